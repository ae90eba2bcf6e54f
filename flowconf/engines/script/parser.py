"""
Parse a config script with RestrictedPython.

Compile errors and warnings are reported through the EventHandler as they are found;
parse_script() never raises for invalid scripts. Callers check ParsedScript.ok.
"""

import ast
import re
from dataclasses import dataclass
from types import CodeType

from RestrictedPython import compile_restricted_exec

from .events import Event, EventHandler, Location, Severity

# RestrictedPython prefixes its messages with "Line N: "
_LINE_RE = re.compile(r"^Line (\d+|None): (.*)$", re.DOTALL)

# Call that pulls symbols from another file: load("lib.sky", "symbol")
_LOAD_FUNCTION = "load"

_UNREAD_PRINTED_WARNING = "Prints, but never reads 'printed' variable."


@dataclass(frozen=True)
class ParsedScript:
    filename: str
    code: CodeType | None
    imports: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.code is not None


def _to_event(kind: Severity, raw: str, filename: str) -> Event:
    m = _LINE_RE.match(raw)
    if m is None:
        return Event(kind, raw, Location(filename))
    line = int(m.group(1)) if m.group(1).isdigit() else None
    return Event(kind, m.group(2), Location(filename, line))


def find_imports(tree: ast.AST) -> tuple[str, ...]:
    """Targets of import statements and load() calls, in source order."""
    found: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((node.lineno, alias.name) for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            found.append((node.lineno, "." * node.level + (node.module or "")))
        elif (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == _LOAD_FUNCTION
        ):
            target = "<dynamic>"
            if node.args and isinstance(node.args[0], ast.Constant):
                target = str(node.args[0].value)
            found.append((node.lineno, target))
    return tuple(name for _, name in sorted(found, key=lambda t: t[0]))


def parse_script(content: str, event_handler: EventHandler, filename: str) -> ParsedScript:
    """
    Compile content with RestrictedPython and collect its cross-file imports.

    Returns a ParsedScript whose code is None when compilation failed. Imports are
    collected whenever the source is valid Python, even if RestrictedPython rejected it.
    """
    result = compile_restricted_exec(content, filename)
    for warning in result.warnings:
        event = _to_event(Severity.WARNING, warning, filename)
        # print() is routed as STDOUT events; scripts never read `printed`.
        if event.message == _UNREAD_PRINTED_WARNING:
            continue
        event_handler.handle(event)
    for error in result.errors:
        event_handler.handle(_to_event(Severity.ERROR, error, filename))
    try:
        imports = find_imports(ast.parse(content, filename))
    except SyntaxError:
        imports = ()
    return ParsedScript(filename=filename, code=result.code, imports=imports)

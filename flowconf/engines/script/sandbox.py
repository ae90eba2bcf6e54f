"""
RestrictedPython sandbox for config scripts.

Allowed: dict, list, str, int, float, bool, range, enumerate, zip, sorted,
len, min, max, sum, abs, json.loads/dumps, print (routed as STDOUT events),
and the native modules bound as globals.

Blocked: open, exec, eval, __import__, compile, underscore attributes, attribute
writes on anything but dict/list, and any native module attribute that is not a
registered operation.
"""

import builtins
import json
import operator
from functools import partial
from typing import Any

from RestrictedPython.Eval import default_guarded_getitem, default_guarded_getiter
from RestrictedPython.Guards import (
    full_write_guard,
    guarded_iter_unpack_sequence,
    guarded_unpack_sequence,
    safe_builtins,
    safer_getattr,
)
from RestrictedPython.PrintCollector import PrintCollector

from .events import Event, EventHandler, Severity
from .natives import NativeModule, native_operations

_INPLACE_OPS = {
    "+=": operator.iadd,
    "-=": operator.isub,
    "*=": operator.imul,
    "/=": operator.itruediv,
    "//=": operator.ifloordiv,
    "%=": operator.imod,
    "|=": operator.ior,
    "&=": operator.iand,
}


def guarded_getattr(obj: Any, name: str, default: Any = None, getattr: Any = getattr) -> Any:
    """safer_getattr, plus: native modules only expose their registered operations."""
    if isinstance(obj, NativeModule):
        ops = native_operations(type(obj))
        if name not in ops:
            raise AttributeError(
                f"module '{obj.name}' has no operation '{name}'. "
                f"Available: {', '.join(sorted(ops))}"
            )
        return getattr(obj, name)
    return safer_getattr(obj, name, default, getattr)


def guarded_inplacevar(op: str, x: Any, y: Any) -> Any:
    fn = _INPLACE_OPS.get(op)
    if fn is None:
        raise SyntaxError(f"Augmented assignment '{op}' is not allowed")
    return fn(x, y)


class EventPrintCollector(PrintCollector):
    """PrintCollector that emits each printed line as a STDOUT event."""

    def __init__(self, event_handler: EventHandler, _getattr_: Any = None) -> None:
        super().__init__(_getattr_)
        self._handler = event_handler
        self._pending = ""

    def write(self, text: str) -> None:
        super().write(text)
        self._pending += text
        *lines, self._pending = self._pending.split("\n")
        for line in lines:
            self._handler.handle(Event(Severity.STDOUT, line))


def _make_safe_builtins() -> dict[str, Any]:
    """safe_builtins already has dict, list, range, etc."""
    return dict(safe_builtins)


def _make_guard_globals(event_handler: EventHandler) -> dict[str, Any]:
    """Guards required by RestrictedPython's rewritten bytecode."""
    return {
        "_getattr_": guarded_getattr,
        "_getiter_": default_guarded_getiter,
        "_getitem_": default_guarded_getitem,
        "_iter_unpack_sequence_": guarded_iter_unpack_sequence,
        "_unpack_sequence_": guarded_unpack_sequence,
        "_inplacevar_": guarded_inplacevar,
        "_write_": full_write_guard,
        "_print_": partial(EventPrintCollector, event_handler),
    }


def _make_extra_globals() -> dict[str, Any]:
    return {"json": json}


def build_restricted_globals(
    context_dict: dict[str, Any], event_handler: EventHandler
) -> dict[str, Any]:
    """
    Build the globals dict for exec(compiled, globals): safe builtins, guards,
    extra (json), and context (the native modules and earlier script bindings).
    """
    safe = _make_safe_builtins()
    g: dict[str, Any] = {
        "__builtins__": safe,
        "__name__": "config",
    }
    g.update(_make_guard_globals(event_handler))
    g.update(_make_extra_globals())
    # Container helpers missing from safe_builtins; writes stay guarded.
    for name in ("list", "dict", "enumerate", "max", "min", "sum", "all", "any"):
        obj = safe.get(name, getattr(builtins, name, None))
        if obj is not None:
            g[name] = obj
    g.update(context_dict)
    return g


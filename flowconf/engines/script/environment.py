"""
Environment: the binding table a script runs against.

An Environment has a read-only parent mapping (the globals) and its own bindings.
Freezing it forbids new bindings; the globals of a frozen environment can be handed
to any number of fresh environments, one per execution.

Optional: a timeout (signal.SIGALRM on Unix, main thread only) interrupts long-running
scripts.
"""

import signal
import threading
import traceback
from collections.abc import Mapping
from types import CodeType, MappingProxyType, TracebackType
from typing import Any

from .events import Event, EventHandler, Location, Severity
from .parser import ParsedScript
from .sandbox import build_restricted_globals

EMPTY_GLOBALS: Mapping[str, Any] = MappingProxyType({})


class FrozenEnvironmentError(RuntimeError):
    """Raised when binding a name in a frozen environment."""

    pass


class ScriptInterruptedError(Exception):
    """Raised when script execution is interrupted before it completes."""

    pass


class ScriptTimeoutError(ScriptInterruptedError, TimeoutError):
    """Raised when script execution exceeds the environment timeout."""

    pass


def _error_location(tb: TracebackType | None, filename: str) -> Location | None:
    """Innermost traceback frame that belongs to the script."""
    location = None
    for frame, lineno in traceback.walk_tb(tb):
        if frame.f_code.co_filename == filename:
            location = Location(filename, lineno)
    return location


class Environment:
    def __init__(
        self,
        *,
        event_handler: EventHandler,
        parent: Mapping[str, Any] = EMPTY_GLOBALS,
        label: str = "",
        timeout: int | None = None,
    ) -> None:
        self._handler = event_handler
        self._parent = parent
        self._bindings: dict[str, Any] = {}
        self._frozen = False
        self.label = label
        self.timeout = timeout

    @property
    def event_handler(self) -> EventHandler:
        return self._handler

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def define(self, name: str, value: Any) -> None:
        if self._frozen:
            raise FrozenEnvironmentError(
                f"Environment '{self.label}' is frozen; cannot bind '{name}'"
            )
        self._bindings[name] = value

    @property
    def globals(self) -> Mapping[str, Any]:
        """Read-only snapshot of the parent bindings overlaid with this environment's own."""
        return MappingProxyType({**self._parent, **self._bindings})

    @property
    def bindings(self) -> Mapping[str, Any]:
        """Names bound in this environment only (not inherited from the parent)."""
        return MappingProxyType(self._bindings)

    def lookup(self, name: str, default: Any = None) -> Any:
        if name in self._bindings:
            return self._bindings[name]
        return self._parent.get(name, default)

    def exec(self, parsed: ParsedScript) -> bool:
        """
        Run parsed against this environment and keep the names it binds.

        Returns False, after reporting an ERROR event, when the script did not compile,
        raised, or rebound one of the parent globals. Raises ScriptInterruptedError on
        timeout or KeyboardInterrupt.
        """
        if self._frozen:
            raise FrozenEnvironmentError(f"Environment '{self.label}' is frozen; cannot exec")
        if parsed.code is None:
            return False
        g = build_restricted_globals({**self._parent, **self._bindings}, self._handler)
        before = dict(g)
        try:
            if self._use_signal():
                self._exec_with_alarm(parsed.code, g)
            else:
                exec(parsed.code, g)  # noqa: S102 - RestrictedPython compiled code
        except ScriptInterruptedError:
            raise
        except KeyboardInterrupt as e:
            raise ScriptInterruptedError("Script execution interrupted") from e
        except Exception as e:
            self._handler.handle(
                Event(
                    Severity.ERROR,
                    f"{type(e).__name__}: {e}",
                    _error_location(e.__traceback__, parsed.filename),
                )
            )
            return False
        return self._collect(g, before, parsed.filename)

    def _use_signal(self) -> bool:
        return (
            self.timeout is not None
            and self.timeout > 0
            and hasattr(signal, "SIGALRM")
            and threading.current_thread() is threading.main_thread()
        )

    def _exec_with_alarm(self, code: CodeType, g: dict[str, Any]) -> None:
        seconds = self.timeout

        def _on_alarm(signum: int, frame: Any) -> None:
            raise ScriptTimeoutError(f"Script execution timed out after {seconds}s")

        previous = signal.signal(signal.SIGALRM, _on_alarm)
        signal.alarm(seconds)
        try:
            exec(code, g)  # noqa: S102 - RestrictedPython compiled code
        finally:
            signal.alarm(0)
            signal.signal(signal.SIGALRM, previous)

    def _collect(self, g: dict[str, Any], before: dict[str, Any], filename: str) -> bool:
        ok = True
        for name, value in g.items():
            # Scripts cannot bind underscore names; those are RestrictedPython internals.
            if name.startswith("_") or (name in before and before[name] is value):
                continue
            if name in self._parent:
                self._handler.handle(
                    Event(
                        Severity.ERROR,
                        f"Cannot reassign global '{name}'",
                        Location(filename),
                    )
                )
                ok = False
                continue
            self._bindings[name] = value
        return ok

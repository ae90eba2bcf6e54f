"""
Script interpreter (Python, RestrictedPython) for config scripts.

Exports: Environment, parse_script, ParsedScript, Event, Severity, Location,
NativeModule, operation, configure_native_module, build_restricted_globals.
"""

from .environment import (
    EMPTY_GLOBALS,
    Environment,
    FrozenEnvironmentError,
    ScriptInterruptedError,
    ScriptTimeoutError,
)
from .events import Event, EventCollector, EventHandler, Location, Severity
from .natives import NativeModule, configure_native_module, native_operations, operation
from .parser import ParsedScript, parse_script
from .sandbox import build_restricted_globals

__all__ = [
    "EMPTY_GLOBALS",
    "Environment",
    "FrozenEnvironmentError",
    "ScriptInterruptedError",
    "ScriptTimeoutError",
    "Event",
    "EventCollector",
    "EventHandler",
    "Location",
    "Severity",
    "NativeModule",
    "configure_native_module",
    "native_operations",
    "operation",
    "ParsedScript",
    "parse_script",
    "build_restricted_globals",
]

"""
Native modules: Python objects exposed to scripts as global namespaces.

A native module subclasses NativeModule, sets `name` (the global binding) and marks
the methods scripts may call with @operation. configure_native_module() records those
operations in a process-wide table that the sandbox consults on every attribute access.

The table is a plain dict: configure modules once at start-up, never concurrently with
each other or with a running script.
"""

import inspect
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

_F = TypeVar("_F", bound=Callable[..., Any])

_OPERATION_MARKER = "_native_operation"

# {module type: {operation name: function}}
_NATIVE_OPERATIONS: dict[type, Mapping[str, Callable[..., Any]]] = {}


class NativeModule:
    """Base class for the capability namespaces bound as script globals."""

    name: ClassVar[str]

    def __repr__(self) -> str:
        return f"<module '{self.name}'>"


def operation(fn: _F) -> _F:
    """Mark a NativeModule method as callable from scripts."""
    setattr(fn, _OPERATION_MARKER, True)
    return fn


def configure_native_module(module_type: type[NativeModule]) -> Mapping[str, Callable[..., Any]]:
    """
    Record the operations of module_type. Idempotent for a given type.

    Raises TypeError if the type has no binding name or declares no operations.
    """
    existing = _NATIVE_OPERATIONS.get(module_type)
    if existing is not None:
        return existing
    if not isinstance(getattr(module_type, "name", None), str) or not module_type.name:
        raise TypeError(f"{module_type.__qualname__} must define a non-empty 'name'")
    ops = {
        n: fn
        for n, fn in inspect.getmembers(module_type, inspect.isfunction)
        if getattr(fn, _OPERATION_MARKER, False)
    }
    if not ops:
        raise TypeError(f"{module_type.__qualname__} declares no @operation methods")
    table = MappingProxyType(ops)
    _NATIVE_OPERATIONS[module_type] = table
    return table


def native_operations(module_type: type[NativeModule]) -> Mapping[str, Callable[..., Any]]:
    """Operations recorded for module_type. Raises LookupError if it was never configured."""
    try:
        return _NATIVE_OPERATIONS[module_type]
    except KeyError:
        raise LookupError(f"Module '{module_type.__qualname__}' is not registered") from None

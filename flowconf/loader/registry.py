"""
Module registry: which native modules a ConfigParser exposes to scripts.
"""

import logging
from collections.abc import Iterable

from flowconf.engines.script import NativeModule, configure_native_module
from flowconf.modules import BUILTIN_MODULES

_log = logging.getLogger(__name__)


def register_modules(
    modules: Iterable[type[NativeModule]] = (),
) -> tuple[type[NativeModule], ...]:
    """
    Return BUILTIN_MODULES followed by modules, without duplicates, and configure
    their operations in the interpreter.

    Configuration writes a process-wide table. Call this during start-up, not
    concurrently with itself or with a running load. Calling it again with the same
    types is a no-op.

    Raises ValueError if two distinct types share a binding name, TypeError if a type
    is not a valid native module.
    """
    ordered: list[type[NativeModule]] = []
    for module in (*BUILTIN_MODULES, *modules):
        if module not in ordered:
            ordered.append(module)

    by_name: dict[str, type[NativeModule]] = {}
    for module in ordered:
        if not (isinstance(module, type) and issubclass(module, NativeModule)):
            raise TypeError(f"{module!r} is not a NativeModule subclass")
        other = by_name.get(module.name)
        if other is not None:
            raise ValueError(
                f"Modules {other.__qualname__} and {module.__qualname__} "
                f"are both bound as '{module.name}'"
            )
        by_name[module.name] = module

    for module in ordered:
        _log.info("Registering module %s", module.__qualname__)
        configure_native_module(module)
    return tuple(ordered)

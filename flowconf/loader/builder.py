"""
Environment builder: module globals (built once, frozen) and per-execution scopes.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from flowconf.core.config import settings
from flowconf.core.options import Options
from flowconf.engines.script import EMPTY_GLOBALS, Environment, EventHandler, NativeModule
from flowconf.modules import OptionsAwareModule

_log = logging.getLogger(__name__)

MODULES_LABEL = "FlowconfModules"


def inject_options(instances: Iterable[object], options: Options) -> None:
    """Hand options to every instance that declares OptionsAwareModule."""
    for instance in instances:
        if isinstance(instance, OptionsAwareModule):
            instance.set_options(options)


def create_environment(
    event_handler: EventHandler,
    parent: Mapping[str, Any] = EMPTY_GLOBALS,
    *,
    timeout: int | None = None,
) -> Environment:
    return Environment(
        event_handler=event_handler,
        parent=parent,
        label=MODULES_LABEL,
        timeout=timeout,
    )


def build_globals(
    modules: Iterable[type[NativeModule]],
    event_handler: EventHandler,
    options: Options,
) -> Mapping[str, Any]:
    """
    Instantiate every module, bind it under its name and inject options, then freeze.

    The returned mapping is read-only and can be reused by several environments.
    """
    env = create_environment(event_handler)
    instances = []
    for module in modules:
        _log.info("Creating variable for %s", module.__qualname__)
        instance = module()
        env.define(module.name, instance)
        instances.append(instance)
    inject_options(instances, options)
    env.freeze()
    return env.globals


def build_scope(event_handler: EventHandler, globals_: Mapping[str, Any]) -> Environment:
    """A fresh, mutable environment over globals_, for exactly one script execution."""
    return create_environment(
        event_handler, globals_, timeout=settings.SCRIPT_EXEC_TIMEOUT
    )

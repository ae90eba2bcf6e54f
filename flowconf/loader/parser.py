"""
ConfigParser: load a workflow Config from a config script.

execute_script(content, options) -> Environment, then extract_config() picks the
workflow requested in the options.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from flowconf.core.config import settings
from flowconf.core.exceptions import InternalError, check_condition
from flowconf.core.options import Options
from flowconf.engines.script import (
    Environment,
    NativeModule,
    ScriptInterruptedError,
    parse_script,
)
from flowconf.models import Config

from .bridge import ConsoleEventHandler
from .builder import build_globals, build_scope
from .extractor import extract_config
from .registry import register_modules

_log = logging.getLogger(__name__)


def read_config_file(path: str | Path) -> str:
    """Read a config script as UTF-8, falling back to Latin-1. OSError propagates."""
    raw = Path(path).read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


class ConfigParser:
    """
    Loads configs against a fixed set of native modules.

    Constructing a ConfigParser registers its modules in the interpreter; do it once at
    start-up. Loads are synchronous and each one gets fresh module instances.
    """

    def __init__(self, modules: Iterable[type[NativeModule]] = ()) -> None:
        self.modules = register_modules(modules)

    def load_config(
        self, content: str, options: Options, *, filename: str | None = None
    ) -> Config:
        try:
            env = self.execute_script(content, options, filename=filename)
        except ScriptInterruptedError as e:
            # Nothing interruptible should run while loading a config.
            raise InternalError("Internal error") from e
        return extract_config(env, options)

    def load_config_file(self, path: str | Path, options: Options) -> Config:
        return self.load_config(read_config_file(path), options, filename=str(path))

    def execute_script(
        self, content: str, options: Options, *, filename: str | None = None
    ) -> Environment:
        """
        Run content and return the populated environment.

        Raises ConfigValidationError when the script uses load()/import or fails;
        the details have already been reported on options.general.console.
        """
        event_handler = ConsoleEventHandler(options.general.console)

        globals_ = build_globals(self.modules, event_handler, options)
        env = build_scope(event_handler, globals_)

        parsed = parse_script(content, event_handler, filename or settings.CONFIG_FILENAME)
        # TODO: multi-file configs; needs a loader that resolves paths relative to the root config
        check_condition(
            not parsed.imports,
            f"load() statements are still not supported: {list(parsed.imports)}",
        )
        check_condition(env.exec(parsed), "Error loading config file")
        _log.debug("Loaded %s with bindings %s", parsed.filename, sorted(env.bindings))
        return env

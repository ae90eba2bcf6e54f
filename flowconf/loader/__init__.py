"""
Config loading: registry, diagnostics bridge, environment builder, extractor.

Exports: ConfigParser, read_config_file, register_modules, ConsoleEventHandler,
build_globals, build_scope, inject_options, extract_config.
"""

from .bridge import ConsoleEventHandler
from .builder import build_globals, build_scope, inject_options
from .extractor import extract_config
from .parser import ConfigParser, read_config_file
from .registry import register_modules

__all__ = [
    "ConfigParser",
    "ConsoleEventHandler",
    "build_globals",
    "build_scope",
    "extract_config",
    "inject_options",
    "read_config_file",
    "register_modules",
]

"""
`log` module: info, warn, error go to the console from the injected options; debug
goes to the Python logger.
"""

import logging
from typing import Any

from flowconf.core.console import Console, LogConsole
from flowconf.core.options import Options
from flowconf.engines.script import NativeModule, operation

from .base import OptionsAwareModule

logger = logging.getLogger(__name__)


def _format(msg: Any, args: tuple[Any, ...]) -> str:
    text = str(msg)
    if not args:
        return text
    try:
        return text % args
    except (TypeError, ValueError):
        return " ".join([text, *(str(a) for a in args)])


class LogModule(NativeModule, OptionsAwareModule):
    name = "log"

    def __init__(self) -> None:
        self._console: Console | None = None

    def set_options(self, options: Options) -> None:
        self._console = options.general.console

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = LogConsole()
        return self._console

    @operation
    def info(self, msg: str, *args: Any) -> None:
        self.console.info(_format(msg, args))

    @operation
    def warn(self, msg: str, *args: Any) -> None:
        self.console.warn(_format(msg, args))

    @operation
    def error(self, msg: str, *args: Any) -> None:
        self.console.error(_format(msg, args))

    @operation
    def debug(self, msg: str, *args: Any) -> None:
        logger.debug(_format(msg, args))

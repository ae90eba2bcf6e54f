"""
Console: the user-facing reporting channel (error, warn, info, progress).
"""

import logging
from typing import Protocol, runtime_checkable

CONSOLE_LOGGER_NAME = "flowconf.console"


@runtime_checkable
class Console(Protocol):
    def error(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def progress(self, message: str) -> None: ...


class LogConsole:
    """Console backed by the `flowconf.console` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(CONSOLE_LOGGER_NAME)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def progress(self, message: str) -> None:
        self._logger.info("Task: %s", message)

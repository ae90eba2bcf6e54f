"""
Diagnostic bridge: interpreter events -> Console.
"""

import logging
import sys
from typing import TextIO

from flowconf.core.console import Console
from flowconf.engines.script import Event, Severity

_log = logging.getLogger(__name__)

NO_LOCATION = "<no location>"


def message_with_location(event: Event) -> str:
    location = NO_LOCATION if event.location is None else event.location.print()
    return f"{location}: {event.message}"


class ConsoleEventHandler:
    """
    EventHandler that reports ERROR/WARNING/INFO/PROGRESS on the console with a location
    prefix, and writes STDOUT/STDERR events verbatim to the raw streams.

    Never raises: a failure to report a diagnostic must not abort the load.
    """

    def __init__(
        self,
        console: Console,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._console = console
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def handle(self, event: Event) -> None:
        try:
            self._dispatch(event)
        except Exception as e:
            _log.warning("Could not report diagnostic %s: %s", event, e)

    def _dispatch(self, event: Event) -> None:
        kind = event.kind
        if kind == Severity.ERROR:
            self._console.error(message_with_location(event))
        elif kind == Severity.WARNING:
            self._console.warn(message_with_location(event))
        elif kind == Severity.INFO:
            self._console.info(message_with_location(event))
        elif kind == Severity.PROGRESS:
            self._console.progress(message_with_location(event))
        elif kind == Severity.STDOUT:
            print(event.message, file=self.stdout)
        elif kind == Severity.STDERR:
            print(event.message, file=self.stderr)
        else:
            print(f"Unknown message type: {event}", file=self.stderr)

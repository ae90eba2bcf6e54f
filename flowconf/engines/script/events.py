"""
Diagnostic events emitted while a script is parsed and executed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    PROGRESS = "PROGRESS"
    STDOUT = "STDOUT"
    STDERR = "STDERR"


@dataclass(frozen=True)
class Location:
    filename: str
    line: int | None = None
    column: int | None = None

    def print(self) -> str:
        """'file:line:column', omitting the parts that are unknown."""
        out = self.filename
        if self.line is not None:
            out += f":{self.line}"
            if self.column is not None:
                out += f":{self.column}"
        return out


@dataclass(frozen=True)
class Event:
    kind: Severity
    message: str
    location: Location | None = None

    def __str__(self) -> str:
        kind = getattr(self.kind, "value", self.kind)
        if self.location is None:
            return f"{kind}: {self.message}"
        return f"{kind} {self.location.print()}: {self.message}"


class EventHandler(Protocol):
    def handle(self, event: Event) -> None: ...


class EventCollector:
    """EventHandler that keeps every event; used when no console is attached."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def handle(self, event: Event) -> None:
        self.events.append(event)

"""Core data types: log levels, parsed events and groups of similar events."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LogLevel(Enum):
    """Standard log severity levels."""

    ERROR = "Error"
    WARN = "Warn"
    INFO = "Info"
    DEBUG = "Debug"
    TRACE = "Trace"


_LEVEL_NAMES = {
    "ERROR": LogLevel.ERROR,
    "ERR": LogLevel.ERROR,
    "WARN": LogLevel.WARN,
    "WARNING": LogLevel.WARN,
    "INFO": LogLevel.INFO,
    "DEBUG": LogLevel.DEBUG,
    "TRACE": LogLevel.TRACE,
}


def parse_level(text: str) -> LogLevel | None:
    """Return the level named by ``text`` (case-insensitive), or None."""
    return _LEVEL_NAMES.get(text.upper())


@dataclass
class LogEvent:
    """A single parsed log line."""

    timestamp: datetime | None
    level: LogLevel | None
    message: str
    raw: str


@dataclass
class LogGroup:
    """Events that share one normalised message pattern."""

    pattern: str
    events: list[LogEvent] = field(default_factory=list)
    dominant_level: LogLevel | None = None
    time_window: tuple[datetime, datetime] | None = None
    _level_counts: Counter = field(default_factory=Counter, repr=False, compare=False)

    @property
    def count(self) -> int:
        """Number of events in the group."""
        return len(self.events)

    def add_event(self, event: LogEvent) -> None:
        """Add an event, updating the time window and the dominant level."""
        ts = event.timestamp
        if ts is not None:
            if self.time_window is None:
                self.time_window = (ts, ts)
            else:
                start, end = self.time_window
                self.time_window = (min(start, ts), max(end, ts))

        if event.level is not None:
            current = (
                self._level_counts[self.dominant_level]
                if self.dominant_level is not None
                else 0
            )
            self._level_counts[event.level] += 1
            if self._level_counts[event.level] > current:
                self.dominant_level = event.level

        self.events.append(event)
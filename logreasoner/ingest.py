"""Parsing of raw log lines into structured events."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from os import PathLike

from .models import LogEvent, LogLevel, parse_level

_TIMESTAMP_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:?\d{2})?)"
)
_LEVEL_RE = re.compile(r"(?i)\b(ERROR|ERR|WARN|WARNING|INFO|DEBUG|TRACE)\b")
_CLF_RE = re.compile(r'^(\S+) \S+ \S+ \[([\w:/]+\s[+\-]\d{4})\] ".*?" (\d{3}) (\d+|-)')
_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339_RE.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction, zulu, sign, oh, om = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    if zulu:
        tz = timezone.utc
    else:
        delta = timedelta(hours=int(oh), minutes=int(om))
        if delta >= timedelta(hours=24):
            return None
        tz = timezone(-delta if sign == "-" else delta)
    try:
        dt = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micro, tzinfo=tz,
        )
    except ValueError:
        return None
    return dt.astimezone(timezone.utc)


def _parse_clf_time(text: str) -> datetime | None:
    try:
        dt = datetime.strptime(text, "%d/%b/%Y:%H:%M:%S %z")
    except ValueError:
        return None
    return dt.astimezone(timezone.utc)


class LogParser:
    """Turns log lines into :class:`LogEvent` objects."""

    def parse_file(self, path: str | PathLike) -> list[LogEvent]:
        """Parse every non-blank line of the file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            return self.parse_lines(handle)

    def parse_lines(self, lines: Iterable[str]) -> list[LogEvent]:
        """Parse the non-blank lines of ``lines``, dropping line terminators."""
        return [
            self.parse_line(line.rstrip("\r\n"))
            for line in lines
            if line.strip()
        ]

    def parse_line(self, line: str) -> LogEvent:
        """Parse a single log line."""
        timestamp = self._extract_timestamp(line)
        level = self._extract_level(line)
        message = self._extract_message(line, timestamp, level)
        return LogEvent(timestamp=timestamp, level=level, message=message, raw=line)

    @staticmethod
    def _extract_timestamp(line: str) -> datetime | None:
        clf = _CLF_RE.search(line)
        if clf is not None:
            parsed = _parse_clf_time(clf.group(2))
            if parsed is not None:
                return parsed
        match = _TIMESTAMP_RE.search(line)
        if match is None:
            return None
        return _parse_rfc3339(match.group(1))

    @staticmethod
    def _extract_level(line: str) -> LogLevel | None:
        match = _LEVEL_RE.search(line)
        if match is not None:
            return parse_level(match.group(1))
        clf = _CLF_RE.search(line)
        if clf is not None:
            status = int(clf.group(3))
            if 500 <= status <= 599:
                return LogLevel.ERROR
            if 400 <= status <= 499:
                return LogLevel.WARN
            return LogLevel.INFO
        return None

    @staticmethod
    def _extract_message(
        line: str, timestamp: datetime | None, level: LogLevel | None
    ) -> str:
        message = line
        if timestamp is not None:
            message = _TIMESTAMP_RE.sub("", message, count=1)
        if level is not None:
            message = _LEVEL_RE.sub("", message, count=1)
        return message.strip()
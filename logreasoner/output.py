"""Rendering of grouping results as text or JSON."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from .grouper import GroupStats
from .models import LogGroup, LogLevel

_RULE = "━" * 40
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_text(groups: Sequence[LogGroup], stats: GroupStats, top_n: int) -> str:
    """Return a human-readable report of the top ``top_n`` groups and the summary."""
    lines = [
        "",
        _RULE,
        "  LOG ANALYSIS RESULTS",
        _RULE,
        "",
        f"Top {top_n} failure patterns:",
        "",
    ]

    for number, group in enumerate(groups[:top_n], start=1):
        level = group.dominant_level or LogLevel.INFO
        lines += [
            f"┌─ Pattern #{number}",
            "│",
            f"│  Message: {group.pattern}",
            f"│  Occurrences: {group.count}",
            f"│  Level: {level.value}",
        ]
        if group.time_window is not None:
            start, end = group.time_window
            span = int((end - start).total_seconds())
            lines += [
                f"│  Time span: {span} seconds",
                f"│  First seen: {start.strftime(_TIME_FORMAT)}",
                f"│  Last seen: {end.strftime(_TIME_FORMAT)}",
            ]
        lines += ["└─", ""]

    lines += [
        _RULE,
        "  SUMMARY",
        _RULE,
        "",
        f"  Total events: {stats.total_events}",
        f"  Unique patterns: {stats.unique_patterns}",
        f"  Largest cluster: {stats.largest_group} events",
        "",
    ]
    return "\n".join(lines)


def _group_record(group: LogGroup) -> dict[str, Any]:
    record: dict[str, Any] = {
        "pattern": group.pattern,
        "count": group.count,
        "level": group.dominant_level.value if group.dominant_level else None,
    }
    if group.time_window is not None:
        start, end = group.time_window
        record["time_window_start"] = start.isoformat()
        record["time_window_end"] = end.isoformat()
    return record


def format_json(groups: Sequence[LogGroup], stats: GroupStats, top_n: int) -> str:
    """Return a pretty-printed JSON document of the top ``top_n`` groups and totals."""
    document = {
        "patterns": [_group_record(group) for group in groups[:top_n]],
        "total_events": stats.total_events,
        "unique_patterns": stats.unique_patterns,
    }
    return json.dumps(document, indent=2, ensure_ascii=False)
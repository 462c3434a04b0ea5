"""Grouping of log events by their normalised message pattern."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .models import LogEvent, LogGroup

_NORMALIZER = re.compile(
    r"(\d+\.?\d*"
    r"|[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
    r"|\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b)"
)
PLACEHOLDER = "<VAR>"


@dataclass(frozen=True)
class GroupStats:
    """Summary figures for a list of groups."""

    total_events: int
    unique_patterns: int
    largest_group: int


class LogGrouper:
    """Collects events into groups that share a normalised message."""

    def normalize_message(self, message: str) -> str:
        """Replace numbers and identifiers with a placeholder and collapse spaces."""
        return " ".join(_NORMALIZER.sub(PLACEHOLDER, message).split())

    def group_events(self, events: Iterable[LogEvent]) -> list[LogGroup]:
        """Group events by pattern, most frequent first (ties keep first-seen order)."""
        groups: dict[str, LogGroup] = {}
        for event in events:
            pattern = self.normalize_message(event.message)
            group = groups.get(pattern)
            if group is None:
                group = groups[pattern] = LogGroup(pattern)
            group.add_event(event)
        return sorted(groups.values(), key=lambda g: g.count, reverse=True)


def get_stats(groups: Sequence[LogGroup]) -> GroupStats:
    """Compute totals for ``groups``; the first group is taken as the largest."""
    return GroupStats(
        total_events=sum(g.count for g in groups),
        unique_patterns=len(groups),
        largest_group=groups[0].count if groups else 0,
    )
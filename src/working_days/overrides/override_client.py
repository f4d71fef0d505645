"""Capability interface used by the oracle to read holiday events from a remote calendar.

The oracle only needs to list the events overlapping a time window. Any object with a
matching :meth:`CalendarOverrideClient.query_events` method can be plugged in: the
CalDAV adapter in production, an in-memory substitute in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class EventWindow:
    """Time range from ``start`` to ``end`` inclusive, as aware datetimes."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("`start` and `end` must be timezone-aware")
        if self.end < self.start:
            raise ValueError("`end` must be >= `start`")


@dataclass(frozen=True)
class CalendarEvent:
    """An event read from the remote calendar."""

    summary: str
    uid: Optional[str] = None

    def matches(self, pattern: str) -> bool:
        """Return ``True`` if the summary contains *pattern*."""
        return pattern in self.summary


# pylint: disable=too-few-public-methods
@runtime_checkable
class CalendarOverrideClient(Protocol):
    """Lists remote calendar events; must be safe for concurrent callers."""

    def query_events(
        self, calendar_path: str, window: EventWindow
    ) -> List[CalendarEvent]:
        """Return the events of *calendar_path* overlapping *window*.

        Raises :class:`src.working_days.errors.CalendarLookupError` on any
        network or protocol failure.
        """

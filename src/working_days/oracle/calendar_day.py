"""Serializable summary of a single day, as answered by the calendar service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


# pylint: disable=too-few-public-methods
@dataclass(frozen=True)
class CalendarDay:
    """Holiday and working-day flags of one day.

    ``ferie`` and ``holiday`` carry the same value; both names are kept for clients
    of the original JSON payload.
    """

    day: datetime
    working_day: bool
    ferie: bool
    holiday: bool
    weekday: bool

    def to_json(self) -> Any:
        """Object to JSON."""
        return {
            "day": self.day.isoformat(),
            "working_day": self.working_day,
            "ferie": self.ferie,
            "holiday": self.holiday,
            "weekday": self.weekday,
        }

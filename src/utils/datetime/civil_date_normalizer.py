"""Utility for normalizing dates and timestamps to *civil dates* of a fixed time zone.

A civil date is an aware :class:`datetime.datetime` at local midnight in the configured
zone. Holiday membership and override lookups are keyed on civil dates only, so two
timestamps falling on the same local day always compare equal once normalized.

Day arithmetic is performed on :class:`datetime.date` values and re-localized with
``pytz`` so that a DST transition between two dates never leaks a non-zero time of day.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Tuple, Union

import pytz  # type: ignore

from src.utils.io.logger import Logger
from src.working_days.errors import ConfigurationError

DateLike = Union[date, datetime]


class CivilDateNormalizer:
    """Builds and normalizes civil dates in a single, explicitly supplied time zone.

    Instances are immutable and hold no other state, so they are safe to share
    between threads.
    """

    _DAY_SPAN = timedelta(hours=23, minutes=59, seconds=59)

    __slots__ = ("_timezone",)

    def __init__(self, timezone: tzinfo) -> None:
        if timezone is None:
            raise ConfigurationError("`timezone` must be defined")
        self._timezone = timezone

    @staticmethod
    def load_timezone(name: str) -> tzinfo:
        """Return the ``pytz`` zone called *name* or raise :class:`ConfigurationError`."""
        if not isinstance(name, str) or len(name.strip()) == 0:
            raise ConfigurationError("Time zone identifier is empty")
        try:
            return pytz.timezone(name.strip())
        except pytz.UnknownTimeZoneError as exc:
            Logger.error(f"Invalid timezone: {name}. Exception: {exc}")
            raise ConfigurationError(f"Unable to load time zone '{name}'") from exc

    @property
    def timezone(self) -> tzinfo:
        """Return the configured zone."""
        return self._timezone

    def at(self, year: int, month: int, day: int) -> datetime:
        """Return the civil date for *year*-*month*-*day*."""
        naive = datetime.combine(date(year, month, day), time.min)
        if hasattr(self._timezone, "localize"):
            return self._timezone.localize(naive)
        return naive.replace(tzinfo=self._timezone)

    def local_day(self, value: DateLike) -> date:
        """Return the calendar day *value* falls on in the configured zone.

        Naive datetimes are read as local wall-clock time of the configured zone.
        """
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.date()
            return value.astimezone(self._timezone).date()
        if isinstance(value, date):
            return value
        raise TypeError(f"Expected date or datetime, got {type(value).__name__}")

    def normalize(self, value: DateLike) -> datetime:
        """Truncate *value* to local midnight of its day in the configured zone."""
        day = self.local_day(value)
        return self.at(day.year, day.month, day.day)

    def shift(self, value: DateLike, days: int) -> datetime:
        """Return the civil date *days* calendar days away from *value*."""
        day = self.local_day(value) + timedelta(days=days)
        return self.at(day.year, day.month, day.day)

    def day_window_utc(self, value: DateLike) -> Tuple[datetime, datetime]:
        """Return the UTC ``(start, end)`` covering local midnight to 23:59:59."""
        start = self.normalize(value).astimezone(pytz.utc)
        return start, start + CivilDateNormalizer._DAY_SPAN

    def now(self) -> datetime:
        """Return the current aware time in the configured zone."""
        return datetime.now(self._timezone)

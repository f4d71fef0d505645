"""Facade answering holiday and working-day questions for a civil calendar.

A day is a holiday when it belongs to the fixed French holiday set of its year, or when
the optional remote calendar lists an event on that day whose summary contains the
configured pattern. The remote calendar can only add holidays: a failed lookup is
logged and the fixed list still applies.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Callable, Optional

from src.utils.datetime.civil_date_normalizer import (CivilDateNormalizer,
                                                      DateLike)
from src.utils.io.logger import Logger
from src.working_days.holidays.holiday_set import HolidaySet
from src.working_days.oracle.calendar_day import CalendarDay
from src.working_days.overrides.override_client import (CalendarOverrideClient,
                                                        EventWindow)
from src.working_days.overrides.override_config import OverrideConfig


class HolidayOracle:
    """Answers ``is_holiday`` / ``is_working_day`` / ``is_weekday`` for any date.

    Stateless apart from its configuration; safe to share between request handlers
    as long as the override client is.
    """

    def __init__(
        self,
        timezone: tzinfo,
        override_client: Optional[CalendarOverrideClient] = None,
        override_config: Optional[OverrideConfig] = None,
        holiday_set: Optional[HolidaySet] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._civil = CivilDateNormalizer(timezone)
        self._holiday_set = holiday_set or HolidaySet(timezone)
        self._override_client = override_client
        self._override_config = override_config or OverrideConfig()
        self._clock = clock or self._civil.now

    @property
    def timezone(self) -> tzinfo:
        """Return the civil time zone."""
        return self._civil.timezone

    @property
    def holiday_set(self) -> HolidaySet:
        """Return the fixed holiday set."""
        return self._holiday_set

    @property
    def override_enabled(self) -> bool:
        """Return ``True`` when a remote calendar is consulted."""
        return self._override_client is not None

    def is_weekday(self, value: DateLike) -> bool:
        """Return ``True`` if the local day of *value* is Monday to Friday."""
        return self._civil.local_day(value).weekday() < 5

    def is_holiday_from_override(self, value: DateLike) -> bool:
        """Return ``True`` if the remote calendar marks the day of *value* as a holiday.

        Raises :class:`CalendarLookupError` when the remote calendar fails.
        """
        if self._override_client is None:
            return False
        start, end = self._civil.day_window_utc(value)
        events = self._override_client.query_events(
            self._override_config.calendar_path, EventWindow(start, end)
        )
        pattern = self._override_config.summary_pattern
        return any(event.matches(pattern) for event in events)

    def is_holiday(self, value: DateLike) -> bool:
        """Return ``True`` if the day of *value* is a fixed or remote-marked holiday.

        The remote calendar is queried on every call, fixed holidays included. Any
        ``LookupError`` it raises is logged and counts as no match.
        """
        day = self._civil.normalize(value)
        try:
            from_override = self.is_holiday_from_override(day)
        except LookupError as exc:
            Logger.error(f"unable to check holidays from caldav: {exc}")
            from_override = False
        return self._holiday_set.contains(day) or from_override

    def is_working_day(self, value: DateLike) -> bool:
        """Return ``True`` if the day of *value* is a weekday and not a holiday."""
        return self.is_weekday(value) and not self.is_holiday(value)

    def is_working_day_now(self) -> bool:
        """Return whether today is a working day."""
        return self.is_working_day(self._clock())

    def calendar_day(self, value: Optional[DateLike] = None) -> CalendarDay:
        """Return the flags of the day of *value* (today when omitted)."""
        moment = self._clock() if value is None else value
        holiday = self.is_holiday(moment)
        weekday = self.is_weekday(moment)
        return CalendarDay(
            day=self._civil.normalize(moment),
            working_day=weekday and not holiday,
            ferie=holiday,
            holiday=holiday,
            weekday=weekday,
        )

    def check_override(self) -> None:
        """Health probe: run a remote lookup for today, raising on failure."""
        self.is_holiday_from_override(self._clock())

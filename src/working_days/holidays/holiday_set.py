"""French public holidays of a given year.

The yearly set holds exactly ten civil dates: eight fixed dates plus two dates anchored
on Easter (the Easter holiday itself and Ascension, 39 days after Easter Sunday).
Sets are rebuilt on every call; the derivation is constant time.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

from src.utils.datetime.civil_date_normalizer import CivilDateNormalizer, DateLike
from src.working_days.easter.easter_calculator import EasterCalculator
from src.working_days.errors import ConfigurationError

ASCENSION_OFFSET_DAYS = 39

_FIXED_HOLIDAYS: Tuple[Tuple[int, int, str], ...] = (
    (1, 1, "Jour de l'an"),
    (5, 1, "Fête du travail"),
    (5, 8, "Victoire 1945"),
    (7, 14, "Fête nationale"),
    (8, 15, "Assomption"),
    (11, 1, "Toussaint"),
    (11, 11, "Armistice"),
    (12, 25, "Noël"),
)


class EasterPolicy(Enum):
    """Which day of the Easter weekend is the public holiday."""

    SUNDAY = "sunday"
    MONDAY = "monday"

    @property
    def offset_days(self) -> int:
        """Days between Easter Sunday and the Easter holiday."""
        return 1 if self is EasterPolicy.MONDAY else 0

    @property
    def label(self) -> str:
        """French name of the Easter holiday."""
        return "Lundi de Pâques" if self is EasterPolicy.MONDAY else "Pâques"

    @staticmethod
    def from_parameter(value: object) -> EasterPolicy:
        """Parse the ``easter_holiday_policy`` parameter."""
        if isinstance(value, EasterPolicy):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(f"Easter holiday policy is invalid: {value}")
        try:
            return EasterPolicy(value.strip().lower())
        except ValueError as exc:
            raise ConfigurationError(
                f"Easter holiday policy is invalid: '{value}'"
            ) from exc


class HolidaySet:
    """Derives the yearly holiday list and answers membership queries."""

    __slots__ = ("_civil", "_easter", "_policy")

    def __init__(
        self, timezone: tzinfo, policy: EasterPolicy = EasterPolicy.MONDAY
    ) -> None:
        self._civil = CivilDateNormalizer(timezone)
        self._easter = EasterCalculator(timezone)
        self._policy = EasterPolicy.from_parameter(policy)

    @property
    def policy(self) -> EasterPolicy:
        """Return the Easter holiday policy in use."""
        return self._policy

    def named_holidays_for(self, year: int) -> List[Tuple[datetime, str]]:
        """Return the ten holidays of *year* with their French names, in calendar order.

        Ascension may coincide with May 1 or May 8; both entries are kept.
        """
        easter_sunday = self._easter.compute_easter(year)
        named: List[Tuple[datetime, str]] = [
            (self._civil.at(year, month, day), name)
            for month, day, name in _FIXED_HOLIDAYS
        ]
        named.append(
            (
                self._civil.shift(easter_sunday, self._policy.offset_days),
                self._policy.label,
            )
        )
        named.append(
            (self._civil.shift(easter_sunday, ASCENSION_OFFSET_DAYS), "Ascension")
        )
        return sorted(named, key=lambda item: item[0])

    def holidays_for(self, year: int) -> List[datetime]:
        """Return the ten holidays of *year* in calendar order."""
        return [day for day, _name in self.named_holidays_for(year)]

    def holiday_names_for(self, year: int) -> Dict[datetime, str]:
        """Return a *day → name* mapping; coinciding holidays share one joined name."""
        names: Dict[datetime, str] = {}
        for day, name in self.named_holidays_for(year):
            names[day] = f"{names[day]} / {name}" if day in names else name
        return names

    def holiday_set_for(self, year: int) -> FrozenSet[datetime]:
        """Return the holidays of *year* as a set."""
        return frozenset(self.holidays_for(year))

    def contains(self, value: DateLike) -> bool:
        """Return ``True`` if the local day of *value* is a fixed public holiday."""
        day = self._civil.normalize(value)
        return day in self.holiday_set_for(day.year)

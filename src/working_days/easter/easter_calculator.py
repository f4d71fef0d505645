"""Easter Sunday computation for the Gregorian calendar.

Uses the anonymous Gregorian algorithm in pure integer floor arithmetic and expresses
the result as an offset from March 31, so that dates spilling into April come out of
plain date arithmetic rather than month branching.
"""

from datetime import datetime, tzinfo
from typing import Final

from src.utils.datetime.civil_date_normalizer import CivilDateNormalizer

FIRST_GREGORIAN_YEAR: Final[int] = 1583


# pylint: disable=too-few-public-methods
class EasterCalculator:
    """Computes Easter Sunday as a civil date of the configured zone."""

    __slots__ = ("_civil",)

    def __init__(self, timezone: tzinfo) -> None:
        self._civil = CivilDateNormalizer(timezone)

    @staticmethod
    def days_after_march_31(year: int) -> int:
        """Return the signed number of days between March 31 and Easter Sunday of *year*."""
        if isinstance(year, bool) or not isinstance(year, int):
            raise TypeError(f"`year` must be int, got {type(year).__name__}")
        if year < FIRST_GREGORIAN_YEAR:
            raise ValueError(
                f"Easter is only computed for Gregorian years (>= {FIRST_GREGORIAN_YEAR}): {year}"
            )
        golden = year % 19
        century = year // 100
        leap_correction = century // 4
        epact = (
            19 * golden + century - leap_correction - (8 * century + 13) // 25 + 15
        ) % 30
        k = epact // 28
        paschal = (k * (29 // (epact + 1)) * ((21 - golden) // 11) - 1) * k + epact
        # 0 = Sunday, 1 = Monday, ...
        weekday = (year + year // 4 + paschal + 2 + leap_correction - century) % 7
        # day counted from March 1 = 1
        march_day = 28 + paschal - weekday
        return march_day - 31

    def compute_easter(self, year: int) -> datetime:
        """Return Easter Sunday of *year* at local midnight."""
        offset = EasterCalculator.days_after_march_31(year)
        return self._civil.shift(self._civil.at(year, 3, 31), offset)

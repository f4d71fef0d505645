"""Typed configuration of the optional CalDAV override path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_SUMMARY_PATTERN = "Holidays"


@dataclass(frozen=True)
class OverrideConfig:
    """Remote calendar endpoint, collection path and holiday summary pattern.

    * url: CalDAV server url. Empty or ``None`` disables the override path.
    * calendar_path: Collection holding the holiday events.
    * summary_pattern: Substring marking an event as a holiday.
    * max_attempts: Startup validation cap, ``None`` retries forever.
    """

    url: Optional[str] = None
    calendar_path: str = ""
    summary_pattern: str = DEFAULT_SUMMARY_PATTERN
    username: Optional[str] = None
    password: Optional[str] = None
    max_attempts: Optional[int] = None
    backoff_multiplier: float = 1
    backoff_max_seconds: float = 60

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("`max_attempts` must be >= 1 or None")
        if not isinstance(self.summary_pattern, str):
            raise TypeError("`summary_pattern` must be a string")

    @property
    def enabled(self) -> bool:
        """Return ``True`` when an endpoint is configured."""
        return self.url is not None and len(self.url.strip()) > 0

    @staticmethod
    def from_parameters(params: Any) -> OverrideConfig:
        """Build the configuration from a :class:`ParameterLoader`-like object."""
        pattern = params.get("caldav_summary_pattern")
        return OverrideConfig(
            url=params.get("caldav_url"),
            calendar_path=params.get("caldav_path") or "",
            summary_pattern=DEFAULT_SUMMARY_PATTERN if pattern is None else pattern,
            username=params.get("caldav_username"),
            password=params.get("caldav_password"),
            max_attempts=params.get("caldav_max_attempts"),
            backoff_multiplier=params.get("caldav_backoff_multiplier", 1),
            backoff_max_seconds=params.get("caldav_backoff_max_seconds", 60),
        )

"""Central configuration manager.

This module handles the loading of static and environment-driven parameters used to
build the holiday oracle: the civil time zone, the Easter holiday policy and the
optional CalDAV override endpoint with its retry settings. Values are exposed through
dictionary-style and method-based access.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv


class ParameterLoader:
    """Centralized configuration manager for all oracle parameters."""

    _ENV_FILEPATH = ".env"

    def __init__(self, env_filepath: Optional[str] = None):
        self.env_filepath = Path(env_filepath or ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()

    @staticmethod
    def _getenv_stripped(name: str) -> Optional[str]:
        value = os.getenv(name)
        if value is None or len(value.strip()) == 0:
            return None
        return value.strip()

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging constants and env values."""
        constant_params = {
            "caldav_backoff_max_seconds": 60,
            "caldav_backoff_multiplier": 1,
            "caldav_max_attempts": None,
            "calendar_tz": "Europe/Paris",
            "date_format": "%Y-%m-%d",
            "easter_holiday_policy": "monday",
        }
        vulnerable_params = {
            "caldav_password": self._getenv_stripped("CALDAV_PASSWORD"),
            "caldav_path": self._getenv_stripped("CALDAV_PATH") or "",
            "caldav_summary_pattern": os.getenv("CALDAV_SUMMARY_PATTERN", "Holidays"),
            "caldav_url": self._getenv_stripped("CALDAV_URL"),
            "caldav_username": self._getenv_stripped("CALDAV_USERNAME"),
        }
        env_overrides = {}
        calendar_tz = self._getenv_stripped("CALENDAR_TZ")
        if calendar_tz is not None:
            env_overrides["calendar_tz"] = calendar_tz
        return {**constant_params, **vulnerable_params, **env_overrides}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else None."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def set(self, key: str, value: Any) -> None:
        """Override a parameter value, e.g. from command line flags."""
        self._parameters[key] = value

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]

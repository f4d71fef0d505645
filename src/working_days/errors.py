"""Error taxonomy of the holiday oracle.

 - ConfigurationError: invalid startup configuration (unknown time zone, bad policy).
   Fatal: the process should not start.
 - ConnectivityError: the remote calendar could not be validated at startup.
   Retried with back-off, never fatal unless a retry cap is configured.
 - CalendarLookupError: a live override query failed. Recovered by the oracle,
   which falls back to the fixed holiday list.
"""

from __future__ import annotations


class WorkingDaysError(Exception):
    """Base error (do not raise directly)."""


class ConfigurationError(WorkingDaysError, ValueError):
    """Invalid or unloadable configuration."""


class ConnectivityError(WorkingDaysError):
    """Remote calendar unreachable during startup validation."""


class CalendarLookupError(WorkingDaysError, LookupError):
    """Remote calendar query failed or returned a malformed response."""


__all__ = [
    "WorkingDaysError",
    "ConfigurationError",
    "ConnectivityError",
    "CalendarLookupError",
]

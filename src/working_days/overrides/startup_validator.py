"""One-time connectivity validation of the remote calendar, built on tenacity.

By default validation never gives up: each failed attempt is logged with its attempt
number and retried after an exponentially growing delay, and the caller is unblocked
only once the server answers. A cap can be configured for callers that prefer a bounded
startup; the last :class:`ConnectivityError` is then re-raised.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from tenacity import (RetryCallState, Retrying, retry_if_exception_type,
                      stop_after_attempt, stop_never, wait_exponential)

from src.utils.io.logger import Logger
from src.working_days.errors import ConnectivityError
from src.working_days.overrides.caldav_client import CaldavOverrideClient
from src.working_days.overrides.override_config import OverrideConfig


class StartupValidator:
    """Retries ``client.validate(calendar_path)`` until it succeeds."""

    def __init__(
        self,
        max_attempts: Optional[int] = None,
        backoff_multiplier: float = 1,
        backoff_max_seconds: float = 60,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("`max_attempts` must be >= 1 or None")
        self.max_attempts = max_attempts
        self.backoff_multiplier = backoff_multiplier
        self.backoff_max_seconds = backoff_max_seconds
        self._sleep = sleep

    @staticmethod
    def from_config(config: OverrideConfig) -> StartupValidator:
        """Build a validator with the retry settings of *config*."""
        return StartupValidator(
            max_attempts=config.max_attempts,
            backoff_multiplier=config.backoff_multiplier,
            backoff_max_seconds=config.backoff_max_seconds,
        )

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0
        Logger.error(
            f"unable to validate caldav connection on retry {retry_state.attempt_number}: "
            f"{exc}. Next try in {delay:.1f}s"
        )

    def _retrying(self) -> Retrying:
        return Retrying(
            retry=retry_if_exception_type(ConnectivityError),
            stop=(
                stop_never
                if self.max_attempts is None
                else stop_after_attempt(self.max_attempts)
            ),
            wait=wait_exponential(
                multiplier=self.backoff_multiplier, max=self.backoff_max_seconds
            ),
            before_sleep=StartupValidator._log_retry,
            sleep=self._sleep,
            reraise=True,
        )

    def validate(self, client: Any, calendar_path: str) -> None:
        """Block until *client* validates *calendar_path*."""
        try:
            self._retrying()(client.validate, calendar_path)
        except ConnectivityError as exc:
            Logger.error(
                f"unable to validate caldav connection after {self.max_attempts} attempts: {exc}"
            )
            raise
        Logger.success(f"caldav connection validated for '{calendar_path}'")


def connect_caldav(
    config: OverrideConfig, validator: Optional[StartupValidator] = None
) -> CaldavOverrideClient:
    """Create the CalDAV override client and validate it before handing it out."""
    client = CaldavOverrideClient.from_url(
        config.url or "", username=config.username, password=config.password
    )
    (validator or StartupValidator.from_config(config)).validate(
        client, config.calendar_path
    )
    return client

"""Unit tests for StartupValidator and connect_caldav.

Sleeping is replaced by a recorder so the exponential back-off can be asserted
without waiting."""

from unittest.mock import MagicMock, patch

import pytest  # type: ignore

from src.working_days.errors import ConnectivityError
from src.working_days.overrides.override_config import OverrideConfig
from src.working_days.overrides.startup_validator import (StartupValidator,
                                                          connect_caldav)


class _FlakyClient:
    """Fails validation a given number of times before succeeding."""

    def __init__(self, failures: int):
        self.failures = failures
        self.calls = 0

    def validate(self, calendar_path: str) -> None:
        """Raise ConnectivityError until the failure budget is spent."""
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectivityError(f"unreachable {calendar_path}")


def test_validate_first_try_does_not_sleep():
    """A reachable server is validated without retrying."""
    sleeps = []
    client = _FlakyClient(failures=0)
    with patch("src.utils.io.logger.Logger.error") as mock_error:
        StartupValidator(sleep=sleeps.append).validate(client, "/cal")
    if client.calls != 1 or sleeps:
        raise AssertionError("Validation should succeed on the first call")
    mock_error.assert_not_called()


def test_unbounded_retries_with_exponential_backoff():
    """Without a cap the validator keeps retrying, doubling the delay up to the max."""
    sleeps = []
    client = _FlakyClient(failures=12)
    validator = StartupValidator(backoff_multiplier=1, backoff_max_seconds=60, sleep=sleeps.append)
    with patch("src.utils.io.logger.Logger.error") as mock_error:
        validator.validate(client, "/cal")
    if client.calls != 13:
        raise AssertionError(f"Expected 13 calls, got {client.calls}")
    if sleeps[:6] != [1, 2, 4, 8, 16, 32]:
        raise AssertionError(f"Unexpected back-off sequence: {sleeps}")
    if max(sleeps) != 60:
        raise AssertionError(f"Back-off must be capped at 60s: {sleeps}")
    if mock_error.call_count != 12:
        raise AssertionError("Every failed attempt must be logged")
    first_log = mock_error.call_args_list[0][0][0]
    if "retry 1" not in first_log or "unreachable /cal" not in first_log:
        raise AssertionError(f"Log must carry attempt number and cause: {first_log}")


def test_capped_retries_reraise():
    """With a cap the last ConnectivityError is raised after the final attempt."""
    client = _FlakyClient(failures=10)
    validator = StartupValidator(max_attempts=3, sleep=lambda _s: None)
    with patch("src.utils.io.logger.Logger.error") as mock_error:
        with pytest.raises(ConnectivityError, match="unreachable"):
            validator.validate(client, "/cal")
    if client.calls != 3:
        raise AssertionError(f"Expected 3 calls, got {client.calls}")
    if mock_error.call_count != 3:
        raise AssertionError("Two retries plus the final failure must be logged")


def test_other_errors_are_not_retried():
    """Only connectivity failures are retried."""
    client = MagicMock()
    client.validate.side_effect = TypeError("bug")
    with pytest.raises(TypeError):
        StartupValidator(sleep=lambda _s: None).validate(client, "/cal")
    client.validate.assert_called_once_with("/cal")


def test_invalid_cap():
    """A cap below one attempt is rejected."""
    with pytest.raises(ValueError):
        StartupValidator(max_attempts=0)


def test_from_config():
    """Retry settings come from the override configuration."""
    config = OverrideConfig(
        url="https://dav.example.org",
        max_attempts=4,
        backoff_multiplier=0.5,
        backoff_max_seconds=10,
    )
    validator = StartupValidator.from_config(config)
    if (validator.max_attempts, validator.backoff_multiplier, validator.backoff_max_seconds) != (
        4,
        0.5,
        10,
    ):
        raise AssertionError("Validator must mirror the configuration")


@patch("src.working_days.overrides.startup_validator.CaldavOverrideClient.from_url")
def test_connect_caldav_validates_before_returning(mock_from_url):
    """connect_caldav builds the client from the config and validates its path."""
    client = MagicMock()
    mock_from_url.return_value = client
    validator = MagicMock()
    config = OverrideConfig(
        url="https://dav.example.org",
        calendar_path="/calendars/team/",
        username="user",
        password="secret",
    )
    result = connect_caldav(config, validator)
    if result is not client:
        raise AssertionError("The validated client must be returned")
    mock_from_url.assert_called_once_with(
        "https://dav.example.org", username="user", password="secret"
    )
    validator.validate.assert_called_once_with(client, "/calendars/team/")

"""Unit tests for ParameterLoader: constants, environment-sourced values and access helpers."""

import pytest  # type: ignore

from src.utils.config.parameters import ParameterLoader

_ENV_KEYS = (
    "CALDAV_URL",
    "CALDAV_PATH",
    "CALDAV_USERNAME",
    "CALDAV_PASSWORD",
    "CALDAV_SUMMARY_PATTERN",
    "CALENDAR_TZ",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear the CalDAV environment and point the loader at a missing .env file."""
    for key in _ENV_KEYS:
        # set first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return str(tmp_path / ".env")


def test_defaults(clean_env):  # pylint: disable=redefined-outer-name
    """Without environment the oracle runs on Paris time with fixed holidays only."""
    params = ParameterLoader(clean_env)
    expected = {
        "calendar_tz": "Europe/Paris",
        "easter_holiday_policy": "monday",
        "caldav_url": None,
        "caldav_path": "",
        "caldav_summary_pattern": "Holidays",
        "caldav_max_attempts": None,
        "date_format": "%Y-%m-%d",
    }
    for key, value in expected.items():
        if params.get(key) != value:
            raise AssertionError(f"{key}: expected {value!r}, got {params.get(key)!r}")


def test_environment_values(clean_env, monkeypatch):  # pylint: disable=redefined-outer-name
    """CalDAV settings and the zone come from the environment."""
    monkeypatch.setenv("CALDAV_URL", " https://dav.example.org ")
    monkeypatch.setenv("CALDAV_PATH", "/calendars/team/")
    monkeypatch.setenv("CALDAV_SUMMARY_PATTERN", "Congés")
    monkeypatch.setenv("CALDAV_USERNAME", "user")
    monkeypatch.setenv("CALDAV_PASSWORD", "secret")
    monkeypatch.setenv("CALENDAR_TZ", "Europe/Brussels")
    params = ParameterLoader(clean_env)
    if params["caldav_url"] != "https://dav.example.org":
        raise AssertionError("Url must be stripped")
    if params["caldav_path"] != "/calendars/team/" or params["caldav_summary_pattern"] != "Congés":
        raise AssertionError("Path and pattern must come from the environment")
    if (params["caldav_username"], params["caldav_password"]) != ("user", "secret"):
        raise AssertionError("Credentials must come from the environment")
    if params["calendar_tz"] != "Europe/Brussels":
        raise AssertionError("Zone must be overridable")


def test_dotenv_file(clean_env):  # pylint: disable=redefined-outer-name
    """Values are read from the .env file when the environment is empty."""
    with open(clean_env, "w", encoding="utf-8") as file:
        file.write("CALDAV_URL=https://dav.example.org\nCALDAV_PATH=/cal/\n")
    params = ParameterLoader(clean_env)
    if params.get("caldav_url") != "https://dav.example.org" or params.get("caldav_path") != "/cal/":
        raise AssertionError("Values from .env expected")


def test_access_helpers(clean_env):  # pylint: disable=redefined-outer-name
    """get() falls back to the default, [] raises, set() overrides."""
    params = ParameterLoader(clean_env)
    if params.get("missing", 42) != 42:
        raise AssertionError("Default expected for missing key")
    with pytest.raises(KeyError):
        _ = params["missing"]
    params.set("caldav_path", "/other/")
    if params.get("caldav_path") != "/other/":
        raise AssertionError("set() must override the value")
    if "calendar_tz" not in params.get_all():
        raise AssertionError("get_all() must expose every parameter")

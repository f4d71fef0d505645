"""Builds a :class:`HolidayOracle` from the central configuration."""

from typing import Any, Optional

from src.utils.config.parameters import ParameterLoader
from src.utils.datetime.civil_date_normalizer import CivilDateNormalizer
from src.utils.io.logger import Logger
from src.working_days.holidays.holiday_set import EasterPolicy, HolidaySet
from src.working_days.oracle.holiday_oracle import HolidayOracle
from src.working_days.overrides.override_config import OverrideConfig
from src.working_days.overrides.startup_validator import (StartupValidator,
                                                          connect_caldav)


def build_oracle(
    params: Optional[Any] = None, validator: Optional[StartupValidator] = None
) -> HolidayOracle:
    """Load the zone, the Easter policy and, when configured, the CalDAV override.

    Blocks until the remote calendar is validated when an endpoint is set.
    """
    params = params or ParameterLoader()
    timezone = CivilDateNormalizer.load_timezone(params.get("calendar_tz"))
    policy = EasterPolicy.from_parameter(params.get("easter_holiday_policy", "monday"))
    config = OverrideConfig.from_parameters(params)
    override_client = None
    if config.enabled:
        Logger.info(f"Validating caldav calendar '{config.calendar_path}'...")
        override_client = connect_caldav(config, validator)
    else:
        Logger.debug("No caldav url configured, using fixed holidays only")
    return HolidayOracle(
        timezone,
        override_client=override_client,
        override_config=config,
        holiday_set=HolidaySet(timezone, policy),
    )

from __future__ import annotations

from enum import Enum


class TimePeriod(str, Enum):
    LAST_24_HOURS = "Last24Hours"
    LAST_7_DAYS = "Last7Days"
    LAST_30_DAYS = "Last30Days"
    LAST_3_MONTHS = "Last3Months"
    LAST_6_MONTHS = "Last6Months"
    LAST_12_MONTHS = "Last12Months"
    ALL_TIME = "AllTime"


PERIOD_OFFSETS: dict[str, int] = {
    TimePeriod.LAST_24_HOURS.value: 86400,
    TimePeriod.LAST_7_DAYS.value: 604800,
    TimePeriod.LAST_30_DAYS.value: 2592000,
    TimePeriod.LAST_3_MONTHS.value: 7776000,
    TimePeriod.LAST_6_MONTHS.value: 15552000,
    TimePeriod.LAST_12_MONTHS.value: 31536000,
}

SUPPORTED_PERIODS: list[str] = [p.value for p in TimePeriod]


def _name(time_period: str) -> str:
    # TimePeriod members hash by member name, not by value
    return time_period.value if isinstance(time_period, TimePeriod) else time_period


def period_offset_seconds(time_period: str) -> int:
    """Seconds to look back from now. Unknown names (and AllTime) give 0."""
    return PERIOD_OFFSETS.get(_name(time_period), 0)


def is_all_time(time_period: str) -> bool:
    return _name(time_period) == TimePeriod.ALL_TIME.value


def is_known_period(time_period: str) -> bool:
    return _name(time_period) in SUPPORTED_PERIODS

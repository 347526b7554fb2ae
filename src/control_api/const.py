"""Shared limits and naming patterns."""

import re
from enum import Enum
from typing import Final


MIN_NAME_LENGTH: Final = 3
MAX_NAME_LENGTH: Final = 27

# Gi
DISK_MAX_SIZE: Final = 100

NAME_PATTERN_STR: Final = r"^[a-z](?:[a-z0-9\-]*[a-z0-9])?$"
NAME_PATTERN: Final = re.compile(NAME_PATTERN_STR)

SID_PATTERN_STR: Final = r"^[a-z](?:[a-z0-9\-]*[a-z0-9])?$"
SID_PATTERN: Final = re.compile(SID_PATTERN_STR)

SID_MIN_LENGTH: Final = 3
SID_MAX_LENGTH: Final = 20
SERVICE_ACCOUNT_NAME_MAX_LENGTH: Final = 60


class DiskMetricsTimeRange(str, Enum):
    """Time windows accepted by disk metrics queries."""

    one_hour = "1h"
    six_hours = "6h"
    twelve_hours = "12h"
    one_day = "1d"
    two_days = "2d"
    seven_days = "7d"
    thirty_days = "30d"


VALID_DISK_METRICS_TIME_RANGES: Final = frozenset(t.value for t in DiskMetricsTimeRange)

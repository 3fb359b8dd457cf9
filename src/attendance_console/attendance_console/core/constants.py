"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PER_PAGE = 10
PER_PAGE_OPTIONS = (5, 10, 25, 50)
LOOKUP_PER_PAGE = 100
DEFAULT_REPORT_DAYS = 7

DEFAULT_CLOCK_IN = "08:00"
DEFAULT_CLOCK_OUT = "17:00"

EMPLOYEE_CODE_PREFIX = "EMP"

# Raw status strings returned by the backend
STATUS_ON_TIME = "tepat waktu"
STATUS_LATE = "terlambat"
STATUS_EARLY = "lebih awal"

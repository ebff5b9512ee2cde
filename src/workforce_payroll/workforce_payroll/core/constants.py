"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Used when the selected batch does not exist in the schedule.
DEFAULT_BATCH_NAME = "Default"
DEFAULT_WORK_START = "09:00"
DEFAULT_WORK_END = "19:00"

# date.weekday() value of the weekly off day (Sunday).
WEEKLY_OFF_WEEKDAY = 6

DEFAULT_CURRENCY_SYMBOL = "₹"
EMPTY_CELL = "-"

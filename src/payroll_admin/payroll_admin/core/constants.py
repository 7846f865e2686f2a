"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STANDARD_HOURS = 8.5
DEFAULT_SLAB_HOURS = 6.0

MONTH_FORMAT = "%Y-%m"
DATE_FORMAT = "%Y-%m-%d"

FLAG_INVALID_SETTINGS = "invalid_settings"

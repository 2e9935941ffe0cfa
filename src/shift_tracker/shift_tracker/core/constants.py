"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HISTORY_LIMIT = 5
DEFAULT_AUTOSAVE_INTERVAL_SECONDS = 300
DEFAULT_DATA_FILE = "data/shift-data.json"
DEFAULT_COMMAND_PREFIX = "!"

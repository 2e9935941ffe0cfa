import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON snapshot of staff roster + shift history
DATA_FILE = os.getenv("DATA_FILE", "data/shift-data.json")

# Periodic autosave; also save right after register/clock-out
AUTOSAVE_INTERVAL_SECONDS = int(os.getenv("AUTOSAVE_INTERVAL_SECONDS", "300"))
SAVE_ON_MUTATION = bool(int(os.getenv("SAVE_ON_MUTATION", "1")))

# If enabled, an unreadable data file is moved aside instead of overwritten
PRESERVE_CORRUPT_DATA = bool(int(os.getenv("PRESERVE_CORRUPT_DATA", "0")))

COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "!")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

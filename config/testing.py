import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "data/test-shift-data.json")

AUTOSAVE_INTERVAL_SECONDS = int(os.getenv("AUTOSAVE_INTERVAL_SECONDS", "1"))
SAVE_ON_MUTATION = bool(int(os.getenv("SAVE_ON_MUTATION", "1")))

PRESERVE_CORRUPT_DATA = bool(int(os.getenv("PRESERVE_CORRUPT_DATA", "0")))

COMMAND_PREFIX = "!"

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

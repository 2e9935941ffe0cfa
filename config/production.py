import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = os.getenv("DATA_FILE", "data/shift-data.json")

AUTOSAVE_INTERVAL_SECONDS = int(os.getenv("AUTOSAVE_INTERVAL_SECONDS", "300"))
SAVE_ON_MUTATION = bool(int(os.getenv("SAVE_ON_MUTATION", "1")))

PRESERVE_CORRUPT_DATA = bool(int(os.getenv("PRESERVE_CORRUPT_DATA", "0")))

COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "!")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

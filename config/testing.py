import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "work_attribution_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

HIDE_SELECTOR_WHEN_POSSIBLE = True
AUTO_ASSIGN_PRIMARY = True
ENABLE_QUICK_SWITCH = True
KNOWN_IMPORT_SOURCES = "itknecht"
HOUR_RATIO_LIMIT = 1.5
DEFAULT_WORK_WEEK = 40.0
DEFAULT_EMPLOYER_PREFIX = "Buddy"

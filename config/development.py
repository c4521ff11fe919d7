import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "work_attribution_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Applies the schema on startup (CREATE TABLE IF NOT EXISTS).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Work context presentation
HIDE_SELECTOR_WHEN_POSSIBLE = bool(int(os.getenv("HIDE_SELECTOR_WHEN_POSSIBLE", "1")))
AUTO_ASSIGN_PRIMARY = bool(int(os.getenv("AUTO_ASSIGN_PRIMARY", "1")))
ENABLE_QUICK_SWITCH = bool(int(os.getenv("ENABLE_QUICK_SWITCH", "1")))

# Comma separated; records from these sources are routed to the company of the same name.
KNOWN_IMPORT_SOURCES = os.getenv("KNOWN_IMPORT_SOURCES", "itknecht")

HOUR_RATIO_LIMIT = float(os.getenv("HOUR_RATIO_LIMIT", "1.5"))
DEFAULT_WORK_WEEK = float(os.getenv("DEFAULT_WORK_WEEK", "40"))
DEFAULT_EMPLOYER_PREFIX = os.getenv("DEFAULT_EMPLOYER_PREFIX", "Buddy")

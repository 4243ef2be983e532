import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

HOLIDAY_RULE = "2nd_4th_saturday"
EXTRA_HOLIDAYS = ""

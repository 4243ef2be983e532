import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "2nd_4th_saturday" (payroll rule), "4th_saturday" or "sunday_only"
HOLIDAY_RULE = os.getenv("HOLIDAY_RULE", "2nd_4th_saturday")
# Comma separated YYYY-MM-DD dates treated as holidays on top of the weekly rule
EXTRA_HOLIDAYS = os.getenv("EXTRA_HOLIDAYS", "")

import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Grace period (minutes) used when a snapshot does not carry config.grace_minutes
GRACE_MINUTES = os.getenv("GRACE_MINUTES", "5")

DISPLAY_DATE_FORMAT = os.getenv("DISPLAY_DATE_FORMAT", "%d/%m/%Y")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

GRACE_MINUTES = os.getenv("GRACE_MINUTES", "5")

DISPLAY_DATE_FORMAT = os.getenv("DISPLAY_DATE_FORMAT", "%d/%m/%Y")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False

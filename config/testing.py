SECRET_KEY = "test-secret"

GRACE_MINUTES = 5

DISPLAY_DATE_FORMAT = "%d/%m/%Y"

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

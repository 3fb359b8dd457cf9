import os

SECRET_KEY = "test-secret"

BACKEND_URL = os.getenv("BACKEND_URL", "http://backend.test/api")
REQUEST_TIMEOUT = 2.0

DEFAULT_PER_PAGE = 10
PER_PAGE_OPTIONS = [5, 10, 25, 50]
LOOKUP_PER_PAGE = 100

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

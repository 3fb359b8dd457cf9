import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000/api")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

DEFAULT_PER_PAGE = int(os.getenv("DEFAULT_PER_PAGE", "10"))
PER_PAGE_OPTIONS = [5, 10, 25, 50]
LOOKUP_PER_PAGE = 100

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

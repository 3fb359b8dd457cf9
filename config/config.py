import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Backend API
    BACKEND_URL = os.environ.get("BACKEND_URL", "http://localhost:8000/api")
    REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))

    # Tables
    DEFAULT_PER_PAGE = int(os.environ.get("DEFAULT_PER_PAGE", "10"))
    PER_PAGE_OPTIONS = [5, 10, 25, 50]
    LOOKUP_PER_PAGE = 100

    DEBUG = bool(int(os.environ.get("DEBUG", "1")))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


# Module-level aliases so this file can also be used as a settings module
SECRET_KEY = Config.SECRET_KEY
BACKEND_URL = Config.BACKEND_URL
REQUEST_TIMEOUT = Config.REQUEST_TIMEOUT
DEFAULT_PER_PAGE = Config.DEFAULT_PER_PAGE
PER_PAGE_OPTIONS = Config.PER_PAGE_OPTIONS
LOOKUP_PER_PAGE = Config.LOOKUP_PER_PAGE
DEBUG = Config.DEBUG
LOG_LEVEL = Config.LOG_LEVEL

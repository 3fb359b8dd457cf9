import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Base URL of the attendance backend API
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000/api")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

DEFAULT_PER_PAGE = int(os.getenv("DEFAULT_PER_PAGE", "10"))
PER_PAGE_OPTIONS = [5, 10, 25, 50]
# Page size used to fill dropdowns (departments, employees)
LOOKUP_PER_PAGE = 100

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

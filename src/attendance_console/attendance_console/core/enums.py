from __future__ import annotations

from enum import Enum


class ValidPage(str, Enum):
    """Pages reachable from the sidebar; the active one drives the breadcrumb."""

    DASHBOARD = "Dashboard"
    DEPARTMENT = "Department"
    EMPLOYEE = "Employee"
    ATTENDANCE = "Attendance"
    ATTENDANCE_HISTORY = "Attendance History"


class ModalMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class LoadState(str, Enum):
    """Lifecycle of one list fetch."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class KioskStatus(str, Enum):
    NOT_CHECKED_IN = "Not checked in"
    CHECKED_IN = "Checked in"
    COMPLETED = "Completed"


class StatsScope(str, Enum):
    PAGE = "page"
    ALL = "all"

from __future__ import annotations

from dataclasses import dataclass

from .api.client import BackendClient, BackendConfig
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import LOOKUP_PER_PAGE
from .dashboard.service import DashboardService
from .departments.http_department_repository import HttpDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.http_employee_repository import HttpEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .ui.modals import InFlightRegistry


@dataclass(frozen=True)
class Container:
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    department_service: DepartmentService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    dashboard_service: DashboardService

    in_flight: InFlightRegistry


def assemble(
    *,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    lookup_per_page: int = LOOKUP_PER_PAGE,
) -> Container:
    department_service = DepartmentService(departments_repo, lookup_per_page=lookup_per_page)
    employee_service = EmployeeService(employees_repo, lookup_per_page=lookup_per_page)
    attendance_service = AttendanceService(attendance_repo, stats_per_page=lookup_per_page)
    dashboard_service = DashboardService(department_service, employee_service, attendance_service)

    return Container(
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        department_service=department_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
        in_flight=InFlightRegistry(),
    )


def build_container(*, backend_config: dict) -> Container:
    config = BackendConfig(
        base_url=str(backend_config["base_url"]),
        timeout=float(backend_config.get("timeout", 10)),
    )
    client = BackendClient(config)

    return assemble(
        departments_repo=HttpDepartmentRepository(client),
        employees_repo=HttpEmployeeRepository(client),
        attendance_repo=HttpAttendanceRepository(client),
        lookup_per_page=int(backend_config.get("lookup_per_page", LOOKUP_PER_PAGE)),
    )

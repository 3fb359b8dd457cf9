"""Example: use the service layer directly (without Flask).

Controllers stay thin; everything shown here is what the pages call.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_console.attendance_console.attendance.model import ReportFilters
from src.attendance_console.attendance_console.common.datetime_utils import default_report_range
from src.attendance_console.attendance_console.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        backend_config={"base_url": settings.BACKEND_URL, "timeout": settings.REQUEST_TIMEOUT}
    )

    departments = container.department_service.list_page(page=1, per_page=5)
    for d in departments.items:
        print(f"{d.name}: {d.clock_in_cutoff} - {d.clock_out_cutoff} ({d.employee_count} staff)")

    start, end = default_report_range(date.today())
    filters = ReportFilters(start_date=start.isoformat(), end_date=end.isoformat())
    print(container.attendance_service.global_stats(filters).as_dict())


if __name__ == "__main__":
    main()

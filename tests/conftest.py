from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_console.attendance_console.api.pagination import Page
from src.attendance_console.attendance_console.attendance.model import (
    AttendanceRecord,
    CheckResult,
    TodayAttendance,
)
from src.attendance_console.attendance_console.container import assemble
from src.attendance_console.attendance_console.core.exceptions import ApiError
from src.attendance_console.attendance_console.departments.model import Department
from src.attendance_console.attendance_console.employees.model import Employee
from src.attendance_console.attendance_console.main import create_app


def make_page(items, *, page: int, per_page: int) -> Page:
    total = len(items)
    last_page = max((total + per_page - 1) // per_page, 1)
    start = (page - 1) * per_page
    chunk = list(items[start : start + per_page])
    return Page(
        items=chunk,
        current_page=page,
        last_page=last_page,
        per_page=per_page,
        total=total,
        from_=start + 1 if chunk else 0,
        to=start + len(chunk),
    )


class FakeDepartmentRepo:
    def __init__(self, departments=()):
        self.items = {d.id: d for d in departments}
        self.next_id = max(self.items, default=0) + 1
        self.fail_with = None
        self.deleted = []

    def list_page(self, *, page: int, per_page: int):
        if self.fail_with:
            raise ApiError(self.fail_with)
        return make_page(list(self.items.values()), page=page, per_page=per_page)

    def create(self, draft):
        d = Department(
            id=self.next_id,
            name=draft.name.strip(),
            clock_in_cutoff=f"{draft.clock_in}:00",
            clock_out_cutoff=f"{draft.clock_out}:00",
            created_at="2026-01-15T08:00:00.000000Z",
        )
        self.items[d.id] = d
        self.next_id += 1

    def update(self, department_id: int, draft):
        old = self.items[department_id]
        self.items[department_id] = Department(
            id=old.id,
            name=draft.name.strip(),
            clock_in_cutoff=f"{draft.clock_in}:00",
            clock_out_cutoff=f"{draft.clock_out}:00",
            created_at=old.created_at,
            employees=old.employees,
        )

    def delete(self, department_id: int):
        self.deleted.append(department_id)
        self.items.pop(department_id, None)


class FakeEmployeeRepo:
    def __init__(self, employees=()):
        self.items = {e.id: e for e in employees}
        self.next_id = max(self.items, default=0) + 1
        self.fail_with = None
        self.saved = []

    def list_page(self, *, page: int, per_page: int):
        if self.fail_with:
            raise ApiError(self.fail_with)
        return make_page(list(self.items.values()), page=page, per_page=per_page)

    def create(self, draft):
        self.saved.append(draft)
        e = Employee(
            id=self.next_id,
            code=draft.code,
            department_id=draft.department_id,
            name=draft.name,
            address=draft.address,
        )
        self.items[e.id] = e
        self.next_id += 1

    def update(self, employee_id: int, draft):
        self.saved.append(draft)

    def delete(self, employee_id: int):
        self.items.pop(employee_id, None)


class FakeAttendanceRepo:
    def __init__(self, rows=(), *, clock=lambda: "08:05:00"):
        self.rows = list(rows)
        self.today_records = {}
        self.clock = clock
        self.report_calls = []
        self.fail_with = None

    def report_page(self, *, page: int, per_page: int, filters):
        self.report_calls.append((page, per_page, filters))
        return make_page(self.rows, page=page, per_page=per_page)

    def today(self, *, employee_id: int, day: str):
        if self.fail_with:
            raise ApiError(self.fail_with)
        return self.today_records.get(employee_id)

    def check_in(self, *, employee_id: int):
        if employee_id in self.today_records:
            raise ApiError("Already checked in today", status_code=422)
        record = TodayAttendance(id=employee_id, employee_id=employee_id, date="2026-10-19", clock_in_time=self.clock())
        self.today_records[employee_id] = record
        return CheckResult(message="Check in successful", attendance=record)

    def check_out(self, *, employee_id: int):
        old = self.today_records[employee_id]
        record = TodayAttendance(
            id=old.id,
            employee_id=employee_id,
            date=old.date,
            clock_in_time=old.clock_in_time,
            clock_out_time="17:02:00",
        )
        self.today_records[employee_id] = record
        return CheckResult(message="Check out successful", attendance=record)


def record(employee_id=1, *, status_in="tepat waktu", status_out="tepat waktu", day="2026-10-19", index=0):
    return AttendanceRecord.from_api(
        {
            "employee_id": employee_id,
            "employee_name": f"Employee {employee_id}",
            "departement": {
                "id": 1,
                "departement_name": "Engineering",
                "max_clock_in_time": "08:00:00",
                "max_clock_out_time": "17:00:00",
            },
            "date": day,
            "clock_in_time": "07:55:00",
            "status_in": status_in,
            "clock_out_time": "17:05:00",
            "status_out": status_out,
        },
        index,
    )


@pytest.fixture()
def fixed_now():
    return datetime(2026, 10, 19, 8, 30, 0)


@pytest.fixture()
def engineering():
    return Department(id=1, name="Engineering", clock_in_cutoff="08:00:00", clock_out_cutoff="17:00:00")


@pytest.fixture()
def department_repo(engineering):
    return FakeDepartmentRepo([engineering])


@pytest.fixture()
def employee_repo(engineering):
    return FakeEmployeeRepo(
        [
            Employee(
                id=7,
                code="EMP123456",
                department_id=engineering.id,
                name="Budi Santoso",
                address="Jl. Merdeka 1",
                department=engineering,
            )
        ]
    )


@pytest.fixture()
def attendance_repo():
    return FakeAttendanceRepo()


@pytest.fixture()
def container(department_repo, employee_repo, attendance_repo):
    return assemble(
        departments_repo=department_repo,
        employees_repo=employee_repo,
        attendance_repo=attendance_repo,
    )


@pytest.fixture()
def app(container):
    app = create_app("config.testing", container=container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_record():
    return record


@pytest.fixture()
def page_of():
    return make_page

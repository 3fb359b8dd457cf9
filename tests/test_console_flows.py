from __future__ import annotations

import csv
import io
import re
from datetime import date

from src.attendance_console.attendance_console.attendance.model import ReportFilters
from src.attendance_console.attendance_console.common.datetime_utils import default_report_range


def _text(resp) -> str:
    return resp.get_data(as_text=True)


# departments
def test_department_list_shows_schedule_and_active_nav(client):
    resp = client.get("/department")

    body = _text(resp)
    assert resp.status_code == 200
    assert "Engineering" in body
    assert "In: 08:00" in body
    assert 'class="nav-link active"' in body
    assert "Showing 1 to 1 of 1 entries" in body


def test_create_department_then_list_shows_it(client, department_repo):
    resp = client.post(
        "/department/save",
        data={
            "mode": "create",
            "departement_name": "QA",
            "max_clock_in_time": "09:00",
            "max_clock_out_time": "18:00",
            "page": "1",
            "per_page": "10",
        },
        follow_redirects=True,
    )

    body = _text(resp)
    assert "Department created successfully" in body
    assert "QA" in body
    assert "In: 09:00" in body
    assert "Out: 18:00" in body
    assert len(department_repo.items) == 2


def test_invalid_department_keeps_modal_open_with_errors(client, department_repo):
    resp = client.post(
        "/department/save",
        data={"mode": "create", "departement_name": "QA", "max_clock_in_time": "18:00", "max_clock_out_time": "09:00"},
    )

    body = _text(resp)
    assert resp.status_code == 200
    assert "Clock out time must be after clock in time" in body
    assert "Add New Department" in body
    assert len(department_repo.items) == 1


def test_edit_modal_is_seeded(client):
    body = _text(client.get("/department?edit_id=1"))

    assert "Edit Department" in body
    assert 'value="Engineering"' in body
    assert 'name="id" value="1"' in body


def test_edit_unknown_department_is_reported(client):
    body = _text(client.get("/department?edit_id=99"))

    assert "Department not found" in body


def test_delete_requires_confirmation_then_deletes(client, department_repo):
    prompt = _text(client.get("/department?confirm_delete=1"))
    assert "This will permanently remove the department" in prompt

    resp = client.post("/department/1/delete", data={"page": "1", "per_page": "10"}, follow_redirects=True)

    assert "Department deleted successfully" in _text(resp)
    assert department_repo.deleted == [1]


def test_second_delete_is_refused_while_first_runs(client, container, department_repo):
    container.in_flight.acquire(("department", 1))

    resp = client.post("/department/1/delete", follow_redirects=True)

    assert "Delete already in progress" in _text(resp)
    assert department_repo.deleted == []


def test_backend_error_is_shown_in_table(client, department_repo):
    department_repo.fail_with = "Failed to fetch data"

    body = _text(client.get("/department"))

    assert "Error loading data" in body
    assert "Failed to fetch data" in body


# employees
def test_employee_create_modal_lists_departments(client):
    body = _text(client.get("/employee?modal=create"))

    assert "Add New Employee" in body
    assert '<option value="1"' in body
    assert 'name="employee_id" type="text"' in body


def test_employee_validation_errors_are_rendered(client, employee_repo):
    resp = client.post(
        "/employee/save",
        data={"mode": "create", "employee_id": "EMP1", "departement_id": "", "name": "Sari", "address": "abc"},
    )

    body = _text(resp)
    assert "Address must be at least 4 characters" in body
    assert "Department is required" in body
    assert employee_repo.saved == []


# attendance history
def test_report_shows_rows_and_page_stats(client, attendance_repo, make_record):
    attendance_repo.rows = [
        make_record(1, status_in="tepat waktu", index=0),
        make_record(2, status_in="tepat waktu", index=1),
        make_record(3, status_in="terlambat", index=2),
    ]

    body = _text(client.get("/attendance?start_date=2026-10-12&end_date=2026-10-19"))

    assert "Employee 3" in body
    assert "Total 3 Records" in body
    assert "67%" in body
    filters = attendance_repo.report_calls[0][2]
    assert (filters.start_date, filters.end_date) == ("2026-10-12", "2026-10-19")


def test_report_waits_for_both_dates(client, attendance_repo):
    body = _text(client.get("/attendance?start_date=&end_date=2026-10-19"))

    assert attendance_repo.report_calls == []
    assert "No attendance records found" in body


def test_report_global_stats_cover_all_pages(client, attendance_repo, make_record):
    attendance_repo.rows = [make_record(i, status_in="terlambat", index=i) for i in range(1, 13)]

    client.get("/attendance?start_date=2026-10-12&end_date=2026-10-19&per_page=5&stats=all")

    # one page for the table, then the whole report for the stats
    assert [call[:2] for call in attendance_repo.report_calls] == [(1, 5), (1, 100)]


def test_report_forwards_department_and_page(client, attendance_repo):
    body = _text(client.get("/attendance?start_date=2026-10-12&end_date=2026-10-19&department_id=2&page=3"))

    assert attendance_repo.report_calls[-1] == (
        3,
        10,
        ReportFilters(start_date="2026-10-12", end_date="2026-10-19", department_id=2),
    )
    assert "Try adjusting your filter criteria" in body


def test_report_clear_restores_default_range(client, attendance_repo):
    start, end = default_report_range(date.today())

    body = _text(client.get("/attendance?start_date=2026-01-01&end_date=2026-01-31&department_id=2&page=3&clear=1"))

    assert attendance_repo.report_calls == [
        (1, 10, ReportFilters(start_date=start.isoformat(), end_date=end.isoformat(), department_id=None)),
    ]
    assert f'value="{start.isoformat()}"' in body
    assert "Try adjusting your filter criteria" not in body


def test_report_empty_message_depends_on_active_filter(client):
    start, end = default_report_range(date.today())
    default_range = f"start_date={start.isoformat()}&end_date={end.isoformat()}"

    unfiltered = _text(client.get(f"/attendance?{default_range}"))
    filtered = _text(client.get(f"/attendance?{default_range}&department_id=1"))

    assert "No attendance data available for the selected period" in unfiltered
    assert "Try adjusting your filter criteria" not in unfiltered
    assert "Try adjusting your filter criteria" in filtered


def test_report_early_leave_card_counts_clock_out_status(client, attendance_repo, make_record):
    attendance_repo.rows = [
        make_record(1, status_out="lebih awal", index=0),
        make_record(2, status_out="Lebih Awal", index=1),
        make_record(3, status_out="tepat waktu", index=2),
    ]

    body = _text(client.get("/attendance?start_date=2026-10-12&end_date=2026-10-19"))

    assert re.search(r"Early Leave</span>\s*<strong>2</strong>", body)


def test_export_csv_contains_all_rows(client, attendance_repo, make_record):
    attendance_repo.rows = [make_record(i, index=i) for i in range(1, 4)]

    resp = client.get("/attendance/export.csv?start_date=2026-10-12&end_date=2026-10-19")

    assert resp.mimetype == "text/csv"
    assert "attendance_20261012_20261019.csv" in resp.headers["Content-Disposition"]
    rows = list(csv.DictReader(io.StringIO(resp.data.decode("utf-8-sig"))))
    assert [r["employee_name"] for r in rows] == ["Employee 1", "Employee 2", "Employee 3"]
    assert rows[0]["clock_in_time"] == "07:55"


# kiosk
def test_kiosk_flow_from_check_in_to_completed(client):
    body = _text(client.get("/check?employee_id=7"))
    assert "Not checked in" in body
    assert 'btn-success">Check In' in body
    assert 'btn-danger" disabled>Check Out' in body

    body = _text(client.post("/check/in", data={"employee_id": "7"}, follow_redirects=True))
    assert 'status-warning">Checked in' in body
    assert "Check in successful" in body
    assert 'btn-success" disabled>Check In' in body
    assert 'btn-danger">Check Out' in body

    body = _text(client.post("/check/out", data={"employee_id": "7"}, follow_redirects=True))
    assert 'status-success">Completed' in body
    assert "Attendance completed for today" in body
    assert 'btn-success" disabled>Check In' in body
    assert 'btn-danger" disabled>Check Out' in body


def test_kiosk_treats_failed_today_fetch_as_no_record(client, attendance_repo):
    attendance_repo.fail_with = "Backend down"

    body = _text(client.get("/check?employee_id=7"))

    assert "Not checked in" in body
    assert 'btn-success">Check In' in body
    assert 'btn-danger" disabled>Check Out' in body


def test_check_out_without_check_in_is_refused(client, attendance_repo):
    body = _text(client.post("/check/out", data={"employee_id": "7"}, follow_redirects=True))

    assert "No check-in record found for today" in body
    assert attendance_repo.today_records == {}


def test_check_in_without_employee_is_refused(client):
    body = _text(client.post("/check/in", data={}, follow_redirects=True))

    assert "Please select an employee first" in body


def test_backend_rejection_is_flashed(client, attendance_repo):
    client.post("/check/in", data={"employee_id": "7"})

    body = _text(client.post("/check/in", data={"employee_id": "7"}, follow_redirects=True))

    assert "Already checked in today" in body


def test_kiosk_reports_employee_load_failure(client, employee_repo):
    employee_repo.fail_with = "down"

    body = _text(client.get("/check"))

    assert "Failed to load employees" in body


# dashboard
def test_dashboard_summarizes_totals(client):
    body = _text(client.get("/"))

    assert "Present Today" in body
    assert '<ol class="breadcrumb">' in body


def test_dashboard_survives_partial_failure(client, department_repo):
    department_repo.fail_with = "down"

    resp = client.get("/")

    assert resp.status_code == 200
    assert "Failed to load departments" in _text(resp)

from __future__ import annotations

import csv
import io
import logging
from datetime import date
from typing import Any, Mapping, Optional

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..common.datetime_utils import default_report_range, format_time, now_local, parse_iso_date
from ..core.enums import StatsScope, ValidPage
from ..core.exceptions import ApiError, ValidationError
from ..container import Container
from ..ui.page_controller import ListController
from ..ui.table import PaginationData
from .model import ReportFilters
from .views import attendance_table

logger = logging.getLogger(__name__)


def _filters_from(values: Mapping[str, Any]) -> ReportFilters:
    raw_dept = values.get("department_id")
    try:
        dept_id = int(raw_dept) if raw_dept not in (None, "") else None
    except (TypeError, ValueError):
        dept_id = None
    return ReportFilters(
        start_date=str(values.get("start_date") or ""),
        end_date=str(values.get("end_date") or ""),
        department_id=dept_id,
    )


def _valid_date(value: str) -> bool:
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _default_filters() -> dict[str, str]:
        start, end = default_report_range(date.today())
        return {
            "start_date": start.strftime("%Y-%m-%d"),
            "end_date": end.strftime("%Y-%m-%d"),
            "department_id": "",
        }

    def _report_controller(args: Mapping[str, Any]) -> ListController:
        return ListController.from_request_args(
            args,
            lambda p, n, f: service.report_page(page=p, per_page=n, filters=_filters_from(f)),
            default_per_page=int(app.config["DEFAULT_PER_PAGE"]),
            per_page_options=list(app.config["PER_PAGE_OPTIONS"]),
            filter_defaults=_default_filters(),
            # No request until both ends of the range are set and well formed
            ready=lambda f: _valid_date(str(f.get("start_date") or "")) and _valid_date(str(f.get("end_date") or "")),
            error_message="Failed to fetch attendance data",
        )

    @app.route("/attendance", endpoint="attendance_report")
    def attendance_report():
        g.navigation.set_page_active(ValidPage.ATTENDANCE_HISTORY)

        ctrl = _report_controller(request.args)
        if request.args.get("clear"):
            ctrl.clear_filters(_default_filters())
        else:
            ctrl.refresh()

        try:
            scope = StatsScope(request.args.get("stats") or StatsScope.PAGE.value)
        except ValueError:
            scope = StatsScope.PAGE

        departments = container.department_service.lookup()

        data = ctrl.data
        records = list(data.items) if data is not None else []
        stats = service.page_stats(records)
        stats_error = None
        if scope == StatsScope.ALL and data is not None:
            try:
                stats = service.global_stats(_filters_from(ctrl.filters))
            except ApiError as e:
                stats_error = e.message

        defaults = _default_filters()
        has_filter = bool(ctrl.filters.get("department_id")) or any(
            ctrl.filters.get(k) != defaults[k] for k in ("start_date", "end_date")
        )
        link_params = ctrl.query(stats=scope.value)
        table = attendance_table(list(app.config["PER_PAGE_OPTIONS"]), has_filter=has_filter).build(
            records,
            pagination=PaginationData.from_page(data) if data is not None else None,
            loading=ctrl.loading,
            error=ctrl.error,
            title=f"Total {data.total if data is not None else 0} Records",
            url_for=url_for,
            list_endpoint="attendance_report",
            link_params=link_params,
        )

        return render_template(
            "attendance/report.html",
            table=table,
            stats=stats,
            stats_scope=scope.value,
            stats_error=stats_error,
            filters=ctrl.filters,
            departments=departments,
            query=link_params,
            export_url=url_for("attendance_export", **{k: v for k, v in ctrl.filters.items() if v}),
        )

    @app.route("/attendance/export.csv", endpoint="attendance_export")
    def attendance_export():
        filters = _filters_from({**_default_filters(), **request.args.to_dict()})
        if not (_valid_date(filters.start_date) and _valid_date(filters.end_date)):
            flash("Missing start_date/end_date", "warning")
            return redirect(url_for("attendance_report"))

        try:
            rows = list(service.iter_report(filters))
        except ApiError as e:
            flash(e.message, "danger")
            return redirect(url_for("attendance_report", **request.args.to_dict()))

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=[
                "date",
                "employee_id",
                "employee_name",
                "department",
                "clock_in_time",
                "status_in",
                "clock_out_time",
                "status_out",
            ],
        )
        writer.writeheader()
        for r in rows:
            writer.writerow(
                {
                    "date": r.date,
                    "employee_id": r.employee_id,
                    "employee_name": r.employee_name,
                    "department": r.department.name if r.department else "",
                    "clock_in_time": format_time(r.clock_in_time),
                    "status_in": r.status_in,
                    "clock_out_time": format_time(r.clock_out_time),
                    "status_out": r.status_out,
                }
            )

        filename = f"attendance_{filters.start_date.replace('-', '')}_{filters.end_date.replace('-', '')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    # kiosk
    def _selected_employee_id(values: Mapping[str, Any]) -> Optional[int]:
        try:
            return int(values.get("employee_id") or 0) or None
        except (TypeError, ValueError):
            return None

    @app.route("/check", endpoint="attendance_check")
    def attendance_check():
        g.navigation.set_page_active(ValidPage.ATTENDANCE)

        employees = []
        employees_error = None
        try:
            employees = container.employee_service.lookup()
        except ApiError as e:
            logger.warning("Error fetching employees: %s", e.message)
            employees_error = "Failed to load employees"

        selected_id = _selected_employee_id(request.args)
        selected = next((e for e in employees if e.id == selected_id), None)
        kiosk = service.kiosk_view(selected)

        last_action = session.pop("last_action", None)
        if last_action and last_action.get("employee_id") != selected_id:
            last_action = None

        return render_template(
            "attendance/check.html",
            employees=employees,
            employees_error=employees_error,
            selected=selected,
            kiosk=kiosk,
            last_action=last_action,
            now=now_local(),
        )

    def _record_action(kind: str, label: str, do_action):
        employee_id = _selected_employee_id(request.form)
        try:
            result = do_action(employee_id)
        except ValidationError as e:
            flash(str(e), "warning")
        except ApiError as e:
            flash(e.message, "danger")
        except Exception:
            logger.exception("Error during %s", kind)
            flash(f"Failed to {label}", "danger")
        else:
            att = result.attendance
            when = None
            if att is not None:
                when = att.clock_in_time if kind == "check-in" else att.clock_out_time
            session["last_action"] = {
                "type": kind,
                "employee_id": employee_id,
                "message": result.message or f"{label.capitalize()} successful",
                "time": format_time(when),
            }
        if employee_id:
            return redirect(url_for("attendance_check", employee_id=employee_id))
        return redirect(url_for("attendance_check"))

    @app.route("/check/in", methods=["POST"], endpoint="attendance_check_in")
    def attendance_check_in():
        return _record_action("check-in", "check in", service.check_in)

    @app.route("/check/out", methods=["POST"], endpoint="attendance_check_out")
    def attendance_check_out():
        return _record_action("check-out", "check out", service.check_out)

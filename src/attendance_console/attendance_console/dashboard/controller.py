from __future__ import annotations

from flask import Flask, g, render_template, url_for

from ..core.enums import ValidPage
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="dashboard")
    def dashboard():
        g.navigation.set_page_active(ValidPage.DASHBOARD)
        summary = container.dashboard_service.summary()
        today = summary.day.strftime("%Y-%m-%d")
        return render_template(
            "dashboard.html",
            summary=summary,
            report_url=url_for("attendance_report", start_date=today, end_date=today),
        )

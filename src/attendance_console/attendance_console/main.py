from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g

from config import get_settings_module
from config.config import Config

from .common.datetime_utils import format_date, format_time
from .container import Container, build_container
from .core.logging import configure_logging
from .navigation.menu import MENU
from .navigation.store import NavigationStore
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees

_SETTING_KEYS = (
    "SECRET_KEY",
    "BACKEND_URL",
    "REQUEST_TIMEOUT",
    "DEFAULT_PER_PAGE",
    "PER_PAGE_OPTIONS",
    "LOOKUP_PER_PAGE",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
)


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    app.config.from_object(Config)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    for key in _SETTING_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    app.secret_key = app.config["SECRET_KEY"]

    logger = configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    if app.config["DEBUG"]:
        logger.info("settings=%s backend=%s", settings_module, app.config["BACKEND_URL"])

    if container is None:
        container = build_container(
            backend_config={
                "base_url": app.config["BACKEND_URL"],
                "timeout": app.config["REQUEST_TIMEOUT"],
                "lookup_per_page": app.config["LOOKUP_PER_PAGE"],
            }
        )
    app.extensions["attendance_console"] = container

    app.jinja_env.filters["clock"] = format_time
    app.jinja_env.filters["long_date"] = format_date

    @app.before_request
    def _navigation():
        g.navigation = NavigationStore()

    @app.context_processor
    def _shell():
        return {"navigation": g.get("navigation") or NavigationStore(), "menu": MENU}

    register_dashboard(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_attendance(app, container)

    return app


if __name__ == "__main__":
    application = create_app()
    logging.getLogger(__name__).info("Starting attendance console")
    application.run(debug=application.config["DEBUG"])

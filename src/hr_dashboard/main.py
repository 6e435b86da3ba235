from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.logging_config import setup_logging
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .interns.controller import register as register_interns
from .schedules.controller import register as register_schedules
from .time_off.controller import register as register_time_off
from .timesheets.controller import register as register_timesheets

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None) or None)

    if container is None:
        data_config = getattr(settings, "SUPABASE_CONFIG")
        container = build_container(data_config=data_config)
        logger.info("settings=%s data platform=%s", settings_module, data_config.get("url"))

    app.extensions["hr_dashboard"] = container

    register_dashboard(app, container)
    register_employees(app, container)
    register_schedules(app, container)
    register_timesheets(app, container)
    register_time_off(app, container)
    register_interns(app, container)

    return app

from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import parse_iso_date
from .container import Container, build_container
from .payroll.controller import register as register_payroll


def _extra_holidays(raw) -> list:
    if not raw:
        return []
    if isinstance(raw, str):
        raw = [part for part in raw.split(",") if part.strip()]
    try:
        return [parse_iso_date(v) for v in raw]
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid EXTRA_HOLIDAYS setting {raw!r}: expected comma separated YYYY-MM-DD dates") from e


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    holiday_rule = getattr(settings, "HOLIDAY_RULE", "2nd_4th_saturday")
    extra_holidays = _extra_holidays(getattr(settings, "EXTRA_HOLIDAYS", ""))

    if app.config["DEBUG"]:
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s holiday_rule=%s extra_holidays=%d",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            holiday_rule,
            len(extra_holidays),
        )

    if container is None:
        container = build_container(
            db_config=db_config,
            holiday_rule=holiday_rule,
            extra_holidays=extra_holidays,
        )

    register_payroll(app, container)

    return app

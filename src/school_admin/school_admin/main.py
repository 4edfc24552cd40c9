from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.display import format_money, format_percent, or_dash
from .common.logging_config import setup_logging
from .container import Container, build_container
from .core.exceptions import ConfigurationError, DomainError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .pages.controller import register as register_pages
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"
MAX_UPLOAD_BYTES = 2 * 1024 * 1024


def _bootstrap_database(container: Container, *, auto_init_db: bool, auto_seed_db: bool) -> None:
    if container.conn is None or not (auto_init_db or auto_seed_db):
        return

    try:
        db_config = container.conn.config
        if auto_init_db:
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        if auto_seed_db:
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("Demo seed ready")
    except ConfigurationError as e:
        logger.error("Skipping database bootstrap: %s", e)
    except DomainError as e:
        logger.error("Database bootstrap failed: %s", e)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_BYTES

    app.jinja_env.filters["percent"] = format_percent
    app.jinja_env.filters["money"] = format_money
    app.jinja_env.filters["or_dash"] = or_dash

    if container is None:
        container = build_container(
            database_url=getattr(settings, "DATABASE_URL", None),
            database_key=getattr(settings, "DATABASE_KEY", None),
        )
        try:
            db_config = container.conn.config
            logger.debug(
                "settings=%s db=%s@%s:%s/%s",
                settings_module, db_config.user, db_config.host, db_config.port, db_config.database,
            )
        except ConfigurationError as e:
            # Pages still render and show the setup banner.
            logger.error("Database is not configured: %s", e)

        _bootstrap_database(
            container,
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
            auto_seed_db=bool(getattr(settings, "AUTO_SEED_DB", False)),
        )

    register_pages(app, container)
    register_dashboard(app, container)
    register_students(app, container)
    register_attendance(app, container)

    return app

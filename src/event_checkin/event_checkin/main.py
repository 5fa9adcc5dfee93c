from __future__ import annotations

import importlib
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .auth.controller import register as register_auth
from .checkins.controller import register as register_checkins
from .container import Container, build_container, build_store
from .core.constants import DEFAULT_EVENT_DATE
from .core.logging import setup_logging
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_MB", 10)) * 1024 * 1024

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), log_file=getattr(settings, "LOG_FILE", None))

    if container is None:
        store_kind = getattr(settings, "RECORD_STORE", "memory")
        db_config = getattr(settings, "DB_CONFIG", None)

        if store_kind == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("Record store schema ready (tables=%s)", len(list_tables(db_config)))

        container = build_container(
            store=build_store(store_kind, db_config=db_config),
            admin_password=getattr(settings, "ADMIN_PASSWORD", None),
            event_date=getattr(settings, "EVENT_DATE", DEFAULT_EVENT_DATE),
        )
        logger.info("Started with settings=%s store=%s", settings_module, store_kind)

    register_sessions(app, container)
    register_employees(app, container)
    register_checkins(app, container)
    register_auth(app, container)
    register_reports(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app


def main() -> None:
    app = create_app()
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")))


if __name__ == "__main__":
    main()

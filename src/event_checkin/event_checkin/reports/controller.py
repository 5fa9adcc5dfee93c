from __future__ import annotations

import io
import logging
from datetime import date

from flask import Flask, send_file

from ..common.http import admin_required, error_response
from ..container import Container
from .export import XLSX_MIMETYPE, checkins_workbook, employees_workbook, roster_workbook

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    admin = admin_required(container.admin_auth)

    def _send(content: bytes, name: str):
        return send_file(
            io.BytesIO(content),
            download_name=f"{name}_{date.today().strftime('%Y%m%d')}.xlsx",
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )

    @app.route("/api/export/checkins.xlsx", methods=["GET"], endpoint="export_checkins")
    @admin
    def export_checkins():
        try:
            return _send(checkins_workbook(container.checkin_service.list_check_ins()), "checkins")
        except Exception:
            logger.exception("Failed to export check-ins")
            return error_response("Failed to export check-ins", 500)

    @app.route("/api/export/employees.xlsx", methods=["GET"], endpoint="export_employees")
    @admin
    def export_employees():
        try:
            return _send(employees_workbook(container.directory_service.list_employees()), "employees")
        except Exception:
            logger.exception("Failed to export employees")
            return error_response("Failed to export employees", 500)

    @app.route("/api/export/sessions.xlsx", methods=["GET"], endpoint="export_sessions")
    @admin
    def export_sessions():
        try:
            return _send(roster_workbook(container.benefits_service.list_sessions()), "benefits_sessions")
        except Exception:
            logger.exception("Failed to export benefits sessions")
            return error_response("Failed to export sessions", 500)

    @app.route("/api/export/biometrics.xlsx", methods=["GET"], endpoint="export_biometrics")
    @admin
    def export_biometrics():
        try:
            return _send(roster_workbook(container.biometrics_service.list_sessions()), "biometric_sessions")
        except Exception:
            logger.exception("Failed to export biometric sessions")
            return error_response("Failed to export sessions", 500)

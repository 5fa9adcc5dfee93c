from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.utils import secure_filename

from ..common.http import admin_required, domain_error_response, error_response, json_payload
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    admin = admin_required(container.admin_auth)
    directory = container.directory_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def list_employees():
        try:
            return jsonify([e.to_dict() for e in directory.list_employees()])
        except Exception:
            logger.exception("Failed to fetch employees")
            return error_response("Failed to fetch employees", 500)

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @admin
    def create_employee():
        try:
            employee = directory.create_employee(json_payload())
            return jsonify(employee.to_dict()), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to create employee")
            return error_response("Failed to create employee", 500)

    @app.route("/api/employees/search", methods=["GET"], endpoint="employees_search")
    def search_employees():
        query = request.args.get("q")
        if not query:
            return error_response("Search query is required", 400)
        try:
            return jsonify([e.to_dict() for e in directory.search(query)])
        except Exception:
            logger.exception("Failed to search employees")
            return error_response("Failed to search employees", 500)

    @app.route("/api/employees/upload", methods=["POST"], endpoint="employees_upload")
    @admin
    def upload_employees():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return error_response("No file provided", 400)

        # secure_filename("员工.csv") == "csv": never use it to read the extension.
        log_name = secure_filename(upload.filename) or "upload"
        try:
            result = directory.import_file(upload.filename, upload.read())
            logger.info("Upload %s: %s imported, %s errors", log_name, result.imported, len(result.errors))
            return jsonify(result.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to process upload %s", log_name)
            return error_response("Failed to process file upload", 500)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def get_employee(employee_id: str):
        try:
            return jsonify(directory.get_employee(employee_id).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to fetch employee %s", employee_id)
            return error_response("Failed to fetch employee", 500)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    @admin
    def update_employee(employee_id: str):
        try:
            return jsonify(directory.update_employee(employee_id, json_payload()).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to update employee %s", employee_id)
            return error_response("Failed to update employee", 500)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @admin
    def delete_employee(employee_id: str):
        try:
            directory.delete_employee(employee_id)
            return jsonify({"message": "Employee deleted successfully"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to delete employee %s", employee_id)
            return error_response("Failed to delete employee", 500)

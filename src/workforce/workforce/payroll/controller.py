from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .service import grid_row_ui


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int = 400):
        return jsonify({"success": False, "message": message}), status

    def _period_from_args():
        year = request.args.get("year", type=int)
        month = request.args.get("month", type=int)
        if year is None or month is None:
            raise ValidationError("Query parameters 'year' and 'month' must be integers")
        return year, month

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _error(str(e))

    @app.route("/api/payroll/grid", methods=["POST"], endpoint="payroll_grid")
    def payroll_grid():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _error("Request body must be a JSON object")

        attendance = payload.get("attendance") or []
        leaves = payload.get("leaves") or []
        if not isinstance(attendance, list) or not isinstance(leaves, list):
            raise ValidationError("'attendance' and 'leaves' must be JSON arrays")

        grid = container.grid_calculator.compute_monthly_grid(
            payload.get("year"),
            payload.get("month"),
            attendance,
            leaves,
        )
        return jsonify(grid.to_dict()), 200

    @app.route("/api/payroll/employees/<employee_id>/grid", endpoint="payroll_employee_grid")
    def payroll_employee_grid(employee_id: str):
        year, month = _period_from_args()
        grid = container.payroll_report_service.employee_grid(employee_id, year, month)
        body = grid.to_dict()
        body["employeeId"] = employee_id
        body["days"] = grid_row_ui(grid)
        return jsonify(body), 200

    @app.route("/api/payroll/summary", endpoint="payroll_summary")
    def payroll_summary():
        year, month = _period_from_args()
        rows = container.payroll_report_service.monthly_summary(year, month)
        return jsonify({"year": year, "month": month, "rows": [r.to_dict() for r in rows]}), 200

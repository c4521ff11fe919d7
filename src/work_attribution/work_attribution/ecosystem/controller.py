from __future__ import annotations

from functools import wraps
from typing import Any, Mapping

from flask import Flask, g, jsonify, request, session

from ..common.datetime_utils import now_local, parse_iso_date, week_number, week_year
from ..common.validators import optional_text
from ..container import Container
from ..core.enums import TimeRecordStatus
from ..core.exceptions import (
    AccessDeniedError,
    DomainError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from ..core.logging_config import get_logger
from ..detection.model import DetectionHints
from ..timesheets.model import NewTimeRecord
from ..timesheets.service import ImportRow
from . import serializers

logger = get_logger(__name__)

TENANT_HEADER = "X-Tenant-Id"
ACTOR_HEADER = "X-Actor-Id"

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (AccessDeniedError, 403),
    (UnauthorizedError, 401),
    (ValidationError, 400),
)


def _int_arg(value: Any, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")


def _new_record_from_json(data: Mapping[str, Any]) -> NewTimeRecord:
    raw_date = data.get("work_date")
    if not raw_date:
        raise ValidationError("work_date is required")
    try:
        work_date = parse_iso_date(str(raw_date))
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {raw_date}")

    try:
        regular = float(data.get("regular_hours") or 0)
        overtime = float(data.get("overtime_hours") or 0)
    except (TypeError, ValueError):
        raise ValidationError("Hours must be numbers")

    company_id = data.get("assigned_company_id")
    status = data.get("status") or TimeRecordStatus.DRAFT.value
    try:
        status = TimeRecordStatus(status)
    except ValueError:
        raise ValidationError(f"Unknown status: {status}")

    return NewTimeRecord(
        employee_id=_int_arg(data.get("employee_id"), "employee_id"),
        work_date=work_date,
        regular_hours=regular,
        overtime_hours=overtime,
        assigned_company_id=_int_arg(company_id, "assigned_company_id") if company_id not in (None, "") else None,
        project_code=optional_text(data.get("project_code")),
        client_id=optional_text(data.get("client_id")),
        import_source=optional_text(data.get("import_source")),
        notes=optional_text(data.get("notes")),
        status=status,
        tenant_id=optional_text(data.get("tenant_id")),
    )


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls)), 400)
        return jsonify({"success": False, "error": type(e).__name__, "message": str(e)}), status

    def tenant_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            tenant_id = session.get("tenant_id") or request.headers.get(TENANT_HEADER)
            if not tenant_id:
                return jsonify({"success": False, "message": "Tenant is required"}), 401
            actor_id = session.get("user_id") or request.headers.get(ACTOR_HEADER)
            g.attribution = container.attribution_for(str(tenant_id), actor_id=str(actor_id) if actor_id else None)
            try:
                return view(*args, **kwargs)
            except DomainError:
                raise
            except Exception:
                logger.exception("unexpected error in %s", request.path)
                return jsonify({"success": False, "message": "Internal error"}), 500

        return wrapper

    @app.route("/api/employees/<int:employee_id>/work-context", methods=["GET"], endpoint="work_context")
    @tenant_required
    def work_context(employee_id: int):
        ctx = g.attribution.resolve_work_context(employee_id)
        return jsonify({"success": True, "data": serializers.work_context_dict(ctx)})

    @app.route(
        "/api/employees/<int:employee_id>/timesheet-distribution",
        methods=["GET"],
        endpoint="timesheet_distribution",
    )
    @tenant_required
    def timesheet_distribution(employee_id: int):
        today = now_local().date()
        week = _int_arg(request.args.get("week", week_number(today)), "week")
        year = _int_arg(request.args.get("year", week_year(today)), "year")
        dist = g.attribution.get_timesheet_distribution(employee_id, week, year)
        return jsonify({"success": True, "data": serializers.distribution_dict(dist)})

    @app.route("/api/employees/<int:employee_id>/detect-company", methods=["POST"], endpoint="detect_company")
    @tenant_required
    def detect_company(employee_id: int):
        try:
            hints = DetectionHints.from_mapping(request.get_json(silent=True) or {})
        except (TypeError, ValueError):
            raise ValidationError("company_id must be an integer")
        detection = g.attribution.detect_company(employee_id, hints)
        return jsonify({"success": True, "data": serializers.detection_dict(detection)})

    @app.route("/api/time-records/validate", methods=["POST"], endpoint="validate_time_record")
    @tenant_required
    def validate_time_record():
        record = _new_record_from_json(request.get_json(silent=True) or {})
        result = g.attribution.validate_time_record(record)
        return jsonify({"success": True, "data": serializers.validation_dict(result)})

    @app.route("/api/time-records", methods=["POST"], endpoint="record_time")
    @tenant_required
    def record_time():
        record = _new_record_from_json(request.get_json(silent=True) or {})
        recorded = g.attribution.record_time(record)
        return jsonify({"success": True, "data": serializers.recorded_time_dict(recorded)}), 201

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @tenant_required
    def create_employee():
        data = request.get_json(silent=True) or {}
        hours = data.get("contract_hours_per_week")
        try:
            hours = float(hours) if hours not in (None, "") else None
        except (TypeError, ValueError):
            raise ValidationError("contract_hours_per_week must be a number")
        employee = g.attribution.create_employee(full_name=data.get("full_name") or "", contract_hours_per_week=hours)
        return jsonify({"success": True, "data": serializers.employee_dict(employee)}), 201

    @app.route(
        "/api/employees/<int:employee_id>/project-companies",
        methods=["POST"],
        endpoint="assign_project_companies",
    )
    @tenant_required
    def assign_project_companies(employee_id: int):
        data = request.get_json(silent=True) or {}
        company_ids = data.get("company_ids")
        if not isinstance(company_ids, list):
            raise ValidationError("company_ids must be a list")
        employee = g.attribution.assign_project_companies(employee_id, company_ids)
        return jsonify({
            "success": True,
            "message": f"{len(employee.project_company_ids)} project companies assigned",
            "data": serializers.employee_dict(employee),
        })

    @app.route("/api/employees/<int:employee_id>/imports/<source>", methods=["POST"], endpoint="import_records")
    @tenant_required
    def import_records(employee_id: int, source: str):
        data = request.get_json(silent=True) or {}
        raw_rows = data.get("rows")
        if not isinstance(raw_rows, list):
            raise ValidationError("rows must be a list")
        if not all(isinstance(r, Mapping) for r in raw_rows):
            raise ValidationError("Each import row must be an object")
        rows = [ImportRow.from_mapping(r) for r in raw_rows]
        result = g.attribution.import_external_records(employee_id, source, rows)
        return jsonify({
            "success": result.success,
            "message": result.summary,
            "data": serializers.import_result_dict(result),
        })

    @app.route("/api/companies/hierarchy", methods=["GET"], endpoint="company_hierarchy")
    @tenant_required
    def company_hierarchy():
        year = request.args.get("year")
        month = request.args.get("month")
        hierarchies = g.attribution.company_hierarchy(
            year=_int_arg(year, "year") if year else None,
            month=_int_arg(month, "month") if month else None,
        )
        return jsonify({"success": True, "data": [serializers.hierarchy_dict(h) for h in hierarchies]})

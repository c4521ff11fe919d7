"""Plain-dict views of the derived results, for JSON responses."""

from __future__ import annotations

from typing import Any, Optional

from ..companies.model import Company
from ..companies.service import CompanyHierarchy
from ..context.model import WorkContext
from ..detection.engine import Detection
from ..employees.model import Employee
from ..timesheets.distribution import TimesheetDistribution
from ..timesheets.model import TimeRecord
from ..timesheets.service import ImportResult, RecordedTime
from ..timesheets.validator import ValidationResult


def company_dict(c: Optional[Company]) -> Optional[dict[str, Any]]:
    if c is None:
        return None
    return {
        "company_id": c.company_id,
        "name": c.name,
        "registration_code": c.registration_code,
        "company_type": c.company_type.value,
        "parent_employer_id": c.parent_employer_id,
    }


def employee_dict(e: Employee) -> dict[str, Any]:
    return {
        "employee_id": e.employee_id,
        "full_name": e.full_name,
        "primary_company_id": e.primary_company_id,
        "project_company_ids": list(e.project_company_ids),
        "contract_hours_per_week": e.contract_hours_per_week,
    }


def record_dict(r: TimeRecord) -> dict[str, Any]:
    return {
        "record_id": r.record_id,
        "employee_id": r.employee_id,
        "work_date": r.work_date.strftime("%Y-%m-%d"),
        "regular_hours": r.regular_hours,
        "overtime_hours": r.overtime_hours,
        "assigned_company_id": r.assigned_company_id,
        "project_code": r.project_code,
        "client_id": r.client_id,
        "notes": r.notes,
        "status": r.status.value,
    }


def work_context_dict(ctx: WorkContext) -> dict[str, Any]:
    return {
        "employee": employee_dict(ctx.employee),
        "primary_company": company_dict(ctx.primary_company),
        "available_companies": [company_dict(c) for c in ctx.available_companies],
        "capabilities": {
            "can_switch": ctx.capabilities.can_switch,
            "requires_selection": ctx.capabilities.requires_selection,
            "has_multiple_assignments": ctx.capabilities.has_multiple_assignments,
        },
        "default_behavior": {
            "auto_select_primary": ctx.default_behavior.auto_select_primary,
            "show_company_selector": ctx.default_behavior.show_company_selector,
            "enable_quick_switch": ctx.default_behavior.enable_quick_switch,
        },
    }


def detection_dict(d: Detection) -> dict[str, Any]:
    return {"company": company_dict(d.company), "rule": d.rule}


def distribution_dict(dist: TimesheetDistribution) -> dict[str, Any]:
    return {
        "employee_id": dist.employee_id,
        "week": dist.week,
        "year": dist.year,
        "sessions": [
            {
                "company_id": s.company_id,
                "company": company_dict(s.company),
                "total_hours": s.total_hours,
                "is_primary": s.is_primary,
                "records": [record_dict(r) for r in s.records],
            }
            for s in dist.sessions
        ],
        "summary": {
            "total_hours": dist.summary.total_hours,
            "primary_hours": dist.summary.primary_hours,
            "other_hours": dist.summary.other_hours,
            # JSON object keys are strings.
            "percentage_by_company": {str(k): v for k, v in dist.summary.percentage_by_company.items()},
        },
    }


def validation_dict(v: ValidationResult) -> dict[str, Any]:
    return {"valid": v.valid, "issues": list(v.issues), "suggestions": list(v.suggestions)}


def recorded_time_dict(rt: RecordedTime) -> dict[str, Any]:
    return {
        "record": record_dict(rt.record),
        "company": company_dict(rt.company),
        "detection_rule": rt.detection_rule,
        "validation": validation_dict(rt.validation),
    }


def import_result_dict(res: ImportResult) -> dict[str, Any]:
    return {
        "success": res.success,
        "company": company_dict(res.company),
        "imported": [record_dict(r) for r in res.imported],
        "summary": res.summary,
    }


def hierarchy_dict(h: CompanyHierarchy) -> dict[str, Any]:
    return {
        "employer": company_dict(h.employer),
        "project_companies": [company_dict(c) for c in h.project_companies],
        "employees": [employee_dict(e) for e in h.employees],
        "statistics": {
            "total_employees": h.statistics.total_employees,
            "active_projects": h.statistics.active_projects,
            "period_hours": h.statistics.period_hours,
        },
        "employee_project_assignments": {str(k): v for k, v in h.employee_project_assignments.items()},
        "project_hour_distribution": {str(k): v for k, v in h.project_hour_distribution.items()},
    }

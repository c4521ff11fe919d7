from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AssignmentType


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object (no DB access code). ``project_company_ids`` never
    contains ``primary_company_id``.
    """

    employee_id: int
    tenant_id: str
    full_name: str
    primary_company_id: int
    project_company_ids: tuple[int, ...] = ()
    contract_hours_per_week: float = 40.0
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class EmployeeCompanyAssignment:
    """Audit trail entry written whenever an employee is linked to a company."""

    employee_id: int
    company_id: int
    assignment_type: AssignmentType
    assigned_by: str
    assigned_at: datetime
    can_log_hours: bool = True
    can_access_reports: bool = False
    can_view_payslips: bool = False
    default_hour_type: str = "project"
    auto_select_company: bool = False

from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty, require_non_negative
from ..companies.repository import CompanyRepository
from ..companies.service import CompanyHierarchyResolver
from ..context.service import WorkContextResolver
from ..core.enums import AssignmentType
from ..core.exceptions import ValidationError
from ..core.logging_config import get_logger
from ..core.settings import EcosystemSettings
from .model import Employee, EmployeeCompanyAssignment
from .repository import EmployeeRepository

logger = get_logger(__name__)


class EmployeeAssignmentService:
    """Use case: place employees on companies (admin)."""

    def __init__(
        self,
        resolver: WorkContextResolver,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        hierarchy: CompanyHierarchyResolver,
        *,
        actor_id: Optional[str] = None,
        settings: EcosystemSettings | None = None,
    ):
        self._resolver = resolver
        self._companies = companies
        self._employees = employees
        self._hierarchy = hierarchy
        self._actor_id = actor_id or resolver.tenant_id
        self._settings = settings or EcosystemSettings()

    def create_employee(self, *, full_name: str, contract_hours_per_week: Optional[float] = None) -> Employee:
        """New employees always start on the default employer, without projects."""
        full_name = require_non_empty(full_name, "Full name")
        if contract_hours_per_week is None:
            hours = self._settings.default_work_week
        else:
            hours = require_non_negative(contract_hours_per_week, "Contract hours per week")

        employer = self._hierarchy.ensure_default_employer()
        employee_id = self._employees.create_employee(
            tenant_id=self._resolver.tenant_id,
            full_name=full_name,
            primary_company_id=employer.company_id,
            contract_hours_per_week=hours,
        )
        logger.info("employee %s (%s) assigned to %s", employee_id, full_name, employer.name)
        return self._resolver.get_employee(employee_id)

    def assign_project_companies(self, employee_id: int, company_ids: Sequence[int]) -> Employee:
        employee = self._resolver.get_employee(employee_id)

        try:
            requested = [int(cid) for cid in company_ids]
        except (TypeError, ValueError):
            raise ValidationError("Project company ids must be integers")

        # Keep first occurrence order.
        unique_ids = list(dict.fromkeys(requested))
        if employee.primary_company_id in unique_ids:
            raise ValidationError("The primary company cannot also be a project company")

        by_id = {c.company_id: c for c in self._companies.list_for_tenant(self._resolver.tenant_id)}
        invalid = [cid for cid in unique_ids if cid not in by_id or not by_id[cid].is_project]
        if invalid:
            raise ValidationError(f"Invalid project companies: {', '.join(str(i) for i in invalid)}")

        assigned_at = now_local()
        assignments = [
            EmployeeCompanyAssignment(
                employee_id=employee.employee_id,
                company_id=cid,
                assignment_type=AssignmentType.PROJECT,
                assigned_by=self._actor_id,
                assigned_at=assigned_at,
            )
            for cid in unique_ids
        ]
        self._employees.replace_project_companies(
            employee_id=employee.employee_id,
            company_ids=unique_ids,
            assignments=assignments,
        )
        logger.info("employee %s assigned to %d project companies", employee.employee_id, len(unique_ids))
        return self._resolver.get_employee(employee.employee_id)

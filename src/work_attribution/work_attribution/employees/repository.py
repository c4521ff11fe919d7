from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeCompanyAssignment


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Direct lookup by id, regardless of tenant (callers check the tenant)."""

        raise NotImplementedError

    def list_for_tenant(self, tenant_id: str) -> Sequence[Employee]:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        tenant_id: str,
        full_name: str,
        primary_company_id: int,
        contract_hours_per_week: float,
    ) -> int:
        raise NotImplementedError

    def replace_project_companies(
        self,
        *,
        employee_id: int,
        company_ids: Sequence[int],
        assignments: Sequence[EmployeeCompanyAssignment],
    ) -> None:
        """Replace the employee's project list and append the audit records.

        All writes apply or none do.
        """

        raise NotImplementedError

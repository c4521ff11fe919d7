from __future__ import annotations

from ..companies.repository import CompanyRepository
from ..core.exceptions import NotFoundError, UnauthorizedError
from ..core.logging_config import get_logger
from ..core.settings import EcosystemSettings
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import Capabilities, DefaultBehavior, WorkContext

logger = get_logger(__name__)


class WorkContextResolver:
    """Use case: which companies may an employee work for right now.

    Pure read of stored state plus static settings; recomputed on every call.
    """

    def __init__(
        self,
        tenant_id: str,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        settings: EcosystemSettings | None = None,
    ):
        self._tenant_id = tenant_id
        self._companies = companies
        self._employees = employees
        self._settings = settings or EcosystemSettings()

    @property
    def tenant_id(self) -> str:
        return self._tenant_id

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        if employee.tenant_id != self._tenant_id:
            raise UnauthorizedError(f"Employee {employee_id} belongs to another tenant")
        return employee

    def resolve(self, employee_id: int) -> WorkContext:
        employee = self.get_employee(employee_id)
        by_id = {c.company_id: c for c in self._companies.list_for_tenant(self._tenant_id)}

        primary = by_id.get(employee.primary_company_id)
        if not primary:
            raise NotFoundError(
                f"Primary company {employee.primary_company_id} of employee {employee_id} not found"
            )

        available = [primary]
        seen = {primary.company_id}
        for company_id in employee.project_company_ids:
            if company_id in seen:
                continue
            company = by_id.get(company_id)
            if not company:
                logger.warning("employee %s references unknown company %s, skipped", employee_id, company_id)
                continue
            seen.add(company_id)
            available.append(company)

        s = self._settings
        can_switch = len(available) > 1
        requires_selection = (not s.hide_selector_when_possible) or len(available) > 1
        capabilities = Capabilities(
            can_switch=can_switch,
            requires_selection=requires_selection,
            has_multiple_assignments=len(employee.project_company_ids) > 0,
        )
        default_behavior = DefaultBehavior(
            auto_select_primary=s.auto_assign_primary,
            show_company_selector=requires_selection and not s.hide_selector_when_possible,
            enable_quick_switch=s.enable_quick_switch and can_switch,
        )

        return WorkContext(
            employee=employee,
            primary_company=primary,
            available_companies=tuple(available),
            capabilities=capabilities,
            default_behavior=default_behavior,
        )

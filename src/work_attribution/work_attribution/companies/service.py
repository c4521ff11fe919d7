from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..common.datetime_utils import month_range, now_local
from ..core import constants
from ..core.enums import CompanyType
from ..core.exceptions import ValidationError
from ..core.logging_config import get_logger
from ..core.settings import EcosystemSettings
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..timesheets.repository import TimeRecordRepository
from .model import Company, CompanySettings, NewCompany
from .repository import CompanyRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class HierarchyStatistics:
    total_employees: int
    active_projects: int
    period_hours: float


@dataclass(frozen=True)
class CompanyHierarchy:
    """One employer with its project companies and directly employed staff."""

    employer: Company
    project_companies: tuple[Company, ...]
    employees: tuple[Employee, ...]
    statistics: HierarchyStatistics
    employee_project_assignments: dict[int, list[int]] = field(default_factory=dict)
    project_hour_distribution: dict[int, float] = field(default_factory=dict)


class CompanyHierarchyResolver:
    """Use case: employer -> project company tree of a tenant."""

    def __init__(
        self,
        tenant_id: str,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        records: TimeRecordRepository,
        settings: EcosystemSettings | None = None,
    ):
        self._tenant_id = tenant_id
        self._companies = companies
        self._employees = employees
        self._records = records
        self._settings = settings or EcosystemSettings()

    def _seed(self) -> NewCompany:
        return NewCompany(
            tenant_id=self._tenant_id,
            name=constants.SEED_EMPLOYER_NAME,
            registration_code=constants.SEED_REGISTRATION_CODE,
            tax_number=constants.SEED_TAX_NUMBER,
            company_type=CompanyType.EMPLOYER,
            settings=CompanySettings(
                standard_work_week=self._settings.default_work_week,
                travel_allowance_per_km=constants.SEED_TRAVEL_ALLOWANCE_PER_KM,
                holiday_allowance_percentage=constants.SEED_HOLIDAY_ALLOWANCE_PERCENTAGE,
                pension_contribution_percentage=constants.SEED_PENSION_CONTRIBUTION_PERCENTAGE,
                collective_agreement=constants.SEED_COLLECTIVE_AGREEMENT,
            ),
        )

    def pick_default_employer(self, companies: Sequence[Company]) -> Optional[Company]:
        """Single employer wins; among several, the prefixed name, else the oldest."""
        employers = [c for c in companies if c.is_employer]
        if not employers:
            return None
        if len(employers) == 1:
            return employers[0]

        prefix = self._settings.default_employer_prefix.strip().lower()
        if prefix:
            for employer in employers:
                if prefix in employer.name.lower():
                    return employer
        return employers[0]

    def ensure_default_employer(self) -> Company:
        employer = self.pick_default_employer(self._companies.list_for_tenant(self._tenant_id))
        if employer:
            return employer

        employer = self._companies.ensure_employer(self._seed())
        logger.info("tenant %s: default employer is %s (%s)", self._tenant_id, employer.name, employer.company_id)
        return employer

    def build_hierarchy(self, *, year: Optional[int] = None, month: Optional[int] = None) -> list[CompanyHierarchy]:
        """Hierarchy per employer with hours aggregated over one calendar month.

        Defaults to the current month.
        """
        self.ensure_default_employer()

        today = now_local().date()
        try:
            start, end = month_range(
                today.year if year is None else int(year),
                today.month if month is None else int(month),
            )
        except ValueError as e:
            raise ValidationError(str(e))

        companies = self._companies.list_for_tenant(self._tenant_id)
        employees = self._employees.list_for_tenant(self._tenant_id)
        records = self._records.list_for_tenant(tenant_id=self._tenant_id, start_date=start, end_date=end)

        hierarchies: list[CompanyHierarchy] = []
        for employer in (c for c in companies if c.is_employer):
            projects = tuple(
                c for c in companies if c.company_type == CompanyType.PROJECT and c.parent_employer_id == employer.company_id
            )
            staff = tuple(e for e in employees if e.primary_company_id == employer.company_id)
            staff_ids = {e.employee_id for e in staff}
            project_ids = {p.company_id for p in projects}

            period_hours = 0.0
            project_hours = {p.company_id: 0.0 for p in projects}
            for r in records:
                if r.employee_id in staff_ids:
                    period_hours += r.total_hours
                if r.assigned_company_id in project_ids:
                    project_hours[r.assigned_company_id] += r.total_hours

            hierarchies.append(
                CompanyHierarchy(
                    employer=employer,
                    project_companies=projects,
                    employees=staff,
                    statistics=HierarchyStatistics(
                        total_employees=len(staff),
                        active_projects=len(projects),
                        period_hours=period_hours,
                    ),
                    employee_project_assignments={
                        e.employee_id: list(e.project_company_ids) for e in staff if e.project_company_ids
                    },
                    project_hour_distribution=project_hours,
                )
            )
        return hierarchies

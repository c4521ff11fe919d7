from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import CompanyType


@dataclass(frozen=True)
class CompanySettings:
    """Starter settings carried by an employer (used by payroll downstream)."""

    standard_work_week: float = 40.0
    travel_allowance_per_km: float = 0.0
    holiday_allowance_percentage: float = 0.0
    pension_contribution_percentage: float = 0.0
    collective_agreement: Optional[str] = None


@dataclass(frozen=True)
class Company:
    """Domain entity: a legal entity owned by a tenant.

    An employer has no parent; a project company has exactly one parent employer.
    """

    company_id: int
    tenant_id: str
    name: str
    registration_code: str
    company_type: CompanyType
    parent_employer_id: Optional[int] = None
    tax_number: Optional[str] = None
    settings: CompanySettings = field(default_factory=CompanySettings)
    created_at: Optional[datetime] = None

    @property
    def is_employer(self) -> bool:
        return self.company_type == CompanyType.EMPLOYER

    @property
    def is_project(self) -> bool:
        return self.company_type == CompanyType.PROJECT


@dataclass(frozen=True)
class NewCompany:
    tenant_id: str
    name: str
    registration_code: str
    company_type: CompanyType
    parent_employer_id: Optional[int] = None
    tax_number: Optional[str] = None
    settings: CompanySettings = field(default_factory=CompanySettings)

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..companies.model import Company
from ..employees.model import Employee


@dataclass(frozen=True)
class Capabilities:
    can_switch: bool
    requires_selection: bool
    has_multiple_assignments: bool


@dataclass(frozen=True)
class DefaultBehavior:
    """Hints for the presentation layer; the core never acts on them."""

    auto_select_primary: bool
    show_company_selector: bool
    enable_quick_switch: bool


@dataclass(frozen=True)
class WorkContext:
    """Derived view: the companies one employee may currently work for.

    ``available_companies`` starts with the primary company, followed by the
    project companies in assignment order, without duplicates.
    """

    employee: Employee
    primary_company: Company
    available_companies: tuple[Company, ...]
    capabilities: Capabilities
    default_behavior: DefaultBehavior

    @property
    def employee_id(self) -> int:
        return self.employee.employee_id

    @property
    def available_company_ids(self) -> tuple[int, ...]:
        return tuple(c.company_id for c in self.available_companies)

    def has_access(self, company_id: Optional[int]) -> bool:
        return company_id is not None and int(company_id) in self.available_company_ids

    def get_company(self, company_id: Optional[int]) -> Optional[Company]:
        if company_id is None:
            return None
        for company in self.available_companies:
            if company.company_id == int(company_id):
                return company
        return None

from __future__ import annotations

from dataclasses import dataclass, field

from ..common.datetime_utils import week_number, week_year
from ..common.validators import require_non_negative
from ..context.service import WorkContextResolver
from ..core.exceptions import AccessDeniedError
from ..core.settings import EcosystemSettings
from .distribution import TimesheetDistributionAggregator
from .model import NewTimeRecord

ACCESS_DENIED = "AccessDenied"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


class AssignmentValidator:
    """Use case: check a prospective time record before it is stored.

    Only an access violation makes a record invalid. Hour overage and a
    missing project code are reported as advice and never block the record.
    """

    def __init__(
        self,
        resolver: WorkContextResolver,
        aggregator: TimesheetDistributionAggregator,
        settings: EcosystemSettings | None = None,
    ):
        self._resolver = resolver
        self._aggregator = aggregator
        self._settings = settings or EcosystemSettings()

    def validate(self, record: NewTimeRecord) -> ValidationResult:
        if record.tenant_id is not None and record.tenant_id != self._resolver.tenant_id:
            raise AccessDeniedError("Time record belongs to another tenant")

        require_non_negative(record.regular_hours, "Regular hours")
        require_non_negative(record.overtime_hours, "Overtime hours")

        context = self._resolver.resolve(record.employee_id)
        issues: list[str] = []
        suggestions: list[str] = []
        valid = True

        if record.assigned_company_id is not None and not context.has_access(record.assigned_company_id):
            valid = False
            issues.append(
                f"{ACCESS_DENIED}: employee {record.employee_id} has no access to company {record.assigned_company_id}"
            )

        week = self._aggregator.aggregate(
            record.employee_id,
            week_number(record.work_date),
            week_year(record.work_date),
        )
        projected = week.summary.total_hours + record.total_hours
        contract_hours = float(context.employee.contract_hours_per_week)
        ratio_limit = self._settings.hour_ratio_limit
        if projected > contract_hours * ratio_limit:
            issues.append(self._overage_issue(projected, contract_hours, ratio_limit))

        if record.assigned_company_id is None:
            target = context.primary_company
        else:
            target = context.get_company(record.assigned_company_id)
        if target is not None and target.is_project and not (record.project_code or "").strip():
            suggestions.append(f"Add a project code for work at {target.name}")

        return ValidationResult(valid=valid, issues=issues, suggestions=suggestions)

    @staticmethod
    def _overage_issue(projected: float, contract_hours: float, ratio_limit: float) -> str:
        message = (
            f"Projected week hours {projected:g} exceed {ratio_limit * 100:g}% "
            f"of contract hours ({contract_hours:g}h)"
        )
        if contract_hours > 0:
            message += f": {projected / contract_hours * 100:.1f}% of contract"
        return message

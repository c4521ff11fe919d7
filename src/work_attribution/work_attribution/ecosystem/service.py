from __future__ import annotations

from typing import Optional, Sequence

from ..companies.repository import CompanyRepository
from ..companies.service import CompanyHierarchy, CompanyHierarchyResolver
from ..context.model import WorkContext
from ..context.service import WorkContextResolver
from ..core.settings import EcosystemSettings
from ..detection.engine import CompanyDetectionEngine, Detection, default_rules
from ..detection.model import DetectionHints
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.service import EmployeeAssignmentService
from ..timesheets.distribution import TimesheetDistribution, TimesheetDistributionAggregator
from ..timesheets.model import NewTimeRecord
from ..timesheets.repository import TimeRecordRepository
from ..timesheets.service import ImportResult, ImportRow, RecordedTime, TimeRecordingService
from ..timesheets.validator import AssignmentValidator, ValidationResult


class WorkAttributionService:
    """Tenant-bound entry point to the attribution engine.

    Build one per tenant (see ``Container.attribution_for``) and pass it
    along; nothing here is shared across tenants.
    """

    def __init__(
        self,
        tenant_id: str,
        *,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        records: TimeRecordRepository,
        settings: Optional[EcosystemSettings] = None,
        actor_id: Optional[str] = None,
    ):
        settings = settings or EcosystemSettings()
        self.tenant_id = tenant_id

        self.resolver = WorkContextResolver(tenant_id, companies, employees, settings)
        self.detector = CompanyDetectionEngine(default_rules(settings.known_import_sources))
        self.aggregator = TimesheetDistributionAggregator(self.resolver, records)
        self.validator = AssignmentValidator(self.resolver, self.aggregator, settings)
        self.hierarchy = CompanyHierarchyResolver(tenant_id, companies, employees, records, settings)
        self.assignments = EmployeeAssignmentService(
            self.resolver,
            companies,
            employees,
            self.hierarchy,
            actor_id=actor_id,
            settings=settings,
        )
        self.recording = TimeRecordingService(self.resolver, self.detector, self.validator, records, settings)

    def resolve_work_context(self, employee_id: int) -> WorkContext:
        return self.resolver.resolve(employee_id)

    def get_timesheet_distribution(self, employee_id: int, week: int, year: int) -> TimesheetDistribution:
        return self.aggregator.aggregate(employee_id, week, year)

    def detect_company(self, employee_id: int, hints: Optional[DetectionHints] = None) -> Detection:
        return self.detector.explain(self.resolver.resolve(employee_id), hints)

    def validate_time_record(self, record: NewTimeRecord) -> ValidationResult:
        return self.validator.validate(record)

    def assign_project_companies(self, employee_id: int, company_ids: Sequence[int]) -> Employee:
        return self.assignments.assign_project_companies(employee_id, company_ids)

    def create_employee(self, *, full_name: str, contract_hours_per_week: Optional[float] = None) -> Employee:
        return self.assignments.create_employee(full_name=full_name, contract_hours_per_week=contract_hours_per_week)

    def record_time(self, record: NewTimeRecord) -> RecordedTime:
        return self.recording.record_time(record)

    def import_external_records(self, employee_id: int, source: str, rows: Sequence[ImportRow]) -> ImportResult:
        return self.recording.import_external_records(employee_id, source, rows)

    def company_hierarchy(self, *, year: Optional[int] = None, month: Optional[int] = None) -> list[CompanyHierarchy]:
        return self.hierarchy.build_hierarchy(year=year, month=month)

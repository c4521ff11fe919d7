from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, require_non_negative
from ..companies.model import Company
from ..context.service import WorkContextResolver
from ..core.enums import TimeRecordStatus
from ..core.exceptions import AccessDeniedError, ValidationError
from ..core.logging_config import get_logger
from ..core.settings import EcosystemSettings
from ..detection.engine import CompanyDetectionEngine
from ..detection.model import DetectionHints
from ..detection.rules.base import company_name, first_matching
from .model import NewTimeRecord, TimeRecord
from .repository import TimeRecordRepository
from .validator import AssignmentValidator, ValidationResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class RecordedTime:
    record: TimeRecord
    company: Company
    detection_rule: str
    validation: ValidationResult


@dataclass(frozen=True)
class ImportRow:
    """One day exported by an external time tracking system."""

    work_date: date
    billable_hours: float
    description: Optional[str] = None
    client_code: Optional[str] = None
    project_code: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ImportRow":
        raw_date = data.get("date") or data.get("work_date")
        if not raw_date:
            raise ValidationError("Import row without a date")
        try:
            work_date = raw_date if isinstance(raw_date, date) else parse_iso_date(str(raw_date))
        except ValueError:
            raise ValidationError(f"Invalid date (YYYY-MM-DD): {raw_date}")
        return cls(
            work_date=work_date,
            billable_hours=require_non_negative(data.get("billable_hours") or 0, "Billable hours"),
            description=optional_text(data.get("description")),
            client_code=optional_text(data.get("client_code")),
            project_code=optional_text(data.get("project_code")),
        )


@dataclass(frozen=True)
class ImportResult:
    success: bool
    imported: tuple[TimeRecord, ...]
    company: Optional[Company]
    summary: str


class TimeRecordingService:
    """Use case: store time records with the right company attached."""

    def __init__(
        self,
        resolver: WorkContextResolver,
        detector: CompanyDetectionEngine,
        validator: AssignmentValidator,
        records: TimeRecordRepository,
        settings: EcosystemSettings | None = None,
    ):
        self._resolver = resolver
        self._detector = detector
        self._validator = validator
        self._records = records
        self._settings = settings or EcosystemSettings()

    def record_time(self, record: NewTimeRecord) -> RecordedTime:
        """Explicit company must be available; otherwise the company is detected."""
        require_non_negative(record.regular_hours, "Regular hours")
        require_non_negative(record.overtime_hours, "Overtime hours")
        if record.tenant_id is not None and record.tenant_id != self._resolver.tenant_id:
            raise AccessDeniedError("Time record belongs to another tenant")

        context = self._resolver.resolve(record.employee_id)
        if record.assigned_company_id is not None:
            company = context.get_company(record.assigned_company_id)
            if company is None:
                raise AccessDeniedError(
                    f"Employee {record.employee_id} is not allowed to work for company {record.assigned_company_id}"
                )
            rule = "explicit_company"
        else:
            detection = self._detector.explain(context, DetectionHints.from_record(record))
            company, rule = detection.company, detection.rule

        to_store = replace(record, assigned_company_id=company.company_id, tenant_id=self._resolver.tenant_id)
        validation = self._validator.validate(to_store)

        record_id = self._records.create_record(tenant_id=self._resolver.tenant_id, record=to_store)
        stored = self._to_stored(record_id, to_store)
        return RecordedTime(record=stored, company=company, detection_rule=rule, validation=validation)

    def import_external_records(self, employee_id: int, source: str, rows: Sequence[ImportRow]) -> ImportResult:
        if not self._settings.is_known_import_source(source):
            raise ValidationError(f"Unknown import source: {source}")
        source = source.strip()

        context = self._resolver.resolve(employee_id)
        company = first_matching(context.available_companies, source, company_name)
        if company is None:
            return ImportResult(
                success=False,
                imported=(),
                company=None,
                summary=f"No {source} company available for employee {employee_id}",
            )

        batch = [
            NewTimeRecord(
                employee_id=context.employee_id,
                work_date=row.work_date,
                regular_hours=row.billable_hours,
                overtime_hours=0.0,
                assigned_company_id=company.company_id,
                project_code=row.project_code,
                client_id=row.client_code,
                import_source=source,
                notes=f"{source} import: {row.description or 'work'}",
                status=TimeRecordStatus.DRAFT,
                tenant_id=self._resolver.tenant_id,
            )
            for row in rows
            if row.billable_hours > 0
        ]
        if not batch:
            return ImportResult(success=True, imported=(), company=company, summary=f"0 hours imported for {company.name}")

        ids = self._records.create_records(tenant_id=self._resolver.tenant_id, records=batch)
        imported = tuple(self._to_stored(rid, rec) for rid, rec in zip(ids, batch))
        total = sum(r.total_hours for r in imported)
        logger.info(
            "imported %d %s records (%gh) for employee %s into %s",
            len(imported),
            source,
            total,
            employee_id,
            company.name,
        )
        return ImportResult(
            success=True,
            imported=imported,
            company=company,
            summary=f"{len(imported)} records ({total:g}h) imported for {company.name}",
        )

    def _to_stored(self, record_id: int, record: NewTimeRecord) -> TimeRecord:
        return TimeRecord(
            record_id=int(record_id),
            tenant_id=self._resolver.tenant_id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            regular_hours=float(record.regular_hours),
            overtime_hours=float(record.overtime_hours),
            assigned_company_id=record.assigned_company_id,
            project_code=record.project_code,
            client_id=record.client_id,
            notes=record.notes,
            status=record.status,
        )

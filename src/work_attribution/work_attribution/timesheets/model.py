from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import TimeRecordStatus


@dataclass(frozen=True)
class TimeRecord:
    """Domain entity: one unit of worked time.

    An untagged record (``assigned_company_id`` is None) belongs to the
    employee's primary company.
    """

    record_id: int
    tenant_id: str
    employee_id: int
    work_date: date
    regular_hours: float
    overtime_hours: float = 0.0
    assigned_company_id: Optional[int] = None
    project_code: Optional[str] = None
    client_id: Optional[str] = None
    notes: Optional[str] = None
    status: TimeRecordStatus = TimeRecordStatus.DRAFT

    @property
    def total_hours(self) -> float:
        return float(self.regular_hours) + float(self.overtime_hours)


@dataclass(frozen=True)
class NewTimeRecord:
    """A prospective time record, not persisted yet."""

    employee_id: int
    work_date: date
    regular_hours: float
    overtime_hours: float = 0.0
    assigned_company_id: Optional[int] = None
    project_code: Optional[str] = None
    client_id: Optional[str] = None
    import_source: Optional[str] = None
    notes: Optional[str] = None
    status: TimeRecordStatus = TimeRecordStatus.DRAFT
    tenant_id: Optional[str] = None

    @property
    def total_hours(self) -> float:
        return float(self.regular_hours) + float(self.overtime_hours)

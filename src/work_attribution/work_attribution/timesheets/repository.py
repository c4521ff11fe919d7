from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import NewTimeRecord, TimeRecord


class TimeRecordRepository(Protocol):
    def list_for_employee(
        self,
        *,
        tenant_id: str,
        employee_id: int,
        start_date: date,
        end_date: date,
    ) -> Sequence[TimeRecord]:
        """Records with ``start_date <= work_date <= end_date``."""

        raise NotImplementedError

    def list_for_tenant(self, *, tenant_id: str, start_date: date, end_date: date) -> Sequence[TimeRecord]:
        raise NotImplementedError

    def create_record(self, *, tenant_id: str, record: NewTimeRecord) -> int:
        raise NotImplementedError

    def create_records(self, *, tenant_id: str, records: Sequence[NewTimeRecord]) -> list[int]:
        """Insert a batch atomically; returns ids in input order."""

        raise NotImplementedError

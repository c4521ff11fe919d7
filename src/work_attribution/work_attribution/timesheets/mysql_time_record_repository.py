from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..core.enums import TimeRecordStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall
from .model import NewTimeRecord, TimeRecord
from .repository import TimeRecordRepository

_COLUMNS = """
    record_id, tenant_id, employee_id, work_date, regular_hours, overtime_hours,
    assigned_company_id, project_code, client_id, notes, status
"""


def _to_record(r: Dict[str, Any]) -> TimeRecord:
    return TimeRecord(
        record_id=int(r["record_id"]),
        tenant_id=str(r["tenant_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        regular_hours=as_float(r.get("regular_hours")),
        overtime_hours=as_float(r.get("overtime_hours")),
        assigned_company_id=int(r["assigned_company_id"]) if r.get("assigned_company_id") is not None else None,
        project_code=r.get("project_code"),
        client_id=r.get("client_id"),
        notes=r.get("notes"),
        status=TimeRecordStatus(r["status"]),
    )


def _insert(cur, tenant_id: str, record: NewTimeRecord) -> int:
    cur.execute(
        """
        INSERT INTO time_records(
            tenant_id, employee_id, work_date, regular_hours, overtime_hours,
            assigned_company_id, project_code, client_id, notes, status
        )
        VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
        """,
        (
            tenant_id,
            int(record.employee_id),
            record.work_date,
            float(record.regular_hours),
            float(record.overtime_hours),
            record.assigned_company_id,
            record.project_code,
            record.client_id,
            record.notes,
            record.status.value,
        ),
    )
    return int(cur.lastrowid)


class MySQLTimeRecordRepository(TimeRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(
        self,
        *,
        tenant_id: str,
        employee_id: int,
        start_date: date,
        end_date: date,
    ) -> Sequence[TimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_records
                WHERE tenant_id=%s AND employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, record_id ASC
                """,
                (tenant_id, int(employee_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_tenant(self, *, tenant_id: str, start_date: date, end_date: date) -> Sequence[TimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_records
                WHERE tenant_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, record_id ASC
                """,
                (tenant_id, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_record(self, *, tenant_id: str, record: NewTimeRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return _insert(cur, tenant_id, record)

    def create_records(self, *, tenant_id: str, records: Sequence[NewTimeRecord]) -> list[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            return [_insert(cur, tenant_id, r) for r in records]

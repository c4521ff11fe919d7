from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import CompanyType
from ..core.logging_config import get_logger
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Company, CompanySettings, NewCompany
from .repository import CompanyRepository

logger = get_logger(__name__)

_SEED_ATTEMPTS = 2

_COLUMNS = """
    company_id, tenant_id, name, registration_code, tax_number, company_type, parent_employer_id,
    standard_work_week, travel_allowance_per_km, holiday_allowance_percentage,
    pension_contribution_percentage, collective_agreement, created_at
"""


def _to_company(r: Dict[str, Any]) -> Company:
    return Company(
        company_id=int(r["company_id"]),
        tenant_id=str(r["tenant_id"]),
        name=r["name"],
        registration_code=r.get("registration_code") or "",
        company_type=CompanyType(r["company_type"]),
        parent_employer_id=int(r["parent_employer_id"]) if r.get("parent_employer_id") is not None else None,
        tax_number=r.get("tax_number"),
        settings=CompanySettings(
            standard_work_week=as_float(r.get("standard_work_week")),
            travel_allowance_per_km=as_float(r.get("travel_allowance_per_km")),
            holiday_allowance_percentage=as_float(r.get("holiday_allowance_percentage")),
            pension_contribution_percentage=as_float(r.get("pension_contribution_percentage")),
            collective_agreement=r.get("collective_agreement"),
        ),
        created_at=r.get("created_at"),
    )


def _insert(cur, company: NewCompany) -> int:
    s = company.settings
    cur.execute(
        """
        INSERT INTO companies(
            tenant_id, name, registration_code, tax_number, company_type, parent_employer_id,
            standard_work_week, travel_allowance_per_km, holiday_allowance_percentage,
            pension_contribution_percentage, collective_agreement
        )
        VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
        """,
        (
            company.tenant_id,
            company.name,
            company.registration_code,
            company.tax_number,
            company.company_type.value,
            company.parent_employer_id,
            s.standard_work_week,
            s.travel_allowance_per_km,
            s.holiday_allowance_percentage,
            s.pension_contribution_percentage,
            s.collective_agreement,
        ),
    )
    return int(cur.lastrowid)


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_tenant(self, tenant_id: str) -> Sequence[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM companies
                WHERE tenant_id=%s
                ORDER BY created_at ASC, company_id ASC
                """,
                (tenant_id,),
            )
            return [_to_company(r) for r in fetchall(cur)]

    def get_by_id(self, company_id: int) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM companies WHERE company_id=%s", (int(company_id),))
            r = fetchone(cur)
            return _to_company(r) if r else None

    def create_company(self, company: NewCompany) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return _insert(cur, company)

    def ensure_employer(self, seed: NewCompany) -> Company:
        for _ in range(_SEED_ATTEMPTS - 1):
            try:
                return self._ensure_employer_once(seed)
            except mysql.connector.Error as e:
                if e.errno != errorcode.ER_LOCK_DEADLOCK:
                    raise
                logger.info("tenant %s: employer seed deadlocked, retrying", seed.tenant_id)
        return self._ensure_employer_once(seed)

    def _ensure_employer_once(self, seed: NewCompany) -> Company:
        with db_cursor(self._conn_factory) as (_, cur):
            # Two empty-gap FOR UPDATE locks are compatible, so concurrent seeds
            # deadlock on insert. InnoDB rolls one back; its retry then sees the winner.
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM companies
                WHERE tenant_id=%s AND company_type=%s
                ORDER BY created_at ASC, company_id ASC
                FOR UPDATE
                """,
                (seed.tenant_id, CompanyType.EMPLOYER.value),
            )
            rows = fetchall(cur)
            if rows:
                return _to_company(rows[0])

            company_id = _insert(cur, seed)
            cur.execute(f"SELECT {_COLUMNS} FROM companies WHERE company_id=%s", (company_id,))
            return _to_company(fetchone(cur))

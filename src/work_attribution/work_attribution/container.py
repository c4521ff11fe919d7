from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .companies.mysql_company_repository import MySQLCompanyRepository
from .companies.repository import CompanyRepository
from .core.settings import EcosystemSettings
from .database.connection import DBConfig, DatabaseConnection
from .ecosystem.service import WorkAttributionService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .timesheets.mysql_time_record_repository import MySQLTimeRecordRepository
from .timesheets.repository import TimeRecordRepository


@dataclass(frozen=True)
class Container:
    companies_repo: CompanyRepository
    employees_repo: EmployeeRepository
    records_repo: TimeRecordRepository
    settings: EcosystemSettings
    conn: Optional[DatabaseConnection] = None

    def attribution_for(self, tenant_id: str, *, actor_id: Optional[str] = None) -> WorkAttributionService:
        """A fresh service handle bound to one tenant."""
        return WorkAttributionService(
            tenant_id,
            companies=self.companies_repo,
            employees=self.employees_repo,
            records=self.records_repo,
            settings=self.settings,
            actor_id=actor_id,
        )


def build_container(*, db_config: Mapping[str, Any], settings: Optional[EcosystemSettings] = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return Container(
        companies_repo=MySQLCompanyRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        records_repo=MySQLTimeRecordRepository(conn),
        settings=settings or EcosystemSettings(),
        conn=conn,
    )

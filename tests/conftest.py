from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

import pytest

from work_attribution.companies.model import Company, NewCompany
from work_attribution.core.enums import CompanyType
from work_attribution.core.settings import EcosystemSettings
from work_attribution.ecosystem.service import WorkAttributionService
from work_attribution.employees.model import Employee
from work_attribution.timesheets.model import NewTimeRecord, TimeRecord

TENANT = "tenant-1"
OTHER_TENANT = "tenant-2"


class InMemoryCompanies:
    def __init__(self, companies=()):
        self._companies: list[Company] = list(companies)
        self.ensure_calls = 0

    def list_for_tenant(self, tenant_id):
        return [c for c in self._companies if c.tenant_id == tenant_id]

    def get_by_id(self, company_id):
        return next((c for c in self._companies if c.company_id == int(company_id)), None)

    def create_company(self, company: NewCompany) -> int:
        cid = max((c.company_id for c in self._companies), default=0) + 1
        self._companies.append(
            Company(
                company_id=cid,
                tenant_id=company.tenant_id,
                name=company.name,
                registration_code=company.registration_code,
                company_type=company.company_type,
                parent_employer_id=company.parent_employer_id,
                tax_number=company.tax_number,
                settings=company.settings,
                created_at=datetime(2026, 1, 1),
            )
        )
        return cid

    def ensure_employer(self, seed: NewCompany) -> Company:
        self.ensure_calls += 1
        for c in self.list_for_tenant(seed.tenant_id):
            if c.is_employer:
                return c
        return self.get_by_id(self.create_company(seed))


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[int, Employee] = {e.employee_id: e for e in employees}
        self.assignments = []
        self.replace_calls = 0

    def get_by_id(self, employee_id):
        return self._by_id.get(int(employee_id))

    def list_for_tenant(self, tenant_id):
        return [e for e in self._by_id.values() if e.tenant_id == tenant_id]

    def create_employee(self, *, tenant_id, full_name, primary_company_id, contract_hours_per_week):
        eid = max(self._by_id, default=0) + 1
        self._by_id[eid] = Employee(
            employee_id=eid,
            tenant_id=tenant_id,
            full_name=full_name,
            primary_company_id=primary_company_id,
            contract_hours_per_week=contract_hours_per_week,
        )
        return eid

    def replace_project_companies(self, *, employee_id, company_ids, assignments):
        self.replace_calls += 1
        self._by_id[employee_id] = replace(self._by_id[employee_id], project_company_ids=tuple(company_ids))
        self.assignments.extend(assignments)


class InMemoryTimeRecords:
    def __init__(self, records=()):
        self.records: list[TimeRecord] = list(records)

    def list_for_employee(self, *, tenant_id, employee_id, start_date, end_date):
        return [
            r
            for r in self.records
            if r.tenant_id == tenant_id and r.employee_id == employee_id and start_date <= r.work_date <= end_date
        ]

    def list_for_tenant(self, *, tenant_id, start_date, end_date):
        return [r for r in self.records if r.tenant_id == tenant_id and start_date <= r.work_date <= end_date]

    def create_record(self, *, tenant_id, record: NewTimeRecord) -> int:
        rid = len(self.records) + 1
        self.records.append(
            TimeRecord(
                record_id=rid,
                tenant_id=tenant_id,
                employee_id=record.employee_id,
                work_date=record.work_date,
                regular_hours=record.regular_hours,
                overtime_hours=record.overtime_hours,
                assigned_company_id=record.assigned_company_id,
                project_code=record.project_code,
                client_id=record.client_id,
                notes=record.notes,
                status=record.status,
            )
        )
        return rid

    def create_records(self, *, tenant_id, records):
        return [self.create_record(tenant_id=tenant_id, record=r) for r in records]


def make_company(company_id, name, company_type=CompanyType.PROJECT, *, parent=1, code=None, tenant_id=TENANT):
    return Company(
        company_id=company_id,
        tenant_id=tenant_id,
        name=name,
        registration_code=code or f"KVK{company_id:05d}",
        company_type=company_type,
        parent_employer_id=None if company_type == CompanyType.EMPLOYER else parent,
        created_at=datetime(2025, 1, company_id),
    )


def make_record(record_id, work_date, hours, *, company_id=None, employee_id=10, tenant_id=TENANT, **kw):
    return TimeRecord(
        record_id=record_id,
        tenant_id=tenant_id,
        employee_id=employee_id,
        work_date=work_date,
        regular_hours=hours,
        assigned_company_id=company_id,
        **kw,
    )


@dataclass
class World:
    companies: InMemoryCompanies
    employees: InMemoryEmployees
    records: InMemoryTimeRecords
    settings: EcosystemSettings

    def service(self, tenant_id: str = TENANT, *, actor_id: Optional[str] = "admin-1") -> WorkAttributionService:
        return WorkAttributionService(
            tenant_id,
            companies=self.companies,
            employees=self.employees,
            records=self.records,
            settings=self.settings,
            actor_id=actor_id,
        )


@pytest.fixture
def world() -> World:
    """Employer A with projects B, C and D; employee E (10) works for A, B and C."""
    companies = InMemoryCompanies(
        [
            make_company(1, "Buddy BV", CompanyType.EMPLOYER),
            make_company(2, "Acme Logistics", code="PRJ-ACME"),
            make_company(3, "ITKnecht GmbH"),
            make_company(4, "Delta Consulting"),
        ]
    )
    employees = InMemoryEmployees(
        [
            Employee(
                employee_id=10,
                tenant_id=TENANT,
                full_name="Eva de Vries",
                primary_company_id=1,
                project_company_ids=(2, 3),
                contract_hours_per_week=40.0,
            ),
            Employee(employee_id=11, tenant_id=TENANT, full_name="Sam Jansen", primary_company_id=1),
            Employee(employee_id=20, tenant_id=OTHER_TENANT, full_name="Other Tenant", primary_company_id=99),
        ]
    )
    return World(companies, employees, InMemoryTimeRecords(), EcosystemSettings())


# Monday of ISO week 10, 2026.
WEEK_10_MONDAY = date(2026, 3, 2)

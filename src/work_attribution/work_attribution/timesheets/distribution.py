from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import week_dates, week_year
from ..companies.model import Company
from ..context.model import WorkContext
from ..context.service import WorkContextResolver
from ..core.exceptions import ValidationError
from .model import TimeRecord
from .repository import TimeRecordRepository


@dataclass(frozen=True)
class CompanySession:
    company_id: int
    company: Optional[Company]
    total_hours: float
    records: tuple[TimeRecord, ...]
    is_primary: bool


@dataclass(frozen=True)
class DistributionSummary:
    total_hours: float
    primary_hours: float
    other_hours: float
    percentage_by_company: dict[int, float]


@dataclass(frozen=True)
class TimesheetDistribution:
    """Snapshot of one employee's week, grouped by company."""

    employee_id: int
    week: int
    year: int
    sessions: tuple[CompanySession, ...]
    summary: DistributionSummary

    def session_for(self, company_id: int) -> Optional[CompanySession]:
        for s in self.sessions:
            if s.company_id == company_id:
                return s
        return None


class TimesheetDistributionAggregator:
    """Use case: hours per company for one employee and one week."""

    def __init__(self, resolver: WorkContextResolver, records: TimeRecordRepository):
        self._resolver = resolver
        self._records = records

    def aggregate(self, employee_id: int, week: int, year: int) -> TimesheetDistribution:
        if not 1 <= int(week) <= 53:
            raise ValidationError(f"Invalid week number: {week}")

        context = self._resolver.resolve(employee_id)
        days = week_dates(int(year), int(week))
        if week_year(days[0]) != int(year):
            raise ValidationError(f"Year {year} has no week {week}")
        records = self._records.list_for_employee(
            tenant_id=self._resolver.tenant_id,
            employee_id=employee_id,
            start_date=days[0],
            end_date=days[-1],
        )
        return self.build(context, records, week=int(week), year=int(year))

    @staticmethod
    def build(context: WorkContext, records, *, week: int, year: int) -> TimesheetDistribution:
        primary_id = context.primary_company.company_id

        grouped: dict[int, list[TimeRecord]] = {c.company_id: [] for c in context.available_companies}
        for r in records:
            company_id = r.assigned_company_id if r.assigned_company_id is not None else primary_id
            grouped.setdefault(company_id, []).append(r)

        sessions = []
        for company_id, company_records in grouped.items():
            sessions.append(
                CompanySession(
                    company_id=company_id,
                    company=context.get_company(company_id),
                    total_hours=sum(r.total_hours for r in company_records),
                    records=tuple(company_records),
                    is_primary=company_id == primary_id,
                )
            )

        total = sum(s.total_hours for s in sessions)
        primary_hours = next(s.total_hours for s in sessions if s.is_primary)
        percentages = {
            s.company_id: (s.total_hours / total * 100 if total > 0 else 0.0)
            for s in sessions
        }

        return TimesheetDistribution(
            employee_id=context.employee_id,
            week=week,
            year=year,
            sessions=tuple(sessions),
            summary=DistributionSummary(
                total_hours=total,
                primary_hours=primary_hours,
                other_hours=total - primary_hours,
                percentage_by_company=percentages,
            ),
        )

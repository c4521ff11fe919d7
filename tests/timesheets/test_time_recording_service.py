from __future__ import annotations

from datetime import date

import pytest

from conftest import WEEK_10_MONDAY
from work_attribution.core.enums import TimeRecordStatus
from work_attribution.core.exceptions import AccessDeniedError, ValidationError
from work_attribution.timesheets.model import NewTimeRecord
from work_attribution.timesheets.service import ImportRow


def test_untagged_record_is_attributed_by_client(world):
    record = NewTimeRecord(employee_id=10, work_date=WEEK_10_MONDAY, regular_hours=8, client_id="acme")

    recorded = world.service().record_time(record)

    assert recorded.company.company_id == 2
    assert recorded.detection_rule == "client"
    assert recorded.record.assigned_company_id == 2
    assert recorded.validation.valid is True
    assert world.records.records[0].assigned_company_id == 2


def test_untagged_record_without_hints_goes_to_primary(world):
    recorded = world.service().record_time(NewTimeRecord(employee_id=10, work_date=WEEK_10_MONDAY, regular_hours=8))

    assert recorded.company.company_id == 1
    assert recorded.detection_rule == "primary_fallback"


def test_explicit_company_must_be_available(world):
    record = NewTimeRecord(employee_id=10, work_date=WEEK_10_MONDAY, regular_hours=8, assigned_company_id=4)

    with pytest.raises(AccessDeniedError):
        world.service().record_time(record)
    assert world.records.records == []


def test_negative_hours_rejected(world):
    record = NewTimeRecord(employee_id=10, work_date=WEEK_10_MONDAY, regular_hours=-1)

    with pytest.raises(ValidationError):
        world.service().record_time(record)


def test_overage_does_not_block_storage(world):
    service = world.service()
    service.record_time(NewTimeRecord(employee_id=10, work_date=WEEK_10_MONDAY, regular_hours=55))

    recorded = service.record_time(NewTimeRecord(employee_id=10, work_date=WEEK_10_MONDAY, regular_hours=8))

    assert recorded.validation.valid is True
    assert len(recorded.validation.issues) == 1
    assert len(world.records.records) == 2


def test_import_routes_rows_to_source_company(world):
    rows = [
        ImportRow(work_date=date(2026, 3, 2), billable_hours=6, description="API work", project_code="ITK-7"),
        ImportRow(work_date=date(2026, 3, 3), billable_hours=0),
        ImportRow(work_date=date(2026, 3, 4), billable_hours=2.5),
    ]

    result = world.service().import_external_records(10, "ITKnecht", rows)

    assert result.success is True
    assert result.company.company_id == 3
    assert len(result.imported) == 2
    assert all(r.assigned_company_id == 3 for r in result.imported)
    assert all(r.status == TimeRecordStatus.DRAFT for r in result.imported)
    assert result.imported[0].notes == "ITKnecht import: API work"
    assert "8.5h" in result.summary


def test_import_from_unknown_source_rejected(world):
    with pytest.raises(ValidationError):
        world.service().import_external_records(10, "harvest", [])


def test_import_without_matching_company_fails_softly(world):
    result = world.service().import_external_records(11, "itknecht", [ImportRow(date(2026, 3, 2), 4)])

    assert result.success is False
    assert result.imported == ()
    assert world.records.records == []


def test_import_row_from_mapping():
    row = ImportRow.from_mapping({"date": "2026-03-02", "billable_hours": "7.5", "client_code": " C1 "})

    assert row.work_date == date(2026, 3, 2)
    assert row.billable_hours == 7.5
    assert row.client_code == "C1"


@pytest.mark.parametrize("data", [{}, {"date": "02-03-2026"}, {"date": "2026-03-02", "billable_hours": -2}])
def test_import_row_from_mapping_rejects_bad_rows(data):
    with pytest.raises(ValidationError):
        ImportRow.from_mapping(data)


@pytest.mark.parametrize("hours", [float("nan"), float("inf")])
def test_non_finite_hours_rejected_and_not_stored(world, hours):
    record = NewTimeRecord(employee_id=10, work_date=WEEK_10_MONDAY, regular_hours=8, overtime_hours=hours)

    with pytest.raises(ValidationError):
        world.service().record_time(record)
    assert world.records.records == []


def test_import_row_with_infinite_hours_rejected():
    with pytest.raises(ValidationError):
        ImportRow.from_mapping({"date": "2026-03-02", "billable_hours": "inf"})

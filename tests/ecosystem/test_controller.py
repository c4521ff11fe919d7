from __future__ import annotations

import pytest
from flask import Flask

from conftest import OTHER_TENANT, TENANT
from work_attribution.container import Container
from work_attribution.ecosystem.controller import TENANT_HEADER, register


@pytest.fixture
def client(world):
    app = Flask(__name__)
    app.secret_key = "test"
    app.config["TESTING"] = True
    container = Container(
        companies_repo=world.companies,
        employees_repo=world.employees,
        records_repo=world.records,
        settings=world.settings,
    )
    register(app, container)
    return app.test_client()


HEADERS = {TENANT_HEADER: TENANT}


def test_tenant_is_required(client):
    resp = client.get("/api/employees/10/work-context")

    assert resp.status_code == 401


def test_tenant_from_session(client):
    with client.session_transaction() as sess:
        sess["tenant_id"] = TENANT

    resp = client.get("/api/employees/10/work-context")

    assert resp.status_code == 200
    assert [c["company_id"] for c in resp.get_json()["data"]["available_companies"]] == [1, 2, 3]


def test_errors_map_to_status_codes(client):
    assert client.get("/api/employees/404/work-context", headers=HEADERS).status_code == 404
    assert client.get("/api/employees/20/work-context", headers=HEADERS).status_code == 401
    resp = client.get("/api/employees/10/work-context", headers={TENANT_HEADER: OTHER_TENANT})
    assert resp.status_code == 401


def test_detect_company(client):
    resp = client.post("/api/employees/10/detect-company", json={"client_id": "acme"}, headers=HEADERS)

    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["company"]["company_id"] == 2
    assert body["data"]["rule"] == "client"


def test_record_then_distribution(client, world):
    resp = client.post(
        "/api/time-records",
        json={"employee_id": 10, "work_date": "2026-03-02", "regular_hours": 6, "assigned_company_id": 2},
        headers=HEADERS,
    )
    assert resp.status_code == 201
    assert resp.get_json()["data"]["validation"]["suggestions"] == ["Add a project code for work at Acme Logistics"]

    resp = client.get("/api/employees/10/timesheet-distribution?week=10&year=2026", headers=HEADERS)

    summary = resp.get_json()["data"]["summary"]
    assert summary["total_hours"] == 6
    assert summary["percentage_by_company"]["2"] == 100


def test_record_for_unavailable_company_is_forbidden(client):
    resp = client.post(
        "/api/time-records",
        json={"employee_id": 10, "work_date": "2026-03-02", "regular_hours": 6, "assigned_company_id": 4},
        headers=HEADERS,
    )

    assert resp.status_code == 403
    assert resp.get_json()["error"] == "AccessDeniedError"


def test_validate_reports_access_denied_without_error_status(client):
    resp = client.post(
        "/api/time-records/validate",
        json={"employee_id": 10, "work_date": "2026-03-02", "regular_hours": 6, "assigned_company_id": 4},
        headers=HEADERS,
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"]["valid"] is False


def test_bad_date_is_a_validation_error(client):
    resp = client.post("/api/time-records/validate", json={"employee_id": 10, "work_date": "2/3/2026"}, headers=HEADERS)

    assert resp.status_code == 400


def test_assign_project_companies(client, world):
    resp = client.post("/api/employees/10/project-companies", json={"company_ids": [4]}, headers=HEADERS)

    assert resp.status_code == 200
    assert resp.get_json()["data"]["project_company_ids"] == [4]

    resp = client.post("/api/employees/10/project-companies", json={"company_ids": [1]}, headers=HEADERS)
    assert resp.status_code == 400


def test_create_employee_and_hierarchy(client):
    resp = client.post("/api/employees", json={"full_name": "Noor Bakker"}, headers=HEADERS)
    assert resp.status_code == 201

    resp = client.get("/api/companies/hierarchy?year=2026&month=3", headers=HEADERS)

    [tree] = resp.get_json()["data"]
    assert tree["employer"]["company_id"] == 1
    assert tree["statistics"]["total_employees"] == 3


def test_import(client):
    resp = client.post(
        "/api/employees/10/imports/itknecht",
        json={"rows": [{"date": "2026-03-02", "billable_hours": 4, "description": "support"}]},
        headers=HEADERS,
    )

    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["company"]["company_id"] == 3
    assert len(body["data"]["imported"]) == 1


@pytest.mark.parametrize("path", ["/api/time-records", "/api/time-records/validate"])
@pytest.mark.parametrize("hours", ["nan", "inf"])
def test_non_finite_hours_are_a_validation_error(client, world, path, hours):
    resp = client.post(
        path,
        json={"employee_id": 10, "work_date": "2026-03-02", "regular_hours": hours},
        headers=HEADERS,
    )

    assert resp.status_code == 400
    assert world.records.records == []


def test_import_rejects_rows_that_are_not_objects(client, world):
    resp = client.post(
        "/api/employees/10/imports/itknecht",
        json={"rows": [{"date": "2026-03-02", "billable_hours": 4}, "2026-03-03"]},
        headers=HEADERS,
    )

    assert resp.status_code == 400
    assert world.records.records == []


def test_hierarchy_month_zero_is_rejected(client):
    resp = client.get("/api/companies/hierarchy?year=2026&month=0", headers=HEADERS)

    assert resp.status_code == 400

from __future__ import annotations

from typing import Optional

import pytest

from conftest import TENANT
from work_attribution.companies.model import Company
from work_attribution.context.service import WorkContextResolver
from work_attribution.detection.engine import PRIMARY_FALLBACK, CompanyDetectionEngine, default_rules
from work_attribution.detection.model import DetectionHints
from work_attribution.detection.rules.base import DetectionRule
from work_attribution.detection.rules.client_rule import ClientRule
from work_attribution.detection.rules.explicit_company_rule import ExplicitCompanyRule
from work_attribution.detection.rules.import_source_rule import ImportSourceRule
from work_attribution.detection.rules.project_code_rule import ProjectCodeRule
from work_attribution.detection.rules.single_company_rule import SingleCompanyRule


@pytest.fixture
def context(world):
    return WorkContextResolver(TENANT, world.companies, world.employees).resolve(10)


@pytest.fixture
def single_context(world):
    return WorkContextResolver(TENANT, world.companies, world.employees).resolve(11)


def test_default_rules_are_ordered_by_priority():
    engine = CompanyDetectionEngine()

    assert [r.name for r in engine.rules] == [
        "single_company",
        "explicit_company",
        "import_source",
        "project_code",
        "client",
    ]


def test_no_hints_falls_back_to_primary(context):
    detection = CompanyDetectionEngine().explain(context)

    assert detection.company.company_id == 1
    assert detection.rule == PRIMARY_FALLBACK


def test_client_substring_of_project_name(context):
    hints = DetectionHints(client_id="acme")

    assert CompanyDetectionEngine().detect(context, hints).company_id == 2


def test_single_company_ignores_hints(single_context):
    hints = DetectionHints(company_id=2, client_id="acme", import_source="itknecht")

    detection = CompanyDetectionEngine().explain(single_context, hints)

    assert detection.company.company_id == 1
    assert detection.rule == "single_company"


def test_explicit_company_beats_other_hints(context):
    hints = DetectionHints(company_id=3, client_id="acme", project_code="PRJ-ACME")

    detection = CompanyDetectionEngine().explain(context, hints)

    assert detection.company.company_id == 3
    assert detection.rule == "explicit_company"


def test_unavailable_explicit_company_falls_through(context):
    hints = DetectionHints(company_id=4, client_id="acme")

    detection = CompanyDetectionEngine().explain(context, hints)

    assert detection.company.company_id == 2
    assert detection.rule == "client"


def test_import_source_beats_project_code(context):
    hints = DetectionHints(import_source="ITKnecht", project_code="PRJ-ACME")

    detection = CompanyDetectionEngine().explain(context, hints)

    assert detection.company.company_id == 3
    assert detection.rule == "import_source"


def test_unknown_import_source_is_ignored(context):
    hints = DetectionHints(import_source="acme")

    assert CompanyDetectionEngine().explain(context, hints).rule == PRIMARY_FALLBACK


def test_project_code_matches_registration_code(context):
    hints = DetectionHints(project_code="prj-acme")

    detection = CompanyDetectionEngine().explain(context, hints)

    assert detection.company.company_id == 2
    assert detection.rule == "project_code"


def test_detection_never_leaves_available_set(context):
    # Delta Consulting (4) exists but is not assigned to the employee.
    hints = DetectionHints(client_id="delta", project_code="delta")

    assert CompanyDetectionEngine().detect(context, hints).company_id == 1


def test_detection_is_deterministic(context):
    engine = CompanyDetectionEngine()
    hints = DetectionHints(client_id="gmbh", project_code="acme")

    results = {engine.explain(context, hints) for _ in range(5)}

    assert len(results) == 1


def test_rules_in_isolation(context):
    hints = DetectionHints(company_id=2, import_source="itknecht", project_code="ITK", client_id="buddy")

    assert SingleCompanyRule().applies(context, hints) is False
    assert ExplicitCompanyRule().extract(context, hints).company_id == 2
    assert ImportSourceRule(["itknecht"]).extract(context, hints).company_id == 3
    assert ImportSourceRule([]).applies(context, hints) is False
    assert ProjectCodeRule().extract(context, hints).company_id == 3
    assert ClientRule().extract(context, hints).company_id == 1
    assert ClientRule().applies(context, DetectionHints()) is False


class _AlwaysFirst(DetectionRule):
    name = "always_first"
    priority = 1

    def __init__(self, company):
        self._company = company

    def applies(self, context, hints) -> bool:
        return True

    def extract(self, context, hints) -> Optional[Company]:
        return self._company


def test_custom_rule_runs_by_priority_not_position(context):
    custom = _AlwaysFirst(context.get_company(2))
    engine = CompanyDetectionEngine([*default_rules(), custom])

    assert engine.rules[0] is custom
    assert engine.explain(context, DetectionHints(company_id=3)).rule == "always_first"


def test_hints_from_mapping_parses_company_id():
    hints = DetectionHints.from_mapping({"company_id": "7", "client_id": "  ", "project_code": " X1 "})

    assert hints.company_id == 7
    assert hints.client_id is None
    assert hints.project_code == "X1"

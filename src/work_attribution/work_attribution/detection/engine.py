from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..companies.model import Company
from ..context.model import WorkContext
from ..core.constants import DEFAULT_KNOWN_IMPORT_SOURCES
from ..core.logging_config import get_logger
from .model import DetectionHints
from .rules.base import DetectionRule
from .rules.client_rule import ClientRule
from .rules.explicit_company_rule import ExplicitCompanyRule
from .rules.import_source_rule import ImportSourceRule
from .rules.project_code_rule import ProjectCodeRule
from .rules.single_company_rule import SingleCompanyRule

logger = get_logger(__name__)

PRIMARY_FALLBACK = "primary_fallback"


@dataclass(frozen=True)
class Detection:
    company: Company
    rule: str


def default_rules(known_import_sources: Sequence[str] = DEFAULT_KNOWN_IMPORT_SOURCES) -> list[DetectionRule]:
    return [
        SingleCompanyRule(),
        ExplicitCompanyRule(),
        ImportSourceRule(known_import_sources),
        ProjectCodeRule(),
        ClientRule(),
    ]


class CompanyDetectionEngine:
    """Chain of Responsibility over detection rules, lowest priority first.

    The first rule whose predicate holds and whose extractor finds a company
    wins; otherwise the primary company is returned. No state is kept between
    calls.
    """

    def __init__(self, rules: Optional[Sequence[DetectionRule]] = None):
        rules = list(rules) if rules is not None else default_rules()
        # sorted() is stable, so equal priorities keep their given order.
        self._rules = tuple(sorted(rules, key=lambda r: r.priority))

    @property
    def rules(self) -> tuple[DetectionRule, ...]:
        return self._rules

    def explain(self, context: WorkContext, hints: Optional[DetectionHints] = None) -> Detection:
        hints = hints or DetectionHints()
        for rule in self._rules:
            if not rule.applies(context, hints):
                continue
            company = rule.extract(context, hints)
            if company is not None:
                logger.debug(
                    "employee %s attributed to company %s by %s",
                    context.employee_id,
                    company.company_id,
                    rule.name,
                )
                return Detection(company=company, rule=rule.name)
        return Detection(company=context.primary_company, rule=PRIMARY_FALLBACK)

    def detect(self, context: WorkContext, hints: Optional[DetectionHints] = None) -> Company:
        return self.explain(context, hints).company

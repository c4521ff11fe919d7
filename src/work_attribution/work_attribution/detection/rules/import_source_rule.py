from __future__ import annotations

from typing import Iterable, Optional

from ...companies.model import Company
from ...context.model import WorkContext
from ..model import DetectionHints
from .base import DetectionRule, company_name, first_matching


class ImportSourceRule(DetectionRule):
    """Records imported from a known external system go to the company named after it."""

    name = "import_source"
    priority = 30

    def __init__(self, known_sources: Iterable[str]):
        self._known = frozenset(s.strip().lower() for s in known_sources if s and s.strip())

    def applies(self, context: WorkContext, hints: DetectionHints) -> bool:
        return bool(hints.import_source) and hints.import_source.strip().lower() in self._known

    def extract(self, context: WorkContext, hints: DetectionHints) -> Optional[Company]:
        return first_matching(context.available_companies, hints.import_source.strip(), company_name)

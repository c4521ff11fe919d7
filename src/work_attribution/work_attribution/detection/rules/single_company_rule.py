from __future__ import annotations

from typing import Optional

from ...companies.model import Company
from ...context.model import WorkContext
from ..model import DetectionHints
from .base import DetectionRule


class SingleCompanyRule(DetectionRule):
    """Only one company available: nothing to decide, hints are ignored."""

    name = "single_company"
    priority = 10

    def applies(self, context: WorkContext, hints: DetectionHints) -> bool:
        return len(context.available_companies) == 1

    def extract(self, context: WorkContext, hints: DetectionHints) -> Optional[Company]:
        return context.available_companies[0]

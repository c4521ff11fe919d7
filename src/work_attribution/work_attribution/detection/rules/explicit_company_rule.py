from __future__ import annotations

from typing import Optional

from ...companies.model import Company
from ...context.model import WorkContext
from ..model import DetectionHints
from .base import DetectionRule


class ExplicitCompanyRule(DetectionRule):
    """Explicit company id, honoured only when it is available to the employee."""

    name = "explicit_company"
    priority = 20

    def applies(self, context: WorkContext, hints: DetectionHints) -> bool:
        return hints.company_id is not None

    def extract(self, context: WorkContext, hints: DetectionHints) -> Optional[Company]:
        return context.get_company(hints.company_id)

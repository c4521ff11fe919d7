from __future__ import annotations

from typing import Optional

from ...companies.model import Company
from ...context.model import WorkContext
from ..model import DetectionHints
from .base import DetectionRule, company_name, first_matching, registration_code


class ProjectCodeRule(DetectionRule):
    """Project code found in a company's name or registration code."""

    name = "project_code"
    priority = 40

    def applies(self, context: WorkContext, hints: DetectionHints) -> bool:
        return bool(hints.project_code)

    def extract(self, context: WorkContext, hints: DetectionHints) -> Optional[Company]:
        return first_matching(context.available_companies, hints.project_code, company_name, registration_code)

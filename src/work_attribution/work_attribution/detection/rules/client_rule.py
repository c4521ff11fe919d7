from __future__ import annotations

from typing import Optional

from ...companies.model import Company
from ...context.model import WorkContext
from ..model import DetectionHints
from .base import DetectionRule, company_name, first_matching


class ClientRule(DetectionRule):
    """Client identifier found in a company's name."""

    name = "client"
    priority = 50

    def applies(self, context: WorkContext, hints: DetectionHints) -> bool:
        return bool(hints.client_id)

    def extract(self, context: WorkContext, hints: DetectionHints) -> Optional[Company]:
        return first_matching(context.available_companies, hints.client_id, company_name)

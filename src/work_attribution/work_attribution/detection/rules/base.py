from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from ...companies.model import Company
from ...context.model import WorkContext
from ..model import DetectionHints


class DetectionRule(ABC):
    """Strategy Pattern: one step of the company detection chain.

    ``applies`` is the predicate (are the needed hints present?), ``extract``
    picks the company or returns None to let the next rule try.
    """

    name: str = "rule"
    priority: int = 0

    @abstractmethod
    def applies(self, context: WorkContext, hints: DetectionHints) -> bool:
        raise NotImplementedError

    @abstractmethod
    def extract(self, context: WorkContext, hints: DetectionHints) -> Optional[Company]:
        raise NotImplementedError


def first_matching(companies: Iterable[Company], needle: str, *fields: Callable[[Company], str]) -> Optional[Company]:
    """First company where any of ``fields`` contains ``needle`` (case-insensitive)."""
    needle = needle.lower()
    for company in companies:
        for get in fields:
            if needle in (get(company) or "").lower():
                return company
    return None


def company_name(company: Company) -> str:
    return company.name


def registration_code(company: Company) -> str:
    return company.registration_code

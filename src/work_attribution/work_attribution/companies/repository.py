from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Company, NewCompany


class CompanyRepository(Protocol):
    """Repository interface for companies.

    Services depend on this interface, not on a concrete store.
    """

    def list_for_tenant(self, tenant_id: str) -> Sequence[Company]:
        """All companies of a tenant, oldest first."""

        raise NotImplementedError

    def get_by_id(self, company_id: int) -> Optional[Company]:
        raise NotImplementedError

    def create_company(self, company: NewCompany) -> int:
        raise NotImplementedError

    def ensure_employer(self, seed: NewCompany) -> Company:
        """Return the tenant's oldest employer, creating ``seed`` only if none exists.

        Check and insert run as one atomic unit.
        """

        raise NotImplementedError

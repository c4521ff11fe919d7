class DomainError(Exception):
    """Base exception for business rule violations."""


class NotFoundError(DomainError):
    """Raised when an employee or a referenced company does not exist."""


class AccessDeniedError(DomainError):
    """Raised when a target company is outside the employee's available set,
    or a record belongs to another tenant."""


class ValidationError(DomainError):
    """Raised when input data is malformed or violates domain rules."""


class UnauthorizedError(DomainError):
    """Raised on a tenant mismatch during direct lookup."""

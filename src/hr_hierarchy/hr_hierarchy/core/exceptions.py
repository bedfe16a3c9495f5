class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced profile does not exist."""


class PersistenceError(DomainError):
    """Raised when the storage layer fails to read or write."""

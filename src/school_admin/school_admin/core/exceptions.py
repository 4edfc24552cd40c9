class DomainError(Exception):
    """Base exception for business rule violations."""


class ConfigurationError(DomainError):
    """Raised when required environment settings are missing or invalid."""


class QueryError(DomainError):
    """Raised when the database rejects a query or cannot be reached."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class DuplicateError(DomainError):
    """Raised when a record would break a uniqueness rule (e.g. two attendance rows for one day)."""


class ConfigurationError(DomainError):
    """Raised when global pay settings cannot be used (zero or missing hour denominators)."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormatError(ValidationError):
    """Raised when a time window, timestamp or date string is malformed."""


class ConfigError(DomainError):
    """Raised when the grace period is negative or not numeric."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when form data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced row does not exist."""


class DataStoreError(DomainError):
    """Raised when the remote data platform rejects or fails a call."""


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing."""

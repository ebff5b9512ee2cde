class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRangeError(DomainError):
    """Raised when a report range starts after it ends."""


class InvalidScheduleError(DomainError):
    """Raised when a schedule cannot produce a positive paid working window."""

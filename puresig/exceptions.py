"""
Exceptions raised by puresig.
"""


class SigningError(Exception):
    """Base exception for signing failures."""
    pass


class ClockError(SigningError):
    """Raised when the system clock cannot be read or is before the epoch."""
    pass


class MissingCredentialError(SigningError):
    """Raised when required credential material is absent."""
    pass

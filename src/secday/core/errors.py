"""
Exceptions raised by SecDay components.
"""

from typing import List, Optional


class SecDayError(Exception):
    """Base class for SecDay errors."""
    pass


class PasswordValidationError(SecDayError):
    """Raised when the submitted password is unusable (e.g. empty)."""
    pass


class BreachLookupError(SecDayError):
    """Raised when the Pwned Passwords range query fails or is malformed."""
    pass


class SurveyValidationError(SecDayError):
    """Raised when a survey submission is incomplete or invalid."""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = missing or []

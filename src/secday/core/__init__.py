"""
Core module for SecDay.

Contains configuration, logging setup and the shared exception types.
"""

from secday.core.errors import (
    SecDayError,
    PasswordValidationError,
    BreachLookupError,
    SurveyValidationError,
)

__all__ = [
    "SecDayError",
    "PasswordValidationError",
    "BreachLookupError",
    "SurveyValidationError",
]

"""
Password checker module.

Scores a password (length, complexity, predictability, breach exposure)
and looks it up in Pwned Passwords using k-anonymity.
"""

__all__ = ["models", "scoring", "calculator", "breach", "service"]

"""
Security awareness survey module.
"""

__all__ = ["models"]

"""
Web UI for the SecDay site.
"""

__all__ = ["app", "views"]

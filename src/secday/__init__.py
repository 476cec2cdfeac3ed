"""
SecDay - Information Security Day event site

A small web app for the Information Security Day (정보보안의 날) event:
a promotional home page, a security-awareness survey, and a password
checker combining local strength heuristics with a k-anonymity breach
lookup against Pwned Passwords.

Main modules:
- password: strength scoring, breach lookup and the check service
- survey: survey questions and answer validation
- web: FastAPI pages and JSON API
- core: configuration, logging and errors
"""

__version__ = "0.1.0"
__author__ = "SecDay Team"

__all__ = ["__version__", "__author__"]

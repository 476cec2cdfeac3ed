"""
Password check data models.
"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class SafetyTier(str, Enum):
    """Bucket for the overall password score."""

    SAFE = "safe"
    MODERATE = "moderate"
    WEAK = "weak"


class ScoringMode(str, Enum):
    """How the overall score is derived from the sub-scores."""

    WEIGHTED = "weighted"
    BREACH_ONLY = "breach_only"


class BreachLookupResult(BaseModel):
    """
    Result of a k-anonymity range query.

    Never holds the password or its full hash.
    """

    hash_prefix: str = Field(..., min_length=5, max_length=5)
    occurrences: int = Field(default=0, ge=0)
    checked_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_pwned(self) -> bool:
        """Whether the password appears in the breach corpus."""
        return self.occurrences > 0


class PasswordCheck(BaseModel):
    """
    Outcome of one password check with its score breakdown.
    """

    password_length: int = Field(..., ge=0)

    # Component scores (each 0-100)
    length_score: int = Field(default=0, ge=0, le=100)
    complexity_score: int = Field(default=0, ge=0, le=100)
    predictability_score: int = Field(default=0, ge=0, le=100)
    breach_score: int = Field(default=0, ge=0, le=100)

    breach_count: int = Field(default=0, ge=0)

    overall_score: int = Field(..., ge=0, le=100, description="Overall score 0-100")
    safety_tier: SafetyTier = SafetyTier.WEAK
    scoring_mode: ScoringMode = ScoringMode.WEIGHTED

    recommendations: List[str] = Field(default_factory=list)
    checked_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        json_schema_extra = {
            "example": {
                "password_length": 14,
                "length_score": 75,
                "complexity_score": 100,
                "predictability_score": 80,
                "breach_score": 100,
                "breach_count": 0,
                "overall_score": 88,
                "safety_tier": "safe",
                "scoring_mode": "weighted",
                "recommendations": [
                    "16자 이상으로 길게 만들면 더 안전합니다",
                ],
                "checked_at": "2026-07-08T10:30:00Z",
            }
        }

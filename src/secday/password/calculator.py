"""
Password score calculation logic.
"""

import logging
from typing import Dict, List

from .models import PasswordCheck, SafetyTier, ScoringMode
from .scoring import (
    contains_common_password,
    has_keyboard_run,
    has_repeated_run,
    has_sequential_run,
    score_breach,
    score_complexity,
    score_length,
    score_predictability,
)

logger = logging.getLogger(__name__)

SAFE_THRESHOLD = 70
MODERATE_THRESHOLD = 40


def classify_tier(score: int) -> SafetyTier:
    """Bucket an overall score: >=70 safe, >=40 moderate, else weak."""
    if score >= SAFE_THRESHOLD:
        return SafetyTier.SAFE
    elif score >= MODERATE_THRESHOLD:
        return SafetyTier.MODERATE
    else:
        return SafetyTier.WEAK


class PasswordScoreCalculator:
    """
    Calculates the overall password score from its sub-scores.

    In weighted mode the score is spread evenly across four factors:
    - Length (25%)
    - Complexity (25%)
    - Predictability (25%)
    - Breach exposure (25%)

    In breach-only mode the breach score alone decides.
    """

    # Weights for each component (must sum to 1.0)
    WEIGHTS: Dict[str, float] = {
        "length": 0.25,
        "complexity": 0.25,
        "predictability": 0.25,
        "breach": 0.25,
    }

    def __init__(self, mode: ScoringMode = ScoringMode.WEIGHTED):
        self.mode = mode

    def compute(self, password: str, breach_count: int) -> PasswordCheck:
        """
        Compute the score breakdown for a password.

        Args:
            password: Password to score (never stored on the result)
            breach_count: Occurrences reported by the breach lookup

        Returns:
            PasswordCheck with sub-scores, overall score and tier
        """
        length_score = score_length(password)
        complexity_score = score_complexity(password)
        predictability_score = score_predictability(password)
        breach_score = score_breach(breach_count)

        if self.mode == ScoringMode.BREACH_ONLY:
            overall_score = float(breach_score)
        else:
            overall_score = (
                length_score * self.WEIGHTS["length"] +
                complexity_score * self.WEIGHTS["complexity"] +
                predictability_score * self.WEIGHTS["predictability"] +
                breach_score * self.WEIGHTS["breach"]
            )

        overall = min(100, max(0, round(overall_score)))
        tier = classify_tier(overall)

        check = PasswordCheck(
            password_length=len(password),
            length_score=length_score,
            complexity_score=complexity_score,
            predictability_score=predictability_score,
            breach_score=breach_score,
            breach_count=breach_count,
            overall_score=overall,
            safety_tier=tier,
            scoring_mode=self.mode,
            recommendations=self._generate_recommendations(password, breach_count),
        )

        logger.info(
            f"Password scored: {check.overall_score}/100 ({tier.value}, mode={self.mode.value})"
        )

        return check

    def _generate_recommendations(self, password: str, breach_count: int) -> List[str]:
        """
        Generate actionable recommendations.

        Args:
            password: Password being scored
            breach_count: Breach occurrences

        Returns:
            List of recommendation strings
        """
        recommendations = []

        if breach_count > 0:
            recommendations.append(
                f"유출된 데이터에서 {breach_count:,}회 발견된 비밀번호입니다. 즉시 변경하세요"
            )

        if len(password) < 12:
            recommendations.append("12자 이상으로 늘리세요")
        elif len(password) < 16:
            recommendations.append("16자 이상으로 길게 만들면 더 안전합니다")

        if score_complexity(password) < 100:
            recommendations.append("영문 대문자, 소문자, 숫자, 특수문자를 모두 섞어 쓰세요")

        lowered = password.lower()
        if has_sequential_run(lowered):
            recommendations.append("abc, 123 같은 연속된 문자를 피하세요")

        if has_repeated_run(lowered):
            recommendations.append("같은 문자를 반복하지 마세요")

        if contains_common_password(lowered):
            recommendations.append("흔히 쓰이는 비밀번호나 단어를 피하세요")

        if has_keyboard_run(lowered):
            recommendations.append("qwer, asdf 같은 키보드 배열 패턴을 피하세요")

        return recommendations

"""
SecDay Web - View logic

Functions that run checks and prepare view models for templates.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel

from secday.core.errors import (
    BreachLookupError,
    PasswordValidationError,
    SurveyValidationError,
)
from secday.password.models import PasswordCheck, SafetyTier
from secday.password.service import PasswordCheckService
from secday.survey.models import (
    COMPLETE_MESSAGE,
    INCOMPLETE_MESSAGE,
    SurveyAnswers,
    SurveyQuestion,
    validate_answers,
)

logger = logging.getLogger(__name__)

CHECK_FAILED_MESSAGE = "비밀번호 확인 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요"
INVALID_ANSWER_MESSAGE = "올바르지 않은 답변이 있습니다"

TIER_LABELS = {
    SafetyTier.SAFE: "안전",
    SafetyTier.MODERATE: "보통",
    SafetyTier.WEAK: "취약",
}

HOME_CONTENT: Dict[str, Any] = {
    "title": "정보보안의 날 행사",
    "subtitle": "매년 7월 둘째 주 수요일은 정보보안의 날입니다",
    "about_title": "정보보안의 날이란?",
    "cards": [
        {
            "title": "목적",
            "body": "정보보호의 중요성에 대한 국민 인식을 제고하고, "
                    "정보보호 문화를 확산하기 위해 제정되었습니다.",
        },
        {
            "title": "역사",
            "body": "2012년부터 시작되어 매년 다양한 캠페인과 행사를 통해 "
                    "정보보안의 중요성을 알리고 있습니다.",
        },
    ],
}

FOOTER_CREDIT = "19대 학생회 AI부 X 기획부"


class Notification(BaseModel):
    """A user-facing toast message."""

    level: str = "info"  # success, error, info
    message: str


class PasswordCheckOutcome(BaseModel):
    """Result of a check request as shown to the user."""

    status_code: int = 200
    result: Optional[PasswordCheck] = None
    notification: Optional[Notification] = None


def base_context() -> Dict[str, Any]:
    """Context shared by every page."""
    return {"footer_credit": FOOTER_CREDIT}


def get_home_view() -> Dict[str, Any]:
    """
    Get data for the home page.
    """
    return {**base_context(), **HOME_CONTENT}


def get_survey_view(
    questions: List[SurveyQuestion],
    selected: Optional[Dict[str, List[str]]] = None,
    notification: Optional[Notification] = None,
) -> Dict[str, Any]:
    """
    Get data for the survey form.

    Args:
        questions: Survey questions
        selected: Previously submitted values, kept when re-rendering
        notification: Optional toast to show

    Returns:
        Template context
    """
    return {
        **base_context(),
        "questions": questions,
        "selected": selected or {},
        "notification": notification,
    }


def submit_survey(
    questions: List[SurveyQuestion],
    form: Dict[str, List[str]],
) -> Tuple[Optional[SurveyAnswers], Notification]:
    """
    Validate a survey submission.

    Answers are acknowledged but not stored.

    Args:
        questions: Survey questions
        form: Submitted values keyed by question id

    Returns:
        Tuple of (answers or None, notification)
    """
    try:
        answers = validate_answers(questions, form)
    except SurveyValidationError as e:
        logger.info(f"Survey rejected: {e} (missing: {e.missing})")
        message = INCOMPLETE_MESSAGE if e.missing else INVALID_ANSWER_MESSAGE
        return None, Notification(level="error", message=message)

    logger.info("Survey submitted")
    return answers, Notification(level="success", message=COMPLETE_MESSAGE)


def get_password_check_view(outcome: Optional[PasswordCheckOutcome] = None) -> Dict[str, Any]:
    """
    Get data for the password checker page.

    Args:
        outcome: Result of a submitted check, if any

    Returns:
        Template context
    """
    result = outcome.result if outcome else None
    return {
        **base_context(),
        "result": result,
        "tier_label": TIER_LABELS.get(result.safety_tier) if result else None,
        "notification": outcome.notification if outcome else None,
    }


async def run_password_check(
    service: PasswordCheckService,
    password: Optional[str],
) -> PasswordCheckOutcome:
    """
    Run a password check and translate failures into one notification.

    Args:
        service: Password check service
        password: Submitted password

    Returns:
        PasswordCheckOutcome with either a result or a notification
    """
    try:
        result = await service.check(password)
    except PasswordValidationError as e:
        return PasswordCheckOutcome(
            status_code=400,
            notification=Notification(level="error", message=str(e)),
        )
    except BreachLookupError as e:
        logger.error(f"Breach lookup failed: {e}")
        return PasswordCheckOutcome(
            status_code=502,
            notification=Notification(level="error", message=CHECK_FAILED_MESSAGE),
        )
    except Exception as e:
        logger.error(f"Password check error: {e}", exc_info=True)
        return PasswordCheckOutcome(
            status_code=500,
            notification=Notification(level="error", message=CHECK_FAILED_MESSAGE),
        )

    return PasswordCheckOutcome(
        result=result,
        notification=Notification(
            level="success" if result.safety_tier == SafetyTier.SAFE else "info",
            message=f"비밀번호 안전도: {TIER_LABELS[result.safety_tier]} ({result.overall_score}점)",
        ),
    )

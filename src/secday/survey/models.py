"""
Survey data models and answer validation.

Questions are defined in questions.yaml next to this module. Answers are
validated and acknowledged but never stored.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from secday.core.errors import SurveyValidationError

logger = logging.getLogger(__name__)

QUESTIONS_FILE = Path(__file__).parent / "questions.yaml"

INCOMPLETE_MESSAGE = "모든 문항에 답변해주세요"
COMPLETE_MESSAGE = "설문조사가 완료되었습니다!"


class QuestionKind(str, Enum):
    """Single choice (radio) or multiple choice (checkbox)."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class SurveyOption(BaseModel):
    """One selectable answer."""

    value: str
    label: str


class SurveyQuestion(BaseModel):
    """A survey question and its options."""

    id: str
    title: str
    kind: QuestionKind = QuestionKind.SINGLE
    options: List[SurveyOption] = Field(default_factory=list)

    @property
    def option_values(self) -> List[str]:
        return [option.value for option in self.options]


class SurveyAnswers(BaseModel):
    """A complete, validated survey submission."""

    password_change: str
    security_features: List[str]
    phishing: str
    update_software: str


def load_questions(filepath: Optional[Path] = None) -> List[SurveyQuestion]:
    """
    Load survey questions from a YAML file.

    Args:
        filepath: Path to the questions file (bundled file by default)

    Returns:
        List of survey questions in display order

    Example YAML format:
        questions:
          - id: phishing
            title: "3. ..."
            kind: single
            options:
              - value: ignore
                label: "..."
    """
    filepath = filepath or QUESTIONS_FILE

    with open(filepath, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or "questions" not in data:
        logger.warning(f"No questions found in {filepath}")
        return []

    questions = [SurveyQuestion(**q) for q in data["questions"]]
    logger.debug(f"Loaded {len(questions)} survey questions from {filepath}")
    return questions


def validate_answers(
    questions: List[SurveyQuestion],
    form: Dict[str, List[str]],
) -> SurveyAnswers:
    """
    Validate raw form values against the questions.

    Args:
        questions: Survey questions
        form: Submitted values keyed by question id (lists, as checkboxes
            may send several values)

    Returns:
        Validated SurveyAnswers

    Raises:
        SurveyValidationError: If a question is unanswered or an answer is
            not one of its options
    """
    answers: Dict[str, object] = {}
    missing: List[str] = []

    for question in questions:
        values = [v for v in form.get(question.id, []) if v]

        if not values:
            missing.append(question.id)
            continue

        unknown = [v for v in values if v not in question.option_values]
        if unknown:
            raise SurveyValidationError(
                f"Invalid answer for {question.id}: {', '.join(unknown)}"
            )

        if question.kind == QuestionKind.MULTIPLE:
            # Keep option order, drop duplicates
            answers[question.id] = [v for v in question.option_values if v in values]
        else:
            if len(values) > 1:
                raise SurveyValidationError(f"Only one answer allowed for {question.id}")
            answers[question.id] = values[0]

    if missing:
        raise SurveyValidationError(INCOMPLETE_MESSAGE, missing=missing)

    return SurveyAnswers(**answers)

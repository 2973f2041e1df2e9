"""Normalization of raw JSON question records into canonical questions.

Accepted answer-key representations, in priority order:

    correctOption: 1-4            one-based option number
    correctOption: "Paris"        option text, compared trimmed and lower-cased
    correctIndex:  0-3            zero-based option index

Anything else resolves to the first option and produces an
``AmbiguousAnswerSpec`` diagnostic. Normalization never raises.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cram_app.constants.quiz_constants import OPTION_COUNT
from cram_app.core.models import AmbiguousAnswerSpec, AnswerSpecIssue, Question

logger = logging.getLogger(__name__)

WarningCallback = Callable[[AmbiguousAnswerSpec], None]


class RawQuestion(BaseModel):
    """Untrusted question record exactly as it appears in the quiz file."""

    model_config = ConfigDict(extra="ignore")

    question: Any = None
    options: Any = None
    correct_option: Any = Field(default=None, alias="correctOption")
    correct_index: Any = Field(default=None, alias="correctIndex")

    @classmethod
    def from_json_value(cls, value: object) -> RawQuestion:
        """Wrap any decoded JSON value; non-objects become an empty record."""
        if isinstance(value, dict):
            return cls.model_validate(value)
        return cls()


def normalize_questions(
    raw_questions: Iterable[object],
    on_warning: WarningCallback | None = None,
) -> list[Question]:
    """Return canonical questions with ids following the input order."""
    return [
        normalize_question(index, raw, on_warning)
        for index, raw in enumerate(raw_questions)
    ]


def normalize_question(
    question_id: int,
    raw: object,
    on_warning: WarningCallback | None = None,
) -> Question:
    record = raw if isinstance(raw, RawQuestion) else RawQuestion.from_json_value(raw)
    text = _coerce_text(record.question)
    options = _coerce_options(record.options)

    correct_index, issue = _resolve_correct_index(record, options)
    if issue is not None:
        diagnostic = AmbiguousAnswerSpec(
            question_id=question_id,
            question_text=text,
            issue=issue,
            raw_value=record.correct_option,
            resolved_index=correct_index,
        )
        logger.warning(diagnostic.describe())
        if on_warning is not None:
            on_warning(diagnostic)

    return Question(
        id=question_id,
        text=text,
        options=options,
        correct_index=correct_index,
    )


def _resolve_correct_index(
    record: RawQuestion,
    options: tuple[str, ...],
) -> tuple[int, AnswerSpecIssue | None]:
    option_number = _as_integral(record.correct_option)
    if option_number is not None and 1 <= option_number <= OPTION_COUNT:
        return option_number - 1, None

    if isinstance(record.correct_option, str):
        wanted = record.correct_option.strip().lower()
        for index, option in enumerate(options[:OPTION_COUNT]):
            if option.strip().lower() == wanted:
                return index, None
        return 0, AnswerSpecIssue.UNMATCHED_OPTION_TEXT

    index = _as_integral(record.correct_index)
    if index is not None and 0 <= index < OPTION_COUNT:
        return index, None

    return 0, AnswerSpecIssue.MISSING_ANSWER_KEY


def _as_integral(value: object) -> int | None:
    """Return ``value`` as an int when it is a whole JSON number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _coerce_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _coerce_options(value: object) -> tuple[str, ...]:
    # Option count is not validated here.
    if not isinstance(value, list):
        return ()
    return tuple(_coerce_text(option) for option in value)

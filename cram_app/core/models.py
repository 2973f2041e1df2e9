"""Domain models for the flashcard quiz."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class QuizPhase(Enum):
    """Lifecycle state of the quiz engine."""

    NO_SESSION = auto()
    ACTIVE = auto()
    COMPLETE = auto()


class AnswerSpecIssue(Enum):
    """Why a raw question's answer key could not be resolved."""

    UNMATCHED_OPTION_TEXT = auto()
    MISSING_ANSWER_KEY = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a resolved answer key."""

    id: int
    text: str
    options: tuple[str, ...]
    correct_index: int


@dataclass(frozen=True, slots=True)
class Score:
    """Immutable score snapshot returned to consumers."""

    correct: int = 0
    incorrect: int = 0

    @property
    def attempts(self) -> int:
        return self.correct + self.incorrect


@dataclass(frozen=True, slots=True)
class AnswerEvaluated:
    """Emitted once per scored answer."""

    question_id: int
    selected_index: int
    correct: bool


@dataclass(frozen=True, slots=True)
class AmbiguousAnswerSpec:
    """Non-fatal diagnostic raised while normalizing a raw question.

    The question still enters the quiz with ``resolved_index`` (always 0) as
    its answer key.
    """

    question_id: int
    question_text: str
    issue: AnswerSpecIssue
    raw_value: object = None
    resolved_index: int = 0

    def describe(self) -> str:
        if self.issue is AnswerSpecIssue.UNMATCHED_OPTION_TEXT:
            return (
                f'Could not find matching option for "{self.raw_value}" in question '
                f'"{self.question_text}". Defaulting to first option.'
            )
        return (
            f'Invalid correct option/index for question "{self.question_text}". '
            "Defaulting to first option."
        )


@dataclass(frozen=True, slots=True)
class QuizSnapshot:
    """Read-only view of the engine state, enough to render the UI."""

    phase: QuizPhase
    current: Question | None = None
    selected_option: int | None = None
    is_answered: bool = False
    score: Score = field(default_factory=Score)
    remaining: int = 0
    total: int = 0
    progress: int = 0

    @property
    def is_complete(self) -> bool:
        return self.phase is QuizPhase.COMPLETE

    @property
    def is_active(self) -> bool:
        return self.phase is QuizPhase.ACTIVE

    @property
    def has_next_question(self) -> bool:
        """Whether "next" leads to another question rather than the summary."""
        return self.remaining > 0

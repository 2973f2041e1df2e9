"""Quiz state machine shared by the Qt window and tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
from pathlib import Path
import random

from cram_app.constants.quiz_constants import OPTION_COUNT
from cram_app.core.models import (
    AmbiguousAnswerSpec,
    AnswerEvaluated,
    Question,
    QuizPhase,
    QuizSnapshot,
)
from cram_app.core.question_normalizer import normalize_questions
from cram_app.core.quiz_importer import load_quiz_from_file
from cram_app.core.services.quiz_repository import QuizRepository
from cram_app.core.services.review_queue import ReviewQueue
from cram_app.core.services.scoreboard import Scoreboard
from cram_app.core.shuffler import shuffle

logger = logging.getLogger(__name__)

AnswerListener = Callable[[AnswerEvaluated], None]
WarningListener = Callable[[AmbiguousAnswerSpec], None]


def compute_progress(total: int, remaining: int) -> int:
    """Percentage of questions mastered, rounded down."""
    if total <= 0:
        return 0
    return (total - remaining) * 100 // total


class QuizEngine:
    """Facade for quiz services: Repository, ReviewQueue and Scoreboard.

    Every mutating call runs to completion and callers re-render from
    :meth:`snapshot` afterwards.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        # Services
        self._repository = QuizRepository()
        self._queue = ReviewQueue()
        self._scoreboard = Scoreboard()

        self._rng = rng if rng is not None else random.Random()
        self._shuffle_seed: int | None = None
        self._phase = QuizPhase.NO_SESSION
        self._current: Question | None = None
        self._selected_option: int | None = None
        self._is_answered: bool = False

        self._answer_listeners: list[AnswerListener] = []
        self._warning_listeners: list[WarningListener] = []

    # --- Subscriptions ---

    def add_answer_listener(self, listener: AnswerListener) -> None:
        self._answer_listeners.append(listener)

    def add_warning_listener(self, listener: WarningListener) -> None:
        self._warning_listeners.append(listener)

    def set_shuffle_seed(self, seed: int | None) -> None:
        """Reseed the shuffle RNG; ``None`` reseeds from OS entropy."""
        self._shuffle_seed = seed
        self._rng.seed(seed)

    def update_shuffle_seed(self, seed: int | None) -> bool:
        """Reseed only if ``seed`` differs from the current one. Returns True on reseed."""
        if seed == self._shuffle_seed:
            return False
        self.set_shuffle_seed(seed)
        return True

    @property
    def shuffle_seed(self) -> int | None:
        return self._shuffle_seed

    # --- Loading ---

    def load(self, raw_questions: Iterable[object], source_name: str | None = None) -> QuizSnapshot:
        """Start a new quiz from raw question records, replacing any session."""
        questions = normalize_questions(raw_questions, on_warning=self._emit_warning)
        shuffled = shuffle(questions, self._rng)

        self._repository.load_questions(shuffled, source_name=source_name)
        logger.info("Loaded quiz with %d questions", len(shuffled))
        return self._start_run(shuffled)

    def load_file(self, file_path: Path) -> QuizSnapshot:
        """Import a JSON quiz file and start it.

        Raises:
            QuizImportError: The file is not a JSON array. The current
                session is left untouched.
            OSError: The file could not be read.
        """
        imported = load_quiz_from_file(file_path)
        return self.load(imported.raw_questions, source_name=file_path.name)

    # --- Transitions ---

    def advance(self) -> QuizSnapshot:
        head = self._queue.head()
        if head is None:
            if self._phase is QuizPhase.ACTIVE:
                logger.info("Quiz complete: %s", self._scoreboard.get_score())
                self._phase = QuizPhase.COMPLETE
            self._current = None
        else:
            self._current = head
        self._selected_option = None
        self._is_answered = False
        return self.snapshot()

    def select_option(self, index: int) -> AnswerEvaluated | None:
        """Score ``index`` as the answer to the current question.

        Returns ``None`` without touching the score when the current question
        has already been answered or there is no current question.
        """
        if self._is_answered or self._current is None:
            return None
        if not 0 <= index < OPTION_COUNT:
            raise ValueError(f"Option index must be between 0 and {OPTION_COUNT - 1}, got {index}.")

        question = self._current
        is_correct = index == question.correct_index

        self._selected_option = index
        self._scoreboard.record_answer(is_correct)
        self._is_answered = True
        self._queue.pop_head()
        if not is_correct:
            self._queue.push_tail(question)

        event = AnswerEvaluated(
            question_id=question.id,
            selected_index=index,
            correct=is_correct,
        )
        logger.debug("Question %d answered %s", question.id, "correctly" if is_correct else "incorrectly")
        self._notify(self._answer_listeners, event)
        return event

    def next_question(self) -> QuizSnapshot:
        if not self._is_answered:
            return self.snapshot()
        return self.advance()

    def restart(self) -> QuizSnapshot:
        """Replay all questions in a new order with a fresh score."""
        if self._phase is QuizPhase.NO_SESSION:
            return self.snapshot()
        shuffled = shuffle(self._repository.get_questions(), self._rng)
        return self._start_run(shuffled)

    def shuffle_remaining(self) -> QuizSnapshot:
        """Reorder the questions still queued.

        The current question is replaced by the new head, which can abandon a
        question the user has not answered yet.
        """
        self._queue.shuffle(self._rng)
        if self._current is not None and self._queue:
            self._current = self._queue.head()
        return self.snapshot()

    # --- Queries ---

    def snapshot(self) -> QuizSnapshot:
        total = self._repository.get_question_count()
        remaining = len(self._queue)
        return QuizSnapshot(
            phase=self._phase,
            current=self._current,
            selected_option=self._selected_option,
            is_answered=self._is_answered,
            score=self._scoreboard.get_score(),
            remaining=remaining,
            total=total,
            progress=compute_progress(total, remaining),
        )

    @property
    def progress(self) -> int:
        return compute_progress(self._repository.get_question_count(), len(self._queue))

    def has_loaded_quiz(self) -> bool:
        return self._phase is not QuizPhase.NO_SESSION

    def get_all_questions(self) -> list[Question]:
        return self._repository.get_questions()

    def get_remaining_questions(self) -> list[Question]:
        return self._queue.snapshot()

    def get_source_name(self) -> str | None:
        return self._repository.get_source_name()

    # --- Internals ---

    def _start_run(self, ordered: list[Question]) -> QuizSnapshot:
        self._queue.reset(ordered)
        self._scoreboard.clear()
        self._phase = QuizPhase.ACTIVE
        return self.advance()

    def _emit_warning(self, diagnostic: AmbiguousAnswerSpec) -> None:
        self._notify(self._warning_listeners, diagnostic)

    @staticmethod
    def _notify(listeners: list[Callable[[object], None]], event: object) -> None:
        for listener in list(listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed handling %r", listener, event)

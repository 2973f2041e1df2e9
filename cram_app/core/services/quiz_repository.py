"""Service holding the fixed question set of the running quiz."""

from __future__ import annotations

from cram_app.core.models import Question


class QuizRepository:
    """Stores the shuffled questions a quiz was started with."""

    def __init__(self) -> None:
        self._questions: list[Question] = []
        self._source_name: str | None = None

    def load_questions(self, questions: list[Question], source_name: str | None = None) -> None:
        """Replace the current quiz with a new list of questions."""
        self._questions = list(questions)
        self._source_name = source_name

    def get_questions(self) -> list[Question]:
        """Return a copy of all loaded questions."""
        return list(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_source_name(self) -> str | None:
        return self._source_name

"""Service for counting correct and incorrect answers."""

from __future__ import annotations

from dataclasses import dataclass

from cram_app.core.models import Score


@dataclass(slots=True)
class ScoreTally:
    """Mutable counters used internally."""

    correct: int = 0
    incorrect: int = 0


class Scoreboard:
    """Tracks the score of a single quiz run."""

    def __init__(self) -> None:
        self._tally = ScoreTally()

    def record_answer(self, is_correct: bool) -> None:
        """Count one answer event; repeated attempts count every time."""
        if is_correct:
            self._tally.correct += 1
        else:
            self._tally.incorrect += 1

    def get_score(self) -> Score:
        return Score(correct=self._tally.correct, incorrect=self._tally.incorrect)

    def clear(self) -> None:
        """Reset all scores."""
        self._tally = ScoreTally()

"""Service for the working queue of questions not yet answered correctly."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from cram_app.core.models import Question
from cram_app.core.shuffler import RandomSource, shuffle


class ReviewQueue:
    """FIFO of unmastered questions.

    A correct answer retires the head for good; an incorrect one moves it to
    the tail so it comes back after everything else still queued.
    """

    def __init__(self) -> None:
        self._queue: deque[Question] = deque()

    def reset(self, questions: Iterable[Question]) -> None:
        self._queue = deque(questions)

    def head(self) -> Question | None:
        return self._queue[0] if self._queue else None

    def pop_head(self) -> Question:
        """Remove and return the head of the queue."""
        return self._queue.popleft()

    def push_tail(self, question: Question) -> None:
        """Queue ``question`` again behind everything still waiting."""
        self._queue.append(question)

    def shuffle(self, rng: RandomSource) -> None:
        self._queue = deque(shuffle(self._queue, rng))

    def snapshot(self) -> list[Question]:
        return list(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

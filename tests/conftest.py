import os
import random
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cram_app.core.quiz_engine import QuizEngine


@pytest.fixture
def sample_raw_questions():
    return [
        {
            "question": "2+2?",
            "options": ["3", "4", "5", "6"],
            "correctOption": "4",
        },
        {
            "question": "Capital of France?",
            "options": ["London", "Berlin", "Paris", "Madrid"],
            "correctIndex": 2,
        },
    ]


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def engine(seeded_rng):
    return QuizEngine(rng=seeded_rng)


@pytest.fixture
def loaded_engine(engine, sample_raw_questions):
    engine.load(sample_raw_questions)
    return engine
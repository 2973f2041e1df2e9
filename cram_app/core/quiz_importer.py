"""Utilities for importing quizzes from a JSON file.

File format: a JSON array of question objects.

    [
      {
        "question": "What is $2 + 2$?",
        "options": ["3", "4", "5", "22"],
        "correctOption": 2
      },
      {
        "question": "Capital of France?",
        "options": ["London", "Berlin", "Paris", "Madrid"],
        "correctOption": "paris"
      },
      {
        "question": "Largest planet?",
        "options": ["Mars", "Jupiter", "Venus", "Earth"],
        "correctIndex": 1
      }
    ]

Architecture note:
    The importer only checks that the document is a JSON array. Individual
    records are handed to the normalizer untouched, which resolves the answer
    key leniently and never rejects a question. A broken record therefore
    degrades to a warning instead of failing the whole upload.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a quiz file cannot be turned into raw question records."""


class QuizParseError(QuizImportError):
    """Raised when the quiz file is not a JSON array."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for the source path and its raw question records."""

    source_path: Path
    raw_questions: list[Any]


_QUIZ_DOCUMENT = TypeAdapter(list[Any])


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise QuizParseError("Quiz file must be UTF-8 encoded JSON.") from exc
    raw_questions = parse_quiz_json(text)
    if not raw_questions:
        logger.warning("Quiz file %s contains no questions.", file_path)
    logger.info("Imported %d raw questions from %s", len(raw_questions), file_path)
    return ImportedQuiz(source_path=file_path, raw_questions=raw_questions)


def parse_quiz_json(text: str) -> list[Any]:
    """Decode ``text`` and return the top-level array of question records."""
    try:
        document = from_json(text, allow_inf_nan=False)
        return _QUIZ_DOCUMENT.validate_python(document, strict=True)
    except (ValueError, ValidationError) as exc:
        raise QuizParseError(
            "Invalid JSON file. Please upload a JSON array of question objects."
        ) from exc

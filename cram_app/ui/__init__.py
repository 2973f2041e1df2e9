"""Qt UI components for the quiz application."""

from .dialog_helpers import (
    confirm_replace_quiz,
    show_error,
    show_info,
    show_warning,
)
from .question_renderer import render_question_html
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "confirm_replace_quiz",
    "show_error",
    "show_info",
    "show_warning",
    "render_question_html",
]

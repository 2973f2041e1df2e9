"""Application entry point for CramQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from cram_app.core.quiz_engine import QuizEngine
from cram_app.ui.quiz_main_window import QuizMainWindow
from cram_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting CramQt…")

    quiz_engine = QuizEngine()

    app = QApplication(sys.argv)
    window = QuizMainWindow(quiz_engine=quiz_engine)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

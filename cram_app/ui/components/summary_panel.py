"""Component for the end-of-quiz score summary."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from cram_app.constants.ui_constants import (
    SUMMARY_CORRECT_TEMPLATE,
    SUMMARY_HEADING,
    SUMMARY_INCORRECT_TEMPLATE,
    SUMMARY_RESTART_BUTTON,
)
from cram_app.core.models import Score
from cram_app.styling.styles import Styles


class SummaryPanel(QWidget):
    """Shows the final score and offers a restart."""

    def __init__(
        self,
        on_restart: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.heading_label = QLabel(SUMMARY_HEADING, self)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.correct_label = QLabel(SUMMARY_CORRECT_TEMPLATE.format(count=0), self)
        self.correct_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.correct_label)

        self.incorrect_label = QLabel(SUMMARY_INCORRECT_TEMPLATE.format(count=0), self)
        self.incorrect_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.incorrect_label)

        self.restart_button = QPushButton(SUMMARY_RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self._handle_restart_click)
        layout.addWidget(self.restart_button, alignment=Qt.AlignCenter)

        layout.addStretch()

    def _handle_restart_click(self) -> None:
        self.on_restart()

    def show_score(self, score: Score) -> None:
        self.correct_label.setText(SUMMARY_CORRECT_TEMPLATE.format(count=score.correct))
        self.incorrect_label.setText(SUMMARY_INCORRECT_TEMPLATE.format(count=score.incorrect))

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.correct_label.setStyleSheet(style)
        self.incorrect_label.setStyleSheet(style)
        self.restart_button.setStyleSheet(style)

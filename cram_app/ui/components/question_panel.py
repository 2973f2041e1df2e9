"""Component for answering questions one at a time."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cram_app.constants.quiz_constants import OPTION_COUNT, OPTION_LETTERS
from cram_app.constants.ui_constants import (
    DEFAULT_QUESTION_FONT_SIZE,
    FINISH_QUIZ_BUTTON,
    NEXT_QUESTION_BUTTON,
    SCORE_CORRECT_TEMPLATE,
    SCORE_INCORRECT_TEMPLATE,
    SCORE_LEFT_TEMPLATE,
    SCORE_TOTAL_TEMPLATE,
)
from cram_app.core.models import QuizSnapshot
from cram_app.core.quiz_engine import QuizEngine
from cram_app.ui.question_renderer import render_question_html
from cram_app.styling.styles import OptionState, Styles, resolve_option_states


class QuestionPanel(QWidget):
    """UI component for the active quiz loop."""

    def __init__(
        self,
        quiz_engine: QuizEngine,
        on_quiz_complete: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_engine = quiz_engine
        self.on_quiz_complete = on_quiz_complete

        self._question_font_size: int = DEFAULT_QUESTION_FONT_SIZE
        self._rendered_question_key: tuple[int, int] | None = None
        self.option_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        # Score row
        score_row = QHBoxLayout()
        self.correct_label = QLabel(SCORE_CORRECT_TEMPLATE.format(count=0), self)
        self.incorrect_label = QLabel(SCORE_INCORRECT_TEMPLATE.format(count=0), self)
        self.total_label = QLabel(SCORE_TOTAL_TEMPLATE.format(count=0), self)
        self.left_label = QLabel(SCORE_LEFT_TEMPLATE.format(count=0), self)
        for label in (self.correct_label, self.incorrect_label, self.total_label, self.left_label):
            score_row.addWidget(label)
        score_row.addStretch()
        layout.addLayout(score_row)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        next_row = QHBoxLayout()
        next_row.addStretch()
        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next_click)
        self.next_button.setVisible(False)
        next_row.addWidget(self.next_button)
        layout.addLayout(next_row)

    def show_snapshot(self, snapshot: QuizSnapshot) -> None:
        """Refresh every widget from the engine snapshot."""
        self.progress_bar.setValue(snapshot.progress)
        self.correct_label.setText(SCORE_CORRECT_TEMPLATE.format(count=snapshot.score.correct))
        self.incorrect_label.setText(SCORE_INCORRECT_TEMPLATE.format(count=snapshot.score.incorrect))
        self.total_label.setText(SCORE_TOTAL_TEMPLATE.format(count=snapshot.total))
        self.left_label.setText(SCORE_LEFT_TEMPLATE.format(count=snapshot.remaining))

        question = snapshot.current
        if question is None:
            self._rendered_question_key = None
            self.question_view.setHtml("")
            self._rebuild_option_buttons([])
            self.next_button.setVisible(False)
            return

        # Re-render only when the question or font changes.
        key = (question.id, self._question_font_size)
        if key != self._rendered_question_key:
            self.question_view.setHtml(render_question_html(question.text, self._question_font_size))
            self._rendered_question_key = key
            self._rebuild_option_buttons(list(question.options))

        states = resolve_option_states(snapshot)
        for index, button in enumerate(self.option_buttons):
            button.setEnabled(not snapshot.is_answered and index < OPTION_COUNT)
            button.setStyleSheet(
                Styles.get_option_button_style(states[index], self._question_font_size)
            )

        self.next_button.setVisible(snapshot.is_answered)
        self.next_button.setText(
            NEXT_QUESTION_BUTTON if snapshot.has_next_question else FINISH_QUIZ_BUTTON
        )

    def _rebuild_option_buttons(self, options: list[str]) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = []
        for index, option in enumerate(options):
            prefix = OPTION_LETTERS[index] if index < len(OPTION_LETTERS) else str(index + 1)
            button = QPushButton(f"{prefix}. {option or '(empty)'}", self)
            button.setStyleSheet(
                Styles.get_option_button_style(OptionState.NEUTRAL, self._question_font_size)
            )
            button.clicked.connect(lambda _checked=False, i=index: self._handle_option_click(i))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)

    def _handle_option_click(self, index: int) -> None:
        self.quiz_engine.select_option(index)
        self.show_snapshot(self.quiz_engine.snapshot())

    def _handle_next_click(self) -> None:
        snapshot = self.quiz_engine.next_question()
        if snapshot.is_complete:
            self.on_quiz_complete()
            return
        self.show_snapshot(snapshot)

    def reset_state(self) -> None:
        """Forget the rendered question so the next snapshot redraws everything."""
        self._rendered_question_key = None

    def set_question_font_size(self, font_size: int) -> None:
        self._question_font_size = font_size
        self.show_snapshot(self.quiz_engine.snapshot())

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for label in (self.correct_label, self.incorrect_label, self.total_label, self.left_label):
            label.setStyleSheet(style)
        self.next_button.setStyleSheet(style)

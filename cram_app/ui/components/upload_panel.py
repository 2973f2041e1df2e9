"""Component shown before a quiz is loaded."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cram_app.constants.about import EXAMPLE_QUIZ_JSON
from cram_app.constants.ui_constants import (
    IMPORT_BUTTON_TEXT,
    UPLOAD_HEADING,
    UPLOAD_REQUIREMENTS,
)
from cram_app.styling.styles import Styles

_FIELD_DESCRIPTIONS = (
    "• question (string)",
    "• options (array of 4 strings)",
    "• correctOption (number 1-4 or matching option text) OR correctIndex (number 0-3)",
)


class UploadPanel(QWidget):
    """File picker with a description of the expected JSON format."""

    def __init__(
        self,
        on_open_file: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_open_file = on_open_file
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(UPLOAD_HEADING, self)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.open_button = QPushButton(IMPORT_BUTTON_TEXT, self)
        self.open_button.clicked.connect(self._handle_open_click)
        layout.addWidget(self.open_button)

        self.requirements_label = QLabel(
            "\n".join((UPLOAD_REQUIREMENTS, *_FIELD_DESCRIPTIONS, "", "Example:")),
            self,
        )
        self.requirements_label.setWordWrap(True)
        layout.addWidget(self.requirements_label)

        self.example_view = QPlainTextEdit(self)
        self.example_view.setReadOnly(True)
        self.example_view.setPlainText(EXAMPLE_QUIZ_JSON)
        layout.addWidget(self.example_view, stretch=1)

    def _handle_open_click(self) -> None:
        self.on_open_file()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.open_button.setStyleSheet(style)
        self.requirements_label.setStyleSheet(style)
        self.example_view.setStyleSheet(f"font-family: monospace; {style}")

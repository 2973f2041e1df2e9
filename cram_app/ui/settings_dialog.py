"""Settings dialog for configuring CramQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from cram_app.constants.ui_constants import (
    DEFAULT_QUESTION_FONT_SIZE,
    DEFAULT_UI_FONT_SIZE,
)

_MAX_SEED = 999_999


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = DEFAULT_UI_FONT_SIZE,
        question_font_size: int = DEFAULT_QUESTION_FONT_SIZE,
        sound_enabled: bool = True,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._question_font_size = question_font_size
        self._sound_enabled = sound_enabled
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Font settings group
        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, counters):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        question_font_row = QHBoxLayout()
        question_font_label = QLabel("Question Font Size (question, options):")
        self.question_font_spinbox = QSpinBox()
        self.question_font_spinbox.setRange(10, 32)
        self.question_font_spinbox.setValue(self._question_font_size)
        self.question_font_spinbox.setSuffix(" pt")
        question_font_row.addWidget(question_font_label)
        question_font_row.addStretch()
        question_font_row.addWidget(self.question_font_spinbox)
        font_layout.addLayout(question_font_row)

        layout.addWidget(font_group)

        # Quiz settings group
        quiz_group = QGroupBox("Quiz Settings")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.sound_checkbox = QCheckBox("Play a sound after a correct answer")
        self.sound_checkbox.setChecked(self._sound_enabled)
        quiz_layout.addWidget(self.sound_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed (0 = random):")
        seed_label.setToolTip(
            "A fixed seed makes every shuffle repeat the same order. Useful for testing."
        )
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, _MAX_SEED)
        self.seed_spinbox.setValue(self._shuffle_seed or 0)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        quiz_layout.addLayout(seed_row)

        layout.addWidget(quiz_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_question_font_size(self) -> int:
        """Get the selected question font size."""
        return self.question_font_spinbox.value()

    def get_sound_enabled(self) -> bool:
        return self.sound_checkbox.isChecked()

    def get_shuffle_seed(self) -> int | None:
        """Get the shuffle seed, or None for an unseeded shuffle."""
        value = self.seed_spinbox.value()
        return value or None

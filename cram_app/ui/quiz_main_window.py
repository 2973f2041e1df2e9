"""Qt main window switching between upload, quiz and summary views."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from cram_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from cram_app.constants.quiz_constants import DEFAULT_QUIZ_FILENAME
from cram_app.constants.ui_constants import (
    DEFAULT_QUESTION_FONT_SIZE,
    DEFAULT_UI_FONT_SIZE,
    IMPORT_DIALOG_TITLE,
    IMPORT_FAILED_TITLE,
    IMPORT_FILE_FILTER,
    NO_QUIZ_LOADED_MESSAGE,
    TOOLBAR_ABOUT,
    TOOLBAR_HELP,
    TOOLBAR_OPEN,
    TOOLBAR_RESTART,
    TOOLBAR_SETTINGS,
    TOOLBAR_SHUFFLE,
    TOOLBAR_SOUND_TEMPLATE,
    WINDOW_TITLE,
)
from cram_app.core.models import AmbiguousAnswerSpec, QuizSnapshot
from cram_app.core.quiz_engine import QuizEngine
from cram_app.core.quiz_importer import QuizImportError
from cram_app.styling.styles import Styles
from cram_app.ui.answer_sound import AnswerSound
from cram_app.ui.components.question_panel import QuestionPanel
from cram_app.ui.components.summary_panel import SummaryPanel
from cram_app.ui.components.upload_panel import UploadPanel
from cram_app.ui.dialog_helpers import (
    confirm_replace_quiz,
    show_error,
    show_info,
    show_warning,
)
from cram_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    """Which panel the main window is showing."""

    UPLOAD = auto()
    QUIZ = auto()
    SUMMARY = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window driving a single QuizEngine."""

    def __init__(self, quiz_engine: QuizEngine) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_engine = quiz_engine
        self._mode = ViewMode.UPLOAD

        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE
        self._question_font_size: int = DEFAULT_QUESTION_FONT_SIZE
        self._load_warnings: list[AmbiguousAnswerSpec] = []

        self.answer_sound = AnswerSound(self)
        self.quiz_engine.add_answer_listener(self.answer_sound.handle_answer)
        self.quiz_engine.add_warning_listener(self._load_warnings.append)

        self._build_ui()
        self._apply_styles()
        self._auto_load_default_quiz()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar_buttons(root_layout)

        self.view_stack = QStackedWidget(self)

        # Initialize components
        self.upload_panel = UploadPanel(on_open_file=self._handle_open_quiz, parent=self)
        self.question_panel = QuestionPanel(
            self.quiz_engine,
            on_quiz_complete=self._show_summary,
            parent=self,
        )
        self.summary_panel = SummaryPanel(on_restart=self._handle_restart, parent=self)

        self.view_stack.addWidget(self.upload_panel)
        self.view_stack.addWidget(self.question_panel)
        self.view_stack.addWidget(self.summary_panel)

        root_layout.addWidget(self.view_stack)

        self._set_mode(ViewMode.UPLOAD)

    def _build_toolbar_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.open_button = QPushButton(TOOLBAR_OPEN, self)
        self.open_button.clicked.connect(self._handle_open_quiz)
        button_row.addWidget(self.open_button)

        self.restart_button = QPushButton(TOOLBAR_RESTART, self)
        self.restart_button.clicked.connect(self._handle_restart)
        button_row.addWidget(self.restart_button)

        self.shuffle_button = QPushButton(TOOLBAR_SHUFFLE, self)
        self.shuffle_button.clicked.connect(self._handle_shuffle)
        button_row.addWidget(self.shuffle_button)

        self.sound_button = QPushButton(self)
        self.sound_button.setCheckable(True)
        self.sound_button.setChecked(self.answer_sound.is_enabled())
        self.sound_button.clicked.connect(self._handle_sound_toggle)
        button_row.addWidget(self.sound_button)
        self._update_sound_button_label()

        button_row.addStretch()

        self.settings_button = QPushButton(TOOLBAR_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.help_button = QPushButton(TOOLBAR_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(TOOLBAR_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: ViewMode) -> None:
        self._mode = mode
        quiz_mode = mode == ViewMode.QUIZ
        self.shuffle_button.setEnabled(quiz_mode)
        self.sound_button.setEnabled(quiz_mode)
        self.restart_button.setEnabled(self.quiz_engine.has_loaded_quiz())

        index_map = {
            ViewMode.UPLOAD: 0,
            ViewMode.QUIZ: 1,
            ViewMode.SUMMARY: 2,
        }
        self.view_stack.setCurrentIndex(index_map[mode])

    def _show_snapshot(self, snapshot: QuizSnapshot) -> None:
        if snapshot.is_complete:
            self._show_summary()
            return
        self.question_panel.show_snapshot(snapshot)
        self._set_mode(ViewMode.QUIZ)

    def _show_summary(self) -> None:
        self.summary_panel.show_score(self.quiz_engine.snapshot().score)
        self._set_mode(ViewMode.SUMMARY)

    def _handle_open_quiz(self) -> None:
        if self._mode == ViewMode.QUIZ and not confirm_replace_quiz(self):
            return

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.home()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return
        self._load_quiz_file(Path(file_path), interactive=True)

    def _load_quiz_file(self, file_path: Path, interactive: bool) -> bool:
        self._load_warnings.clear()
        try:
            snapshot = self.quiz_engine.load_file(file_path)
        except (OSError, QuizImportError) as exc:
            logger.error("Error parsing quiz file %s: %s", file_path, exc)
            if interactive:
                show_error(self, IMPORT_FAILED_TITLE, str(exc))
            return False

        self.question_panel.reset_state()
        self._show_snapshot(snapshot)
        if interactive and self._load_warnings:
            details = "\n".join(warning.describe() for warning in self._load_warnings[:5])
            show_warning(
                self,
                "Answer keys defaulted",
                f"{len(self._load_warnings)} question(s) had an unrecognized answer key and "
                f"will treat option A as correct:\n\n{details}",
            )
        return True

    def _handle_restart(self) -> None:
        if not self.quiz_engine.has_loaded_quiz():
            show_warning(self, "No quiz", NO_QUIZ_LOADED_MESSAGE)
            return
        self.question_panel.reset_state()
        self._show_snapshot(self.quiz_engine.restart())

    def _handle_shuffle(self) -> None:
        self._show_snapshot(self.quiz_engine.shuffle_remaining())

    def _handle_sound_toggle(self) -> None:
        self.answer_sound.set_enabled(self.sound_button.isChecked())
        self._update_sound_button_label()

    def _update_sound_button_label(self) -> None:
        state = "ON" if self.answer_sound.is_enabled() else "OFF"
        self.sound_button.setText(TOOLBAR_SOUND_TEMPLATE.format(state=state))

    def _auto_load_default_quiz(self) -> None:
        default_quiz_path = Path(DEFAULT_QUIZ_FILENAME)
        if not default_quiz_path.exists():
            return
        if self._load_quiz_file(default_quiz_path, interactive=False):
            logger.info("Auto-loaded %s", default_quiz_path)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._question_font_size,
            self.answer_sound.is_enabled(),
            self.quiz_engine.shuffle_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._question_font_size = dialog.get_question_font_size()

            self.answer_sound.set_enabled(dialog.get_sound_enabled())
            self.sound_button.setChecked(self.answer_sound.is_enabled())
            self._update_sound_button_label()
            self.quiz_engine.update_shuffle_seed(dialog.get_shuffle_seed())

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        buttons = [
            self.open_button,
            self.restart_button,
            self.shuffle_button,
            self.sound_button,
            self.settings_button,
            self.help_button,
            self.about_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        # Pass settings to components
        self.upload_panel.apply_font_size(self._ui_font_size)
        self.summary_panel.apply_font_size(self._question_font_size)
        self.question_panel.apply_font_size(self._ui_font_size)
        self.question_panel.set_question_font_size(self._question_font_size)

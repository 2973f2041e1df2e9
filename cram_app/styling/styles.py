"""Centralized styles and font definitions for the application."""

from enum import Enum, auto

from cram_app.core.models import QuizSnapshot

from .color_palette import ColorPalette, Theme


class OptionState(Enum):
    """How an option button is colored after the question is answered."""

    NEUTRAL = auto()
    CORRECT = auto()
    WRONG = auto()


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPlainTextEdit, QSpinBox {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_option_button_style(
        state: OptionState,
        font_size: int,
        theme: Theme = Theme.LIGHT,
    ) -> str:
        base = f"font-size: {font_size}pt; padding: 12px; text-align: left;"
        if state is OptionState.CORRECT:
            color = ColorPalette.SUCCESS.get(theme)
        elif state is OptionState.WRONG:
            color = ColorPalette.ERROR.get(theme)
        else:
            return base
        return (
            base
            + f" background-color: {color}; border: 1px solid {color};"
            + f" color: {ColorPalette.TEXT_ON_STATUS.get(theme)};"
        )


def resolve_option_states(snapshot: QuizSnapshot) -> list[OptionState]:
    """Coloring for each option of the current question.

    Nothing is colored until the question is answered. Afterwards the correct
    option is always marked, and a wrong selection is marked as such.
    """
    question = snapshot.current
    if question is None:
        return []
    states = [OptionState.NEUTRAL] * len(question.options)
    if not snapshot.is_answered:
        return states
    for index in range(len(states)):
        if index == question.correct_index:
            states[index] = OptionState.CORRECT
        elif index == snapshot.selected_option:
            states[index] = OptionState.WRONG
    return states

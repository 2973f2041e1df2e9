"""Styling module for CramQt."""

from .color_palette import ColorPalette, Theme
from .styles import OptionState, Styles, resolve_option_states

__all__ = ["ColorPalette", "OptionState", "Styles", "Theme", "resolve_option_states"]

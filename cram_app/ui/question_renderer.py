"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from cram_app.core.markdown_math_renderer import renderer
from cram_app.styling.color_palette import ColorPalette, Theme


def render_question_html(question_text: str, font_size: int = 14, theme: Theme = Theme.LIGHT) -> str:
    """Render a quiz question as HTML.

    Args:
        question_text: The question text (supports Markdown and LaTeX)
        font_size: Font size in points for the question text (default 14)
        theme: Theme used for the text color

    Returns:
        HTML string ready for display in QWebEngineView
    """
    return renderer.render_full_document(
        question_text,
        font_size=font_size,
        text_color=ColorPalette.TEXT_PRIMARY.get(theme),
    )


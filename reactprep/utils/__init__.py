"""ReactPrep utilities."""

from .highlighter import (
    Highlighter,
    Language,
    get_highlighter,
    get_theme_css,
    highlight,
    highlight_or_plain,
    highlight_questions,
    render_plain_code,
)

__all__ = [
    "Highlighter",
    "Language",
    "get_highlighter",
    "get_theme_css",
    "highlight",
    "highlight_or_plain",
    "highlight_questions",
    "render_plain_code",
]

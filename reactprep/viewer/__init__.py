"""
ReactPrep Viewer - Rendering components for the question bank.

This module provides:
- Code viewer with mistake overlays
- Question cards, difficulty badges and side panels
- Topic grid, progress bars, breadcrumbs and sidebar navigation
"""

from .overlay import (
    OverlayBand,
    PositionedMistake,
    position,
    position_mistakes,
)

from .icons import (
    IconName,
    DEFAULT_ICON,
    get_icon_glyph,
    render_icon,
    resolve_icon,
)

from .code import (
    flatten_markup,
    get_code_css,
    render_code_viewer,
    render_mistake_band,
    resolve_theme,
    SEVERITY_CLASSES,
)

from .question import (
    get_question_css,
    render_difficulty_badge,
    render_sidebar_content,
    render_pro_tips,
    render_question_header,
    render_question_code,
    render_question_card,
    render_question_list_header,
    render_empty_question_list,
    PROBLEM_TAB,
    SOLUTION_TAB,
)

from .topics import (
    get_topics_css,
    render_progress_bar,
    render_topic_card,
    render_topic_grid,
    render_breadcrumbs,
    render_sidebar_nav,
)

__all__ = [
    # Overlay
    "OverlayBand",
    "PositionedMistake",
    "position",
    "position_mistakes",
    # Icons
    "IconName",
    "DEFAULT_ICON",
    "get_icon_glyph",
    "render_icon",
    "resolve_icon",
    # Code
    "flatten_markup",
    "get_code_css",
    "render_code_viewer",
    "render_mistake_band",
    "resolve_theme",
    "SEVERITY_CLASSES",
    # Question
    "get_question_css",
    "render_difficulty_badge",
    "render_sidebar_content",
    "render_pro_tips",
    "render_question_header",
    "render_question_code",
    "render_question_card",
    "render_question_list_header",
    "render_empty_question_list",
    "PROBLEM_TAB",
    "SOLUTION_TAB",
    # Topics
    "get_topics_css",
    "render_progress_bar",
    "render_topic_card",
    "render_topic_grid",
    "render_breadcrumbs",
    "render_sidebar_nav",
]

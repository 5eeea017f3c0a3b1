"""
Question renderer - question cards and their side panels.

Provides:
- Difficulty badges
- Hints / explanation / pro tips panels
- Question card with problem/solution tabs and mistake overlays
- Question list header and empty state
"""

import html
from typing import Optional

from reactprep.config import DEFAULT_LANGUAGE
from reactprep.schemas import Difficulty, HighlightedQuestion

from .code import flatten_markup, render_code_viewer
from .icons import IconName, render_icon

PROBLEM_TAB = "problem"
SOLUTION_TAB = "solution"

DIFFICULTY_CLASSES = {
    Difficulty.EASY: "difficulty-easy",
    Difficulty.MEDIUM: "difficulty-medium",
    Difficulty.HARD: "difficulty-hard",
}

# Panel kind -> (title, icon, css modifier)
PANEL_STYLES = {
    "hints": ("Hints", IconName.HELP_CIRCLE, "panel-hints"),
    "explanation": ("Explanation", IconName.BOOK_OPEN, "panel-explanation"),
    "tips": ("Pro Tips", IconName.LIGHTBULB, "panel-tips"),
}


def get_question_css() -> str:
    """Get CSS styles for question cards."""
    return """
    <style>
    .question-card {
        border: 1px solid #e5e7eb;
        border-radius: 16px;
        margin-bottom: 2em;
        overflow: hidden;
        background: white;
    }
    .question-card-header {
        padding: 1.5em;
        border-bottom: 1px solid #e5e7eb;
    }
    .question-card-title-row {
        display: flex;
        align-items: center;
        gap: 0.75em;
    }
    .question-card-title {
        font-size: 1.25em;
        font-weight: 700;
        color: #111827;
        margin: 0;
    }
    .question-card-description {
        font-size: 0.9em;
        color: #6b7280;
        line-height: 1.6;
        margin-top: 0.25em;
    }
    .question-card-status {
        display: flex;
        gap: 0.5em;
        margin-top: 0.75em;
        font-size: 0.8em;
        font-weight: 600;
    }
    .status-completed { color: #059669; }
    .status-saved { color: #2563eb; }
    .difficulty-badge {
        border-radius: 999px;
        border: 1px solid;
        padding: 0.1em 0.6em;
        font-size: 0.75em;
        font-weight: 600;
    }
    .difficulty-easy {
        background: rgba(16, 185, 129, 0.1);
        color: #10b981;
        border-color: rgba(16, 185, 129, 0.2);
    }
    .difficulty-medium {
        background: rgba(245, 158, 11, 0.1);
        color: #f59e0b;
        border-color: rgba(245, 158, 11, 0.2);
    }
    .difficulty-hard {
        background: rgba(244, 63, 94, 0.1);
        color: #f43f5e;
        border-color: rgba(244, 63, 94, 0.2);
    }
    .side-panel {
        border: 1px solid;
        border-radius: 12px;
        padding: 1.5em;
        margin-bottom: 1em;
    }
    .panel-hints { background: rgba(255, 251, 235, 0.5); border-color: #fef3c7; }
    .panel-explanation { background: rgba(236, 253, 245, 0.5); border-color: #d1fae5; }
    .panel-tips { background: rgba(239, 246, 255, 0.5); border-color: #dbeafe; }
    .side-panel-title {
        display: flex;
        align-items: center;
        gap: 0.5em;
        font-size: 0.8em;
        font-weight: 700;
        letter-spacing: 0.05em;
        text-transform: uppercase;
        margin-bottom: 1em;
    }
    .panel-hints .side-panel-title { color: #d97706; }
    .panel-explanation .side-panel-title { color: #059669; }
    .panel-tips .side-panel-title { color: #2563eb; }
    .side-panel ul {
        list-style: none;
        padding: 0;
        margin: 0;
    }
    .side-panel li {
        display: flex;
        gap: 0.75em;
        font-size: 0.9em;
        line-height: 1.6;
        color: #4b5563;
        margin-bottom: 1em;
    }
    .side-panel-bullet {
        flex-shrink: 0;
        width: 1.4em;
        height: 1.4em;
        border-radius: 999px;
        background: rgba(0, 0, 0, 0.06);
        font-size: 0.7em;
        font-weight: 700;
        display: flex;
        align-items: center;
        justify-content: center;
    }
    .side-panel p {
        font-size: 0.9em;
        line-height: 1.6;
        color: #4b5563;
    }
    .question-list-header {
        display: flex;
        justify-content: space-between;
        border-bottom: 1px solid #e5e7eb;
        padding-bottom: 1em;
        margin-bottom: 1em;
        font-size: 1.25em;
        font-weight: 700;
    }
    .question-list-empty {
        border: 2px dashed #e5e7eb;
        border-radius: 16px;
        padding: 5em 1em;
        text-align: center;
        color: #6b7280;
        font-size: 1.1em;
    }
    </style>
    """


def render_difficulty_badge(difficulty: Difficulty) -> str:
    """Render a coloured difficulty pill."""
    return (
        f'<span class="difficulty-badge {DIFFICULTY_CLASSES[difficulty]}">'
        f'{difficulty.value}</span>'
    )


def render_sidebar_content(kind: str, content: str | list[str]) -> str:
    """
    Render a side panel.

    Args:
        kind: "hints", "explanation" or "tips"
        content: A list renders as numbered bullets, a string as a paragraph

    Returns:
        HTML string, or "" when there is nothing to show
    """
    if not content:
        return ""
    if kind not in PANEL_STYLES:
        raise ValueError(f"Unknown panel kind: {kind}")

    title, icon, modifier = PANEL_STYLES[kind]
    parts = [f'<div class="side-panel {modifier}">']
    parts.append('<div class="side-panel-title">')
    parts.append(render_icon(icon))
    parts.append(f'<span>{title}</span>')
    parts.append('</div>')

    if isinstance(content, list):
        parts.append('<ul>')
        for index, item in enumerate(content, start=1):
            parts.append(
                f'<li><span class="side-panel-bullet">{index}</span>'
                f'<span>{html.escape(item)}</span></li>'
            )
        parts.append('</ul>')
    else:
        parts.append(f'<p>{html.escape(content)}</p>')

    parts.append('</div>')
    return flatten_markup(''.join(parts))


def render_pro_tips(tips: list[str]) -> str:
    return render_sidebar_content("tips", tips)


def render_question_header(question: HighlightedQuestion, completed: bool = False, saved: bool = False) -> str:
    """Render title row, description and status flags."""
    parts = ['<div class="question-card-header">']
    parts.append('<div class="question-card-title-row">')
    parts.append(render_difficulty_badge(question.difficulty))
    parts.append(f'<h3 class="question-card-title">{html.escape(question.title)}</h3>')
    parts.append('</div>')
    parts.append(f'<div class="question-card-description">{html.escape(question.description)}</div>')

    if completed or saved:
        parts.append('<div class="question-card-status">')
        if completed:
            parts.append(f'<span class="status-completed">{render_icon(IconName.CHECK_CIRCLE)} Completed</span>')
        if saved:
            parts.append(f'<span class="status-saved">{render_icon(IconName.BOOKMARK)} Saved</span>')
        parts.append('</div>')

    parts.append('</div>')
    return ''.join(parts)


def render_question_code(
    question: HighlightedQuestion,
    active_tab: str = PROBLEM_TAB,
    show_mistakes: bool = False,
    language: str = DEFAULT_LANGUAGE,
    theme: str = "light",
) -> str:
    """
    Render the code for the active tab.

    Mistakes annotate the flawed code only, so overlays are drawn on the
    problem tab and never on the solution tab.
    """
    if active_tab == SOLUTION_TAB:
        return render_code_viewer(question.solution_html, language=language, theme=theme)
    return render_code_viewer(
        question.preview_html,
        language=language,
        mistakes=question.mistakes,
        show_mistakes=show_mistakes,
        line_count=question.line_count,
        theme=theme,
    )


def render_question_card(
    question: HighlightedQuestion,
    active_tab: str = PROBLEM_TAB,
    show_mistakes: bool = False,
    completed: bool = False,
    saved: bool = False,
    show_hints: bool = True,
    show_explanation: Optional[bool] = None,
    theme: str = "light",
) -> str:
    """
    Render a full question card.

    Args:
        question: Question with pre-rendered code
        active_tab: PROBLEM_TAB or SOLUTION_TAB
        show_mistakes: Draw mistake overlays on the problem tab
        completed: Show the completed flag
        saved: Show the saved flag
        show_hints: Include the hints panel
        show_explanation: Include the explanation panel (default: only on the solution tab)
        theme: "light" or "dark" code theme

    Returns:
        HTML string for the card
    """
    if show_explanation is None:
        show_explanation = active_tab == SOLUTION_TAB

    parts = ['<div class="question-card">']
    parts.append(render_question_header(question, completed=completed, saved=saved))
    parts.append('<div style="padding: 1.5em;">')
    parts.append(render_question_code(question, active_tab=active_tab, show_mistakes=show_mistakes, theme=theme))
    parts.append(render_pro_tips(question.pro_tips))
    if show_hints:
        parts.append(render_sidebar_content("hints", question.hints))
    if show_explanation:
        parts.append(render_sidebar_content("explanation", question.explanation))
    parts.append('</div>')
    parts.append('</div>')
    return flatten_markup(''.join(parts))


def render_question_list_header(count: int, label: str = "Questions") -> str:
    return f'<div class="question-list-header"><span>{html.escape(label)} ({count})</span></div>'


def render_empty_question_list(message: str = "No questions found for this difficulty level.") -> str:
    return f'<div class="question-list-empty">{html.escape(message)}</div>'

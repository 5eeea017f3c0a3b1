"""
Topic renderer - topic grid, progress bars, breadcrumbs and sidebar.
"""

import html
from typing import Optional

from reactprep.questionbank.navigator import Breadcrumb, NavItem
from reactprep.schemas import Topic

from .icons import render_icon


def get_topics_css() -> str:
    """Get CSS styles for topic navigation."""
    return """
    <style>
    .topic-grid {
        display: grid;
        grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
        gap: 1.5em;
    }
    .topic-card {
        display: block;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        padding: 1.5em;
        background: white;
        text-decoration: none !important;
        transition: border-color 0.2s;
    }
    .topic-card:hover {
        border-color: #3b82f6;
    }
    .topic-card-head {
        display: flex;
        align-items: center;
        gap: 1em;
        margin-bottom: 1em;
    }
    .topic-card-icon {
        background: #eff6ff;
        border-radius: 8px;
        padding: 0.5em 0.7em;
        font-size: 1.3em;
    }
    .topic-card-name {
        font-size: 1.1em;
        font-weight: 700;
        color: #111827;
    }
    .topic-card-description {
        font-size: 0.9em;
        color: #6b7280;
        margin-bottom: 1.5em;
    }
    .topic-card-progress-label {
        display: flex;
        justify-content: space-between;
        font-size: 0.75em;
        font-weight: 500;
        letter-spacing: 0.05em;
        text-transform: uppercase;
        color: #9ca3af;
        margin-bottom: 0.4em;
    }
    .progress-bar {
        height: 8px;
        width: 100%;
        border-radius: 999px;
        background: #f3f4f6;
        overflow: hidden;
    }
    .progress-bar-fill {
        height: 100%;
        background: #3b82f6;
    }
    .breadcrumbs {
        display: flex;
        align-items: center;
        gap: 0.5em;
        font-size: 0.9em;
        color: #6b7280;
        margin-bottom: 1em;
    }
    .breadcrumbs a {
        color: #6b7280;
        text-decoration: none;
    }
    .breadcrumb-current {
        color: #111827;
        font-weight: 500;
    }
    .sidebar-nav a {
        display: flex;
        gap: 0.75em;
        padding: 0.4em 0.75em;
        border-radius: 8px;
        color: #4b5563;
        text-decoration: none;
        font-size: 0.9em;
        font-weight: 500;
    }
    .sidebar-nav a.active {
        background: #f3f4f6;
        color: #111827;
    }
    </style>
    """


def clamp_percent(progress: float) -> float:
    return min(100, max(0, progress))


def render_progress_bar(progress: float) -> str:
    """Render a horizontal bar; progress is clamped to 0-100."""
    return (
        '<div class="progress-bar">'
        f'<div class="progress-bar-fill" style="width: {clamp_percent(progress):g}%;"></div>'
        '</div>'
    )


def topic_href(topic: Topic) -> str:
    """Link target for a topic card (query-parameter routing)."""
    return f"?topic={html.escape(topic.slug)}"


def render_topic_card(topic: Topic, progress: int = 0) -> str:
    parts = [f'<a class="topic-card" href="{topic_href(topic)}" target="_self" data-topic-id="{html.escape(topic.id)}">']
    parts.append('<div class="topic-card-head">')
    parts.append(render_icon(topic.icon, "topic-card-icon"))
    parts.append(f'<span class="topic-card-name">{html.escape(topic.name)}</span>')
    parts.append('</div>')
    parts.append(f'<div class="topic-card-description">{html.escape(topic.description)}</div>')
    parts.append('<div class="topic-card-progress-label">')
    parts.append(f'<span>Progress</span><span>{progress}%</span>')
    parts.append('</div>')
    parts.append(render_progress_bar(progress))
    parts.append('</a>')
    return ''.join(parts)


def render_topic_grid(topics: list[Topic], progress: Optional[dict[str, int]] = None) -> str:
    """
    Render all topics as cards.

    Args:
        topics: Topics in display order
        progress: Topic ID -> percent complete (missing topics show 0)

    Returns:
        HTML string for the grid
    """
    progress = progress or {}
    parts = ['<div class="topic-grid">']
    for topic in topics:
        parts.append(render_topic_card(topic, progress.get(topic.id, 0)))
    parts.append('</div>')
    return ''.join(parts)


def path_to_href(path: str) -> str:
    """Map an app path ("/topics/<slug>") to a query-parameter link."""
    segments = [s for s in path.split("/") if s]
    if len(segments) >= 2 and segments[0] == "topics":
        return f"?topic={html.escape(segments[1])}"
    if segments == ["saved"]:
        return "?view=saved"
    return "?"


def render_breadcrumbs(crumbs: list[Breadcrumb]) -> str:
    """Render a breadcrumb trail; the current crumb is not a link."""
    parts = ['<nav class="breadcrumbs">']
    for index, crumb in enumerate(crumbs):
        if index > 0:
            parts.append('<span>/</span>')
        if crumb.is_current:
            parts.append(f'<span class="breadcrumb-current">{html.escape(crumb.name)}</span>')
        else:
            parts.append(f'<a href="{path_to_href(crumb.href)}" target="_self">{html.escape(crumb.name)}</a>')
    parts.append('</nav>')
    return ''.join(parts)


def render_sidebar_nav(items: list[NavItem]) -> str:
    """Render sidebar links, highlighting the active one."""
    parts = ['<nav class="sidebar-nav">']
    for item in items:
        css_class = ' class="active"' if item.is_active else ''
        parts.append(
            f'<a{css_class} href="{path_to_href(item.url)}" target="_self">'
            f'{render_icon(item.icon)}<span>{html.escape(item.title)}</span></a>'
        )
    parts.append('</nav>')
    return ''.join(parts)


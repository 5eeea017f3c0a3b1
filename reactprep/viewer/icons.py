"""
Icon lookup for topics, severities and panels.

Content refers to icons by name (e.g. "Anchor" in topics.yaml). Names map
to glyphs through a fixed table; anything unknown renders as HelpCircle.
"""

import html
from enum import Enum


class IconName(str, Enum):
    ANCHOR = "Anchor"
    ZAP = "Zap"
    LAYOUT = "Layout"
    HELP_CIRCLE = "HelpCircle"
    ALERT_CIRCLE = "AlertCircle"
    ALERT_TRIANGLE = "AlertTriangle"
    INFO = "Info"
    LIGHTBULB = "Lightbulb"
    BOOK_OPEN = "BookOpen"
    BOOKMARK = "Bookmark"
    CHECK_CIRCLE = "CheckCircle2"
    EYE = "Eye"
    EYE_OFF = "EyeOff"
    CODE = "Code2"
    ATOM = "Atom"


DEFAULT_ICON = IconName.HELP_CIRCLE

ICON_GLYPHS: dict[IconName, str] = {
    IconName.ANCHOR: "⚓",
    IconName.ZAP: "⚡",
    IconName.LAYOUT: "▦",
    IconName.HELP_CIRCLE: "❓",
    IconName.ALERT_CIRCLE: "⛔",
    IconName.ALERT_TRIANGLE: "⚠️",
    IconName.INFO: "ℹ️",
    IconName.LIGHTBULB: "💡",
    IconName.BOOK_OPEN: "📖",
    IconName.BOOKMARK: "🔖",
    IconName.CHECK_CIRCLE: "✅",
    IconName.EYE: "👁",
    IconName.EYE_OFF: "🙈",
    IconName.CODE: "⌨️",
    IconName.ATOM: "⚛️",
}


def resolve_icon(name: str | IconName) -> IconName:
    """Map an icon name to IconName, defaulting for unknown names."""
    try:
        return IconName(name)
    except ValueError:
        return DEFAULT_ICON


def get_icon_glyph(name: str | IconName) -> str:
    return ICON_GLYPHS[resolve_icon(name)]


def render_icon(name: str | IconName, css_class: str = "icon") -> str:
    """Render an icon as an inline span."""
    icon = resolve_icon(name)
    return (
        f'<span class="{html.escape(css_class)}" data-icon="{icon.value}" aria-hidden="true">'
        f'{ICON_GLYPHS[icon]}</span>'
    )

"""
Code viewer renderer - highlighted code with mistake overlays.

Features:
- Language header
- Pre-highlighted code markup (see utils.highlighter)
- Severity-coloured bands over annotated lines with hover tooltips
"""

import html
from typing import Iterable, Optional

from reactprep.config import CODE_LINE_HEIGHT_PX, CODE_TOP_PADDING_PX, DEFAULT_LANGUAGE
from reactprep.schemas import Mistake, Severity

from .icons import IconName, render_icon
from .overlay import position_mistakes

# Severity to CSS class mapping for band colours
SEVERITY_CLASSES = {
    Severity.ERROR: "mistake-error",      # Rose
    Severity.WARNING: "mistake-warning",  # Amber
    Severity.INFO: "mistake-info",        # Blue
}

SEVERITY_ICONS = {
    Severity.ERROR: IconName.ALERT_CIRCLE,
    Severity.WARNING: IconName.ALERT_TRIANGLE,
    Severity.INFO: IconName.INFO,
}

THEME_CLASSES = {
    "light": "code-theme-light",
    "dark": "code-theme-dark",
}


def resolve_theme(base: Optional[str]) -> str:
    """Map a Streamlit theme base ("light", "dark" or None) to a viewer theme."""
    return "dark" if base == "dark" else "light"


def flatten_markup(markup: str) -> str:
    """
    Encode newlines as character references.

    Markdown ends a raw HTML block at the first blank line, so blank lines
    inside <pre> would split the code viewer apart. "&#10;" renders as the
    same line break without ever forming a blank line.
    """
    return markup.replace("\r\n", "\n").replace("\n", "&#10;")


def get_code_css() -> str:
    """Get CSS styles for the code viewer."""
    return """
    <style>
    .code-viewer {
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        overflow: hidden;
        margin: 0.5em 0 1em 0;
        box-shadow: inset 0 2px 4px rgba(0,0,0,0.05);
    }
    .code-theme-dark.code-viewer {
        border-color: #1f2937;
        background: #0d1117;
    }
    .code-viewer-header {
        background: rgba(243, 244, 246, 0.5);
        border-bottom: 1px solid #e5e7eb;
        padding: 0.5em 1em;
    }
    .code-viewer-language {
        font-family: monospace;
        font-size: 0.75em;
        letter-spacing: 0.1em;
        text-transform: uppercase;
        color: #6b7280;
    }
    .code-viewer-body {
        position: relative;
        overflow-x: auto;
        padding: %(padding)dpx 16px;
        font-family: "JetBrains Mono", Menlo, monospace;
        font-size: 13px;
    }
    .code-viewer-body .code-block,
    .code-viewer-body .code-block pre {
        background: transparent !important;
        margin: 0 !important;
        padding: 0 !important;
        border: none;
    }
    .code-viewer-body .code-block pre {
        line-height: %(line_height)dpx !important;
        font-size: 13px;
        white-space: pre;
    }
    .mistake-band {
        position: absolute;
        left: 0;
        right: 0;
        border-bottom: 2px dotted;
        cursor: help;
    }
    .mistake-error {
        border-color: rgba(244, 63, 94, 0.5);
        background: rgba(244, 63, 94, 0.05);
    }
    .mistake-warning {
        border-color: rgba(245, 158, 11, 0.5);
        background: rgba(245, 158, 11, 0.05);
    }
    .mistake-info {
        border-color: rgba(59, 130, 246, 0.5);
        background: rgba(59, 130, 246, 0.05);
    }
    .mistake-icon {
        position: absolute;
        left: 4px;
        font-size: 10px;
        line-height: %(line_height)dpx;
    }
    .mistake-tooltip {
        position: absolute;
        bottom: 100%%;
        left: 16px;
        z-index: 10;
        width: 16em;
        margin-bottom: 8px;
        padding: 8px;
        border-radius: 8px;
        background: #111827;
        color: white;
        font-size: 11px;
        line-height: 1.4;
        display: none;
        white-space: normal;
    }
    .mistake-band:hover .mistake-tooltip {
        display: block;
    }
    .mistake-tooltip-head {
        display: flex;
        gap: 8px;
        font-weight: 700;
        margin-bottom: 4px;
    }
    .mistake-error .mistake-severity { color: #fb7185; }
    .mistake-warning .mistake-severity { color: #fbbf24; }
    .mistake-info .mistake-severity { color: #60a5fa; }
    </style>
    """ % {"padding": CODE_TOP_PADDING_PX, "line_height": CODE_LINE_HEIGHT_PX}


def render_mistake_band(mistake: Mistake, top: int, height: int) -> str:
    """Render one overlay band with its tooltip."""
    css_class = SEVERITY_CLASSES[mistake.severity]
    message = html.escape(mistake.message)
    parts = [
        f'<div class="mistake-band {css_class}" data-mistake-id="{html.escape(mistake.id)}" '
        f'style="top: {top}px; height: {height}px;" title="{message}">'
    ]
    parts.append(render_icon(SEVERITY_ICONS[mistake.severity], "mistake-icon"))
    parts.append('<div class="mistake-tooltip">')
    parts.append('<div class="mistake-tooltip-head">')
    parts.append(f'<span class="mistake-severity">{mistake.severity.value.upper()}</span>')
    parts.append(f'<span>Line {mistake.line_number}</span>')
    parts.append('</div>')
    parts.append(message)
    parts.append('</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_code_viewer(
    code_html: str,
    language: str = DEFAULT_LANGUAGE,
    mistakes: Iterable[Mistake] = (),
    show_mistakes: bool = False,
    line_count: Optional[int] = None,
    theme: str = "light",
) -> str:
    """
    Render a code block with optional mistake overlays.

    Args:
        code_html: Highlighted (or plain fallback) code markup
        language: Language tag shown in the header
        mistakes: Annotations for the code
        show_mistakes: Whether to draw the overlays
        line_count: Lines in the source code; markers past it are dropped
        theme: "light" or "dark"

    Returns:
        HTML string for the viewer
    """
    theme_class = THEME_CLASSES.get(theme, THEME_CLASSES["light"])
    parts = [f'<div class="code-viewer {theme_class}">']

    parts.append('<div class="code-viewer-header">')
    parts.append(f'<span class="code-viewer-language">{html.escape(language)}</span>')
    parts.append('</div>')

    parts.append('<div class="code-viewer-body">')
    parts.append(flatten_markup(code_html))
    if show_mistakes:
        for positioned in position_mistakes(mistakes, line_count=line_count):
            parts.append(render_mistake_band(positioned.mistake, positioned.band.top, positioned.band.height))
    parts.append('</div>')

    parts.append('</div>')
    return ''.join(parts)

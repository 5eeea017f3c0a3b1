"""
Syntax highlighting for question code samples.

Thin adapter over Pygments:
- One Highlighter per process, built lazily on first use
- Class-based HTML output; colours come from get_theme_css(), which carries
  a light and a dark variant
- Failures raise RenderError; highlight_or_plain() degrades to escaped text
"""

import html
import logging
from enum import Enum
from functools import lru_cache
from typing import Iterable

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from reactprep.config import DARK_THEME, DEFAULT_LANGUAGE, LIGHT_THEME
from reactprep.errors import RenderError
from reactprep.schemas import HighlightedQuestion, Question

logger = logging.getLogger(__name__)

CODE_BLOCK_CLASS = "code-block"
LIGHT_THEME_CLASS = "code-theme-light"
DARK_THEME_CLASS = "code-theme-dark"


class Language(str, Enum):
    TSX = "tsx"
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    CSS = "css"
    HTML = "html"


# Pygments lexer aliases to try, most specific first. Older Pygments
# releases ship no TSX lexer, so TSX falls back to JSX and then TypeScript.
LEXER_ALIASES = {
    Language.TSX: ("tsx", "jsx", "typescript"),
    Language.TYPESCRIPT: ("typescript",),
    Language.JAVASCRIPT: ("javascript",),
    Language.CSS: ("css",),
    Language.HTML: ("html",),
}


def parse_language(language: str | Language) -> Language:
    """Map a language tag to Language, raising RenderError for unsupported tags."""
    try:
        return Language(language)
    except ValueError:
        raise RenderError(f"Unsupported language: {language!r}") from None


class Highlighter:
    """
    Converts (code, language) into themed HTML.

    Lexers for every supported language are resolved at construction time;
    rendered output is memoised per (code, language).
    """

    def __init__(self):
        self.formatter = HtmlFormatter(cssclass=CODE_BLOCK_CLASS)
        self._lexers = {language: self._resolve_lexer(language) for language in Language}
        self._cache: dict[tuple[str, Language], str] = {}
        logger.info(f"Initialized highlighter for {', '.join(l.value for l in Language)}")

    @staticmethod
    def _resolve_lexer(language: Language):
        for alias in LEXER_ALIASES[language]:
            try:
                return get_lexer_by_name(alias)
            except ClassNotFound:
                continue
        raise RenderError(f"No Pygments lexer available for {language.value}")

    def highlight(self, code: str, language: str | Language = DEFAULT_LANGUAGE) -> str:
        """
        Render code as HTML.

        Raises:
            RenderError: Unsupported language, non-string input, or a Pygments failure
        """
        lang = parse_language(language)
        if not isinstance(code, str):
            raise RenderError(f"Code must be a string, got {type(code).__name__}")

        key = (code, lang)
        if key not in self._cache:
            try:
                self._cache[key] = pygments_highlight(code, self._lexers[lang], self.formatter)
            except Exception as e:
                raise RenderError(f"Highlighting failed for {lang.value}: {e}") from e
        return self._cache[key]


@lru_cache(maxsize=1)
def get_highlighter() -> Highlighter:
    """Process-wide highlighter, created on first call."""
    return Highlighter()


def highlight(code: str, language: str | Language = DEFAULT_LANGUAGE) -> str:
    """Highlight with the shared highlighter."""
    return get_highlighter().highlight(code, language)


def render_plain_code(code: str) -> str:
    """Unhighlighted fallback markup with the same container as highlighted code."""
    return f'<div class="{CODE_BLOCK_CLASS}"><pre>{html.escape(code)}</pre></div>'


def highlight_or_plain(code: str, language: str | Language = DEFAULT_LANGUAGE) -> str:
    """Highlight, falling back to plain escaped code when rendering fails."""
    try:
        return highlight(code, language)
    except RenderError as e:
        logger.warning(f"Showing plain code: {e}")
        return render_plain_code(code if isinstance(code, str) else str(code))


def highlight_questions(
    questions: Iterable[Question],
    language: str | Language = DEFAULT_LANGUAGE,
) -> list[HighlightedQuestion]:
    """Pre-render both code samples of every question."""
    return [
        HighlightedQuestion.from_question(
            q,
            preview_html=highlight_or_plain(q.suboptimal_code, language),
            solution_html=highlight_or_plain(q.correct_code, language),
        )
        for q in questions
    ]


def get_theme_css() -> str:
    """Token colours for both theme variants, scoped by wrapper class."""
    light = HtmlFormatter(style=LIGHT_THEME).get_style_defs(f".{LIGHT_THEME_CLASS} .{CODE_BLOCK_CLASS}")
    dark = HtmlFormatter(style=DARK_THEME).get_style_defs(f".{DARK_THEME_CLASS} .{CODE_BLOCK_CLASS}")
    return f"<style>\n{light}\n{dark}\n</style>"

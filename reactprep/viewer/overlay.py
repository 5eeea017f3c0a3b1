"""
Mistake overlay positioning.

A code block renders every line at a fixed height below a fixed top
padding, so the band for line N is:

    top    = (N - 1) * line_height + top_padding
    height = line_height

The constants must match the code CSS in viewer.code; if the rendered line
height drifts, markers drift away from their lines.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from reactprep.config import CODE_LINE_HEIGHT_PX, CODE_TOP_PADDING_PX
from reactprep.schemas import Mistake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlayBand:
    """Vertical band (in px, relative to the code container) for one marker."""
    top: int
    height: int


@dataclass(frozen=True)
class PositionedMistake:
    mistake: Mistake
    band: OverlayBand


def position(
    line_number: int,
    line_height: int = CODE_LINE_HEIGHT_PX,
    top_padding: int = CODE_TOP_PADDING_PX,
) -> OverlayBand:
    """
    Band for a 1-based line number.

    Raises:
        ValueError: If line_number < 1
    """
    if line_number < 1:
        raise ValueError(f"line_number must be >= 1, got {line_number}")
    return OverlayBand(top=(line_number - 1) * line_height + top_padding, height=line_height)


def position_mistakes(
    mistakes: Iterable[Mistake],
    line_count: Optional[int] = None,
    line_height: int = CODE_LINE_HEIGHT_PX,
    top_padding: int = CODE_TOP_PADDING_PX,
) -> list[PositionedMistake]:
    """
    Position every mistake, in input order.

    When line_count is given, mistakes past the last line are dropped
    rather than drawn below the code block.
    """
    result = []
    for mistake in mistakes:
        if line_count is not None and mistake.line_number > line_count:
            logger.warning(
                f"Skipping marker {mistake.id!r}: line {mistake.line_number} is past the last line ({line_count})"
            )
            continue
        result.append(PositionedMistake(mistake, position(mistake.line_number, line_height, top_padding)))
    return result

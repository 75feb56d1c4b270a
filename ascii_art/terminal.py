"""
Terminal size detection and output width resolution.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Columns kept free so lines don't wrap at the terminal edge
MARGIN = 2

# Narrower art is illegible; only applied to detected widths
MIN_WIDTH = 40

FALLBACK_WIDTH = 80


class WidthSource(Enum):
    """Which path decided the output width."""
    USER = "user"
    AUTO_DETECTED = "auto_detected"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class WidthResolution:
    """Resolved output width with its provenance."""
    width: int
    source: WidthSource


def get_terminal_size() -> Optional[Tuple[int, int]]:
    """Get terminal dimensions (columns, rows), or None if not a terminal."""
    try:
        size = os.get_terminal_size()
    except OSError:
        return None

    if size.columns <= 0:
        return None
    return (size.columns, size.lines)


def apply_margin(width: int) -> int:
    """Subtract the safety margin, never going below zero."""
    return max(width - MARGIN, 0)


def compute_output_width(
    user_width: Optional[int],
    detected_width: Optional[int]
) -> WidthResolution:
    """
    Decide the output width.

    An explicit user width wins verbatim. A detected terminal width
    loses the margin and is raised to MIN_WIDTH. Without either,
    FALLBACK_WIDTH is used.
    """
    if user_width is not None:
        return WidthResolution(user_width, WidthSource.USER)

    if detected_width is not None:
        width = max(apply_margin(detected_width), MIN_WIDTH)
        return WidthResolution(width, WidthSource.AUTO_DETECTED)

    return WidthResolution(FALLBACK_WIDTH, WidthSource.FALLBACK)


def resolve_output_width(user_width: Optional[int] = None) -> WidthResolution:
    """Probe the terminal and resolve the output width."""
    size = get_terminal_size()
    detected_width = size[0] if size else None
    return compute_output_width(user_width, detected_width)

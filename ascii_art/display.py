"""
Terminal display module for rendering ASCII art.

Colors each character with the nearest of the 16 basic ANSI colors,
taken from the co-located pixel of the source image.
"""

import math
import sys
from typing import Tuple
import numpy as np

from .converter import AsciiGrid

# 16 basic ANSI colors (foreground codes), black first.
# Order matters: the first entry wins a distance tie.
ANSI_COLORS: Tuple[Tuple[int, int, int, str], ...] = (
    (0, 0, 0, "\033[30m"),          # Black
    (128, 0, 0, "\033[31m"),        # Red
    (0, 128, 0, "\033[32m"),        # Green
    (128, 128, 0, "\033[33m"),      # Yellow
    (0, 0, 128, "\033[34m"),        # Blue
    (128, 0, 128, "\033[35m"),      # Magenta
    (0, 128, 128, "\033[36m"),      # Cyan
    (192, 192, 192, "\033[37m"),    # White
    (128, 128, 128, "\033[90m"),    # Bright black (gray)
    (255, 0, 0, "\033[91m"),        # Bright red
    (0, 255, 0, "\033[92m"),        # Bright green
    (255, 255, 0, "\033[93m"),      # Bright yellow
    (0, 0, 255, "\033[94m"),        # Bright blue
    (255, 0, 255, "\033[95m"),      # Bright magenta
    (0, 255, 255, "\033[96m"),      # Bright cyan
    (255, 255, 255, "\033[97m"),    # Bright white
)

RESET = "\033[0m"


def rgb_to_ansi(r: int, g: int, b: int) -> str:
    """Return the escape code of the ANSI color closest to (r, g, b)."""
    r, g, b = int(r), int(g), int(b)
    min_distance = math.inf
    closest_code = ANSI_COLORS[0][3]

    for ar, ag, ab, code in ANSI_COLORS:
        distance = math.sqrt((r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2)
        if distance < min_distance:
            min_distance = distance
            closest_code = code

    return closest_code


class Display:
    """
    Writes colored ASCII grids to a terminal stream.
    """

    RESET_STYLE = RESET

    def __init__(self, output_stream=None):
        """
        Initialize display.

        Args:
            output_stream: Output stream (defaults to stdout)
        """
        self.output = output_stream or sys.stdout

    def render(self, grid: AsciiGrid, original: np.ndarray):
        """
        Render a grid colored by the source image.

        Each character is preceded by the escape code of its pixel's
        nearest ANSI color. Every row ends with a reset, and one more
        reset follows the last row.

        Args:
            grid: Character grid to display
            original: RGB buffer of shape (height, width, 3), at least
                as large as the grid
        """
        for y, row in enumerate(grid):
            line = []
            for x, char in enumerate(row):
                r, g, b = original[y, x][:3]
                line.append(rgb_to_ansi(r, g, b) + char)
            self.output.write("".join(line) + self.RESET_STYLE + "\n")

        self.output.write(self.RESET_STYLE)
        self.output.flush()


def render_colored(grid: AsciiGrid, original: np.ndarray, output_stream=None):
    """Render a grid to ``output_stream`` (stdout by default)."""
    Display(output_stream).render(grid, original)

"""
Core ASCII conversion engine.

Turns a grayscale pixel buffer into a grid of characters:
- Standard mode maps brightness onto a 10-character density ramp
- Edge mode maps a binary Canny edge map onto '#' and ' '
"""

import math
from typing import Callable, List, Optional
import numpy as np

from .effects import EdgeDetector
from .errors import InvalidDimensionsError, UnknownModeError

# Rows of single characters, top to bottom
AsciiGrid = List[List[str]]


class CharacterSets:
    """Character sets used by the converter."""

    # Ordered by perceived density (dark to light)
    STANDARD = " .:-=+*#%@"

    # Edge mode markers
    EDGE = "#"
    BLANK = " "


def brightness_to_char(brightness: int) -> str:
    """
    Map a brightness value (0-255) to a character of the density ramp.

    The range is spread evenly across the ramp: 0 maps to ' ',
    255 maps to '@' and 127 lands on '='.
    """
    last = len(CharacterSets.STANDARD) - 1
    # Round half away from zero; brightness is never negative
    index = int(math.floor(int(brightness) / 255 * last + 0.5))
    index = min(max(index, 0), last)
    return CharacterSets.STANDARD[index]


def edge_to_char(edge_value: int) -> str:
    """Map an edge map sample to '#' (255) or ' ' (anything else)."""
    if edge_value == 255:
        return CharacterSets.EDGE
    return CharacterSets.BLANK


def _check_dimensions(width: int, height: int):
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError("Image dimensions must be greater than zero.")


def build_grid(
    width: int,
    height: int,
    sample_at: Callable[[int, int], int],
    mapper: Callable[[int], str]
) -> AsciiGrid:
    """
    Build a character grid by mapping every sample of a width x height source.

    Args:
        width: Number of columns
        height: Number of rows
        sample_at: Returns the sample at (x, y)
        mapper: Maps a single sample to a character

    Returns:
        ``height`` rows of ``width`` characters in row-major order

    Raises:
        InvalidDimensionsError: If either dimension is not positive
    """
    _check_dimensions(width, height)

    grid = []
    for y in range(height):
        row = [mapper(sample_at(x, y)) for x in range(width)]
        grid.append(row)

    return grid


def _grid_from_array(array: np.ndarray, mapper: Callable[[int], str]) -> AsciiGrid:
    height, width = array.shape[:2]
    return build_grid(width, height, lambda x, y: int(array[y, x]), mapper)


def convert_to_ascii(gray: np.ndarray) -> AsciiGrid:
    """Convert a grayscale buffer of shape (height, width) to a density grid."""
    return _grid_from_array(gray, brightness_to_char)


def detect_and_convert(
    gray: np.ndarray,
    detector: Optional[EdgeDetector] = None
) -> AsciiGrid:
    """
    Run Canny edge detection on a grayscale buffer and map the edges.

    Dimensions are checked before the detector runs, so an empty
    buffer fails the same way as in standard mode.
    """
    height, width = gray.shape[:2]
    _check_dimensions(width, height)

    detector = detector or EdgeDetector()
    edges = detector.detect(gray)

    return _grid_from_array(edges, edge_to_char)


class ASCIIConverter:
    """
    Converts grayscale buffers to character grids.

    Selects the brightness or edge path based on the conversion mode.
    """

    MODES = ("standard", "edge")

    def __init__(self, mode: str = "standard", edge_detector: Optional[EdgeDetector] = None):
        """
        Initialize the converter.

        Args:
            mode: Conversion mode ('standard' or 'edge')
            edge_detector: Detector used in edge mode (Canny defaults if None)

        Raises:
            UnknownModeError: If the mode is not one of MODES
        """
        if mode not in self.MODES:
            raise UnknownModeError(mode, self.MODES)

        self.mode = mode
        self.edge_detector = edge_detector or EdgeDetector()

    def convert(self, gray: np.ndarray) -> AsciiGrid:
        """Convert a grayscale buffer using the configured mode."""
        if self.mode == "edge":
            return detect_and_convert(gray, self.edge_detector)
        return convert_to_ascii(gray)

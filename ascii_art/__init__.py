"""
ASCII Art - Terminal image to ASCII art converter

Converts image files to ASCII art printed in the terminal with:
- Brightness mapped onto a 10-character density ramp
- Edge detection mode (Canny)
- Colors approximated with the 16 basic ANSI colors
- Output width fitted to the terminal
"""

__version__ = "0.1.0"

from .converter import (
    ASCIIConverter,
    AsciiGrid,
    CharacterSets,
    brightness_to_char,
    build_grid,
    convert_to_ascii,
    detect_and_convert,
    edge_to_char,
)
from .display import ANSI_COLORS, RESET, Display, render_colored, rgb_to_ansi
from .effects import EdgeDetector
from .errors import (
    ASCIIArtError,
    DecodeFailedError,
    ImageIOError,
    ImageLoaderError,
    ImageNotFoundError,
    InvalidDimensionsError,
    UnknownModeError,
    UnsupportedFormatError,
)
from .image_loader import ProcessedImage, load_image, preprocess_image
from .terminal import (
    WidthResolution,
    WidthSource,
    compute_output_width,
    get_terminal_size,
    resolve_output_width,
)

__all__ = [
    # Conversion
    "ASCIIConverter",
    "AsciiGrid",
    "CharacterSets",
    "brightness_to_char",
    "edge_to_char",
    "build_grid",
    "convert_to_ascii",
    "detect_and_convert",
    "EdgeDetector",
    # Rendering
    "ANSI_COLORS",
    "RESET",
    "Display",
    "render_colored",
    "rgb_to_ansi",
    # Loading
    "ProcessedImage",
    "load_image",
    "preprocess_image",
    # Terminal
    "WidthResolution",
    "WidthSource",
    "compute_output_width",
    "get_terminal_size",
    "resolve_output_width",
    # Errors
    "ASCIIArtError",
    "ImageLoaderError",
    "ImageNotFoundError",
    "UnsupportedFormatError",
    "InvalidDimensionsError",
    "DecodeFailedError",
    "ImageIOError",
    "UnknownModeError",
]

#!/usr/bin/env python3
"""
Command-line interface for the ASCII art converter.

Converts an image file to ASCII art colored with the 16 ANSI colors:
- Standard mode maps brightness to a density ramp
- Edge mode draws Canny edges with '#'
- Output width follows the terminal unless --width is given
"""

import argparse
import sys
from typing import Optional, Tuple

from . import __version__
from .converter import ASCIIConverter, AsciiGrid
from .display import Display
from .errors import ASCIIArtError, InvalidDimensionsError
from .image_loader import ProcessedImage, load_image, preprocess_image
from .terminal import WidthResolution, WidthSource, resolve_output_width


def emit_width_messages(resolution: WidthResolution):
    """Tell the user where the output width came from."""
    if resolution.source == WidthSource.AUTO_DETECTED:
        print(f"Using auto-detected width: {resolution.width} characters")
    elif resolution.source == WidthSource.FALLBACK:
        print(
            "Warning: Unable to detect terminal size; "
            f"defaulting to {resolution.width} characters.",
            file=sys.stderr
        )
        print(f"Using fallback width: {resolution.width} characters")


def run_pipeline(
    image_path: str,
    width: int,
    mode: str = "standard"
) -> Tuple[ProcessedImage, AsciiGrid]:
    """
    Load, resize and convert an image.

    Returns:
        The processed buffers and the character grid

    Raises:
        ASCIIArtError: On the first failing step
    """
    image = load_image(image_path)
    processed = preprocess_image(image, width)

    converter = ASCIIConverter(mode=mode)
    try:
        grid = converter.convert(processed.gray)
    except InvalidDimensionsError as e:
        if converter.mode == "edge":
            raise InvalidDimensionsError(f"Edge detection failed: {e}") from e
        raise

    return processed, grid


class ASCIIArtApp:
    """
    Main application class.

    Resolves the output width, runs the pipeline and renders the result.
    """

    def __init__(
        self,
        width: Optional[int] = None,
        mode: str = "standard",
        output_stream=None
    ):
        """
        Initialize the application.

        Args:
            width: Output width (auto-detect if None)
            mode: Conversion mode ('standard' or 'edge')
            output_stream: Where the art is written (defaults to stdout)
        """
        self.resolution = resolve_output_width(width)
        self.mode = mode
        self.display = Display(output_stream)

    @property
    def width(self) -> int:
        return self.resolution.width

    def convert_image(self, image_path: str) -> int:
        """
        Convert a single image file and print it.

        Returns:
            Exit code (0 for success)
        """
        emit_width_messages(self.resolution)

        try:
            processed, grid = run_pipeline(image_path, self.width, self.mode)
        except ASCIIArtError as e:
            print(e, file=sys.stderr)
            return 1

        self.display.render(grid, processed.original)
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-art",
        description="Convert images to colorized ASCII art in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ascii-art photo.png                 Fit to the terminal width
  ascii-art photo.png -w 120          120 characters wide
  ascii-art photo.png --mode edge     Draw edges only

Modes (use --mode option):
  standard  - Brightness mapped to: .:-=+*#%@
  edge      - Canny edges drawn with '#'
"""
    )

    parser.add_argument(
        "image",
        help="Path to the input image file (PNG, JPEG, ...)"
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        help="Override the output width in characters (default: terminal width)"
    )
    parser.add_argument(
        "-m", "--mode",
        default="standard",
        help="Rendering mode: 'standard' or 'edge' (default: standard)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    app = ASCIIArtApp(width=args.width, mode=args.mode)
    return app.convert_image(args.image)


if __name__ == "__main__":
    sys.exit(main())

"""
Error types raised by the conversion pipeline.

Every error carries its user-facing message, so the CLI can print
``str(err)`` as-is and exit non-zero.
"""


class ASCIIArtError(Exception):
    """Base class for all pipeline failures."""


class ImageLoaderError(ASCIIArtError):
    """Raised when an image cannot be loaded or prepared for conversion."""


class ImageNotFoundError(ImageLoaderError):
    """The image path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Could not find image file "{path}".')


class UnsupportedFormatError(ImageLoaderError):
    """The file exists but is not an image format we can read."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Unsupported image format for file "{path}".')


class InvalidDimensionsError(ImageLoaderError):
    """A width or height of zero was requested or found."""


class DecodeFailedError(ImageLoaderError):
    """The image format was recognised but the data could not be decoded."""


class ImageIOError(ImageLoaderError):
    """Any other I/O failure while reading the image."""


class UnknownModeError(ASCIIArtError, ValueError):
    """An unrecognised conversion mode was requested."""

    def __init__(self, mode: str, choices=("standard", "edge")):
        self.mode = mode
        self.choices = tuple(choices)
        valid = " or ".join(f"'{choice}'" for choice in self.choices)
        super().__init__(f"Unknown mode '{mode}'. Use {valid}.")

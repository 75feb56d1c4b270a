"""
Image loading and preprocessing.

Decodes an image file with Pillow and resizes it to the output width,
compressing the height because terminal cells are about twice as tall
as they are wide.
"""

import math
from dataclasses import dataclass
import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import (
    DecodeFailedError,
    ImageIOError,
    ImageNotFoundError,
    InvalidDimensionsError,
    UnsupportedFormatError,
)

# Terminal characters are roughly 2x taller than wide
VERTICAL_COMPRESSION = 2


@dataclass
class ProcessedImage:
    """Co-sized buffers ready for conversion and rendering."""
    gray: np.ndarray      # (height, width) uint8
    original: np.ndarray  # (height, width, 3) uint8 RGB


def load_image(path: str) -> Image.Image:
    """
    Open and fully decode an image file.

    Args:
        path: Path to image file

    Returns:
        Decoded PIL Image

    Raises:
        ImageNotFoundError: The file does not exist
        UnsupportedFormatError: Pillow does not recognise the format
        DecodeFailedError: The data is corrupt or exceeds size limits
        ImageIOError: Any other OS-level failure
    """
    try:
        image = Image.open(path)
    except FileNotFoundError:
        raise ImageNotFoundError(path)
    except UnidentifiedImageError:
        raise UnsupportedFormatError(path)
    except Image.DecompressionBombError as e:
        raise DecodeFailedError(f'Image limits exceeded for "{path}": {e}')
    except OSError as e:
        raise ImageIOError(f'I/O error while accessing "{path}": {e}')

    # Image.open is lazy; force the decode so corrupt data fails here.
    # The file is closed on every path once the block exits.
    with image:
        try:
            image.load()
        except Image.DecompressionBombError as e:
            raise DecodeFailedError(f'Image limits exceeded for "{path}": {e}')
        except (OSError, SyntaxError, ValueError) as e:
            raise DecodeFailedError(f'Failed to decode image "{path}": {e}')

        return image.copy()


def target_height(original_width: int, original_height: int, target_width: int) -> int:
    """Output height in rows for a given output width, at least 1."""
    aspect_ratio = original_height / original_width
    height = math.floor(aspect_ratio * target_width / VERTICAL_COMPRESSION + 0.5)
    return max(1, int(height))


def preprocess_image(image: Image.Image, target_width: int) -> ProcessedImage:
    """
    Resize an image to the target width and split it into buffers.

    Args:
        image: Decoded PIL Image
        target_width: Output width in characters

    Returns:
        ProcessedImage with grayscale and RGB buffers of identical size

    Raises:
        InvalidDimensionsError: If target_width or an image dimension is zero
    """
    if target_width <= 0:
        raise InvalidDimensionsError("Target width must be greater than zero.")

    original_width, original_height = image.size
    if original_width == 0 or original_height == 0:
        raise InvalidDimensionsError("Input image has invalid dimensions.")

    height = target_height(original_width, original_height, target_width)

    # Drop alpha and palettes before resampling
    rgb = image.convert("RGB")
    resized = rgb.resize((target_width, height), Image.Resampling.LANCZOS)

    return ProcessedImage(
        gray=np.array(resized.convert("L")),
        original=np.array(resized),
    )

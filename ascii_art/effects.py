"""
Edge detection for line-art style ASCII output.

Wraps OpenCV's Canny detector, whose output map holds only
0 (no edge) and 255 (edge).
"""

from typing import Union
import cv2
import numpy as np
from PIL import Image


class EdgeDetector:
    """Canny edge detection with fixed hysteresis thresholds."""

    LOW_THRESHOLD = 50
    HIGH_THRESHOLD = 100

    def __init__(
        self,
        low_threshold: int = LOW_THRESHOLD,
        high_threshold: int = HIGH_THRESHOLD
    ):
        """
        Initialize edge detector.

        Args:
            low_threshold: Low hysteresis threshold for Canny
            high_threshold: High hysteresis threshold for Canny
        """
        self.low_threshold = low_threshold
        self.high_threshold = high_threshold

    def detect(self, image: Union[np.ndarray, Image.Image]) -> np.ndarray:
        """
        Apply Canny edge detection.

        Args:
            image: Grayscale buffer, or a PIL Image (converted to grayscale)

        Returns:
            uint8 buffer of the same height and width, every sample 0 or 255
        """
        if isinstance(image, Image.Image):
            image = image.convert("L")

        arr = np.ascontiguousarray(image, dtype=np.uint8)
        return cv2.Canny(arr, self.low_threshold, self.high_threshold)

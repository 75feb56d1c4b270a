import unittest

import numpy as np

from ascii_art.converter import (
    ASCIIConverter,
    CharacterSets,
    brightness_to_char,
    build_grid,
    convert_to_ascii,
    detect_and_convert,
    edge_to_char,
)
from ascii_art.errors import InvalidDimensionsError, UnknownModeError


class TestBrightnessToChar(unittest.TestCase):
    def test_boundary_values(self):
        self.assertEqual(brightness_to_char(0), " ")
        self.assertEqual(brightness_to_char(127), "=")
        self.assertEqual(brightness_to_char(255), "@")

    def test_intermediate_values(self):
        expected = {25: ".", 50: ":", 75: "-", 100: "=", 130: "+", 180: "*", 230: "%"}
        for brightness, char in expected.items():
            with self.subTest(brightness=brightness):
                self.assertEqual(brightness_to_char(brightness), char)

    def test_monotonic_over_full_range(self):
        ramp = CharacterSets.STANDARD
        indices = [ramp.index(brightness_to_char(b)) for b in range(256)]
        self.assertEqual(indices, sorted(indices))
        self.assertEqual(set(indices), set(range(len(ramp))))

    def test_accepts_numpy_samples(self):
        self.assertEqual(brightness_to_char(np.uint8(255)), "@")


class TestEdgeToChar(unittest.TestCase):
    def test_edge_and_non_edge(self):
        self.assertEqual(edge_to_char(255), "#")
        self.assertEqual(edge_to_char(0), " ")

    def test_non_binary_values_are_blank(self):
        for value in range(255):
            with self.subTest(value=value):
                self.assertEqual(edge_to_char(value), " ")


class TestBuildGrid(unittest.TestCase):
    def test_rejects_zero_dimensions(self):
        for width, height in ((0, 3), (3, 0), (0, 0)):
            with self.assertRaises(InvalidDimensionsError) as ctx:
                build_grid(width, height, lambda x, y: 0, brightness_to_char)
            self.assertEqual(str(ctx.exception), "Image dimensions must be greater than zero.")

    def test_row_major_order(self):
        samples = [[0, 1, 2], [10, 11, 12]]
        grid = build_grid(3, 2, lambda x, y: samples[y][x], str)
        self.assertEqual(grid, [["0", "1", "2"], ["10", "11", "12"]])

    def test_dimensions(self):
        grid = build_grid(7, 4, lambda x, y: 0, brightness_to_char)
        self.assertEqual(len(grid), 4)
        self.assertTrue(all(len(row) == 7 for row in grid))


class TestConvertToAscii(unittest.TestCase):
    def test_dimensions_match(self):
        gray = np.full((5, 10), 128, dtype=np.uint8)
        grid = convert_to_ascii(gray)
        self.assertEqual(len(grid), 5)
        self.assertEqual(len(grid[0]), 10)

    def test_fully_black_image(self):
        grid = convert_to_ascii(np.zeros((3, 4), dtype=np.uint8))
        self.assertTrue(all(ch == " " for row in grid for ch in row))

    def test_fully_white_image(self):
        grid = convert_to_ascii(np.full((3, 4), 255, dtype=np.uint8))
        self.assertTrue(all(ch == "@" for row in grid for ch in row))

    def test_gradient(self):
        gray = np.array([[0, 127, 255]], dtype=np.uint8)
        self.assertEqual(convert_to_ascii(gray), [[" ", "=", "@"]])

    def test_rejects_empty_buffer(self):
        with self.assertRaises(InvalidDimensionsError):
            convert_to_ascii(np.zeros((0, 0), dtype=np.uint8))


class TestDetectAndConvert(unittest.TestCase):
    def test_dimensions_match(self):
        grid = detect_and_convert(np.full((5, 10), 128, dtype=np.uint8))
        self.assertEqual(len(grid), 5)
        self.assertEqual(len(grid[0]), 10)

    def test_black_image_has_no_edges(self):
        grid = detect_and_convert(np.zeros((3, 4), dtype=np.uint8))
        self.assertTrue(all(ch == " " for row in grid for ch in row))

    def test_square_outline_is_drawn(self):
        gray = np.zeros((20, 20), dtype=np.uint8)
        gray[5:15, 5:15] = 255
        grid = detect_and_convert(gray)
        chars = {ch for row in grid for ch in row}
        self.assertIn("#", chars)
        self.assertLessEqual(chars, {"#", " "})

    def test_rejects_empty_buffer_before_detection(self):
        with self.assertRaises(InvalidDimensionsError):
            detect_and_convert(np.zeros((0, 0), dtype=np.uint8))


class TestASCIIConverter(unittest.TestCase):
    def test_unknown_mode(self):
        with self.assertRaises(UnknownModeError) as ctx:
            ASCIIConverter(mode="invalid")
        self.assertEqual(str(ctx.exception), "Unknown mode 'invalid'. Use 'standard' or 'edge'.")

    def test_standard_mode(self):
        converter = ASCIIConverter()
        grid = converter.convert(np.full((2, 3), 255, dtype=np.uint8))
        self.assertEqual(grid, [["@"] * 3] * 2)

    def test_edge_mode(self):
        converter = ASCIIConverter(mode="edge")
        grid = converter.convert(np.zeros((3, 4), dtype=np.uint8))
        self.assertEqual(grid, [[" "] * 4] * 3)


if __name__ == "__main__":
    unittest.main()

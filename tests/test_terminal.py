import os
import unittest
from unittest.mock import patch

from ascii_art import terminal
from ascii_art.terminal import (
    WidthResolution,
    WidthSource,
    compute_output_width,
    get_terminal_size,
    resolve_output_width,
)


class TestComputeOutputWidth(unittest.TestCase):
    def test_user_width_override(self):
        self.assertEqual(
            compute_output_width(120, 100),
            WidthResolution(120, WidthSource.USER)
        )

    def test_user_width_below_minimum_is_kept(self):
        self.assertEqual(compute_output_width(10, None).width, 10)

    def test_margin_applied(self):
        self.assertEqual(
            compute_output_width(None, 100),
            WidthResolution(98, WidthSource.AUTO_DETECTED)
        )

    def test_minimum_width_enforced(self):
        self.assertEqual(
            compute_output_width(None, 30),
            WidthResolution(40, WidthSource.AUTO_DETECTED)
        )
        self.assertEqual(compute_output_width(None, 1).width, 40)

    def test_fallback(self):
        self.assertEqual(
            compute_output_width(None, None),
            WidthResolution(80, WidthSource.FALLBACK)
        )


class TestTerminalProbe(unittest.TestCase):
    @patch("ascii_art.terminal.os.get_terminal_size", side_effect=OSError)
    def test_not_a_terminal(self, _):
        self.assertIsNone(get_terminal_size())
        self.assertEqual(resolve_output_width().source, WidthSource.FALLBACK)

    @patch("ascii_art.terminal.os.get_terminal_size")
    def test_detected(self, mock_size):
        mock_size.return_value = os.terminal_size((132, 40))
        self.assertEqual(get_terminal_size(), (132, 40))
        self.assertEqual(
            resolve_output_width(),
            WidthResolution(130, WidthSource.AUTO_DETECTED)
        )

    @patch("ascii_art.terminal.os.get_terminal_size")
    def test_zero_columns_is_not_detected(self, mock_size):
        mock_size.return_value = os.terminal_size((0, 0))
        self.assertIsNone(get_terminal_size())

    @patch.object(terminal, "get_terminal_size", return_value=(200, 50))
    def test_user_width_skips_detection_result(self, _):
        self.assertEqual(
            resolve_output_width(60),
            WidthResolution(60, WidthSource.USER)
        )


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the ANSI formatters.
"""

import os
import unittest
from unittest.mock import patch

from devlog import colors


class TestColors(unittest.TestCase):

    def test_ansi_wraps_text(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(colors.ansi('33')('hi'), '\033[33mhi\033[0m')
            self.assertEqual(colors.yellow('hi'), '\033[33mhi\033[0m')

    def test_no_color(self):
        with patch.dict(os.environ, {'NO_COLOR': '1'}, clear=True):
            self.assertEqual(colors.red('hi'), 'hi')

    def test_named_formatter(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(colors.named_formatter('Grey')('x'), '\033[90mx\033[0m')
            self.assertEqual(colors.named_formatter('gray')('x'), '\033[90mx\033[0m')

    def test_named_formatter_unknown(self):
        self.assertIsNone(colors.named_formatter('chartreuse'))
        self.assertIsNone(colors.named_formatter(''))
        self.assertIsNone(colors.named_formatter(None))


if __name__ == '__main__':
    unittest.main()

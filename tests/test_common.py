"""
Unit tests for shared helpers and constants.
"""

import logging
import unittest

import numpy as np

from glbaccessor.common import (
    BUFFER_ALIGNMENT,
    INVALID_INDEX,
    get_logger,
    log_debug_level,
    padding_for,
    region_index,
)


class TestCommon(unittest.TestCase):
    """Test region references, padding and logger setup."""

    def test_region_index(self):
        """Region references resolve to integer ids."""
        self.assertEqual(region_index(None), INVALID_INDEX)
        self.assertEqual(region_index(7), 7)
        self.assertEqual(region_index(np.int64(2)), 2)

        class Region:
            ix = 4

        self.assertEqual(region_index(Region()), 4)

    def test_region_index_rejects_bool(self):
        """A bool is not accepted as a region id."""
        with self.assertRaises(TypeError):
            region_index(True)
        with self.assertRaises(TypeError):
            region_index(False)

    def test_padding_for(self):
        """Padding brings sizes up to the alignment."""
        self.assertEqual(BUFFER_ALIGNMENT, 4)
        self.assertEqual([padding_for(n) for n in range(6)], [0, 3, 2, 1, 0, 3])
        self.assertEqual(padding_for(5, 8), 3)

    def test_get_logger_adds_one_handler(self):
        """Repeated calls reuse the same handler."""
        logger = get_logger("glbaccessor.test_common")
        get_logger("glbaccessor.test_common")

        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.INFO)

    def test_log_debug_level(self):
        """The named logger switches to DEBUG."""
        get_logger("glbaccessor.test_debug")
        log_debug_level("glbaccessor.test_debug")

        self.assertEqual(logging.getLogger("glbaccessor.test_debug").level, logging.DEBUG)
        package_logger = logging.getLogger("glbaccessor")
        self.assertEqual(package_logger.level, logging.DEBUG)
        self.assertEqual(len(package_logger.handlers), 1)


if __name__ == '__main__':
    unittest.main()

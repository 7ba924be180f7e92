"""
Unit tests for the zero predicate.
"""

import unittest
import numpy as np

from glbaccessor.zero import is_zero, zero_mask
from glbaccessor.gltype import GLT_FLOAT, GLT_VEC2F, GLT_VEC3F, GLT_VEC4F


class TestZeroPredicate(unittest.TestCase):
    """Test which elements count as zero."""

    def test_scalar_strict_bound(self):
        """Scalars are zero only strictly below the epsilon."""
        self.assertTrue(is_zero(0.0, GLT_FLOAT))
        self.assertTrue(is_zero(5e-5, GLT_FLOAT))
        self.assertTrue(is_zero(-5e-5, GLT_FLOAT))
        self.assertFalse(is_zero(1e-4, GLT_FLOAT))
        self.assertFalse(is_zero(-1e-4, GLT_FLOAT))
        self.assertFalse(is_zero(-5.0, GLT_FLOAT))

    def test_vector_inclusive_bound(self):
        """Vector components may equal the epsilon and still be zero."""
        self.assertTrue(is_zero((1e-5, -1e-5, 0.0), GLT_VEC3F))
        self.assertTrue(is_zero((1e-4, -1e-4, 1e-4), GLT_VEC3F))
        self.assertFalse(is_zero((0.0, 0.0, 2e-4), GLT_VEC3F))
        self.assertTrue(is_zero((0.0, 0.0, 0.0, 1e-4), GLT_VEC4F))
        self.assertFalse(is_zero((0.0, 0.0, 0.0, 1.0), GLT_VEC4F))

    def test_other_shapes_use_vector_rule(self):
        """Two-component vectors follow the inclusive rule."""
        self.assertTrue(is_zero((1e-4, 0.0), GLT_VEC2F))
        self.assertFalse(is_zero((0.0, 0.01), GLT_VEC2F))

    def test_zero_mask(self):
        """zero_mask gives one flag per element."""
        mask = zero_mask([(0, 0, 0), (1, 0, 0), (0, 1e-5, 0)], GLT_VEC3F)
        np.testing.assert_array_equal(mask, [True, False, True])

        mask = zero_mask(np.array([0.0, 3.0, -2e-5]), GLT_FLOAT)
        np.testing.assert_array_equal(mask, [True, False, True])

    def test_zero_mask_empty(self):
        """An empty input gives an empty mask."""
        self.assertEqual(zero_mask([], GLT_VEC3F).shape, (0,))


if __name__ == '__main__':
    unittest.main()

import numpy as np
from specfun.precision import EXTENDED, MAX_FLOAT, narrow, narrow_array
from .tools import TestCase


class TestNarrowing(TestCase):
    def test_values_in_range_are_converted(self):
        self.assertEqual(narrow(EXTENDED(0.25)), 0.25)
        self.assertIsInstance(narrow(EXTENDED(-3.0)), float)

    def test_infinities_saturate(self):
        self.assertEqual(narrow(EXTENDED(np.inf)), MAX_FLOAT)
        self.assertEqual(narrow(EXTENDED(-np.inf)), -MAX_FLOAT)

    def test_values_beyond_double_range_saturate(self):
        big = EXTENDED(MAX_FLOAT) * 4
        self.assertEqual(narrow(big), MAX_FLOAT)
        self.assertEqual(narrow(-big), -MAX_FLOAT)

    def test_nan_is_preserved(self):
        self.assertTrue(np.isnan(narrow(EXTENDED(np.nan))))

    def test_arrays(self):
        values = np.array([1.0, np.inf, -np.inf, np.nan, -2.0], dtype=EXTENDED)
        narrowed = narrow_array(values)
        self.assertEqual(narrowed.dtype, np.float64)
        self.assertEqual(narrowed[0], 1.0)
        self.assertEqual(narrowed[1], MAX_FLOAT)
        self.assertEqual(narrowed[2], -MAX_FLOAT)
        self.assertTrue(np.isnan(narrowed[3]))
        self.assertEqual(narrowed[4], -2.0)

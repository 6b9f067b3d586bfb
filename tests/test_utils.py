import unittest

import numpy as np

from cachematrix.utils import frozen_copy, identical


class TestIdentical(unittest.TestCase):
    def test_same_values_in_different_arrays(self):
        self.assertTrue(identical(np.eye(3), np.eye(3).copy()))

    def test_shape_difference(self):
        self.assertFalse(identical(np.eye(2), np.eye(3)))
        self.assertFalse(identical(np.zeros((2, 3)), np.zeros((3, 2))))

    def test_one_ulp_difference(self):
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        b = a.copy()
        b[0, 1] = np.nextafter(2.0, 3.0)
        self.assertFalse(identical(a, b))

    def test_nan_and_signed_zero(self):
        self.assertTrue(identical(np.array([[np.nan]]), np.array([[np.nan]])))
        self.assertTrue(identical(np.array([[-0.0]]), np.array([[0.0]])))


class TestFrozenCopy(unittest.TestCase):
    def test_copy_is_independent_and_read_only(self):
        a = np.eye(2)
        b = frozen_copy(a)
        a[0, 0] = 3.0

        self.assertEqual(b[0, 0], 1.0)
        self.assertFalse(b.flags.writeable)


if __name__ == "__main__":
    unittest.main()

import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as np

from src.ndtensor.domain._errors import ConsumedTensorError
from src.ndtensor.domain._numeric import decimal, float32, float64, fraction, int64
from src.ndtensor.infrastructure._tensor import Tensor


class TestTensorToNumpy(unittest.TestCase):
    def test_float64_round_trip(self):
        rng = np.random.default_rng(0)
        x = rng.standard_normal((2, 3, 4))
        t = Tensor.from_numpy(x)
        self.assertIs(t.dtype, float64)
        self.assertEqual(t.shape, (2, 3, 4))
        y = t.to_numpy()
        self.assertEqual(y.dtype, np.float64)
        np.testing.assert_array_equal(y, x)

    def test_float32_is_preserved(self):
        x = np.arange(6, dtype=np.float32).reshape(2, 3)
        t = Tensor.from_numpy(x)
        self.assertIs(t.dtype, float32)
        self.assertEqual(t.to_numpy().dtype, np.float32)

    def test_integer_arrays_map_to_int64(self):
        for np_dtype in (np.int8, np.int32, np.uint16):
            with self.subTest(np_dtype=np_dtype):
                t = Tensor.from_numpy(np.arange(4, dtype=np_dtype))
                self.assertIs(t.dtype, int64)
                self.assertEqual(t.data(), (0, 1, 2, 3))

    def test_explicit_dtype_casts(self):
        t = Tensor.from_numpy(np.array([1.7, 2.2]), dtype="int64")
        self.assertIs(t.dtype, int64)
        self.assertEqual(t.data(), (1, 2))

    def test_zero_dim_becomes_single_element(self):
        t = Tensor.from_numpy(np.float64(3.5))
        self.assertEqual(t.shape, (1,))
        self.assertEqual(t.data(), (3.5,))

    def test_from_numpy_copies(self):
        x = np.zeros((2, 2))
        t = Tensor.from_numpy(x)
        x[0, 0] = 5.0
        self.assertEqual(t[0, 0], 0.0)

    def test_to_numpy_copies(self):
        t = Tensor.zeros([3])
        y = t.to_numpy()
        y[0] = 1.0
        self.assertEqual(t[0], 0.0)

    def test_exotic_element_types_become_object_arrays(self):
        t = Tensor.range(3, dtype=fraction)
        y = t.to_numpy()
        self.assertEqual(y.dtype, object)
        self.assertEqual(list(y), [Fraction(0), Fraction(1), Fraction(2)])

        d = Tensor.ones([2], dtype=decimal).to_numpy()
        self.assertEqual(d.dtype, object)
        self.assertEqual(d[1], Decimal(1))

    def test_unregistered_dtype_warns(self):
        with self.assertWarns(RuntimeWarning):
            t = Tensor.from_numpy(np.array([True, False]))
        self.assertEqual(t.dtype.zero, False)
        self.assertEqual(t.data(), (True, False))

    def test_to_numpy_on_consumed_tensor_raises(self):
        t = Tensor.zeros([2, 2])
        t.flatten()
        with self.assertRaises(ConsumedTensorError):
            t.to_numpy()


class TestTensorClone(unittest.TestCase):
    def test_clone_is_independent(self):
        t = Tensor.range(4).reshaped([2, 2])
        c = t.clone()
        c[0, 0] = 42.0
        self.assertEqual(t[0, 0], 0.0)
        self.assertEqual(c.shape, t.shape)
        self.assertIs(c.dtype, t.dtype)

    def test_tolist_nests_by_shape(self):
        t = Tensor.range(6, dtype=int).reshaped([2, 3])
        self.assertEqual(t.tolist(), [[0, 1, 2], [3, 4, 5]])
        self.assertEqual(t.tolist(), np.arange(6).reshape(2, 3).tolist())


if __name__ == "__main__":
    unittest.main()

import unittest

import numpy as np

from src.ndtensor.domain._errors import (
    ConsumedTensorError,
    InvalidAxisError,
    ShapeMismatchError,
)
from src.ndtensor.infrastructure._tensor import Tensor


class TestTensorReshaped(unittest.TestCase):
    def test_reshaped_with_wildcard(self):
        t = Tensor.range(24).reshaped([2, -1, 4])
        self.assertEqual(t.shape, (2, 3, 4))
        self.assertEqual(t.strides(), (12, 4, 1))

    def test_round_trip_preserves_data(self):
        original = Tensor.range(24)
        expected = original.data()
        for shape in ([2, 3, 4], [4, 6], [24, 1], [1, 2, 1, 12], [-1, 8]):
            with self.subTest(shape=shape):
                t = Tensor.range(24).reshaped(shape).reshaped([24])
                self.assertEqual(t.data(), expected)

    def test_reshaped_consumes_receiver(self):
        t = Tensor.range(6)
        r = t.reshaped([2, 3])
        self.assertEqual(r.shape, (2, 3))
        with self.assertRaises(ConsumedTensorError):
            t.data()
        with self.assertRaises(ConsumedTensorError):
            _ = t.shape
        with self.assertRaises(RuntimeError):
            t.slice([])

    def test_failed_reshape_leaves_receiver_usable(self):
        t = Tensor.range(6)
        with self.assertRaises(ShapeMismatchError):
            t.reshaped([4, 2])
        with self.assertRaises(ShapeMismatchError):
            t.reshaped([-1, -1])
        self.assertEqual(t.shape, (6,))
        self.assertEqual(t.size(), 6)

    def test_repr_of_consumed_tensor(self):
        t = Tensor.range(4)
        t.flatten()
        self.assertEqual(repr(t), "Tensor(<consumed>)")


class TestTensorFlatten(unittest.TestCase):
    def test_flatten_keeps_row_major_order(self):
        t = Tensor.range(12, dtype=int).reshaped([3, 4])
        f = t.flatten()
        self.assertEqual(f.shape, (12,))
        self.assertEqual(f.data(), tuple(range(12)))

    def test_flatten_consumes_receiver(self):
        t = Tensor.zeros([2, 2])
        t.flatten()
        with self.assertRaises(ConsumedTensorError):
            t.flatten()


class TestTensorSwapAxesTranspose(unittest.TestCase):
    def test_transpose_matches_numpy(self):
        t = Tensor.range(6).reshaped([2, 3])
        ref = np.arange(6, dtype=np.float64).reshape(2, 3)
        np.testing.assert_array_equal(t.transpose().to_numpy(), ref.T)
        np.testing.assert_array_equal(t.T.to_numpy(), ref.T)

    def test_transpose_twice_is_identity(self):
        for shape in ([2, 3], [1, 5], [4, 4], [0, 3]):
            with self.subTest(shape=shape):
                n = int(np.prod(shape))
                t = Tensor.range(n).reshaped(shape)
                self.assertEqual(t.transpose().transpose(), t)

    def test_transpose_requires_rank2(self):
        with self.assertRaises(InvalidAxisError):
            Tensor.range(4).transpose()
        with self.assertRaises(InvalidAxisError):
            Tensor.zeros([2, 2, 2]).transpose()

    def test_swapaxes_rank3(self):
        t = Tensor.range(24).reshaped([2, 3, 4])
        ref = np.arange(24, dtype=np.float64).reshape(2, 3, 4)
        out = t.swapaxes(0, 2)
        self.assertEqual(out.shape, (4, 3, 2))
        np.testing.assert_array_equal(out.to_numpy(), np.swapaxes(ref, 0, 2))

    def test_swapaxes_invalid(self):
        t = Tensor.zeros([2, 3])
        with self.assertRaises(InvalidAxisError):
            t.swapaxes(0, 0)
        with self.assertRaises(InvalidAxisError):
            t.swapaxes(0, 2)

    def test_swapaxes_does_not_alias(self):
        t = Tensor.zeros([2, 3])
        s = t.swapaxes(0, 1)
        s[0, 0] = 1.0
        self.assertEqual(t[0, 0], 0.0)


class TestTensorRavelUnravel(unittest.TestCase):
    def test_ravel_unravel_round_trip(self):
        t = Tensor.zeros([2, 3, 4])
        for k in range(t.size()):
            self.assertEqual(t.ravel_index(t.unravel_index(k)), k)

    def test_unravel_index_values(self):
        t = Tensor.zeros([2, 3, 4])
        self.assertEqual(t.unravel_index(23), (1, 2, 3))
        self.assertEqual(t.ravel_index((1, 0, 2)), 14)


if __name__ == "__main__":
    unittest.main()

import unittest
from unittest import TestCase

import numpy as np

from src.ndtensor.domain._errors import InvalidAxisError, ShapeMismatchError
from src.ndtensor.infrastructure._tensor import Tensor


# -----------------------------
# Helpers
# -----------------------------
def _tensor_from_numpy(arr: np.ndarray) -> Tensor:
    return Tensor.from_numpy(np.asarray(arr, dtype=np.float64))


class TestTensorConcat(TestCase):
    def test_concat_axis0_matches_numpy(self):
        a = _tensor_from_numpy(np.array([[1, 2], [3, 4]]))
        b = _tensor_from_numpy(np.array([[5, 6]]))

        y = Tensor.concat([a, b], axis=0)

        ref = np.concatenate([a.to_numpy(), b.to_numpy()], axis=0)
        self.assertEqual(y.shape, ref.shape)
        np.testing.assert_allclose(y.to_numpy(), ref, rtol=0, atol=0)

    def test_concat_axis1_matches_numpy(self):
        a = _tensor_from_numpy(np.array([[1, 2], [3, 4]]))
        b = _tensor_from_numpy(np.array([[5], [6]]))

        y = Tensor.concat([a, b], axis=1)

        ref = np.concatenate([a.to_numpy(), b.to_numpy()], axis=1)
        self.assertEqual(y.shape, ref.shape)
        np.testing.assert_allclose(y.to_numpy(), ref, rtol=0, atol=0)

    def test_concat_negative_axis_matches_numpy(self):
        rng = np.random.default_rng(1)
        a = _tensor_from_numpy(rng.standard_normal((2, 3, 4)))
        b = _tensor_from_numpy(rng.standard_normal((2, 3, 5)))

        y = Tensor.concat([a, b], axis=-1)

        ref = np.concatenate([a.to_numpy(), b.to_numpy()], axis=-1)
        self.assertEqual(y.shape, ref.shape)
        np.testing.assert_allclose(y.to_numpy(), ref, rtol=0, atol=0)

    def test_concat_middle_axis_three_inputs(self):
        rng = np.random.default_rng(2)
        arrs = [rng.standard_normal((2, k, 3)) for k in (1, 4, 2)]

        y = Tensor.concat([_tensor_from_numpy(a) for a in arrs], axis=1)

        np.testing.assert_allclose(y.to_numpy(), np.concatenate(arrs, axis=1))

    def test_concat_keeps_inputs_intact(self):
        a = Tensor.zeros([2])
        b = Tensor.ones([3])
        y = Tensor.concat([a, b])
        y[0] = 7.0
        self.assertEqual(a.data(), (0.0, 0.0))
        self.assertEqual(y.data(), (7.0, 0.0, 1.0, 1.0, 1.0))

    def test_concat_requires_non_empty(self):
        with self.assertRaises(ShapeMismatchError):
            _ = Tensor.concat([], axis=0)

    def test_concat_axis_out_of_bounds_raises(self):
        a = Tensor.ones([2, 3])
        b = Tensor.ones([2, 3])

        with self.assertRaises(InvalidAxisError):
            _ = Tensor.concat([a, b], axis=2)

        with self.assertRaises(InvalidAxisError):
            _ = Tensor.concat([a, b], axis=-3)

    def test_concat_shape_mismatch_non_axis_raises(self):
        a = Tensor.ones([2, 3])
        b = Tensor.ones([4, 3])

        # concat on axis=1 requires dim0 to match -> should raise
        with self.assertRaises(ShapeMismatchError):
            _ = Tensor.concat([a, b], axis=1)

    def test_concat_rank_mismatch_raises(self):
        with self.assertRaises(ShapeMismatchError):
            _ = Tensor.concat([Tensor.ones([2, 3]), Tensor.ones([3])], axis=0)


if __name__ == "__main__":
    unittest.main()

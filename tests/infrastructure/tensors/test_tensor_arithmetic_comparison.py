import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as np

from src.ndtensor.domain._errors import ShapeMismatchError
from src.ndtensor.domain._numeric import decimal, float64, fraction, int64
from src.ndtensor.infrastructure._tensor import Tensor


def _tensor_from_numpy(arr: np.ndarray) -> Tensor:
    return Tensor.from_numpy(np.asarray(arr, dtype=np.float64))


class TestTensorArithmetic(unittest.TestCase):
    def setUp(self) -> None:
        self.a_np = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        self.b_np = np.array([[0.5, -1.0, 2.0], [3.0, 0.25, -4.0]])
        self.a = _tensor_from_numpy(self.a_np)
        self.b = _tensor_from_numpy(self.b_np)

    def test_tensor_tensor_ops_match_numpy(self):
        np.testing.assert_allclose((self.a + self.b).to_numpy(), self.a_np + self.b_np)
        np.testing.assert_allclose((self.a - self.b).to_numpy(), self.a_np - self.b_np)
        np.testing.assert_allclose((self.a * self.b).to_numpy(), self.a_np * self.b_np)
        np.testing.assert_allclose((self.a / self.b).to_numpy(), self.a_np / self.b_np)

    def test_scalar_ops_both_sides(self):
        np.testing.assert_allclose((self.a + 1).to_numpy(), self.a_np + 1)
        np.testing.assert_allclose((2 * self.a).to_numpy(), 2 * self.a_np)
        np.testing.assert_allclose((10 - self.a).to_numpy(), 10 - self.a_np)
        np.testing.assert_allclose((1 / self.a).to_numpy(), 1 / self.a_np)
        np.testing.assert_allclose((self.a / 4).to_numpy(), self.a_np / 4)
        np.testing.assert_allclose((-self.a).to_numpy(), -self.a_np)

    def test_operands_are_not_modified(self):
        before = self.a.data()
        _ = self.a + self.b
        _ = self.a * 3
        self.assertEqual(self.a.data(), before)

    def test_shape_mismatch_raises(self):
        c = Tensor.zeros([3, 2])
        with self.assertRaises(ShapeMismatchError):
            _ = self.a + c

    def test_unsupported_operand_type(self):
        with self.assertRaises(TypeError):
            _ = self.a + "x"

    def test_int_division_promotes_to_float(self):
        t = Tensor.range(4, dtype=int) + 1
        self.assertIs(t.dtype, int64)
        out = t / 2
        self.assertIs(out.dtype, float64)
        self.assertEqual(out.data(), (0.5, 1.0, 1.5, 2.0))

    def test_int_times_float_scalar_is_float(self):
        out = Tensor.range(3, dtype=int) * 0.5
        self.assertIs(out.dtype, float64)

    def test_fraction_arithmetic_stays_exact(self):
        t = Tensor.range(3, dtype=fraction) + Tensor.ones([3], dtype=fraction)
        out = t / 3
        self.assertIs(out.dtype, fraction)
        self.assertEqual(out.data(), (Fraction(1, 3), Fraction(2, 3), Fraction(1)))

    def test_int_tensor_takes_scalar_element_type(self):
        t = Tensor.range(3, dtype=int)

        out = t * Fraction(1, 2)
        self.assertIs(out.dtype, fraction)
        self.assertEqual(out.data(), (Fraction(0), Fraction(1, 2), Fraction(1)))

        out = t + Decimal("0.5")
        self.assertIs(out.dtype, decimal)
        self.assertEqual(out.data(), (Decimal("0.5"), Decimal("1.5"), Decimal("2.5")))

        out = t * np.float32(1.5)
        self.assertIs(out.dtype, float64)
        np.testing.assert_allclose(out.to_numpy(), [0.0, 1.5, 3.0])

    def test_integer_like_scalars_keep_tensor_type(self):
        t = Tensor.range(3, dtype=int)
        self.assertIs((t + np.int64(2)).dtype, int64)
        self.assertIs((Tensor.range(3, dtype=fraction) * 2).dtype, fraction)
        self.assertEqual((Tensor.range(2, dtype="float32") * 2.0).dtype.name, "float32")

    def test_int_and_exact_tensors_promote(self):
        a = Tensor.range(2, dtype=int)
        b = Tensor.ones([2], dtype=fraction)
        self.assertIs((a + b).dtype, fraction)
        self.assertIs((b + a).dtype, fraction)


class TestTensorEquality(unittest.TestCase):
    def test_equal_tensors(self):
        self.assertEqual(Tensor.eye(2), Tensor([1.0, 0.0, 0.0, 1.0], shape=(2, 2)))

    def test_shape_difference(self):
        a = Tensor.zeros([2, 2])
        b = Tensor.zeros([4])
        self.assertNotEqual(a, b)
        self.assertTrue(a != b)

    def test_value_difference(self):
        a = Tensor.zeros([3])
        b = Tensor([0.0, 1.0, 0.0])
        self.assertFalse(a == b)

    def test_equality_ignores_dtype_descriptor(self):
        self.assertEqual(Tensor.range(3, dtype=int), Tensor.range(3))

    def test_compare_with_non_tensor(self):
        self.assertFalse(Tensor.zeros([1]) == 0.0)
        self.assertTrue(Tensor.zeros([1]) != [0.0])

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Tensor.zeros([1]))

    def test_allclose(self):
        a = Tensor([1.0, 2.0, 3.0])
        b = Tensor([1.0 + 1e-9, 2.0, 3.0 - 1e-9])
        self.assertTrue(a.allclose(b))
        self.assertFalse(a.allclose(Tensor([1.0, 2.1, 3.0])))
        self.assertFalse(a.allclose(Tensor.zeros([1, 3])))
        self.assertFalse(
            Tensor([float("inf")]).allclose(Tensor([float("-inf")]))
        )
        self.assertTrue(Tensor([float("inf")]).allclose(Tensor([float("inf")])))


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for construction tests")
class ConstructionTests(unittest.TestCase):
    def _all_indices(self, shape):
        if not shape:
            yield ()
            return
        for i in range(shape[0]):
            for rest in self._all_indices(shape[1:]):
                yield (i,) + rest

    def test_construct_nd_allocates_zero_filled_structure(self) -> None:
        from objarray_jax import ObjectArray, construct_nd, dimension_count, dimensionality

        m = construct_nd([3])
        self.assertIsInstance(m, ObjectArray)
        self.assertEqual(list(m), [0.0, 0.0, 0.0])
        self.assertEqual(dimension_count(m, 0), 3)

        for shape in ([1], [2, 3], [2, 1, 4], [1, 1, 1, 1]):
            with self.subTest(shape=shape):
                self.assertEqual(dimensionality(construct_nd(shape)), len(shape))

    def test_construct_nd_allocates_independent_children(self) -> None:
        from objarray_jax import construct_nd

        m = construct_nd([2, 2])
        self.assertIsNot(m[0], m[1])
        m[0][0] = 5
        self.assertEqual(m[1][0], 0.0)

    def test_construct_nd_rejects_empty_shape(self) -> None:
        from objarray_jax import InvalidDimensionalityError, construct_nd

        with self.assertRaises(InvalidDimensionalityError):
            construct_nd([])
        with self.assertRaises(InvalidDimensionalityError):
            construct_nd([2, -1])
        with self.assertRaises(InvalidDimensionalityError):
            construct_nd([1.5])
        with self.assertRaises(InvalidDimensionalityError):
            construct_nd([0, 3])

    def test_construct_from_nested_lists(self) -> None:
        from objarray_jax import ObjectArray, construct_object_array

        m = construct_object_array([[1, 2], [3, 4]])
        self.assertIsInstance(m, ObjectArray)
        self.assertIsInstance(m[0], ObjectArray)
        self.assertEqual(m, [[1, 2], [3, 4]])

    def test_construct_from_scalar_returns_bare_scalar(self) -> None:
        from objarray_jax import construct_object_array, object_array_coerce

        self.assertEqual(construct_object_array(7), 7)
        self.assertEqual(object_array_coerce("text"), "text")

    def test_construct_from_jax_array_unwraps_leaves(self) -> None:
        import jax.numpy as jnp

        from objarray_jax import construct_object_array, shape

        m = construct_object_array(jnp.arange(6).reshape(2, 3))
        self.assertEqual(shape(m), (2, 3))
        self.assertEqual(m, [[0, 1, 2], [3, 4, 5]])
        self.assertIsInstance(m[1][2], int)

    def test_coerce_then_construct_round_trip(self) -> None:
        from objarray_jax import construct_object_array, get_nd, object_array_coerce

        source = [[[1, "a"], [None, 2.5]], [[(1, 2), 3], [4, 5]]]
        m = construct_object_array(object_array_coerce(source))
        for idx in self._all_indices((2, 2, 2)):
            with self.subTest(idx=idx):
                want = source[idx[0]][idx[1]][idx[2]]
                got = get_nd(m, idx)
                if isinstance(want, tuple):
                    self.assertEqual(tuple(got), want)
                else:
                    self.assertEqual(got, want)

    def test_coerce_does_not_alias_source_containers(self) -> None:
        from objarray_jax import ObjectArray, object_array_coerce

        source = ObjectArray([ObjectArray([1, 2]), ObjectArray([3, 4])])
        coerced = object_array_coerce(source)
        self.assertEqual(coerced, source)
        self.assertIsNot(coerced[0], source[0])

    def test_factories(self) -> None:
        from objarray_jax import construct_matrix, new_matrix, new_matrix_nd, new_vector, shape, supports_dimensionality

        self.assertEqual(new_vector(2), [0.0, 0.0])
        self.assertEqual(new_vector(0), [])
        self.assertEqual(shape(new_matrix(2, 3)), (2, 3))
        self.assertEqual(shape(new_matrix_nd((2, 3, 4))), (2, 3, 4))
        self.assertEqual(construct_matrix([[1], [2]]), [[1], [2]])
        self.assertTrue(supports_dimensionality(1))
        self.assertTrue(supports_dimensionality(5))
        self.assertFalse(supports_dimensionality(0))


if __name__ == "__main__":
    unittest.main()

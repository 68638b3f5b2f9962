from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for shape tests")
class ShapeIntrospectionTests(unittest.TestCase):
    def test_dimensionality_and_shape_follow_first_child(self) -> None:
        from objarray_jax import construct_object_array, dimensionality, shape

        m = construct_object_array([[[1, 2, 3]], [[4, 5, 6]]])
        self.assertEqual(dimensionality(m), 3)
        self.assertEqual(shape(m), (2, 1, 3))

    def test_irregular_shape_reports_first_child(self) -> None:
        from objarray_jax import ObjectArray, shape

        ragged = ObjectArray([ObjectArray([1, 2]), ObjectArray([3, 4, 5])])
        self.assertEqual(shape(ragged), (2, 2))

    def test_empty_container_is_one_dimensional(self) -> None:
        from objarray_jax import ObjectArray, dimension_count, dimensionality, is_vector, shape

        empty = ObjectArray()
        self.assertEqual(dimensionality(empty), 1)
        self.assertEqual(shape(empty), (0,))
        self.assertEqual(dimension_count(empty, 0), 0)
        self.assertTrue(is_vector(empty))

    def test_dimension_count_per_axis(self) -> None:
        from objarray_jax import InvalidAxisError, construct_nd, dimension_count

        m = construct_nd([2, 3, 4])
        self.assertEqual([dimension_count(m, axis) for axis in range(3)], [2, 3, 4])
        with self.assertRaises(InvalidAxisError):
            dimension_count(m, -1)
        with self.assertRaises(InvalidAxisError):
            dimension_count(m, 3)
        with self.assertRaises(InvalidAxisError):
            dimension_count(m, 1.0)

    def test_vector_scalar_and_element_type_flags(self) -> None:
        from objarray_jax import construct_nd, element_type, is_scalar, is_vector

        self.assertTrue(is_vector(construct_nd([4])))
        self.assertFalse(is_vector(construct_nd([2, 2])))
        self.assertFalse(is_scalar(construct_nd([1])))
        self.assertIs(element_type(construct_nd([1])), object)

    def test_jax_leaf_arrays_count_as_dimensions(self) -> None:
        import jax.numpy as jnp

        from objarray_jax import ObjectArray, dimensionality, is_vector, shape

        m = ObjectArray([jnp.zeros((3,)), jnp.zeros((3,))])
        self.assertEqual(dimensionality(m), 2)
        self.assertEqual(shape(m), (2, 3))
        self.assertFalse(is_vector(m))


if __name__ == "__main__":
    unittest.main()

"""objarray-jax public API."""

from __future__ import annotations

import os
from typing import Final

from .broadcast import broadcast
from .construction import (
    ZERO,
    construct_matrix,
    construct_nd,
    construct_object_array,
    new_matrix,
    new_matrix_nd,
    new_vector,
    object_array_coerce,
    supports_dimensionality,
)
from .conversion import convert_to_nested_sequence, mutable_matrix, to_jax
from .errors import (
    IncompatibleShapeError,
    IndexOutOfRangeError,
    InvalidAxisError,
    InvalidDimensionalityError,
    ObjectArrayError,
)
from .indexing import get_1d, get_2d, get_nd, is_mutable, set_1d, set_1d_mut, set_2d, set_2d_mut, set_nd, set_nd_mut
from .registry import (
    OBJECT_ARRAY_KEY,
    ArrayImplementation,
    ImplementationRegistry,
    ObjectArrayImplementation,
    default_registry,
    register_implementation,
)
from .shape import dimension_count, dimensionality, element_type, is_scalar, is_vector, shape
from .slicing import get_column, get_major_slice, get_major_slice_seq, get_major_slice_view, get_row, get_slice
from .values import ObjectArray

_AUTOREGISTER: Final[bool] = os.environ.get("OBJARRAY_JAX_DISABLE_AUTOREGISTER", "0") != "1"

if _AUTOREGISTER:
    register_implementation(ObjectArrayImplementation())

__all__ = [
    "ObjectArray",
    "ZERO",
    "construct_object_array",
    "construct_nd",
    "object_array_coerce",
    "new_vector",
    "new_matrix",
    "new_matrix_nd",
    "construct_matrix",
    "supports_dimensionality",
    "dimensionality",
    "shape",
    "dimension_count",
    "is_vector",
    "is_scalar",
    "element_type",
    "get_1d",
    "get_2d",
    "get_nd",
    "set_1d",
    "set_2d",
    "set_nd",
    "set_1d_mut",
    "set_2d_mut",
    "set_nd_mut",
    "is_mutable",
    "get_row",
    "get_column",
    "get_major_slice",
    "get_major_slice_view",
    "get_slice",
    "get_major_slice_seq",
    "broadcast",
    "convert_to_nested_sequence",
    "mutable_matrix",
    "to_jax",
    "OBJECT_ARRAY_KEY",
    "ArrayImplementation",
    "ImplementationRegistry",
    "ObjectArrayImplementation",
    "default_registry",
    "register_implementation",
    "ObjectArrayError",
    "InvalidDimensionalityError",
    "InvalidAxisError",
    "IndexOutOfRangeError",
    "IncompatibleShapeError",
]

"""Construction of object arrays from shapes, array-likes and foreign data."""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from typing import Final

from .errors import InvalidDimensionalityError
from .values import ObjectArray, dimensionality_of, get_0d, get_1d, major_slices, shape_of

# Leaf fill value for freshly allocated arrays. Element type stays unconstrained.
ZERO: Final[float] = 0.0


def _as_extent(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimensionalityError(f"Shape extents must be integers, got {value!r}")
    if isinstance(value, numbers.Integral):
        extent = int(value)
    else:
        real = float(value)
        if not real.is_integer():
            raise InvalidDimensionalityError(f"Shape extents must be integers, got {value!r}")
        extent = int(real)
    if extent < 0:
        raise InvalidDimensionalityError(f"Shape extents must be non-negative, got {extent}")
    return extent


def _as_shape(shape: Iterable[object]) -> tuple[int, ...]:
    dims = tuple(_as_extent(dim) for dim in shape)
    if 0 in dims:
        raise InvalidDimensionalityError(f"Nested object array shapes must be positive, got {list(dims)}")
    return dims


def construct_object_vector(length: object) -> ObjectArray:
    return ObjectArray([ZERO] * _as_extent(length))


def construct_nd(shape: Iterable[object]) -> ObjectArray:
    """Allocate a zero-filled nested object array with exactly ``shape``."""
    dims = _as_shape(shape)
    if len(dims) < 1:
        raise InvalidDimensionalityError(f"Can't make a nested object array of dimensionality: {len(dims)}")
    return _construct_nd(dims)


def _construct_nd(dims: tuple[int, ...]) -> ObjectArray:
    if len(dims) == 1:
        return construct_object_vector(dims[0])
    rest = dims[1:]
    return ObjectArray([_construct_nd(rest) for _ in range(dims[0])])


def construct_object_array(data: object) -> object:
    """Build an object array equivalent to the array-like ``data``.

    0-dimensional sources come back as bare scalars, not wrapped.
    """
    dims = dimensionality_of(data)
    if dims < 0:
        raise InvalidDimensionalityError(f"Can't construct an object array of dimensionality: {dims}")
    if dims == 0:
        return get_0d(data)
    if dims == 1:
        n = shape_of(data)[0]
        return ObjectArray([get_0d(get_1d(data, i)) for i in range(n)])
    return ObjectArray([construct_object_array(sl) for sl in major_slices(data)])


def object_array_coerce(param: object) -> object:
    """Coerce arbitrary nested data, recursing on major slices until scalars."""
    if dimensionality_of(param) > 0:
        return ObjectArray([object_array_coerce(sl) for sl in major_slices(param)])
    return get_0d(param)


def new_vector(length: object) -> ObjectArray:
    return construct_object_vector(length)


def new_matrix(rows: object, columns: object) -> ObjectArray:
    n_cols = _as_extent(columns)
    return ObjectArray([construct_object_vector(n_cols) for _ in range(_as_extent(rows))])


def new_matrix_nd(shape: Iterable[object]) -> ObjectArray:
    return construct_nd(shape)


def construct_matrix(data: object) -> object:
    return construct_object_array(data)


def supports_dimensionality(dims: int) -> bool:
    return dims >= 1

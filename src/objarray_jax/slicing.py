"""Row, column and arbitrary-axis slicing of object arrays."""

from __future__ import annotations

from .errors import InvalidDimensionalityError
from .values import ObjectArray, as_axis, as_index, dimensionality_of, get_0d, get_1d


def get_major_slice(m: ObjectArray, i: object) -> object:
    """Slot ``i`` by reference: an (N-1)-dimensional sub-array or a scalar."""
    return m[as_index(i, len(m))]


def get_row(m: ObjectArray, i: object) -> object:
    return get_major_slice(m, i)


def get_major_slice_view(m: ObjectArray, i: object) -> object:
    return get_major_slice(m, i)


def get_column(m: ObjectArray, i: object) -> ObjectArray:
    dims = dimensionality_of(m)
    if dims < 2:
        raise InvalidDimensionalityError(f"Can't take a column of an array with dimensionality: {dims}")
    return ObjectArray([get_1d(row, i) for row in m])


def get_slice(m: object, axis: object, i: object) -> object:
    """Slice at position ``i`` along ``axis``.

    Axis 0 is the major slice; higher axes rebuild the outer containers, so
    only the selected leaves or sub-arrays are shared with ``m``.
    """
    x = as_axis(axis, dimensionality_of(m))
    if x == 0:
        return get_1d(m, i)
    return ObjectArray([get_slice(child, x - 1, i) for child in m])


def get_major_slice_seq(m: ObjectArray) -> list[object]:
    if len(m) == 0:
        return []
    if dimensionality_of(m[0]) == 0:
        return [get_0d(v) for v in m]
    return list(m)

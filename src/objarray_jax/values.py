"""Object-array container type and the element collaborator.

Every operation in this package dispatches on how many dimensions remain.
The helpers here answer that question for *any* value: nested containers
(``ObjectArray``, ``list``, ``tuple``), array objects that expose ``ndim`` and
``shape`` (jax and numpy arrays), and plain scalars, which are 0-dimensional.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence

from .errors import IndexOutOfRangeError, InvalidAxisError, InvalidDimensionalityError


class ObjectArray(list):
    """Mutable nested container holding sub-arrays or leaf values of any type."""


_SCALAR_SEQUENCE_TYPES = (str, bytes, bytearray)


def is_object_array(value: object) -> bool:
    return isinstance(value, ObjectArray)


def is_nested_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCE_TYPES)


def _is_array_object(value: object) -> bool:
    return hasattr(value, "ndim") and hasattr(value, "shape") and not is_nested_sequence(value)


def dimensionality_of(value: object) -> int:
    """Number of dimensions of ``value``; scalars are 0-dimensional."""
    if is_nested_sequence(value):
        if len(value) == 0:
            return 1
        return 1 + dimensionality_of(value[0])
    if _is_array_object(value):
        return int(value.ndim)
    return 0


def shape_of(value: object) -> tuple[int, ...]:
    if is_nested_sequence(value):
        if len(value) == 0:
            return (0,)
        return (len(value),) + shape_of(value[0])
    if _is_array_object(value):
        return tuple(int(d) for d in value.shape)
    return ()


def get_0d(value: object) -> object:
    """Unwrap a 0-dimensional value to its scalar."""
    if _is_array_object(value) and int(value.ndim) == 0:
        return value.item()
    return value


def as_index(index: object, length: int, *, where: str = "index") -> int:
    """Validate ``index`` against a container of ``length`` slots."""
    try:
        i = operator.index(index)
    except TypeError:
        if _is_array_object(index) and int(index.ndim) == 0:
            i = operator.index(index.item())
        else:
            raise IndexOutOfRangeError(f"{where} must be an integer, got {type(index).__name__}") from None
    if i < 0 or i >= length:
        raise IndexOutOfRangeError(f"{where} {i} out of range for length {length}")
    return i


def as_axis(axis: object, dims: int) -> int:
    """Validate ``axis`` against an array of dimensionality ``dims``."""
    try:
        x = operator.index(axis)
    except TypeError:
        raise InvalidAxisError(f"Axis must be an integer, got {type(axis).__name__}") from None
    if x < 0 or x >= dims:
        raise InvalidAxisError(f"Invalid axis {x} for array of dimensionality {dims}")
    return x


def get_1d(value: object, i: object) -> object:
    """Read slot ``i`` of any 1-or-more dimensional value."""
    if is_nested_sequence(value):
        return value[as_index(i, len(value))]
    if _is_array_object(value) and int(value.ndim) > 0:
        return value[as_index(i, int(value.shape[0]))]
    raise InvalidDimensionalityError(f"Cannot index into a scalar of type {type(value).__name__}")


def major_slices(value: object) -> list[object]:
    """Major slices of a value with dimensionality >= 1."""
    if is_nested_sequence(value):
        return list(value)
    if _is_array_object(value) and int(value.ndim) > 0:
        return [value[i] for i in range(int(value.shape[0]))]
    raise InvalidDimensionalityError(f"A scalar of type {type(value).__name__} has no major slices")

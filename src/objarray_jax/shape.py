"""Shape and dimensionality introspection for object arrays.

Rectangularity is assumed: only the first child of each container is
inspected. Length-0 containers are treated as 1-dimensional with shape ``(0,)``.
"""

from __future__ import annotations

from .values import ObjectArray, as_axis, dimensionality_of, shape_of


def dimensionality(m: ObjectArray) -> int:
    if len(m) == 0:
        return 1
    return 1 + dimensionality_of(m[0])


def shape(m: ObjectArray) -> tuple[int, ...]:
    if len(m) == 0:
        return (0,)
    return (len(m),) + shape_of(m[0])


def dimension_count(m: object, axis: object) -> int:
    """Extent of ``m`` along ``axis``."""
    dims = shape_of(m)
    return dims[as_axis(axis, len(dims))]


def is_vector(m: ObjectArray) -> bool:
    return len(m) == 0 or dimensionality_of(m[0]) == 0


def is_scalar(m: ObjectArray) -> bool:
    return False


def element_type(m: ObjectArray) -> type:
    return object

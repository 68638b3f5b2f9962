"""Indexed reads and the copy-on-write / in-place write families.

Copy-on-write ``set_*`` functions clone one container per level on the path
to the written slot and alias every untouched subtree with the original.
The ``*_mut`` functions write straight into the existing containers.

Children are reached through the element collaborator, so plain lists,
tuples and jax arrays nested inside an ``ObjectArray`` index like any other
dimension. Writes need a sequence child; in-place writes need a mutable one.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from .errors import InvalidDimensionalityError
from .values import ObjectArray, as_index, dimensionality_of, get_1d as value_get_1d, is_nested_sequence


def _descend(child: object, indexes: Sequence[object]) -> object:
    if dimensionality_of(child) == 0:
        raise InvalidDimensionalityError(
            f"Too many indices for nested object array: {list(indexes)} reaches a {type(child).__name__} leaf"
        )
    return child


def _writable(child: object, indexes: Sequence[object], *, mutable: bool) -> Sequence[object]:
    _descend(child, indexes)
    if not is_nested_sequence(child) or (mutable and not isinstance(child, MutableSequence)):
        raise InvalidDimensionalityError(
            f"Can't set {list(indexes)} inside an immutable {type(child).__name__} slot"
        )
    return child


def get_1d(m: ObjectArray, x: object) -> object:
    return value_get_1d(m, x)


def get_2d(m: ObjectArray, x: object, y: object) -> object:
    return value_get_1d(_descend(get_1d(m, x), (y,)), y)


def get_nd(m: ObjectArray, indexes: Sequence[object]) -> object:
    indexes = tuple(indexes)
    if len(indexes) == 0:
        return m
    child = get_1d(m, indexes[0])
    if len(indexes) == 1:
        return child
    return get_nd(_descend(child, indexes[1:]), indexes[1:])


def set_1d(m: Sequence[object], x: object, v: object) -> ObjectArray:
    i = as_index(x, len(m))
    arr = ObjectArray(m)
    arr[i] = v
    return arr


def set_2d(m: Sequence[object], x: object, y: object, v: object) -> ObjectArray:
    i = as_index(x, len(m))
    arr = ObjectArray(m)
    arr[i] = set_1d(_writable(m[i], (y,), mutable=False), y, v)
    return arr


def set_nd(m: Sequence[object], indexes: Sequence[object], v: object) -> ObjectArray:
    indexes = tuple(indexes)
    if len(indexes) == 0:
        raise InvalidDimensionalityError(f"Can't set on object array with dimensionality: {len(indexes)}")
    i = as_index(indexes[0], len(m))
    arr = ObjectArray(m)
    if len(indexes) == 1:
        arr[i] = v
    else:
        arr[i] = set_nd(_writable(m[i], indexes[1:], mutable=False), indexes[1:], v)
    return arr


def set_1d_mut(m: MutableSequence[object], x: object, v: object) -> None:
    m[as_index(x, len(m))] = v


def set_2d_mut(m: ObjectArray, x: object, y: object, v: object) -> None:
    set_1d_mut(_writable(get_1d(m, x), (y,), mutable=True), y, v)


def set_nd_mut(m: MutableSequence[object], indexes: Sequence[object], v: object) -> None:
    indexes = tuple(indexes)
    if len(indexes) == 0:
        raise InvalidDimensionalityError(f"Can't set on object array with dimensionality: {len(indexes)}")
    if len(indexes) == 1:
        set_1d_mut(m, indexes[0], v)
        return
    child = get_1d(m, indexes[0])
    set_nd_mut(_writable(child, indexes[1:], mutable=True), indexes[1:], v)


def is_mutable(m: ObjectArray) -> bool:
    return True

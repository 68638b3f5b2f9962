"""Implementation capability surface and the implementation registry.

``ObjectArrayImplementation`` bundles every object-array operation behind the
method names client code uses to drive an array backend. Registries are plain
objects; ``default_registry()`` returns the single process-wide instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from typing import Final, Protocol, runtime_checkable

from . import construction, conversion, indexing, slicing
from .broadcast import broadcast as broadcast_array
from .shape import dimension_count, dimensionality, element_type, is_scalar, is_vector, shape as shape_of_array
from .values import ObjectArray

logger = logging.getLogger(__name__)

OBJECT_ARRAY_KEY: Final[str] = "object-array"


@runtime_checkable
class ArrayImplementation(Protocol):
    def implementation_key(self) -> str: ...

    def meta_info(self) -> dict[str, str]: ...

    def new_vector(self, length: int) -> object: ...

    def new_matrix(self, rows: int, columns: int) -> object: ...

    def new_matrix_nd(self, shape: Iterable[int]) -> object: ...

    def construct_matrix(self, data: object) -> object: ...

    def supports_dimensionality(self, dims: int) -> bool: ...


class ObjectArrayImplementation:
    """Array backend built from nested mutable ``ObjectArray`` containers."""

    def __init__(self, sample: ObjectArray | None = None) -> None:
        self.sample = ObjectArray([1]) if sample is None else sample

    def __repr__(self) -> str:
        return f"ObjectArrayImplementation(sample={self.sample!r})"

    # implementation identity and construction

    def implementation_key(self) -> str:
        return OBJECT_ARRAY_KEY

    def meta_info(self) -> dict[str, str]:
        return {"doc": "Array implementation for nested mutable object arrays"}

    def new_vector(self, length: int) -> ObjectArray:
        return construction.new_vector(length)

    def new_matrix(self, rows: int, columns: int) -> ObjectArray:
        return construction.new_matrix(rows, columns)

    def new_matrix_nd(self, shape: Iterable[int]) -> ObjectArray:
        return construction.new_matrix_nd(shape)

    def construct_matrix(self, data: object) -> object:
        return construction.construct_matrix(data)

    def supports_dimensionality(self, dims: int) -> bool:
        return construction.supports_dimensionality(dims)

    # introspection

    def dimensionality(self, m: ObjectArray) -> int:
        return dimensionality(m)

    def shape(self, m: ObjectArray) -> tuple[int, ...]:
        return shape_of_array(m)

    def dimension_count(self, m: ObjectArray, axis: int) -> int:
        return dimension_count(m, axis)

    def is_vector(self, m: ObjectArray) -> bool:
        return is_vector(m)

    def is_scalar(self, m: ObjectArray) -> bool:
        return is_scalar(m)

    def element_type(self, m: ObjectArray) -> type:
        return element_type(m)

    # access and mutation

    def get_1d(self, m: ObjectArray, x: int) -> object:
        return indexing.get_1d(m, x)

    def get_2d(self, m: ObjectArray, x: int, y: int) -> object:
        return indexing.get_2d(m, x, y)

    def get_nd(self, m: ObjectArray, indexes: Sequence[int]) -> object:
        return indexing.get_nd(m, indexes)

    def set_1d(self, m: ObjectArray, x: int, v: object) -> ObjectArray:
        return indexing.set_1d(m, x, v)

    def set_2d(self, m: ObjectArray, x: int, y: int, v: object) -> ObjectArray:
        return indexing.set_2d(m, x, y, v)

    def set_nd(self, m: ObjectArray, indexes: Sequence[int], v: object) -> ObjectArray:
        return indexing.set_nd(m, indexes, v)

    def set_1d_mut(self, m: ObjectArray, x: int, v: object) -> None:
        indexing.set_1d_mut(m, x, v)

    def set_2d_mut(self, m: ObjectArray, x: int, y: int, v: object) -> None:
        indexing.set_2d_mut(m, x, y, v)

    def set_nd_mut(self, m: ObjectArray, indexes: Sequence[int], v: object) -> None:
        indexing.set_nd_mut(m, indexes, v)

    def is_mutable(self, m: ObjectArray) -> bool:
        return indexing.is_mutable(m)

    # slicing

    def get_row(self, m: ObjectArray, i: int) -> object:
        return slicing.get_row(m, i)

    def get_column(self, m: ObjectArray, i: int) -> ObjectArray:
        return slicing.get_column(m, i)

    def get_major_slice(self, m: ObjectArray, i: int) -> object:
        return slicing.get_major_slice(m, i)

    def get_slice(self, m: ObjectArray, axis: int, i: int) -> object:
        return slicing.get_slice(m, axis, i)

    def get_major_slice_view(self, m: ObjectArray, i: int) -> object:
        return slicing.get_major_slice_view(m, i)

    def get_major_slice_seq(self, m: ObjectArray) -> list[object]:
        return slicing.get_major_slice_seq(m)

    # shape transforms and conversion

    def broadcast(self, m: ObjectArray, target_shape: Sequence[int]) -> object:
        return broadcast_array(m, target_shape)

    def coerce_param(self, m: ObjectArray, param: object) -> object:
        return construction.object_array_coerce(param)

    def mutable_matrix(self, m: object) -> ObjectArray:
        return conversion.mutable_matrix(m)

    def convert_to_nested_sequence(self, m: object) -> object:
        return conversion.convert_to_nested_sequence(m)


class ImplementationRegistry:
    """Table mapping implementation keys to implementation instances."""

    def __init__(self, implementations: Iterable[ArrayImplementation] = ()) -> None:
        self._implementations: dict[str, ArrayImplementation] = {}
        for impl in implementations:
            self.register(impl)

    def register(self, impl: ArrayImplementation) -> ArrayImplementation:
        if not isinstance(impl, ArrayImplementation):
            raise TypeError(f"{type(impl).__name__} does not implement the array implementation surface")
        key = impl.implementation_key()
        if key in self._implementations:
            logger.debug("Replacing array implementation %r", key)
        else:
            logger.debug("Registering array implementation %r", key)
        self._implementations[key] = impl
        return impl

    def get(self, key: str) -> ArrayImplementation:
        try:
            return self._implementations[key]
        except KeyError:
            known = ", ".join(sorted(self._implementations)) or "none"
            raise KeyError(f"No array implementation registered for {key!r} (known: {known})") from None

    def keys(self) -> tuple[str, ...]:
        return tuple(self._implementations)

    def __contains__(self, key: object) -> bool:
        return key in self._implementations

    def __iter__(self) -> Iterator[str]:
        return iter(self._implementations)

    def __len__(self) -> int:
        return len(self._implementations)


@lru_cache(maxsize=1)
def default_registry() -> ImplementationRegistry:
    return ImplementationRegistry()


def register_implementation(
    impl: ArrayImplementation, *, registry: ImplementationRegistry | None = None
) -> ArrayImplementation:
    target = default_registry() if registry is None else registry
    return target.register(impl)

"""Conversion of object arrays to persistent, mutable and jax representations."""

from __future__ import annotations

import jax.numpy as jnp

from .errors import classify_exception
from .values import ObjectArray, dimensionality_of, get_0d, major_slices


def convert_to_nested_sequence(m: object) -> object:
    """Deep copy replacing every dimension with a tuple; 0-d leaves are unwrapped."""
    if dimensionality_of(m) > 0:
        return tuple(convert_to_nested_sequence(sl) for sl in major_slices(m))
    return get_0d(m)


def mutable_matrix(m: object) -> ObjectArray:
    """Fully mutable deep copy that shares no container with ``m``."""
    if dimensionality_of(m) > 1:
        return ObjectArray([mutable_matrix(sl) for sl in major_slices(m)])
    return ObjectArray([get_0d(v) for v in major_slices(m)])


def to_jax(m: object, dtype=None) -> jnp.ndarray:
    """Materialize a rectangular numeric object array as a jax array."""
    nested = convert_to_nested_sequence(m)
    try:
        return jnp.asarray(nested, dtype=dtype)
    except (TypeError, ValueError) as err:
        raise classify_exception(err) from err

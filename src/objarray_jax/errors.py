"""Structured error types for object-array operations."""

from __future__ import annotations


class ObjectArrayError(Exception):
    """Base class for structured objarray-jax errors."""


class InvalidDimensionalityError(ObjectArrayError):
    """Dimensionality or index count not supported by the nested representation."""


class InvalidAxisError(ObjectArrayError):
    """Axis argument outside ``[0, dimensionality)``."""


class IndexOutOfRangeError(ObjectArrayError, IndexError):
    """Index outside a container's slot range."""


class IncompatibleShapeError(ObjectArrayError, ValueError):
    """Source and target shapes cannot be aligned on trailing dimensions."""


def classify_exception(err: Exception) -> ObjectArrayError:
    """Best-effort classification of foreign failures for structured APIs."""
    if isinstance(err, ObjectArrayError):
        return err
    message = str(err)
    lowered = message.lower()

    if isinstance(err, IndexError) or "out of range" in lowered or "bounds" in lowered:
        return IndexOutOfRangeError(message)
    if "axis" in lowered:
        return InvalidAxisError(message)
    if "broadcast" in lowered or "shape" in lowered:
        return IncompatibleShapeError(message)
    if any(marker in lowered for marker in ("rank", "dimension", "ndim")):
        return InvalidDimensionalityError(message)
    return ObjectArrayError(message)

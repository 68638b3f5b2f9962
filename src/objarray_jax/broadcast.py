"""Broadcasting by prepending leading axes that alias the source array."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import IncompatibleShapeError
from .values import ObjectArray, shape_of


def broadcast(m: object, target_shape: Sequence[int]) -> object:
    """Expand ``m`` to ``target_shape`` under trailing-dimension matching.

    Extents must match exactly; size-1 axes are not stretched. Every slot of a
    new leading axis holds the same reference, so nothing is copied.
    """
    mshape = shape_of(m)
    target = tuple(int(d) for d in target_shape)
    dims = len(mshape)
    tdims = len(target)
    if dims > tdims:
        raise IncompatibleShapeError(
            f"Can't broadcast shape {list(mshape)} to lower dimensional shape {list(target)}"
        )
    if mshape != target[tdims - dims :]:
        raise IncompatibleShapeError(f"Incompatible shapes, cannot broadcast {list(mshape)} to {list(target)}")

    out = m
    for dup in reversed(target[: tdims - dims]):
        out = ObjectArray([out] * dup)
    return out

from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def empty_matrix() -> np.ndarray:
    # 1x1 "not available" matrix; it can be stored but never inverted.
    return np.full((1, 1), np.nan)


def coerce_matrix(candidate: Any) -> np.ndarray:
    """Return a private, read-only 2D numeric copy of ``candidate``.

    Only the type of the value is checked here. Non-square and singular
    matrices are accepted; they fail later, at inversion time.
    """
    if candidate is None:
        return freeze(empty_matrix())

    if np.isscalar(candidate):
        raise TypeError("Scalars/0D are not supported; matrix data must be 2D.")

    if not isinstance(candidate, np.ndarray) and not is_sequence_like(candidate):
        if not hasattr(candidate, "__array__"):
            raise TypeError(
                "Matrix data must be provided as a nested sequence or a NumPy array."
            )

    try:
        array = np.array(candidate, copy=True)
    except ValueError as exc:
        raise TypeError(f"Matrix data must be rectangular: {exc}") from exc

    if array.ndim != 2:
        raise TypeError(f"Matrix data must be 2D, got {array.ndim}D input.")
    if array.dtype == np.bool_:
        array = array.astype(np.int8)
    elif not np.issubdtype(array.dtype, np.number):
        raise TypeError(f"Matrix data must be numeric, got dtype {array.dtype}.")

    return freeze(array)


def freeze(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array

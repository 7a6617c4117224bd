from __future__ import annotations

from typing import Any

import numpy as np

from .coercion import coerce_matrix, freeze


class CacheMatrix:
    """A matrix together with a single cache slot for its inverse.

    The holder only stores values. The inverse is computed elsewhere
    (see ``cache_solve``) and handed back through :meth:`set_inverse`.
    Replacing the matrix always empties the slot, so a cached inverse can
    never outlive the matrix it was computed for.

    Both stored arrays are private read-only copies: writing into the array
    passed to the constructor, or into the one returned by :meth:`get`,
    cannot change what the cache was computed from.
    """

    __slots__ = ("_matrix", "_inverse")

    def __init__(self, matrix: Any = None):
        self._matrix: np.ndarray = coerce_matrix(matrix)
        self._inverse: np.ndarray | None = None

    def set(self, matrix: Any) -> None:
        """Replace the wrapped matrix and drop the cached inverse."""
        new_matrix = coerce_matrix(matrix)
        self._matrix = new_matrix
        self._inverse = None

    def get(self) -> np.ndarray:
        return self._matrix

    def set_inverse(self, inverse: Any) -> None:
        # Trusted caller: no check that this really is the inverse.
        # None empties the slot.
        if inverse is None:
            self._inverse = None
            return
        self._inverse = freeze(np.array(inverse, copy=True))

    def get_inverse(self) -> np.ndarray | None:
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._matrix.shape
        return int(rows), int(cols)

    def __repr__(self) -> str:
        state = "cached" if self._inverse is not None else "empty"
        return f"CacheMatrix(shape={self.shape}, dtype={self._matrix.dtype}, inverse={state})"


def make_cache_matrix(matrix: Any = None) -> CacheMatrix:
    """Create a :class:`CacheMatrix` wrapping ``matrix``.

    Without an argument the holder wraps a 1x1 matrix holding NaN.
    """
    return CacheMatrix(matrix)

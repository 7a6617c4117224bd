from __future__ import annotations

import logging
from typing import Any

import numpy as np

from . import runtime as _runtime

logger = logging.getLogger(__name__)


class SingularMatrixError(np.linalg.LinAlgError):
    """The matrix is singular, exactly or within the solve tolerance."""

    def __init__(self, message: str, *, rcond: float = 0.0) -> None:
        super().__init__(message)
        self.rcond = rcond


def _reciprocal_condition(a: np.ndarray, inverse: np.ndarray) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        denom = float(np.linalg.norm(a, 1)) * float(np.linalg.norm(inverse, 1))
    if not np.isfinite(denom) or denom <= 0.0:
        return 0.0
    return 1.0 / denom


def _supported_dtype(a: np.ndarray) -> np.ndarray:
    # LAPACK only takes single and double precision.
    if a.dtype.kind == "f" and a.dtype not in (np.float32, np.float64):
        return a.astype(np.float32 if a.dtype.itemsize < 4 else np.float64)
    if a.dtype.kind == "c" and a.dtype not in (np.complex64, np.complex128):
        return a.astype(np.complex128)
    return a


def invert(matrix: Any, *, tol: float | None = None, check_finite: bool = True) -> np.ndarray:
    """Return the inverse of a square matrix as a new array.

    Raises ``numpy.linalg.LinAlgError`` for non-square input and
    :class:`SingularMatrixError` when the matrix is exactly singular or its
    reciprocal 1-norm condition number is below ``tol``. ``tol`` defaults to
    the runtime solve tolerance (float64 machine epsilon unless
    ``CACHEMATRIX_SOLVE_TOL`` is set); ``tol=0`` disables the check.
    """
    a = np.asarray(matrix)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise np.linalg.LinAlgError(f"matrix must be square to invert, got shape {a.shape}")

    if tol is None:
        tol = _runtime.default_instance().solve_tolerance()
    elif not tol >= 0:
        raise ValueError(f"tol must be non-negative, got {tol!r}")

    if check_finite and not np.isfinite(a).all():
        raise ValueError("matrix must not contain infs or NaNs")

    a = _supported_dtype(a)

    if a.shape[0] == 0:
        return np.zeros((0, 0), dtype=np.result_type(a.dtype, np.float64))

    try:
        inverse = np.linalg.inv(a)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError("system is exactly singular", rcond=0.0) from exc

    if tol > 0:
        rcond = _reciprocal_condition(a, inverse)
        if rcond < tol:
            raise SingularMatrixError(
                f"system is computationally singular: reciprocal condition number = {rcond:g}",
                rcond=rcond,
            )

    logger.debug("inverted %dx%d matrix (dtype=%s)", a.shape[0], a.shape[1], inverse.dtype)
    return inverse

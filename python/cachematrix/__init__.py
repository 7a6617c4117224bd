"""Matrix wrapper that caches its inverse.

Matrix inversion is a costly computation, so a :class:`CacheMatrix` keeps the
inverse next to the matrix once it has been computed, and
:func:`cache_solve` reuses it until the matrix is replaced.
"""
from __future__ import annotations

import logging as _logging
import warnings as _warnings
from typing import Any

from ._internal import observability as _observability
from ._internal import runtime as _runtime_mod
from ._internal.holder import CacheMatrix, make_cache_matrix
from ._internal.inversion import SingularMatrixError, invert
from ._internal.linalg_cache import (
    CACHE_HIT_MESSAGE,
    cache_solve,
    get_hit_notifier,
    make_cache_solve,
    set_hit_notifier,
    warn_cache_hit,
)
from ._internal.observability import SolveObservability, SolveRecord
from ._internal.warnings import (
    CacheMatrixCacheHit,
    CacheMatrixConfigWarning,
    CacheMatrixWarning,
)

__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# The hit notice is per call, not per call site. Appended so that -W and
# PYTHONWARNINGS settings, and any filter added later, still win.
_warnings.filterwarnings("always", category=CacheMatrixCacheHit, append=True)


def last_solve() -> dict[str, Any] | None:
    """Return the record of the most recent :func:`cache_solve` call."""
    return _observability.default_instance().last()


def solve_stats() -> dict[str, int]:
    """Return cache hit/miss counters since start-up or the last clear."""
    return _observability.default_instance().stats()


def clear_solve_stats() -> None:
    _observability.default_instance().clear()


def reload_config() -> None:
    """Re-read ``CACHEMATRIX_*`` environment variables on next use."""
    _runtime_mod.default_instance().reload()


__all__ = [
    "CACHE_HIT_MESSAGE",
    "CacheMatrix",
    "CacheMatrixCacheHit",
    "CacheMatrixConfigWarning",
    "CacheMatrixWarning",
    "SingularMatrixError",
    "SolveObservability",
    "SolveRecord",
    "cache_solve",
    "clear_solve_stats",
    "get_hit_notifier",
    "invert",
    "last_solve",
    "make_cache_matrix",
    "make_cache_solve",
    "reload_config",
    "set_hit_notifier",
    "solve_stats",
    "warn_cache_hit",
]

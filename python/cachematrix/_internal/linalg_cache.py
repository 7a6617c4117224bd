from __future__ import annotations

import logging
import warnings
from typing import Any, Callable

import numpy as np

from . import inversion as _inversion
from . import observability as _observability
from . import runtime as _runtime
from .holder import CacheMatrix
from .warnings import CacheMatrixCacheHit

logger = logging.getLogger(__name__)

HitNotifier = Callable[[CacheMatrix], None]

CACHE_HIT_MESSAGE = "getting cached data"

_hit_notifier: HitNotifier | None = None


def warn_cache_hit(holder: CacheMatrix) -> None:
    warnings.warn(CACHE_HIT_MESSAGE, CacheMatrixCacheHit, stacklevel=3)


def _silent(holder: CacheMatrix) -> None:
    return None


def set_hit_notifier(notifier: HitNotifier | None) -> HitNotifier | None:
    """Install the process-wide cache-hit notifier and return the previous one.

    ``None`` restores the default, which warns with :class:`CacheMatrixCacheHit`
    unless ``CACHEMATRIX_QUIET`` is set.
    """
    global _hit_notifier
    previous = _hit_notifier
    _hit_notifier = notifier
    return previous


def get_hit_notifier() -> HitNotifier:
    if _hit_notifier is not None:
        return _hit_notifier
    if _runtime.default_instance().quiet():
        return _silent
    return warn_cache_hit


def make_cache_solve(
    invert: Callable[..., Any] = _inversion.invert,
    *,
    observability: _observability.SolveObservability | None = None,
) -> Callable[..., np.ndarray]:
    def _cache_solve(
        holder: CacheMatrix,
        *,
        on_hit: HitNotifier | None = None,
        **options: Any,
    ) -> np.ndarray:
        """Return the inverse of ``holder``'s matrix, computing it at most once.

        A cached inverse is returned as-is and announced through ``on_hit``
        (or the process-wide notifier). Otherwise the inverse is computed with
        ``options`` forwarded to the inversion routine, stored in the holder
        and returned. Inversion errors propagate and leave the cache empty.
        """
        obs = observability if observability is not None else _observability.default_instance()

        inverse = holder.get_inverse()
        if inverse is not None:
            notify = on_hit if on_hit is not None else get_hit_notifier()
            notify(holder)
            obs.record("inverse", holder.get(), hit=True)
            return inverse

        matrix = holder.get()
        obs.record("inverse", matrix, hit=False)
        result = invert(matrix, **options)
        holder.set_inverse(result)
        logger.debug("cached inverse for %r", holder)
        return holder.get_inverse()

    return _cache_solve


cache_solve = make_cache_solve()

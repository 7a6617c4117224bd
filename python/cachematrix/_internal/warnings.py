"""Warning categories raised by cachematrix.

``CacheMatrixCacheHit`` carries the cache-hit notice and is shown on every
hit (see the filter registered in ``cachematrix/__init__.py``); filter on
``CacheMatrixWarning`` to silence everything this package emits.
"""


class CacheMatrixWarning(UserWarning):
    """Base category for cachematrix warnings."""


class CacheMatrixCacheHit(CacheMatrixWarning):
    """Emitted when an inverse is served from a holder's cache."""


class CacheMatrixConfigWarning(CacheMatrixWarning):
    """Environment configuration that was invalid and has been ignored."""

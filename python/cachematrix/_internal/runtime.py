from __future__ import annotations

import os
import warnings

import numpy as np

from .warnings import CacheMatrixConfigWarning

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class Runtime:
    """Process-wide settings read lazily from the environment."""

    def __init__(
        self,
        *,
        tol_env_var: str = "CACHEMATRIX_SOLVE_TOL",
        quiet_env_var: str = "CACHEMATRIX_QUIET",
    ) -> None:
        self._tol_env_var = tol_env_var
        self._quiet_env_var = quiet_env_var
        self._tol_cache: float | None = None
        self._quiet_cache: bool | None = None

    def solve_tolerance(self) -> float:
        if self._tol_cache is not None:
            return self._tol_cache

        default = float(np.finfo(np.float64).eps)
        raw = os.environ.get(self._tol_env_var)
        tol = default
        if raw:
            try:
                tol = float(raw)
            except ValueError:
                tol = -1.0
            if not tol >= 0.0:
                warnings.warn(
                    f"{self._tol_env_var}={raw!r} is not a non-negative number; "
                    f"using default {default:g}",
                    CacheMatrixConfigWarning,
                    stacklevel=3,
                )
                tol = default

        self._tol_cache = tol
        return tol

    def quiet(self) -> bool:
        if self._quiet_cache is None:
            raw = os.environ.get(self._quiet_env_var, "")
            self._quiet_cache = raw.strip().lower() in _TRUTHY
        return self._quiet_cache

    def reload(self) -> None:
        self._tol_cache = None
        self._quiet_cache = None


_default_runtime = Runtime()


def default_instance() -> Runtime:
    return _default_runtime

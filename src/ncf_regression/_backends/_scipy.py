"""SciPy backend (always available).

Maps the three primitives of :class:`NoncentralFBackend` onto SciPy:

=============  ==================================================
Primitive      SciPy call
=============  ==================================================
``sample``     ``scipy.stats.ncf.rvs(df1, df2, ncp, size, rng)``
``logpdf``     ``scipy.stats.ncf.logpdf(y, df1, df2, ncp)``
``minimize``   ``scipy.optimize.minimize(objective, x0, method)``
=============  ==================================================

``ncf.rvs`` broadcasts a vector ``ncp`` against ``size``, so a single
call produces one draw per observation with its own noncentrality.

The optimizer method defaults to whatever
:func:`~ncf_regression.get_optimizer` resolves at construction time.
Nelder–Mead is derivative-free, which suits the noncentral F density:
its log is smooth but SciPy evaluates it through a series expansion,
so finite-difference gradients for the quasi-Newton methods are both
expensive and noisy.

Nothing here checks convergence; the ``OptimizeResult`` is returned
exactly as SciPy produced it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from scipy import optimize, stats

from .._config import get_optimizer

# scipy.optimize.minimize spells its methods with this capitalisation
# in its documentation; it is case-insensitive on input.
_SCIPY_METHOD_NAMES = {
    "nelder-mead": "Nelder-Mead",
    "powell": "Powell",
    "bfgs": "BFGS",
    "l-bfgs-b": "L-BFGS-B",
}


@dataclass(frozen=True)
class ScipyBackend:
    """``scipy.stats.ncf`` + ``scipy.optimize.minimize`` backend.

    Parameters
    ----------
    method : str or None
        Optimizer method.  ``None`` (default) resolves the active
        policy via :func:`~ncf_regression.get_optimizer`.
    options : dict
        Extra ``options=`` forwarded to ``scipy.optimize.minimize``
        (e.g. ``{"maxiter": 2000}``).
    """

    method: str | None = None
    options: dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        method = get_optimizer() if self.method is None else self.method.strip().lower()
        if method not in _SCIPY_METHOD_NAMES:
            msg = (
                f"Unknown optimizer {self.method!r}. "
                f"Choose from: {sorted(_SCIPY_METHOD_NAMES)}"
            )
            raise ValueError(msg)
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "method", method)

    @property
    def name(self) -> str:
        return "scipy"

    @property
    def optimizer(self) -> str:
        """SciPy spelling of the configured optimizer method."""
        return _SCIPY_METHOD_NAMES[self.method]

    def sample(
        self,
        df1: float,
        df2: float,
        ncp: float | np.ndarray,
        size: int,
        rng: np.random.Generator,
    ) -> np.ndarray:
        """Draw *size* noncentral F variates with ``ncf.rvs``."""
        return np.asarray(
            stats.ncf.rvs(df1, df2, ncp, size=size, random_state=rng),
            dtype=float,
        )

    def logpdf(
        self,
        y: np.ndarray,
        df1: float,
        df2: float,
        ncp: float | np.ndarray,
    ) -> np.ndarray:
        """Noncentral F log-density via ``ncf.logpdf``."""
        return np.asarray(stats.ncf.logpdf(y, df1, df2, ncp), dtype=float)

    def minimize(
        self,
        objective: Callable[[np.ndarray], float],
        x0: np.ndarray,
    ) -> optimize.OptimizeResult:
        """Run ``scipy.optimize.minimize`` with the configured method."""
        return optimize.minimize(
            objective,
            x0,
            method=self.optimizer,
            options=dict(self.options) or None,
        )

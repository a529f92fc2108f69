"""Feasibility of the log-mean link.

Under the mean link ``μ = exp(η)`` the implied noncentrality parameter
``λ = df1 ((df2 − 2) μ / df2 − 1)`` is non-negative only when

    μ >= df2 / (df2 − 2)    ⇔    η >= log(df2 / (df2 − 2)),

the mean of the central F distribution.  These helpers expose that
lower bound and check a coefficient vector against it; the mean-link
fit in :mod:`.fitting` uses them to validate its starting point and to
reject infeasible iterates.
"""

from __future__ import annotations

import numpy as np

from ._compat import _as_design_matrix, _as_vector, _check_coefficients
from ._typing import ArrayLike


def link_constraint(df2: float) -> float:
    """Smallest feasible linear predictor, ``log(df2 / (df2 − 2))``."""
    df2 = np.float64(df2)
    return float(np.log(df2 / (df2 - 2)))


def satisfies_constraint(X: ArrayLike, beta: ArrayLike, df2: float) -> bool:
    """Return ``True`` iff every entry of ``X β`` is at least :func:`link_constraint`.

    Raises:
        ValueError: If *beta* does not have one entry per column of *X*.
    """
    X_arr, _ = _as_design_matrix(X)
    beta_arr = _as_vector(beta, name="beta")
    _check_coefficients(X_arr, beta_arr)
    return bool(np.all(X_arr @ beta_arr >= link_constraint(df2)))

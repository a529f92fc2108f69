"""Simulation from log-linear noncentral F regression models.

Two link choices are supported, mirroring the two parameterisations in
:mod:`.moments`:

* :func:`simulate` — the noncentrality parameter follows the log link,
  ``λ_i = exp(x_iᵀβ)``.
* :func:`simulate_from_mean` — the mean follows the log link,
  ``μ_i = exp(x_iᵀβ)``, and ``λ_i`` is recovered with
  :func:`~ncf_regression.ncp_from_mean`.

Each row of ``X`` produces exactly one draw.  Randomness comes from a
``numpy.random.Generator`` built from *random_state* on every call; no
state survives between calls.
"""

from __future__ import annotations

import logging

import numpy as np

from ._backends import NoncentralFBackend, resolve_backend
from ._compat import (
    _as_design_matrix,
    _as_vector,
    _check_coefficients,
    _check_degrees_of_freedom,
)
from ._typing import ArrayLike
from .moments import ncp_from_mean

logger = logging.getLogger(__name__)


def _linear_predictor(X: ArrayLike, beta: ArrayLike) -> np.ndarray:
    """Return ``X β`` after checking conformability."""
    X_arr, _ = _as_design_matrix(X)
    beta_arr = _as_vector(beta, name="beta")
    _check_coefficients(X_arr, beta_arr)
    return X_arr @ beta_arr


def _draw(
    ncp: np.ndarray,
    df1: float,
    df2: float,
    random_state: int | np.random.Generator | None,
    backend: str | NoncentralFBackend | None,
) -> np.ndarray:
    engine = resolve_backend(backend)
    rng = np.random.default_rng(random_state)
    logger.debug(
        "Drawing %d noncentral F variates (df1=%s, df2=%s) with %s backend",
        ncp.shape[0],
        df1,
        df2,
        engine.name,
    )
    return engine.sample(df1, df2, ncp, ncp.shape[0], rng)


def simulate(
    X: ArrayLike,
    beta: ArrayLike,
    df1: float,
    df2: float,
    *,
    random_state: int | np.random.Generator | None = None,
    backend: str | NoncentralFBackend | None = None,
) -> np.ndarray:
    """Simulate responses with noncentrality parameter ``exp(X β)``.

    Args:
        X: Design matrix ``(n, p)``.
        beta: Coefficients, length ``p``.
        df1: Numerator degrees of freedom.
        df2: Denominator degrees of freedom.
        random_state: Seed or generator for reproducibility.
        backend: Backend name or instance supplying the sampler.

    Returns:
        Array of ``n`` draws, one per row of *X*.

    Raises:
        ValueError: If the degrees of freedom are not positive or
            *beta* does not conform to *X*.
    """
    _check_degrees_of_freedom(df1, df2)
    ncp = np.exp(_linear_predictor(X, beta))
    return _draw(ncp, df1, df2, random_state, backend)


def simulate_from_mean(
    X: ArrayLike,
    beta: ArrayLike,
    df1: float,
    df2: float,
    *,
    random_state: int | np.random.Generator | None = None,
    backend: str | NoncentralFBackend | None = None,
) -> np.ndarray:
    """Simulate responses with mean ``exp(X β)``.

    The implied noncentrality parameter is negative wherever
    ``X β < log(df2 / (df2 − 2))`` (see
    :func:`~ncf_regression.satisfies_constraint`); the sampler's own
    domain error is raised in that case.

    Args:
        X: Design matrix ``(n, p)``.
        beta: Coefficients, length ``p``.
        df1: Numerator degrees of freedom.
        df2: Denominator degrees of freedom (``> 2`` for a mean to exist).
        random_state: Seed or generator for reproducibility.
        backend: Backend name or instance supplying the sampler.

    Returns:
        Array of ``n`` draws, one per row of *X*.
    """
    _check_degrees_of_freedom(df1, df2)
    mu = np.exp(_linear_predictor(X, beta))
    ncp = np.asarray(ncp_from_mean(df1, df2, mu), dtype=float)
    return _draw(ncp, df1, df2, random_state, backend)

"""Maximum-likelihood fitting of log-linear noncentral F regressions.

Model
-----
Each response ``y_i`` is an independent draw from a noncentral F
distribution on ``(df1, df2)`` degrees of freedom.  The covariates
enter through a log link on either

* the noncentrality parameter (``link="ncp"``, the default):
  ``λ_i = exp(x_iᵀβ)``, or
* the mean (``link="mean"``): ``μ_i = exp(x_iᵀβ)`` and
  ``λ_i = ncp_from_mean(df1, df2, μ_i)``.

The degrees of freedom are treated as known.  β is estimated by
minimising the negative log-likelihood

    −ℓ(β) = −Σ_i log f(y_i; df1, df2, λ_i(β))

with the backend's unconstrained optimizer.

The mean link is only defined where every ``x_iᵀβ`` is at least
:func:`~ncf_regression.link_constraint`; the objective is ``+inf``
outside that region, which the derivative-free default optimizer
treats as a wall.

Failure semantics
-----------------
This routine adds no convergence checking of its own: no retries, no
alternative starting points, no tightened tolerances.  The optimizer's
success flag, message and iteration count are copied onto the
:class:`~ncf_regression.FitResult`, and a statsmodels
``ConvergenceWarning`` is emitted when the optimizer reports failure.
Exceptions raised inside the optimizer or density propagate unchanged.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable

import numpy as np
from statsmodels.tools.numdiff import approx_hess
from statsmodels.tools.sm_exceptions import ConvergenceWarning

from ._backends import NoncentralFBackend, resolve_backend
from ._compat import (
    _as_design_matrix,
    _as_vector,
    _check_coefficients,
    _check_degrees_of_freedom,
    _check_response,
)
from ._results import FitResult
from ._typing import ArrayLike
from .constraints import link_constraint, satisfies_constraint
from .moments import mean_of, ncp_from_mean, variance_from_mean

logger = logging.getLogger(__name__)

_LINKS = ("ncp", "mean")


def _make_objective(
    y: np.ndarray,
    X: np.ndarray,
    df1: float,
    df2: float,
    link: str,
    engine: NoncentralFBackend,
) -> Callable[[np.ndarray], float]:
    """Build the negative log-likelihood as a function of β alone."""
    floor = link_constraint(df2) if link == "mean" else None

    def _minus_log_likelihood(beta: np.ndarray) -> float:
        eta = X @ np.ravel(beta)
        if floor is None:
            ncp = np.exp(eta)
        else:
            if np.any(eta < floor):
                return np.inf
            # Clip rounding error at the boundary μ = df2 / (df2 − 2).
            ncp = np.maximum(ncp_from_mean(df1, df2, np.exp(eta)), 0.0)
        return -float(np.sum(engine.logpdf(y, df1, df2, ncp)))

    return _minus_log_likelihood


def _standard_errors(
    objective: Callable[[np.ndarray], float],
    beta_hat: np.ndarray,
) -> np.ndarray:
    """Standard errors from the inverse numerical Hessian of −ℓ at β̂.

    Entries are NaN where the observed information cannot be inverted:
    a singular Hessian, a Hessian with non-finite entries (β̂ within a
    finite-difference step of the mean-link boundary, where −ℓ is
    ``+inf``), or a non-positive variance on the diagonal.
    """
    unavailable = np.full(beta_hat.shape[0], np.nan)
    with np.errstate(invalid="ignore", over="ignore"):
        hessian = approx_hess(beta_hat, objective)
    if not np.all(np.isfinite(hessian)):
        logger.debug("Observed information is not finite at beta_hat=%s", beta_hat)
        return unavailable
    try:
        covariance = np.linalg.inv(hessian)
    except np.linalg.LinAlgError as exc:
        logger.debug("Observed information is singular: %s", exc)
        return unavailable
    variances = np.diag(covariance)
    if not np.all(variances > 0):
        logger.debug("Non-positive variances on the covariance diagonal: %s", variances)
    return np.where(variances > 0, np.sqrt(np.abs(variances)), np.nan)


def _optimizer_label(engine: NoncentralFBackend) -> str:
    method = getattr(engine, "optimizer", None)
    return f"{engine.name} ({method})" if method else engine.name


def fit_ml(
    y: ArrayLike,
    X: ArrayLike,
    df1: float,
    df2: float,
    beta0: ArrayLike | None = None,
    extras: bool = False,
    *,
    link: str = "ncp",
    backend: str | NoncentralFBackend | None = None,
) -> FitResult:
    """Maximum-likelihood estimate of β for a noncentral F regression.

    Args:
        y: Responses, length ``n``.
        X: Design matrix ``(n, p)``.  Include a column of ones for an
            intercept; none is added automatically.
        df1: Numerator degrees of freedom (known).
        df2: Denominator degrees of freedom (known).
        beta0: Starting point for the optimizer, length ``p``.
            Defaults to the zero vector for ``link="ncp"``.  Required
            for ``link="mean"``, where it must satisfy
            :func:`~ncf_regression.satisfies_constraint`.
        extras: When ``True``, also compute the linear predictor,
            fitted means, fitted variances and standard errors.
        link: ``"ncp"`` to model ``log λ`` or ``"mean"`` to model
            ``log E[Y]`` linearly in *X*.
        backend: Backend name or instance supplying the density and
            optimizer.

    Returns:
        A :class:`~ncf_regression.FitResult`.

    Raises:
        ValueError: If *link* is unknown, the degrees of freedom are
            not positive, the shapes of *y*, *X* and *beta0* do not
            conform, or a mean-link starting point is missing or
            infeasible.
    """
    if link not in _LINKS:
        msg = f"Unknown link {link!r}. Choose from: {list(_LINKS)}"
        raise ValueError(msg)
    _check_degrees_of_freedom(df1, df2)

    X_arr, feature_names = _as_design_matrix(X)
    y_arr = _as_vector(y, name="y")
    _check_response(X_arr, y_arr)
    n, p = X_arr.shape

    if beta0 is None:
        if link == "mean":
            msg = (
                "link='mean' requires an explicit beta0 with "
                f"X @ beta0 >= log(df2 / (df2 - 2)) = {link_constraint(df2):.6g}; "
                "the zero vector is never feasible."
            )
            raise ValueError(msg)
        beta0_arr = np.zeros(p)
    else:
        beta0_arr = _as_vector(beta0, name="beta0")
        _check_coefficients(X_arr, beta0_arr, name="beta0")
        if link == "mean" and not satisfies_constraint(X_arr, beta0_arr, df2):
            msg = (
                "beta0 violates the mean-link constraint "
                f"X @ beta0 >= {link_constraint(df2):.6g}."
            )
            raise ValueError(msg)

    engine = resolve_backend(backend)
    objective = _make_objective(y_arr, X_arr, df1, df2, link, engine)

    logger.debug(
        "Fitting noncentral F regression: n=%d, p=%d, df1=%s, df2=%s, link=%s, backend=%s",
        n,
        p,
        df1,
        df2,
        link,
        _optimizer_label(engine),
    )
    opt = engine.minimize(objective, beta0_arr)
    beta_hat = np.asarray(opt.x, dtype=float).ravel()

    converged = bool(getattr(opt, "success", True))
    message = str(getattr(opt, "message", ""))
    n_iterations = int(getattr(opt, "nit", -1))
    if not converged:
        warnings.warn(
            f"Noncentral F likelihood maximisation did not converge: {message}",
            ConvergenceWarning,
            stacklevel=2,
        )
    logger.debug(
        "Optimizer finished: converged=%s, nit=%d, message=%s",
        converged,
        n_iterations,
        message,
    )

    fitted: dict[str, np.ndarray] = {}
    if extras:
        eta_hat = X_arr @ beta_hat
        if link == "ncp":
            mu_hat = np.asarray(mean_of(df1, df2, np.exp(eta_hat)))
        else:
            mu_hat = np.exp(eta_hat)
        fitted = {
            "eta_hat": eta_hat,
            "mu_hat": mu_hat,
            "var_hat": np.asarray(variance_from_mean(df1, df2, mu_hat)),
            "standard_errors": _standard_errors(objective, beta_hat),
        }

    return FitResult(
        beta_hat=beta_hat,
        log_likelihood=-objective(beta_hat),
        converged=converged,
        n_iterations=n_iterations,
        message=message,
        df1=float(df1),
        df2=float(df2),
        link=link,
        optimizer=_optimizer_label(engine),
        feature_names=feature_names,
        n_observations=n,
        **fitted,
    )

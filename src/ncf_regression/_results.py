"""Typed result object for noncentral F maximum-likelihood fits.

A frozen dataclass that provides:

* **Attribute access** — ``result.beta_hat``, ``result.mu_hat``, etc.
* **Dict-like access** — ``result["beta_hat"]``, ``result.get("key")``,
  ``"key" in result`` for consumers that prefer bracket syntax.
* **Serialisation** — ``.to_dict()`` returns a plain ``dict[str, Any]``
  with all NumPy types converted to native Python.
* **Tabulation** — ``.to_frame()`` returns the coefficients as a
  :class:`pandas.DataFrame`.

The result is frozen (immutable after construction) to communicate
that it is a snapshot of a completed fit.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

import numpy as np
import pandas as pd

# ------------------------------------------------------------------ #
# Serialisation helper
# ------------------------------------------------------------------ #


def _numpy_to_python(obj: Any) -> Any:
    """Recursively convert NumPy scalars/arrays to Python-native types.

    Handles nested dicts, lists, np.ndarray, np.integer, and
    np.floating so that :meth:`to_dict` returns a fully
    JSON-serialisable structure.
    """
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, dict):
        return {k: _numpy_to_python(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        converted = [_numpy_to_python(item) for item in obj]
        return type(obj)(converted)
    return obj


# ------------------------------------------------------------------ #
# Dict-compatibility mixin
# ------------------------------------------------------------------ #


class _DictAccessMixin:
    """Dict-like access convenience for result dataclasses.

    Supports three access patterns:

    1. ``result["key"]``     — raises ``KeyError`` on miss
    2. ``result.get(key, d)`` — returns *d* on miss (default ``None``)
    3. ``"key" in result``   — membership test
    """

    def __getitem__(self, key: str) -> Any:
        """Attribute lookup via bracket syntax."""
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None

    def get(self, key: str, default: Any = None) -> Any:
        """Attribute lookup with a fallback default."""
        return getattr(self, key, default)

    def __contains__(self, key: object) -> bool:
        """Membership test: ``"key" in result``."""
        if not isinstance(key, str):
            return False
        return hasattr(self, key)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary.

        Runs :func:`_numpy_to_python` on every field so the returned
        dict is fully JSON-serialisable.
        """
        return {
            f.name: _numpy_to_python(getattr(self, f.name))
            for f in fields(self)  # type: ignore[arg-type]
        }


# ------------------------------------------------------------------ #
# FitResult
# ------------------------------------------------------------------ #


@dataclass(frozen=True)
class FitResult(_DictAccessMixin):
    """Result of :func:`~ncf_regression.fit_ml`.

    All fields are accessible both as attributes (``result.beta_hat``)
    and via dict syntax (``result["beta_hat"]``).  The per-observation
    fields are ``None`` unless the fit was run with ``extras=True``.
    """

    # ---- Estimates -------------------------------------------------
    beta_hat: np.ndarray
    """Maximum-likelihood coefficient vector, shape ``(p,)``."""

    log_likelihood: float
    """Log-likelihood at ``beta_hat``."""

    # ---- Optimizer report ------------------------------------------
    converged: bool
    """The optimizer's own success flag."""

    n_iterations: int
    """Iterations reported by the optimizer (``-1`` if unreported)."""

    message: str
    """The optimizer's termination message."""

    # ---- Model metadata --------------------------------------------
    df1: float
    """Numerator degrees of freedom."""

    df2: float
    """Denominator degrees of freedom."""

    link: str
    """``"ncp"`` (λ = exp(Xβ)) or ``"mean"`` (E[Y] = exp(Xβ))."""

    optimizer: str
    """Name of the backend and method that produced the fit."""

    feature_names: list[str]
    """Design-matrix column names."""

    n_observations: int
    """Number of rows of the design matrix."""

    # ---- Extras ----------------------------------------------------
    eta_hat: np.ndarray | None = None
    """Linear predictor ``X β̂``, shape ``(n,)``."""

    mu_hat: np.ndarray | None = None
    """Fitted mean per observation, shape ``(n,)``."""

    var_hat: np.ndarray | None = None
    """Fitted variance per observation, shape ``(n,)``."""

    standard_errors: np.ndarray | None = None
    """Standard errors of ``beta_hat`` from the inverse observed information."""

    @property
    def n_params(self) -> int:
        return int(self.beta_hat.shape[0])

    @property
    def aic(self) -> float:
        """Akaike information criterion, ``2k − 2ℓ``."""
        return 2 * self.n_params - 2 * self.log_likelihood

    @property
    def bic(self) -> float:
        """Bayesian information criterion, ``k log n − 2ℓ``."""
        return self.n_params * float(np.log(self.n_observations)) - 2 * self.log_likelihood

    def to_frame(self) -> pd.DataFrame:
        """Coefficient table indexed by feature name.

        Columns are ``coef`` and, when available, ``std_err`` and ``z``.
        """
        table = pd.DataFrame(
            {"coef": self.beta_hat},
            index=pd.Index(self.feature_names, name="feature"),
        )
        if self.standard_errors is not None:
            table["std_err"] = self.standard_errors
            table["z"] = self.beta_hat / self.standard_errors
        return table

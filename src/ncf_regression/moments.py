"""Moments and parameter conversions for the noncentral F distribution.

For ``F ~ F(df1, df2, λ)`` the mean is linear in the noncentrality
parameter λ:

    E[F] = df2 (λ + df1) / (df1 (df2 − 2)),        df2 > 2

so the mean and λ are interchangeable parameterisations for fixed
degrees of freedom.  :func:`mean_of` and :func:`ncp_from_mean` are
exact algebraic inverses of one another.

Variance as a quadratic in the mean
-----------------------------------
Eliminating λ from the textbook variance

    Var[F] = 2 (df2/df1)² [(df1 + λ)² + (df1 + 2λ)(df2 − 2)]
             / ((df2 − 2)² (df2 − 4)),              df2 > 4

leaves a quadratic in the mean ``m``:

    Var(m) = c0 + c1·m + c2·m²
           = 2 (m − r1)(m − r2) / (df2 − 4)

The roots ``r1 < r2`` have the closed form

    r = (df2/df1) (−1 ± √((df1 + df2 − 2)/(df2 − 2)))

which :func:`roots` uses by default.  The general polynomial solver is
kept as a cross-check; both agree to floating-point precision.

No domain validation happens here.  Arithmetic is carried out in NumPy
float64, so ``df2 == 2`` (mean) or ``df2 == 4`` (variance) produces
``inf``/``nan`` with NumPy's ``RuntimeWarning`` rather than raising.
"""

from __future__ import annotations

import numpy as np

from ._typing import FloatLike

# ------------------------------------------------------------------ #
# Helpers
# ------------------------------------------------------------------ #


def _as_float(x: FloatLike) -> np.ndarray:
    return np.asarray(x, dtype=float)


def _unwrap(result: np.ndarray) -> float | np.ndarray:
    """Return a Python float for 0-d results, the array otherwise."""
    if np.ndim(result) == 0:
        return float(result)
    return result


# ------------------------------------------------------------------ #
# Mean ↔ noncentrality parameter
# ------------------------------------------------------------------ #


def mean_of(df1: FloatLike, df2: FloatLike, ncp: FloatLike) -> float | np.ndarray:
    """Mean of the noncentral F distribution.

    Args:
        df1: Numerator degrees of freedom.
        df2: Denominator degrees of freedom (the mean exists for
            ``df2 > 2``).
        ncp: Noncentrality parameter λ (scalar or array).

    Returns:
        ``df2 (ncp + df1) / (df1 (df2 − 2))``, broadcast elementwise.
    """
    df1, df2, ncp = _as_float(df1), _as_float(df2), _as_float(ncp)
    return _unwrap(df2 * (ncp + df1) / (df1 * (df2 - 2)))


def ncp_from_mean(df1: FloatLike, df2: FloatLike, mean: FloatLike) -> float | np.ndarray:
    """Noncentrality parameter implied by a given mean.

    The exact inverse of :func:`mean_of`.  Means below
    ``df2 / (df2 − 2)`` map to negative values, which no noncentral F
    distribution attains; they are returned unchanged.
    """
    df1, df2, mean = _as_float(df1), _as_float(df2), _as_float(mean)
    return _unwrap(df1 * (df2 - 2) * mean / df2 - df1)


# ------------------------------------------------------------------ #
# Variance polynomial
# ------------------------------------------------------------------ #


def polynomial_coefficients(df1: float, df2: float) -> np.ndarray:
    """Coefficients ``(c0, c1, c2)`` of the variance polynomial in the mean.

    Ordered by ascending power, the convention of
    :mod:`numpy.polynomial.polynomial`, so that
    ``Var(m) = c0 + c1·m + c2·m²``.
    """
    df1, df2 = np.float64(df1), np.float64(df2)
    df2_minus_4 = df2 - 4

    c0 = -2 * df2**2 / (df1 * (df2 - 2) * df2_minus_4)
    c1 = 4 * df2 / (df1 * df2_minus_4)
    c2 = 2 / df2_minus_4

    return np.array([c0, c1, c2], dtype=float)


def roots(df1: float, df2: float, use_general_solver: bool = False) -> np.ndarray:
    """Roots of the variance polynomial, sorted ascending.

    Args:
        df1: Numerator degrees of freedom.
        df2: Denominator degrees of freedom.
        use_general_solver: When ``True``, find the roots of
            :func:`polynomial_coefficients` with
            :func:`numpy.polynomial.polynomial.polyroots` (real parts
            only).  The default uses the closed form, which avoids the
            companion-matrix eigenvalue problem entirely.

    Returns:
        Array ``[r1, r2]`` with ``r1 <= r2``.
    """
    if use_general_solver:
        found = np.polynomial.polynomial.polyroots(polynomial_coefficients(df1, df2))
        return np.sort(np.real(found))

    df1, df2 = np.float64(df1), np.float64(df2)
    pm = np.sqrt((df1 + df2 - 2) / (df2 - 2))
    return (df2 / df1) * np.array([-1 - pm, -1 + pm])


# ------------------------------------------------------------------ #
# Variance
# ------------------------------------------------------------------ #


def variance_from_mean(
    df1: float,
    df2: float,
    mean: FloatLike,
    use_general_solver: bool = False,
) -> float | np.ndarray:
    """Variance of the noncentral F distribution with the given mean.

    Evaluates ``2 (mean − r1)(mean − r2) / (df2 − 4)`` where ``r1, r2``
    come from :func:`roots`.

    Args:
        df1: Numerator degrees of freedom.
        df2: Denominator degrees of freedom (the variance exists for
            ``df2 > 4``).
        mean: Mean value(s) at which to evaluate the variance.
        use_general_solver: Forwarded to :func:`roots`.
    """
    r1, r2 = roots(df1, df2, use_general_solver=use_general_solver)
    mean = _as_float(mean)
    return _unwrap(2 * (mean - r1) * (mean - r2) / (np.float64(df2) - 4))


def variance_of(df1: float, df2: float, ncp: FloatLike) -> float | np.ndarray:
    """Variance of the noncentral F distribution in the λ parameterisation."""
    return variance_from_mean(df1, df2, mean_of(df1, df2, ncp))

"""Input coercion for design matrices and coefficient/response vectors.

All public API functions accept NumPy arrays, plain sequences and
pandas objects.  This module adds transparent support for Polars: when
a user passes a ``polars.DataFrame`` (or ``polars.LazyFrame``) it is
converted to ``pandas.DataFrame`` at the boundary so that internal
code — which operates on float64 NumPy arrays — remains unchanged.

Polars is **not** a required dependency.  If it is not installed, the
converter simply passes pandas objects through untouched.

The shape helpers at the bottom enforce the conformability rules
shared by simulation, fitting and the constraint check: ``X`` is
``(n, p)``, ``beta`` has length ``p`` and ``y`` has length ``n``.
Mismatches fail fast with ``ValueError`` instead of broadcasting into
a silently wrong answer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    import polars as pl

    DataFrameLike: TypeAlias = pd.DataFrame | pl.DataFrame | pl.LazyFrame
else:
    DataFrameLike: TypeAlias = pd.DataFrame

# Runtime detection; Polars is optional.
try:
    import polars as pl

    _HAS_POLARS = True
except ImportError:
    _HAS_POLARS = False


def _ensure_pandas_df(obj: DataFrameLike, *, name: str = "input") -> pd.DataFrame:
    """Convert *obj* to a :class:`pandas.DataFrame` if necessary.

    Accepted types:
        * ``pandas.DataFrame`` — returned as-is.
        * ``polars.DataFrame`` — converted via ``.to_pandas()``.
        * ``polars.LazyFrame`` — collected then converted.

    Args:
        obj: A pandas or Polars DataFrame (or LazyFrame).
        name: Label used in error messages (e.g. ``"X"`` or ``"y"``).

    Returns:
        A pandas ``DataFrame``.

    Raises:
        TypeError: If *obj* is not a recognised DataFrame type.
    """
    if isinstance(obj, pd.DataFrame):
        return obj

    if _HAS_POLARS:
        if isinstance(obj, pl.LazyFrame):
            return obj.collect().to_pandas()
        if isinstance(obj, pl.DataFrame):
            return obj.to_pandas()

    raise TypeError(
        f"'{name}' must be a pandas DataFrame"
        + (" or Polars DataFrame/LazyFrame" if _HAS_POLARS else "")
        + f", got {type(obj).__name__}."
    )


def _is_frame(obj: Any) -> bool:
    """Return ``True`` for pandas or Polars frame objects."""
    if isinstance(obj, pd.DataFrame):
        return True
    return _HAS_POLARS and isinstance(obj, (pl.DataFrame, pl.LazyFrame))


def _as_design_matrix(X: Any, *, name: str = "X") -> tuple[np.ndarray, list[str]]:
    """Return ``X`` as a float64 ``(n, p)`` array plus column names.

    DataFrame inputs keep their column labels; arrays get ``x0 … x{p-1}``.

    Raises:
        ValueError: If *X* is not two-dimensional.
    """
    if _is_frame(X):
        df = _ensure_pandas_df(X, name=name)
        return df.to_numpy(dtype=float), [str(c) for c in df.columns]

    arr = np.asarray(X, dtype=float)
    if arr.ndim != 2:
        msg = f"'{name}' must be a 2-D design matrix, got an array with shape {arr.shape}."
        raise ValueError(msg)
    return arr, [f"x{j}" for j in range(arr.shape[1])]


def _as_vector(obj: Any, *, name: str) -> np.ndarray:
    """Return *obj* as a 1-D float64 array.

    Accepts sequences, NumPy arrays (1-D or a single column),
    pandas/Polars Series and single-column DataFrames.

    Raises:
        ValueError: If *obj* cannot be read as a single vector.
    """
    if _is_frame(obj):
        df = _ensure_pandas_df(obj, name=name)
        if df.shape[1] != 1:
            msg = f"'{name}' must have exactly one column, got {df.shape[1]}."
            raise ValueError(msg)
        return df.iloc[:, 0].to_numpy(dtype=float)
    if isinstance(obj, pd.Series):
        return obj.to_numpy(dtype=float)
    if _HAS_POLARS and isinstance(obj, pl.Series):
        return obj.to_numpy().astype(float)

    arr = np.asarray(obj, dtype=float)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr.ravel()
    if arr.ndim != 1:
        msg = f"'{name}' must be a 1-D vector, got an array with shape {arr.shape}."
        raise ValueError(msg)
    return arr


def _check_coefficients(X: np.ndarray, beta: np.ndarray, *, name: str = "beta") -> None:
    """Raise if *beta* does not have one entry per column of *X*."""
    if beta.shape[0] != X.shape[1]:
        msg = (
            f"Dimension mismatch: '{name}' has length {beta.shape[0]} "
            f"but X has {X.shape[1]} columns (X shape {X.shape})."
        )
        raise ValueError(msg)


def _check_response(X: np.ndarray, y: np.ndarray) -> None:
    """Raise if *X* is empty or *y* does not have one entry per row of *X*."""
    if X.shape[0] == 0:
        msg = f"'X' has no rows (X shape {X.shape}); at least one observation is required."
        raise ValueError(msg)
    if y.shape[0] != X.shape[0]:
        msg = (
            f"Dimension mismatch: 'y' has length {y.shape[0]} "
            f"but X has {X.shape[0]} rows (X shape {X.shape})."
        )
        raise ValueError(msg)


def _check_degrees_of_freedom(df1: float, df2: float) -> None:
    """Reject degrees of freedom for which no F distribution exists."""
    if not df1 > 0:
        msg = f"df1 must be positive, got {df1}."
        raise ValueError(msg)
    if not df2 > 0:
        msg = f"df2 must be positive, got {df2}."
        raise ValueError(msg)

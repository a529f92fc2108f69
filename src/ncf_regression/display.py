"""Formatted ASCII summary of a noncentral F regression fit.

The table mirrors the statsmodels summary style: model metadata and
fit statistics in the top panel, one row per coefficient in the bottom
panel, and a Notes section for anything the reader should not miss
(non-convergence, missing standard errors).
"""

from __future__ import annotations

import math
import textwrap
from typing import TYPE_CHECKING

import numpy as np
from scipy import stats as _sp_stats

if TYPE_CHECKING:
    from ._results import FitResult


def _truncate(name: str, max_len: int) -> str:
    """Truncate *name* to *max_len*, appending ``'...'`` if needed."""
    if len(name) <= max_len:
        return name
    return name[: max_len - 3] + "..."


def _fmt_num(val: float | None, spec: str = ".4f") -> str:
    """Format a number, mapping ``None`` and NaN to ``'N/A'``."""
    if val is None:
        return "N/A"
    if isinstance(val, float) and math.isnan(val):
        return "N/A"
    return format(val, spec)


def _fmt_p(p: float) -> str:
    """Format a p-value: scientific notation if tiny, 4 dp otherwise."""
    if math.isnan(p):
        return "N/A"
    if p < 0.0001:
        return f"{p:.2e}"
    return f"{p:.4f}"


def print_fit_summary(
    result: FitResult,
    *,
    title: str = "Noncentral F Regression Results",
) -> None:
    """Print a fitted model in a formatted ASCII table.

    Standard errors, z statistics and two-sided normal p-values are
    shown only when the fit was run with ``extras=True``.

    Args:
        result: Result returned by :func:`~ncf_regression.fit_ml`.
        title: Title for the output table.
    """
    print("=" * 80)
    for line in textwrap.wrap(title, width=78):
        print(f"{line:^80}")
    print("=" * 80)

    col1 = 40
    col2 = 38
    rows = [
        ("Link:", result.link, "No. Observations:", str(result.n_observations)),
        ("df1:", _fmt_num(result.df1, "g"), "Log-Likelihood:", _fmt_num(result.log_likelihood)),
        ("df2:", _fmt_num(result.df2, "g"), "AIC:", _fmt_num(result.aic)),
        ("Optimizer:", result.optimizer, "BIC:", _fmt_num(result.bic)),
        ("Converged:", str(result.converged), "Iterations:", str(result.n_iterations)),
    ]
    for left_label, left_value, right_label, right_value in rows:
        left_value = _truncate(left_value, col1 - 16)
        print(
            f"{left_label:<16}{left_value:<{col1 - 16}}"
            f"{right_label:>{col2 - 11}} {right_value:>10}"
        )

    print("-" * 80)

    # ── Table geometry (W = 80 chars) ─────────────────────────── #
    #
    #   Feature (fc=24, left) | Coef (14) | Std.Err (14) | z (12) | P>|z| (16)
    #   Total: 24 + 14 + 14 + 12 + 16 = 80
    fc = 24
    print(f"{'Feature':<{fc}}{'Coef':>14}{'Std.Err':>14}{'z':>12}{'P>|z|':>16}")
    print("-" * 80)

    se = result.standard_errors
    for j, feat in enumerate(result.feature_names):
        coef = float(result.beta_hat[j])
        if se is None:
            se_str, z_str, p_str = "", "", ""
        else:
            se_j = float(se[j])
            z = coef / se_j if se_j > 0 else float("nan")
            p = float(2 * _sp_stats.norm.sf(np.abs(z))) if not math.isnan(z) else float("nan")
            se_str, z_str, p_str = _fmt_num(se_j), _fmt_num(z, ".3f"), _fmt_p(p)
        print(
            f"{_truncate(feat, fc - 2):<{fc}}{coef:>14.4f}"
            f"{se_str:>14}{z_str:>12}{p_str:>16}"
        )

    print("=" * 80)

    notes: list[str] = []
    if not result.converged:
        notes.append(f"The optimizer did not report convergence: {result.message}")
    if se is None:
        notes.append("Standard errors not computed; refit with extras=True.")
    elif np.any(np.isnan(se)):
        notes.append(
            "Some standard errors are unavailable: the observed "
            "information matrix is singular or not positive definite."
        )
    if notes:
        print("Notes:")
        for note in notes:
            print(textwrap.fill(note, width=80, initial_indent="  ", subsequent_indent="  "))
        print("=" * 80)

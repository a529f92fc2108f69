"""Optimizer configuration for the ncf_regression package.

Controls which ``scipy.optimize.minimize`` method the default backend
uses when :func:`~ncf_regression.fit_ml` maximises the noncentral F
likelihood.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_optimizer`.
    2. The ``NCF_REGRESSION_OPTIMIZER`` environment variable.
    3. The default, ``"nelder-mead"`` (derivative-free, matching the
       classical ``optim`` default for likelihoods of this kind).

Valid names are ``"nelder-mead"``, ``"powell"``, ``"bfgs"`` and
``"l-bfgs-b"`` (case-insensitive), plus ``"auto"`` which restores the
default resolution order.

Examples:
    Select BFGS globally from the shell::

        export NCF_REGRESSION_OPTIMIZER=bfgs

    Select Powell programmatically::

        import ncf_regression
        ncf_regression.set_optimizer("powell")

    Re-enable the default::

        ncf_regression.set_optimizer("auto")
"""

from __future__ import annotations

import os

_DEFAULT_OPTIMIZER = "nelder-mead"

_OPTIMIZERS = {"nelder-mead", "powell", "bfgs", "l-bfgs-b"}

_VALID_OPTIMIZERS = _OPTIMIZERS | {"auto"}

# Sentinel indicating "no programmatic override has been set".
_optimizer_override: str | None = None


def get_optimizer() -> str:
    """Return the active optimizer method name.

    Resolution order:
        1. Value set by :func:`set_optimizer` (unless ``"auto"``).
        2. ``NCF_REGRESSION_OPTIMIZER`` environment variable.
        3. ``"nelder-mead"``.

    Returns:
        A lower-case method name accepted by ``scipy.optimize.minimize``.
    """
    # 1. Programmatic override
    if _optimizer_override is not None and _optimizer_override != "auto":
        return _optimizer_override

    # 2. Environment variable (unrecognised values are ignored)
    env = os.environ.get("NCF_REGRESSION_OPTIMIZER", "").strip().lower()
    if env in _OPTIMIZERS:
        return env

    # 3. Default
    return _DEFAULT_OPTIMIZER


def set_optimizer(name: str) -> None:
    """Override the optimizer selection.

    Args:
        name: One of ``"nelder-mead"``, ``"powell"``, ``"bfgs"``,
            ``"l-bfgs-b"`` or ``"auto"`` (case-insensitive).
            ``"auto"`` restores the default resolution order.

    Raises:
        ValueError: If *name* is not a recognised optimizer.
    """
    global _optimizer_override
    normalised = name.strip().lower()
    if normalised not in _VALID_OPTIMIZERS:
        raise ValueError(
            f"Unknown optimizer '{name}'. Choose from: {sorted(_VALID_OPTIMIZERS)}"
        )
    _optimizer_override = normalised

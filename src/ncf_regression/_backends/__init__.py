"""Backend abstraction for the noncentral F numerical primitives.

The package never implements its own sampler, density or optimizer.
Each backend implements the :class:`NoncentralFBackend` interface,
which bundles the three primitives that simulation and fitting
consume:

* ``sample``   — draw noncentral F variates,
* ``logpdf``   — evaluate the noncentral F log-density,
* ``minimize`` — unconstrained multivariate minimisation.

:func:`~ncf_regression.simulate`, :func:`~ncf_regression.simulate_from_mean`
and :func:`~ncf_regression.fit_ml` take an optional ``backend=``
argument.  Passing any object that satisfies the protocol injects it
directly (tests use deterministic fakes this way); passing a name or
``None`` goes through :func:`resolve_backend`.

Resolution follows the optimizer policy set by :mod:`.._config`:

1. Programmatic override via :func:`~ncf_regression.set_optimizer`.
2. ``NCF_REGRESSION_OPTIMIZER`` environment variable.
3. ``"nelder-mead"``.

Adding a new backend requires a module ``_backends/_<name>.py`` with a
class implementing :class:`NoncentralFBackend` and a branch in
:func:`resolve_backend`.  No changes to ``simulation.py`` or
``fitting.py`` are needed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

import numpy as np

from .._config import get_optimizer

# ------------------------------------------------------------------ #
# NoncentralFBackend protocol
# ------------------------------------------------------------------ #


@runtime_checkable
class NoncentralFBackend(Protocol):
    """Interface that every numerical backend must implement.

    Attributes:
        name: Short identifier (e.g. ``"scipy"``).
    """

    @property
    def name(self) -> str: ...

    def sample(
        self,
        df1: float,
        df2: float,
        ncp: float | np.ndarray,
        size: int,
        rng: np.random.Generator,
    ) -> np.ndarray:
        """Draw *size* independent noncentral F variates.

        Args:
            df1: Numerator degrees of freedom.
            df2: Denominator degrees of freedom.
            ncp: Noncentrality parameter — a scalar, or an array of
                length *size* giving one λ per draw.
            size: Number of draws.
            rng: Source of randomness.

        Returns:
            Array of shape ``(size,)``.
        """
        ...

    def logpdf(
        self,
        y: np.ndarray,
        df1: float,
        df2: float,
        ncp: float | np.ndarray,
    ) -> np.ndarray:
        """Elementwise natural log of the noncentral F density at *y*."""
        ...

    def minimize(
        self,
        objective: Callable[[np.ndarray], float],
        x0: np.ndarray,
    ) -> Any:
        """Minimise *objective* starting from *x0*.

        Returns:
            An object exposing ``x`` (the minimising point), ``fun``,
            ``success``, ``message`` and ``nit``, in the manner of
            :class:`scipy.optimize.OptimizeResult`.
        """
        ...


# ------------------------------------------------------------------ #
# Resolution
# ------------------------------------------------------------------ #

# Backend instances are stateless apart from their configuration, so
# one instance per (name, optimizer) pair is shared.
_BACKEND_CACHE: dict[tuple[str, str], NoncentralFBackend] = {}


def resolve_backend(
    backend: str | NoncentralFBackend | None = None,
) -> NoncentralFBackend:
    """Return a :class:`NoncentralFBackend` instance for *backend*.

    Args:
        backend: An object implementing the protocol (returned
            unchanged), ``"scipy"``, or ``None`` for the default
            SciPy backend configured with the active optimizer.

    Returns:
        A backend ready for sampling and fitting.

    Raises:
        ValueError: If *backend* is a string naming no known backend.
        TypeError: If *backend* is neither a string nor an object
            implementing the protocol.
    """
    if backend is not None and not isinstance(backend, str):
        if not isinstance(backend, NoncentralFBackend):
            msg = (
                f"backend must be a backend name or implement "
                f"NoncentralFBackend, got {type(backend).__name__}."
            )
            raise TypeError(msg)
        return backend

    name = "scipy" if backend is None else backend.strip().lower()
    method = get_optimizer()
    key = (name, method)

    if key in _BACKEND_CACHE:
        return _BACKEND_CACHE[key]

    if name == "scipy":
        from ._scipy import ScipyBackend

        instance: NoncentralFBackend = ScipyBackend(method=method)

    else:
        msg = f"Unknown backend {backend!r}.  Choose 'scipy'."
        raise ValueError(msg)

    _BACKEND_CACHE[key] = instance
    return instance

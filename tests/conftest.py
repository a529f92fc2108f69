"""Shared fixtures: seeded RNGs and a recording fake backend."""

from types import SimpleNamespace

import numpy as np
import pytest


class RecordingBackend:
    """Deterministic stand-in for the SciPy backend.

    ``sample`` returns the noncentrality parameters themselves,
    ``logpdf`` is a Gaussian kernel centred on λ, and ``minimize``
    evaluates the objective once at ``x0`` and returns a canned point.
    Every call is recorded for inspection.
    """

    name = "fake"

    def __init__(self, x=None, success=True, message="stub finished", nit=7):
        self.x = x
        self.success = success
        self.message = message
        self.nit = nit
        self.sample_calls = []
        self.logpdf_calls = 0
        self.minimize_calls = []

    def sample(self, df1, df2, ncp, size, rng):
        self.sample_calls.append(
            {"df1": df1, "df2": df2, "ncp": np.copy(ncp), "size": size, "rng": rng}
        )
        return np.broadcast_to(np.asarray(ncp, dtype=float), (size,)).copy()

    def logpdf(self, y, df1, df2, ncp):
        self.logpdf_calls += 1
        return -0.5 * (np.asarray(y) - np.asarray(ncp)) ** 2

    def minimize(self, objective, x0):
        self.minimize_calls.append({"objective": objective, "x0": np.copy(x0)})
        x = np.copy(x0) if self.x is None else np.asarray(self.x, dtype=float)
        return SimpleNamespace(
            x=x,
            fun=objective(x),
            success=self.success,
            message=self.message,
            nit=self.nit,
        )


@pytest.fixture()
def rng():
    return np.random.default_rng(42)


@pytest.fixture()
def fake_backend():
    return RecordingBackend()


@pytest.fixture()
def design(rng):
    """Intercept plus one uniform covariate, n = 40."""
    n = 40
    return np.column_stack([np.ones(n), rng.uniform(-1.0, 1.0, n)])

"""Tests for the FitResult record."""

import json
import math

import numpy as np
import pandas as pd
import pytest

from ncf_regression._results import FitResult, _numpy_to_python


def _make_result(**overrides):
    fields = dict(
        beta_hat=np.array([1.0, -0.5]),
        log_likelihood=-120.0,
        converged=True,
        n_iterations=np.int64(57),
        message="Optimization terminated successfully.",
        df1=5.0,
        df2=10.0,
        link="ncp",
        optimizer="scipy (Nelder-Mead)",
        feature_names=["const", "x"],
        n_observations=100,
    )
    fields.update(overrides)
    return FitResult(**fields)


class TestNumpyToPython:
    def test_nested(self):
        obj = {"a": np.array([1, 2]), "b": [np.float64(1.5), np.bool_(True)]}
        assert _numpy_to_python(obj) == {"a": [1, 2], "b": [1.5, True]}

    def test_bool_stays_bool(self):
        assert _numpy_to_python(np.bool_(False)) is False


class TestDictAccess:
    def test_getitem(self):
        result = _make_result()
        assert result["link"] == "ncp"

    def test_getitem_missing(self):
        with pytest.raises(KeyError):
            _make_result()["nope"]

    def test_get_default(self):
        assert _make_result().get("nope", 3) == 3

    def test_contains(self):
        result = _make_result()
        assert "beta_hat" in result
        assert "aic" in result
        assert 1 not in result

    def test_frozen(self):
        result = _make_result()
        with pytest.raises(AttributeError):
            result.link = "mean"


class TestSerialisation:
    def test_to_dict_is_json_serialisable(self):
        result = _make_result(mu_hat=np.array([2.0, 3.0]))
        payload = result.to_dict()
        assert payload["beta_hat"] == [1.0, -0.5]
        assert payload["mu_hat"] == [2.0, 3.0]
        assert payload["var_hat"] is None
        json.dumps(payload)


class TestInformationCriteria:
    def test_aic(self):
        assert _make_result().aic == pytest.approx(2 * 2 + 240.0)

    def test_bic(self):
        assert _make_result().bic == pytest.approx(2 * math.log(100) + 240.0)

    def test_n_params(self):
        assert _make_result().n_params == 2


class TestToFrame:
    def test_without_standard_errors(self):
        frame = _make_result().to_frame()
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns) == ["coef"]
        assert list(frame.index) == ["const", "x"]

    def test_with_standard_errors(self):
        frame = _make_result(standard_errors=np.array([0.5, 0.25])).to_frame()
        assert list(frame.columns) == ["coef", "std_err", "z"]
        np.testing.assert_allclose(frame["z"], [2.0, -2.0])

"""Tests for the noncentral F moment conversions and variance polynomial."""

import numpy as np
import pytest

from ncf_regression.moments import (
    mean_of,
    ncp_from_mean,
    polynomial_coefficients,
    roots,
    variance_from_mean,
    variance_of,
)

# ------------------------------------------------------------------ #
# Helpers
# ------------------------------------------------------------------ #

DF_GRID = [(1.0, 5.0), (2.0, 8.0), (5.0, 10.0), (3.5, 25.0), (20.0, 60.0)]


def _textbook_variance(df1, df2, ncp):
    """Var[F] for F ~ F(df1, df2, ncp), written directly in terms of ncp."""
    return (
        2
        * (df2 / df1) ** 2
        * ((df1 + ncp) ** 2 + (df1 + 2 * ncp) * (df2 - 2))
        / ((df2 - 2) ** 2 * (df2 - 4))
    )


# ------------------------------------------------------------------ #
# mean_of / ncp_from_mean
# ------------------------------------------------------------------ #


class TestMeanConversions:
    def test_mean_worked_example(self):
        # 10 * (3 + 5) / (5 * 8) = 2
        assert mean_of(5, 10, 3) == pytest.approx(2.0)

    def test_ncp_worked_example(self):
        assert ncp_from_mean(5, 10, 2.0) == pytest.approx(3.0)

    def test_central_mean(self):
        # λ = 0 gives the central F mean df2 / (df2 - 2)
        assert mean_of(4, 12, 0) == pytest.approx(12 / 10)

    @pytest.mark.parametrize("df1, df2", DF_GRID)
    @pytest.mark.parametrize("ncp", [0.0, 0.3, 1.0, 7.5, 120.0])
    def test_ncp_round_trip(self, df1, df2, ncp):
        assert ncp_from_mean(df1, df2, mean_of(df1, df2, ncp)) == pytest.approx(
            ncp, abs=1e-10
        )

    @pytest.mark.parametrize("df1, df2", DF_GRID)
    def test_mean_round_trip(self, df1, df2):
        means = np.linspace(df2 / (df2 - 2), 40.0, 25)
        np.testing.assert_allclose(
            mean_of(df1, df2, ncp_from_mean(df1, df2, means)), means, rtol=1e-12
        )

    def test_scalar_input_returns_float(self):
        assert isinstance(mean_of(5, 10, 3), float)
        assert isinstance(ncp_from_mean(5, 10, 2.0), float)

    def test_array_input_broadcasts(self):
        ncp = np.array([0.0, 1.0, 2.0])
        result = mean_of(5, 10, ncp)
        assert isinstance(result, np.ndarray)
        np.testing.assert_allclose(result, 10 * (ncp + 5) / 40)

    def test_negative_ncp_not_rejected(self):
        # Means below the central mean map to negative λ; nothing is clipped.
        assert ncp_from_mean(5, 10, 1.0) == pytest.approx(5 * 8 / 10 - 5)

    def test_df2_equal_two_is_infinite(self):
        with np.errstate(divide="ignore"):
            assert np.isinf(mean_of(5, 2, 3))

    def test_df2_equal_two_does_not_raise_zero_division(self):
        with pytest.warns(RuntimeWarning):
            mean_of(5.0, 2.0, 3.0)


# ------------------------------------------------------------------ #
# polynomial_coefficients / roots
# ------------------------------------------------------------------ #


class TestVariancePolynomial:
    def test_coefficients_worked_example(self):
        c0, c1, c2 = polynomial_coefficients(5, 10)
        assert c0 == pytest.approx(-2 * 100 / (5 * 8 * 6))
        assert c1 == pytest.approx(4 * 10 / (5 * 6))
        assert c2 == pytest.approx(2 / 6)

    def test_coefficients_ascending_order(self):
        coefs = polynomial_coefficients(5, 10)
        assert coefs.shape == (3,)
        # Leading coefficient is 2 / (df2 - 4) > 0 for df2 > 4.
        assert coefs[2] > 0

    @pytest.mark.parametrize("df1, df2", DF_GRID)
    def test_closed_form_matches_general_solver(self, df1, df2):
        closed = roots(df1, df2)
        general = roots(df1, df2, use_general_solver=True)
        np.testing.assert_allclose(closed, general, rtol=1e-8)

    @pytest.mark.parametrize("df1, df2", DF_GRID)
    def test_roots_sorted(self, df1, df2):
        for use_general_solver in (False, True):
            r1, r2 = roots(df1, df2, use_general_solver=use_general_solver)
            assert r1 < r2

    @pytest.mark.parametrize("df1, df2", DF_GRID)
    def test_roots_are_zeros_of_polynomial(self, df1, df2):
        coefs = polynomial_coefficients(df1, df2)
        values = np.polynomial.polynomial.polyval(roots(df1, df2), coefs)
        np.testing.assert_allclose(values, 0.0, atol=1e-9)

    def test_general_solver_returns_real_array(self):
        result = roots(5, 10, use_general_solver=True)
        assert not np.iscomplexobj(result)

    def test_closed_form_worked_example(self):
        pm = np.sqrt(13 / 8)
        np.testing.assert_allclose(roots(5, 10), [2 * (-1 - pm), 2 * (-1 + pm)])


# ------------------------------------------------------------------ #
# variance_from_mean / variance_of
# ------------------------------------------------------------------ #


class TestVariance:
    def test_both_solvers_agree_worked_example(self):
        closed = variance_from_mean(5, 10, 2.0)
        general = variance_from_mean(5, 10, 2.0, use_general_solver=True)
        assert closed == pytest.approx(general, abs=1e-6)

    def test_worked_example_value(self):
        # λ = 3: 2 * 4 * (64 + 88) / (64 * 6)
        assert variance_from_mean(5, 10, 2.0) == pytest.approx(1216 / 384)

    @pytest.mark.parametrize("df1, df2", DF_GRID)
    @pytest.mark.parametrize("ncp", [0.0, 0.5, 4.0, 50.0])
    def test_matches_textbook_formula(self, df1, df2, ncp):
        mean = mean_of(df1, df2, ncp)
        assert variance_from_mean(df1, df2, mean) == pytest.approx(
            _textbook_variance(df1, df2, ncp), rel=1e-10
        )

    @pytest.mark.parametrize("df1, df2", DF_GRID)
    def test_positive_in_feasible_region(self, df1, df2):
        means = mean_of(df1, df2, np.linspace(0.0, 200.0, 50))
        assert np.all(variance_from_mean(df1, df2, means) > 0)

    def test_polynomial_evaluates_to_variance(self):
        means = np.linspace(1.5, 10.0, 9)
        coefs = polynomial_coefficients(3, 15)
        np.testing.assert_allclose(
            np.polynomial.polynomial.polyval(means, coefs),
            variance_from_mean(3, 15, means),
            rtol=1e-10,
        )

    def test_variance_of_uses_ncp(self):
        assert variance_of(5, 10, 3) == pytest.approx(variance_from_mean(5, 10, 2.0))

    def test_array_input_returns_array(self):
        result = variance_from_mean(5, 10, [2.0, 3.0])
        assert isinstance(result, np.ndarray)
        assert result.shape == (2,)

    def test_df2_equal_four_is_not_finite(self):
        with np.errstate(divide="ignore", invalid="ignore"):
            assert not np.isfinite(variance_from_mean(5, 4, 2.0))

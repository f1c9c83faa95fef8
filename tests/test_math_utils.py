"""
Unit tests for mathematical utility functions.
"""

import pytest
import numpy as np
from probkit.utils import (
    odds,
    logit,
    logit_inverse,
    odds_to_probability
)


class TestOdds:
    """Tests for odds function."""

    def test_odds_basic(self):
        """Test basic odds functionality."""
        assert np.isclose(odds(0.5), 1.0)
        assert np.isclose(odds(0.2), 0.25)
        assert np.isclose(odds(0.75), 3.0)

    def test_odds_zero(self):
        """Test that zero probability has zero odds."""
        assert odds(0.0) == 0.0

    def test_odds_near_one(self):
        """Test that odds grow without bound as p approaches 1."""
        assert odds(0.999999) > 1e5
        assert np.isfinite(odds(1 - 1e-12))

    def test_odds_array(self):
        """Test odds with arrays keeps order and length."""
        p = np.array([0.75, 0.0, 0.5])
        result = odds(p)
        assert len(result) == 3
        np.testing.assert_allclose(result, [3.0, 0.0, 1.0])

    def test_odds_list(self):
        """Test odds accepts plain lists."""
        np.testing.assert_allclose(odds([0.2, 0.5]), [0.25, 1.0])

    def test_odds_monotonic(self):
        """Test odds are non-negative and strictly increasing on [0, 1)."""
        p = np.linspace(0, 0.99, 100)
        result = odds(p)
        assert np.all(result >= 0)
        assert np.all(np.diff(result) > 0)

    def test_odds_rejects_one(self):
        """Test that p = 1 is rejected."""
        with pytest.raises(ValueError, match=r"must be in \[0, 1\)"):
            odds(1)

    def test_odds_rejects_negative(self):
        """Test that negative probabilities are rejected."""
        with pytest.raises(ValueError, match=r"must be in \[0, 1\)"):
            odds(-1)

    def test_odds_rejects_any_invalid_element(self):
        """Test that one invalid element rejects the whole array."""
        with pytest.raises(ValueError):
            odds([0.1, 0.5, 1.5])

    def test_odds_rejects_nan(self):
        """Test that NaN is not a valid probability."""
        with pytest.raises(ValueError):
            odds(np.nan)

    def test_odds_rejects_text(self):
        """Test that text input is rejected."""
        with pytest.raises(TypeError, match="must be numeric"):
            odds("0.5")


class TestLogit:
    """Tests for logit function."""

    def test_logit_basic(self):
        """Test basic logit functionality."""
        assert logit(0.5) == 0.0
        assert logit(0.75) > 0
        assert logit(0.25) < 0

    def test_logit_is_log_odds(self):
        """Test that logit equals log of the odds."""
        p = np.array([0.1, 0.3, 0.6, 0.9])
        np.testing.assert_allclose(logit(p), np.log(odds(p)))

    def test_logit_zero(self):
        """Test logit at the lower boundary."""
        assert logit(0.0) == -np.inf

    def test_logit_array(self):
        """Test logit with arrays."""
        p = np.array([0.1, 0.5, 0.9])
        result = logit(p)
        assert len(result) == 3
        assert result[1] == 0.0
        assert np.isclose(result[0], -result[2])

    def test_logit_out_of_domain(self):
        """Test that out-of-domain values raise instead of producing NaN."""
        with pytest.raises(ValueError):
            logit(-0.5)
        with pytest.raises(ValueError):
            logit(1.5)
        with pytest.raises(ValueError):
            logit(1.0)


class TestLogitInverse:
    """Tests for logit_inverse function."""

    def test_logit_inverse_basic(self):
        """Test basic logit_inverse functionality."""
        assert np.isclose(logit_inverse(0.0), 0.5)
        assert logit_inverse(2.0) > 0.5
        assert logit_inverse(-2.0) < 0.5

    def test_logit_inverse_formula(self):
        """Test agreement with exp(x) / (1 + exp(x)) for moderate x."""
        x = np.array([-3.0, -0.5, 0.0, 1.0, 4.0])
        np.testing.assert_allclose(logit_inverse(x), np.exp(x) / (1 + np.exp(x)))

    def test_logit_inverse_large_positive(self):
        """Test that large x stays strictly below 1."""
        result = logit_inverse(10)
        assert 0.9999 < result < 1.0

    def test_logit_inverse_numerical_stability(self):
        """Test logit_inverse does not overflow for large magnitudes."""
        result = logit_inverse(np.array([-1000, 0, 1000]))
        assert all(np.isfinite(result))
        assert 0 <= result[0] < 1e-10
        assert np.isclose(result[1], 0.5)
        assert result[2] > 1 - 1e-10

    def test_logit_inverse_round_trip(self):
        """Test that logit_inverse undoes logit on (0, 1)."""
        p = np.linspace(0.01, 0.99, 25)
        np.testing.assert_allclose(logit_inverse(logit(p)), p)

    def test_logit_inverse_rejects_text(self):
        """Test that text input is rejected."""
        with pytest.raises(TypeError, match="must be numeric"):
            logit_inverse("hello")

    def test_logit_inverse_rejects_bool(self):
        """Test that boolean input is not treated as numeric."""
        with pytest.raises(TypeError):
            logit_inverse(True)
        with pytest.raises(TypeError):
            logit_inverse([0.0, True])

    def test_logit_inverse_rejects_infinite(self):
        """Test that infinite input is rejected rather than mapped to 0 or 1."""
        with pytest.raises(ValueError, match="infinite"):
            logit_inverse(np.inf)
        with pytest.raises(ValueError, match="infinite"):
            logit_inverse([0.0, -np.inf])

    def test_logit_inverse_rejects_nan(self):
        """Test that NaN input is rejected."""
        with pytest.raises(ValueError, match="NaN"):
            logit_inverse(np.nan)


class TestOddsToProbability:
    """Tests for odds_to_probability function."""

    def test_basic(self):
        """Test basic conversion."""
        assert np.isclose(odds_to_probability(1.0), 0.5)
        assert odds_to_probability(0.0) == 0.0

    def test_scalar_returns_scalar(self):
        """Test scalar input gives a numpy scalar, not a 0-d array."""
        assert not isinstance(odds_to_probability(1.0), np.ndarray)
        assert not isinstance(odds(0.5), np.ndarray)

    def test_inverse_of_odds(self):
        """Test that odds_to_probability undoes odds."""
        p = np.array([0.0, 0.2, 0.5, 0.9])
        np.testing.assert_allclose(odds_to_probability(odds(p)), p)

    def test_infinite_odds(self):
        """Test that infinite odds map to probability 1."""
        assert odds_to_probability(np.inf) == 1.0

    def test_rejects_negative(self):
        """Test that negative odds are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            odds_to_probability(-1.0)

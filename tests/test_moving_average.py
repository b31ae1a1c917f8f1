import numpy as np
import pytest

from stat4trading import moving_average
from stat4trading.errors import (
    InsufficientDataError,
    InternalConsistencyError,
    LengthMismatchError,
    Stat4TradingError,
)
from stat4trading.moving_average import ema, output_length_after_ma, sma, span_to_alpha, wma


class TestOutputLength:
    """Tests for output_length_after_ma."""

    def test_formula(self):
        """Test the n - w + 1 formula."""
        assert output_length_after_ma(10, 3) == 8
        assert output_length_after_ma(10, 10) == 1
        assert output_length_after_ma(10, 1) == 10

    def test_can_be_non_positive(self):
        """Test that short series give a non-positive length."""
        assert output_length_after_ma(3, 4) == 0
        assert output_length_after_ma(0, 5) == -4


class TestSpanToAlpha:
    """Tests for span_to_alpha."""

    def test_values(self):
        """Test alpha = 2/(w+1) for a few windows."""
        assert span_to_alpha(1) == 1.0
        assert span_to_alpha(3) == 0.5
        assert span_to_alpha(19) == 0.1

    def test_invalid(self):
        """Test various invalid windows."""
        for bad in (0, -1, 1.5, "5", True):
            with pytest.raises(ValueError, match="window width must be an integer >= 1"):
                span_to_alpha(bad)


class TestSMA:
    """Tests for the simple moving average."""

    def test_basic_functionality(self):
        """Test against a hand-computed result."""
        result = sma([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        np.testing.assert_allclose(result, [2.0, 3.0, 4.0])

    def test_window_one_is_identity(self):
        """Test that a window of one returns the input."""
        x = np.array([3.0, -1.0, 7.5])
        np.testing.assert_allclose(sma(x, 1), x)

    def test_window_equal_length(self):
        """Test a window as long as the series."""
        result = sma([2.0, 4.0, 6.0], 3)
        assert result.shape == (1,)
        assert result[0] == pytest.approx(4.0)

    def test_shift_invariance(self):
        """Test that SMA(x + c) == SMA(x) + c."""
        np.random.seed(0)
        x = np.random.randn(50)
        c = 17.25
        np.testing.assert_allclose(sma(x + c, 7), sma(x, 7) + c, atol=1e-12)

    def test_integer_input(self):
        """Test that integer input gives float output."""
        result = sma([1, 2, 3, 4], 2)
        assert result.dtype == float
        np.testing.assert_allclose(result, [1.5, 2.5, 3.5])

    def test_does_not_mutate_input(self):
        """Test that the input array is left untouched."""
        x = np.array([1.0, 2.0, 3.0, 4.0])
        before = x.copy()
        out = sma(x, 2)
        np.testing.assert_array_equal(x, before)
        assert not np.shares_memory(out, x)

    def test_insufficient_data(self):
        """Test series shorter than the window."""
        with pytest.raises(InsufficientDataError, match="not enough data"):
            sma([1.0, 2.0], 3)
        with pytest.raises(InsufficientDataError):
            sma([], 1)

    def test_insufficient_data_checked_before_expected(self):
        """Test that a short series fails before the length check."""
        with pytest.raises(InsufficientDataError):
            sma([1.0, 2.0], 3, expected=5)

    def test_expected_length_match(self):
        """Test a correctly precomputed expected length."""
        x = np.arange(10.0)
        result = sma(x, 4, expected=output_length_after_ma(x.size, 4))
        assert result.size == 7

    def test_expected_length_mismatch(self):
        """Test a wrong expected length."""
        with pytest.raises(LengthMismatchError, match="expected output length"):
            sma(np.arange(10.0), 4, expected=6)

    def test_expected_length_skip_sentinels(self):
        """Test that None and non-positive values skip the check."""
        x = np.arange(10.0)
        for skip in (None, 0, -1):
            assert sma(x, 4, expected=skip).size == 7

    def test_invalid_window(self):
        """Test a zero window."""
        with pytest.raises(ValueError, match="window width"):
            sma([1.0, 2.0, 3.0], 0)

    def test_multidimensional_rejected(self):
        """Test that 2-D arrays are rejected."""
        with pytest.raises(ValueError, match="x must be 1-D"):
            sma(np.ones((3, 3)), 2)


class TestWMA:
    """Tests for the weighted moving average."""

    def test_basic_functionality(self):
        """Test against a hand-computed result."""
        result = wma([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        np.testing.assert_allclose(result, [14.0 / 6.0, 20.0 / 6.0, 26.0 / 6.0])

    def test_newest_sample_weighted_most(self):
        """Test that the newest sample dominates the window."""
        # A spike at the end of the window moves WMA more than SMA
        x = np.array([0.0, 0.0, 0.0, 10.0])
        assert wma(x, 4)[0] > sma(x, 4)[0]

    def test_constant_input(self):
        """Test that constant input is a fixed point."""
        x = np.full(20, 3.7)
        for w in (1, 2, 5, 20):
            np.testing.assert_allclose(wma(x, w), 3.7)

    def test_weight_sum(self):
        """Test that weights are normalised by w(w+1)/2."""
        # Ones in a single window: sum of weights over w(w+1)/2 is one
        for w in (1, 3, 8):
            np.testing.assert_allclose(wma(np.ones(w), w), [1.0])

    def test_errors(self):
        """Test short input and a wrong expected length."""
        with pytest.raises(InsufficientDataError):
            wma([1.0], 2)
        with pytest.raises(LengthMismatchError):
            wma(np.arange(5.0), 2, expected=3)


class TestEMA:
    """Tests for the exponential moving average."""

    def test_basic_functionality(self):
        """Test against a hand-computed result."""
        # alpha = 2/3; recurrence 1, 5/3, 23/9, 95/27, first w-1 = 1 value dropped
        result = ema([1.0, 2.0, 3.0, 4.0], 2)
        np.testing.assert_allclose(result, [5.0 / 3.0, 23.0 / 9.0, 95.0 / 27.0])

    def test_window_one_is_identity(self):
        """Test that a window of one returns the input."""
        x = np.array([4.0, -2.0, 9.0, 1.5])
        np.testing.assert_allclose(ema(x, 1), x)

    def test_drops_w_minus_one_values(self):
        """Test that only the first w-1 recurrence values are dropped."""
        x = np.arange(1.0, 21.0)
        w = 5
        alpha = 2.0 / (1.0 + w)
        full = np.empty_like(x)
        full[0] = x[0]
        for t in range(1, x.size):
            full[t] = alpha * x[t] + (1 - alpha) * full[t - 1]
        np.testing.assert_allclose(ema(x, w), full[w - 1 :])

    def test_constant_input(self):
        """Test that constant input is a fixed point."""
        np.testing.assert_allclose(ema(np.full(30, 2.5), 10), 2.5)

    def test_errors(self):
        """Test short input and a wrong expected length."""
        with pytest.raises(InsufficientDataError):
            ema([1.0, 2.0], 3)
        with pytest.raises(LengthMismatchError):
            ema(np.arange(5.0), 2, expected=5)

    def test_internal_length_fault(self, monkeypatch):
        """Test that a bad tail length is an internal fault."""
        monkeypatch.setattr(moving_average, "_ema_recurrence", lambda x, alpha: x[:-1])
        with pytest.raises(InternalConsistencyError, match="EMA output length"):
            ema(np.arange(10.0), 3)

    def test_internal_fault_is_not_an_input_error(self, monkeypatch):
        """Test that the internal fault is not a ValueError."""
        monkeypatch.setattr(moving_average, "_ema_recurrence", lambda x, alpha: x[:-1])
        with pytest.raises(AssertionError):
            try:
                ema(np.arange(10.0), 3)
            except ValueError:
                pytest.fail("internal fault must not be reported as ValueError")


class TestMovingAverageFamily:
    """Properties shared by SMA, WMA and EMA."""

    @pytest.mark.parametrize("func", [sma, wma, ema])
    def test_output_length(self, func):
        """Test that output length is n - w + 1 for every window."""
        np.random.seed(1)
        for n in (1, 2, 7, 50):
            x = np.random.randn(n)
            for w in range(1, n + 1):
                assert func(x, w).size == n - w + 1

    @pytest.mark.parametrize("func", [sma, wma, ema])
    def test_errors_are_value_errors(self, func):
        """Test that input errors are ValueErrors."""
        with pytest.raises(ValueError):
            func([1.0], 2)
        assert issubclass(InsufficientDataError, Stat4TradingError)

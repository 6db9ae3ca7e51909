"""
Tests for the logarithmic scale.
"""

import math

import pytest

from relscale import INT_BRIDGE, LinearScale, LogarithmicScale, snap_to_step, snap_to_values

DOUBLINGS = [10.0, 20.0, 40.0, 80.0, 160.0, 320.0, 640.0, 1280.0, 2560.0, 5120.0, 10240.0]


class TestLogMapping:
    """Tests for to_relative / to_absolute in log space."""

    @pytest.mark.parametrize("step", range(11))
    def test_to_absolute_doubles_per_tenth(self, log_scale, step):
        assert log_scale.to_absolute(step / 10) == pytest.approx(DOUBLINGS[step])

    @pytest.mark.parametrize("step", range(11))
    def test_to_relative_doubles_per_tenth(self, log_scale, step):
        assert log_scale.to_relative(DOUBLINGS[step]) == pytest.approx(step / 10)

    def test_boundaries(self, log_scale):
        assert log_scale.to_relative(10.0) == 0.0
        assert log_scale.to_relative(10240.0) == pytest.approx(1.0)
        assert log_scale.to_absolute(0.0) == 10.0
        assert log_scale.to_absolute(1.0) == 10240.0

    @pytest.mark.parametrize("low, high", [(20.0, 20000.0), (50.0, 5000.0), (0.001, 7.0)])
    def test_boundaries_are_exact(self, low, high):
        scale = LogarithmicScale.with_min_max(low, high)

        assert scale.to_absolute(0.0) == low
        assert scale.to_absolute(1.0) == high
        assert scale.to_clamped_absolute(-5.0) == low
        assert scale.to_clamped_absolute(5.0) == high

    @pytest.mark.parametrize("low, high", [(20.0, 20000.0), (50.0, 5000.0), (0.001, 7.0)])
    def test_clamped_absolute_stays_in_bounds(self, low, high):
        scale = LogarithmicScale.with_min_max(low, high)

        for i in range(-100, 201):
            assert low <= scale.to_clamped_absolute(i / 100) <= high

    def test_inverted_bounds_stay_in_range(self):
        scale = LogarithmicScale.with_min_max(5000.0, 50.0)

        assert scale.to_absolute(0.0) == 5000.0
        assert scale.to_absolute(0.5) == pytest.approx(500.0)
        for i in range(101):
            assert 50.0 <= scale.to_clamped_absolute(i / 100) <= 5000.0

    def test_worked_example(self, log_scale):
        assert log_scale.to_absolute(0.5) == pytest.approx(320.0)
        assert log_scale.to_relative(320.0) == pytest.approx(0.5)
        assert log_scale.to_clamped_absolute(-1.0) == pytest.approx(10.0)
        assert log_scale.to_clamped_relative(20240.0) == 1.0

    def test_equal_steps_are_equal_ratios(self):
        scale = LogarithmicScale.with_min_max(20.0, 20000.0)

        values = [scale.to_absolute(i / 6) for i in range(7)]
        ratios = [b / a for a, b in zip(values, values[1:])]

        assert ratios == pytest.approx([10 ** 0.5] * 6)

    @pytest.mark.parametrize("absolute", [10.0, 33.0, 1000.0, 10240.0])
    def test_absolute_round_trip(self, log_scale, absolute):
        relative = log_scale.to_relative(absolute)

        assert log_scale.to_absolute(relative) == pytest.approx(absolute)


class TestLogBounds:
    """Reported bounds are the original, non-log values."""

    def test_get_min_max_are_original(self, log_scale):
        assert log_scale.get_min() == 10.0
        assert log_scale.get_max() == 10240.0

    def test_delegate_holds_log_bounds(self, log_scale):
        delegate = log_scale.linear_delegate

        assert isinstance(delegate, LinearScale)
        assert delegate.get_min() == pytest.approx(1.0)
        assert delegate.get_max() == pytest.approx(math.log10(10240.0))

    def test_bridge_shared_with_delegate(self, log_scale):
        assert log_scale.bridge is log_scale.linear_delegate.bridge


class TestLogOutOfBounds:
    """Extrapolation and undefined input."""

    def test_extrapolated_absolute(self, log_scale):
        assert log_scale.to_absolute(-0.1) == pytest.approx(5.0)
        assert log_scale.to_absolute(-1.0) == pytest.approx(0.009765625)
        assert log_scale.to_absolute(-2.0) == pytest.approx(10 / 1024**2)
        assert log_scale.to_absolute(1.1) == pytest.approx(20480.0)

    def test_extrapolated_relative(self, log_scale):
        assert log_scale.to_relative(1.0) == pytest.approx(-0.3321928, abs=1e-7)

    def test_zero_is_negative_infinity(self, log_scale):
        relative = log_scale.to_relative(0.0)

        assert math.isinf(relative)
        assert relative < 0

    def test_negative_is_nan(self, log_scale):
        assert math.isnan(log_scale.to_relative(-1.0))

    def test_huge_relative_overflows_to_infinity(self, log_scale):
        assert log_scale.to_absolute(1e6) == math.inf

    def test_clamped_absolute(self, log_scale):
        assert log_scale.to_clamped_absolute(0.0) == pytest.approx(10.0)
        assert log_scale.to_clamped_absolute(-1.0) == pytest.approx(10.0)
        assert log_scale.to_clamped_absolute(1.1) == pytest.approx(10240.0)

    def test_clamped_relative(self, log_scale):
        assert log_scale.to_clamped_relative(1.0) == 0.0
        # -inf clamps to 0
        assert log_scale.to_clamped_relative(0.0) == 0.0
        # NaN clamps to 0
        assert log_scale.to_clamped_relative(-1.0) == 0.0
        assert log_scale.to_clamped_relative(20240.0) == 1.0

    def test_degenerate_bounds(self):
        scale = LogarithmicScale.with_min_max(100.0, 100.0)

        assert math.isnan(scale.to_relative(100.0))
        assert scale.to_relative(1000.0) == math.inf


class TestLogRasterizer:
    """The rasterizer sees final absolute values, never log values."""

    def test_rasterizer_receives_absolute_value(self):
        seen = []

        def record(value):
            seen.append(value)
            return value

        scale = LogarithmicScale.with_min_max_and_rasterizer(10.0, 10240.0, record)
        scale.to_absolute(0.5)

        assert len(seen) == 1
        assert seen[0] == pytest.approx(320.0)

    def test_rounding_rasterizer(self):
        scale = LogarithmicScale.with_min_max_and_rasterizer(10.0, 10240.0, round)

        assert scale.to_absolute(0.5) == 320
        assert scale.to_absolute(0.55) == 453
        assert scale.to_clamped_absolute(2.0) == 10240

    def test_rasterizer_not_applied_to_relative(self):
        scale = LogarithmicScale.with_min_max_and_rasterizer(10.0, 10240.0, lambda _: 1.0)

        assert scale.to_relative(320.0) == pytest.approx(0.5)

    def test_step_rasterizer_on_overflowing_extrapolation(self):
        scale = LogarithmicScale.with_min_max_and_rasterizer(10.0, 10240.0, snap_to_step(0.1))

        plain = LogarithmicScale.with_min_max(10.0, 10240.0)

        # 10 * 1024 ** 102 is finite but too large to divide by the step
        assert scale.to_absolute(102.0) == plain.to_absolute(102.0)
        assert math.isfinite(scale.to_absolute(102.0))
        assert scale.to_absolute(1e6) == math.inf

    def test_values_rasterizer_keeps_overflow(self):
        scale = LogarithmicScale.with_min_max_and_rasterizer(
            10.0, 10240.0, snap_to_values([10.0, 100.0, 1000.0])
        )

        assert scale.to_absolute(1e6) == math.inf
        assert scale.to_absolute(1.1) == 1000.0

    def test_rasterizer_exposed(self):
        scale = LogarithmicScale.with_min_max_and_rasterizer(10.0, 10240.0, round)

        assert scale.rasterizer is round
        assert scale.linear_delegate.rasterizer is round


class TestLogBridges:
    """Logarithmic scales over non-float domain types."""

    def test_int_domain_bounds(self):
        scale = LogarithmicScale.with_min_max(1, 1000, bridge=INT_BRIDGE)

        assert scale.get_min() == 1
        assert scale.get_max() == 1000
        assert scale.to_absolute(0.0) == 1
        assert scale.to_absolute(1.0) == 1000

    def test_int_domain_quantizes_log_space(self):
        scale = LogarithmicScale.with_min_max(1, 1000, bridge=INT_BRIDGE)

        # log-space values are domain values too: 1.5 rounds to 2, so 10**2
        assert scale.to_absolute(0.5) == 100
        assert scale.linear_delegate.get_max() == 3

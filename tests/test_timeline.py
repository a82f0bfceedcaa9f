"""Tests for the shutter timeline."""

import pytest
import torch

from propshutter.core import build_timeline, ShutterSample, ConfigurationError


class TestBuildTimeline:
    def test_five_steps(self):
        timeline = build_timeline(5, 1.0)
        assert timeline.positions.tolist() == [1.0, 0.5, 0.0, -0.5, -1.0]
        assert timeline.times.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]

    @pytest.mark.parametrize("n,duration", [(2, 1.0), (10, 0.3), (1000, 2.5)])
    def test_endpoints_and_length(self, n, duration):
        timeline = build_timeline(n, duration)
        assert len(timeline) == n
        assert timeline[0] == ShutterSample(1.0, 0.0)
        assert timeline[n - 1].spatial_position == -1.0
        assert timeline[n - 1].elapsed_time == pytest.approx(duration)

    def test_monotonic(self):
        timeline = build_timeline(700, 1.0)
        assert (timeline.positions[1:] < timeline.positions[:-1]).all()
        assert (timeline.times[1:] > timeline.times[:-1]).all()

    def test_affine_mapping(self):
        timeline = build_timeline(101, 2.0)
        expected = 1.0 - 2.0 * timeline.times / 2.0
        assert torch.allclose(timeline.positions, expected, atol=1e-12)
        assert timeline.time_at(0.0) == pytest.approx(1.0)

    def test_iteration(self):
        samples = list(build_timeline(3, 1.0))
        assert samples == [ShutterSample(1.0, 0.0), ShutterSample(0.0, 0.5), ShutterSample(-1.0, 1.0)]

    @pytest.mark.parametrize("n", [1, 0, -3])
    def test_too_few_steps(self, n):
        with pytest.raises(ConfigurationError):
            build_timeline(n, 1.0)

    def test_non_integer_steps(self):
        with pytest.raises(ConfigurationError):
            build_timeline(3.5, 1.0)

    @pytest.mark.parametrize("duration", [0.0, -1.0, float("inf")])
    def test_invalid_duration(self, duration):
        with pytest.raises(ConfigurationError):
            build_timeline(5, duration)

    def test_dtype(self):
        timeline = build_timeline(4, 1.0, dtype=torch.float32)
        assert timeline.positions.dtype == torch.float32

"""Tests for the rotation model."""

import math

import pytest
import torch

from propshutter.core import position, RotationState, angular_velocity


class TestPosition:
    def test_initial_position(self):
        p = position(0.0, 1.0, 0.0)
        assert isinstance(p, RotationState)
        assert p.x.item() == pytest.approx(1.0)
        assert p.y.item() == 0.0

    def test_quarter_turn(self):
        p = position(0.25, 1.0, 0.0)
        assert p.x.item() == pytest.approx(0.0, abs=1e-12)
        assert p.y.item() == pytest.approx(1.0)

    def test_phase_offset(self):
        p = position(0.0, 3.0, math.pi / 2)
        assert p.x.item() == pytest.approx(0.0, abs=1e-12)
        assert p.y.item() == pytest.approx(1.0)

    def test_on_unit_circle(self):
        g = torch.Generator().manual_seed(0)
        t = torch.rand(200, generator=g, dtype=torch.float64) * 20 - 10
        f = torch.rand(200, generator=g, dtype=torch.float64) * 10 - 5
        ph = torch.rand(200, generator=g, dtype=torch.float64) * 2 * math.pi
        p = position(t, f, ph)
        assert torch.allclose(p.x ** 2 + p.y ** 2, torch.ones(200, dtype=torch.float64), atol=1e-9)

    @pytest.mark.parametrize("freq", [0.5, 1.0, 1.5, 7.0])
    def test_periodic(self, freq):
        t = torch.linspace(0, 3, 50, dtype=torch.float64)
        p0 = position(t, freq, 0.4)
        p1 = position(t + 1 / freq, freq, 0.4)
        assert torch.allclose(p0.x, p1.x, atol=1e-9)
        assert torch.allclose(p0.y, p1.y, atol=1e-9)

    def test_broadcast_blades_against_times(self):
        t = torch.linspace(0, 1, 5, dtype=torch.float64).view(1, -1)
        phases = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64).view(-1, 1)
        p = position(t, 1.0, phases)
        assert p.x.shape == (3, 5)
        assert p.y[1, 0].item() == pytest.approx(math.sin(1.0))

    def test_angular_velocity(self):
        assert angular_velocity(1.0) == pytest.approx(2 * math.pi)

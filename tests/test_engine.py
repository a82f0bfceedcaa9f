"""Tests for PhotographEngine."""

import math

import pytest
import torch

from propshutter.core import (
    PhotographEngine,
    PropellerParams,
    ConfigurationError,
    PhotoPoint,
    ShutterSample,
    Blade,
    blade_phases,
    sample_coordinate,
    position,
)


class TestPhotographEngine:
    @pytest.fixture
    def params(self):
        return PropellerParams(step_count=700, shutter_duration=1.0, frequency_hz=1.5,
                               phase_offsets=(0.0, 2 * math.pi / 3, 4 * math.pi / 3))

    @pytest.fixture
    def engine(self, params):
        return PhotographEngine(params)

    def test_three_blades(self, engine):
        photographs, _ = engine.synthesize()

        assert len(photographs) == 3
        for photo in photographs:
            assert 0 < len(photo) <= 700

    def test_points_inside_disc(self, engine):
        photographs, _ = engine.synthesize()

        for photo in photographs:
            r2 = photo.coordinates ** 2 + photo.positions ** 2
            assert (r2 < 1).all()
            assert torch.isfinite(photo.coordinates).all()

    def test_meta(self, engine):
        photographs, meta = engine.synthesize()

        assert "timeline" in meta
        assert "coordinates" in meta
        assert "inside" in meta
        assert "degenerate" in meta
        assert meta["coordinates"].shape == (3, 700)
        assert meta["params"] is engine.params
        assert int(meta["inside"][1].sum()) == len(photographs[1])

    def test_matches_scalar_solver(self, engine, params):
        photographs, meta = engine.synthesize()
        timeline = meta["timeline"]
        photo = photographs[2]
        for i in [0, len(photo) // 2, len(photo) - 1]:
            idx = int(photo.sample_indices[i])
            expected = sample_coordinate(timeline[idx], params.frequency_hz, params.phase_offsets[2])
            assert photo.coordinates[i].item() == pytest.approx(expected)

    def test_degenerate_sample_excluded(self):
        engine = PhotographEngine(PropellerParams(step_count=5, frequency_hz=1.0, phase_offsets=(0.0,)))
        photographs, meta = engine.synthesize()

        assert meta["degenerate"][0, 0].item()
        assert photographs[0].sample_indices.tolist() == [1, 2, 3]

    def test_blade_count_is_free(self):
        engine = PhotographEngine(PropellerParams(step_count=100, phase_offsets=blade_phases(5)))
        photographs, _ = engine.synthesize()

        assert len(photographs) == 5
        assert [p.blade.index for p in photographs] == [0, 1, 2, 3, 4]

    def test_override_params(self, engine):
        photographs, meta = engine.synthesize(PropellerParams(step_count=50, phase_offsets=(0.5,)))
        assert len(photographs) == 1
        assert len(meta["timeline"]) == 50

    def test_invalid_params_rejected(self):
        with pytest.raises(ConfigurationError):
            PhotographEngine(PropellerParams(step_count=1))

    def test_invalid_override_rejected(self, engine):
        with pytest.raises(ConfigurationError):
            engine.synthesize(PropellerParams(shutter_duration=0.0))

    def test_deterministic(self, engine):
        a, _ = engine.synthesize()
        b, _ = engine.synthesize()
        assert torch.equal(a[0].coordinates, b[0].coordinates)

    def test_photo_points(self, engine):
        photographs, _ = engine.synthesize()
        points = list(photographs[0].points())

        assert len(points) == len(photographs[0])
        assert all(isinstance(p, PhotoPoint) for p in points)
        assert not any(p.is_degenerate for p in points)
        assert points[0].blade == photographs[0].blade

    def test_photo_point_degenerate(self):
        point = PhotoPoint(Blade(0.0), ShutterSample(1.0, 0.0), float("inf"))
        assert point.is_degenerate


class TestExposureFrames:
    @pytest.fixture
    def engine(self):
        return PhotographEngine(PropellerParams(step_count=20, frequency_hz=1.5))

    def test_segments(self, engine):
        segments = engine.blade_segments(0.0)

        assert segments.shape == (3, 2, 2)
        assert torch.allclose(segments[:, 1], -segments[:, 0])
        assert segments[0, 0].tolist() == pytest.approx([1.0, 0.0])

    def test_exposed_prefix(self, engine):
        photographs, meta = engine.synthesize()
        frame = engine.exposure_frame(10, photographs, meta["timeline"])

        assert frame.index == 10
        assert frame.sample == meta["timeline"][10]
        for photo in frame.photographs:
            assert (photo.sample_indices <= 10).all()

    def test_last_frame_is_full_photograph(self, engine):
        photographs, meta = engine.synthesize()
        frame = engine.exposure_frame(19, photographs, meta["timeline"])

        assert [len(p) for p in frame.photographs] == [len(p) for p in photographs]

    def test_frame_out_of_range(self, engine):
        photographs, meta = engine.synthesize()
        with pytest.raises(IndexError):
            engine.exposure_frame(20, photographs, meta["timeline"])

    def test_exposure_frames(self, engine):
        frames = list(engine.exposure_frames())

        assert len(frames) == 20
        counts = [sum(len(p) for p in f.photographs) for f in frames]
        assert counts == sorted(counts)

    def test_frame_uses_synthesized_params(self, engine):
        override = PropellerParams(step_count=20, frequency_hz=2.0, phase_offsets=(0.5,))
        photographs, meta = engine.synthesize(override)

        frame = engine.exposure_frame(5, photographs, meta["timeline"], meta["params"])

        assert frame.segments.shape == (1, 2, 2)
        assert len(frame.segments) == len(photographs)
        tip = position(frame.sample.elapsed_time, 2.0, 0.5)
        assert frame.segments[0, 0].tolist() == pytest.approx([float(tip.x), float(tip.y)])

"""
test_easing.py
--------------
Unit tests for the elastic ease-out curve and interpolation helpers.
"""

import math

import pytest

from src.core.layout.easing import clamp, elastic_ease_out, elastic_offset, lerp


class TestElasticEaseOut:

    def test_endpoints(self):
        """Curve starts at 1 + ease(0) = 1 and ends exactly at 1."""
        assert elastic_offset(0.0) == 0.0
        assert elastic_offset(1.0) == 1.0
        assert elastic_ease_out(0.0) == 1.0
        assert elastic_ease_out(1.0) == 1.0

    def test_matches_reference_formula(self):
        p = 0.3
        s = p / (2 * math.pi) * math.asin(1)
        for t in (0.1, 0.25, 0.5, 0.8, 0.95):
            expected = 1 - (2 ** (10 * (t - 1)) * math.sin((t - 1 - s) * 2 * math.pi / p))
            assert elastic_ease_out(t) == pytest.approx(expected)

    def test_overshoots_before_settling(self):
        """The bounce leaves [0, 1] transiently."""
        samples = [elastic_ease_out(i / 100) for i in range(1, 100)]
        assert any(value > 1.0 for value in samples)
        assert all(math.isfinite(value) for value in samples)

    def test_progress_is_clamped(self):
        assert elastic_ease_out(1.7) == 1.0
        assert elastic_ease_out(-0.5) == elastic_ease_out(0.0)


class TestHelpers:

    def test_lerp_extrapolates(self):
        assert lerp(10, 20, 0.5) == 15
        assert lerp(10, 20, 1.5) == 25
        assert lerp(10, 20, -0.5) == 5

    def test_clamp(self):
        assert clamp(2.0) == 1.0
        assert clamp(-1.0) == 0.0
        assert clamp(0.3) == 0.3

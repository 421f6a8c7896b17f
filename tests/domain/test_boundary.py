from __future__ import annotations

import math

import pytest

from diffusion_search.domain.boundary import radius, reflect_outer, sample_annulus_point
from diffusion_search.errors import RejectionLimitError
from diffusion_search.rng.uniform import UniformEngine


def test_radius() -> None:
    assert radius([3.0, 4.0]) == 5.0
    assert radius([0.0, 0.0, 0.0]) == 0.0
    assert radius([-2.0]) == 2.0


class TestReflectOuter:
    def test_overshoot_is_mirrored_inside(self) -> None:
        position = [10.5, 0.0]
        reflect_outer(position, 10.0, 10.5)
        assert position[0] == pytest.approx(9.5)
        assert position[1] == 0.0

    def test_direction_is_preserved(self) -> None:
        unit = [1.0 / math.sqrt(3.0)] * 3
        position = [11.0 * u for u in unit]
        reflect_outer(position, 10.0, radius(position))
        assert radius(position) == pytest.approx(9.0)
        for x, u in zip(position, unit):
            assert x / radius(position) == pytest.approx(u)


class TestSampleAnnulusPoint:
    def test_points_lie_in_shell(self) -> None:
        engine = UniformEngine(1231423)
        for _ in range(500):
            point = sample_annulus_point(engine.draw, 3, 5.0, 2.0)
            assert len(point) == 3
            assert 2.0 <= radius(point) <= 5.0

    def test_one_dimensional_shell(self) -> None:
        engine = UniformEngine(8)
        for _ in range(200):
            (x,) = sample_annulus_point(engine.draw, 1, 10.0, 1.0)
            assert 1.0 <= abs(x) <= 10.0

    def test_rejects_points_inside_target(self) -> None:
        # 0.5 maps to the origin on every axis.
        with pytest.raises(RejectionLimitError, match="placement"):
            sample_annulus_point(lambda: 0.5, 2, 10.0, 1.0, max_tries=5)

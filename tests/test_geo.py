"""Tests for point synthesis around a settlement."""
import itertools
import math
import random

import pytest

from utils.geo import (
    FALLBACK_BASE_KM, FALLBACK_STEP_KM, KM_PER_DEGREE, MAX_RADIUS_KM, MIN_DISTANCE_KM,
    distance_km, generate_nearby_points, offset_point,
)

KYIV = (50.4501, 30.5234)


class ConstantRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def test_single_point_is_center():
    assert generate_nearby_points(*KYIV, 1) == [KYIV]


def test_single_point_uses_no_randomness():
    rng = ConstantRandom(0.7)
    generate_nearby_points(*KYIV, 1, rng=rng)
    assert rng.calls == 0


def test_zero_count():
    assert generate_nearby_points(*KYIV, 0) == []


@pytest.mark.parametrize("count", [2, 3, 7, 15])
def test_points_within_radius_and_separated(count):
    points = generate_nearby_points(*KYIV, count, rng=random.Random(count))
    assert len(points) == count

    for lat, lng in points:
        assert distance_km(lat, lng, *KYIV, KYIV[0]) <= MAX_RADIUS_KM + 1e-9

    for (lat1, lng1), (lat2, lng2) in itertools.combinations(points, 2):
        assert distance_km(lat1, lng1, lat2, lng2, KYIV[0]) >= MIN_DISTANCE_KM


def test_fallback_is_deterministic():
    """Constant randomness collides after the first point, forcing fallback placement."""
    lat, lng = KYIV
    points = generate_nearby_points(lat, lng, 3, rng=ConstantRandom(0.0))

    assert points[0] == (lat, lng)

    cos_lat = math.cos(math.radians(lat))
    for i in (1, 2):
        angle = i * 2 * math.pi / 3
        distance = FALLBACK_BASE_KM + i * FALLBACK_STEP_KM
        expected = (
            lat + distance * math.cos(angle) / KM_PER_DEGREE,
            lng + distance * math.sin(angle) / (KM_PER_DEGREE * cos_lat),
        )
        assert points[i] == pytest.approx(expected, abs=1e-12)
        assert distance_km(*points[i], lat, lng, lat) == pytest.approx(distance)


def test_fallback_same_on_every_call():
    first = generate_nearby_points(*KYIV, 5, rng=ConstantRandom(0.0))
    second = generate_nearby_points(*KYIV, 5, rng=ConstantRandom(0.0))
    assert first == second


def test_fallback_may_exceed_max_radius():
    points = generate_nearby_points(*KYIV, 12, rng=ConstantRandom(0.0))
    assert distance_km(*points[11], *KYIV, KYIV[0]) == pytest.approx(0.2 + 11 * 0.1)
    assert distance_km(*points[11], *KYIV, KYIV[0]) > MAX_RADIUS_KM


def test_longitude_scaled_by_latitude():
    """1 km east is more degrees of longitude further north."""
    _, lng_south = offset_point(45.0, 30.0, 1.0, math.pi / 2)
    _, lng_north = offset_point(60.0, 30.0, 1.0, math.pi / 2)
    assert (lng_north - 30.0) > (lng_south - 30.0)
    assert distance_km(60.0, lng_north, 60.0, 30.0, 60.0) == pytest.approx(1.0)


def test_distance_km_degree():
    assert distance_km(1.0, 0.0, 0.0, 0.0, 0.0) == pytest.approx(KM_PER_DEGREE)

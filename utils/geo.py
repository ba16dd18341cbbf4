"""
Geo utilities - spread several reports around one settlement.

Distances use an equirectangular approximation around the centre point
(111.32 km per degree, longitude scaled by cos(latitude)), which is
accurate enough at the ~1 km scale we work with.
"""
import math
import random
from typing import List, Tuple

KM_PER_DEGREE = 111.32
MAX_RADIUS_KM = 1.0
MIN_DISTANCE_KM = 0.05
MAX_ATTEMPTS = 50

# Deterministic placement when random sampling runs out of attempts
FALLBACK_BASE_KM = 0.2
FALLBACK_STEP_KM = 0.1

Point = Tuple[float, float]


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float, ref_lat: float) -> float:
    """Approximate distance in km between two nearby points."""
    cos_lat = math.cos(math.radians(ref_lat))
    dy = (lat1 - lat2) * KM_PER_DEGREE
    dx = (lng1 - lng2) * KM_PER_DEGREE * cos_lat
    return math.sqrt(dy * dy + dx * dx)


def offset_point(lat: float, lng: float, distance: float, angle: float) -> Point:
    """Move `distance` km from (lat, lng) along `angle` radians (0 = north)."""
    cos_lat = math.cos(math.radians(lat))
    new_lat = lat + distance * math.cos(angle) / KM_PER_DEGREE
    new_lng = lng + distance * math.sin(angle) / (KM_PER_DEGREE * cos_lat)
    return new_lat, new_lng


def generate_nearby_points(center_lat: float, center_lng: float, count: int,
                           rng=None) -> List[Point]:
    """
    Generate `count` points around a centre.

    A single report stays exactly on the centre. Several reports are
    scattered within MAX_RADIUS_KM and kept MIN_DISTANCE_KM apart by
    rejection sampling; a point that can't be placed in MAX_ATTEMPTS
    tries is put on a fixed spiral instead.

    Args:
        center_lat, center_lng: Settlement coordinates
        count: Number of points
        rng: Random source with random() (random module by default)

    Returns:
        List of (lat, lng)
    """
    if count <= 0:
        return []
    if count == 1:
        return [(center_lat, center_lng)]

    rng = rng or random
    points: List[Point] = []

    for i in range(count):
        point = None
        for _ in range(MAX_ATTEMPTS):
            angle = rng.random() * 2 * math.pi
            distance = rng.random() * MAX_RADIUS_KM
            lat, lng = offset_point(center_lat, center_lng, distance, angle)

            if distance_km(lat, lng, center_lat, center_lng, center_lat) > MAX_RADIUS_KM:
                continue
            if any(distance_km(lat, lng, p_lat, p_lng, center_lat) < MIN_DISTANCE_KM
                   for p_lat, p_lng in points):
                continue

            point = (lat, lng)
            break

        if point is None:
            angle = i * 2 * math.pi / count
            distance = FALLBACK_BASE_KM + i * FALLBACK_STEP_KM
            point = offset_point(center_lat, center_lng, distance, angle)

        points.append(point)

    return points

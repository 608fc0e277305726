#!/usr/bin/env python3
"""
Suggestion Scoring — Geospatial Proximity

Computes the great-circle distance between two WGS84 points with the
Haversine formula and maps it onto a [0.0, 1.0] proximity score with a
linear decay: coincident points score 1.0, points at or beyond the
reference distance score 0.0.

Out-of-range coordinates are rejected with InvalidCoordinate; they are
never wrapped or clamped.

Pure math with the standard library; no geo packages needed.
"""

from __future__ import annotations

import math

from .exceptions import InvalidCoordinate
from .models import Coordinate
from .score_type import ScoreType


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM = 6371.0

# Half the circumference: no two points on the sphere are further apart
MAX_GREAT_CIRCLE_KM = math.pi * EARTH_RADIUS_KM


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_coordinate(latitude: float, longitude: float) -> Coordinate:
    """
    Return a Coordinate for the pair, or raise InvalidCoordinate when either
    value is not finite or falls outside [-90, 90] / [-180, 180].
    """
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidCoordinate(latitude, longitude, "values must be finite")
    if not -90.0 <= latitude <= 90.0:
        raise InvalidCoordinate(latitude, longitude, "latitude must be within [-90, 90]")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidCoordinate(latitude, longitude, "longitude must be within [-180, 180]")
    return Coordinate(latitude=float(latitude), longitude=float(longitude))


# ---------------------------------------------------------------------------
# Core distance calculation
# ---------------------------------------------------------------------------


def haversine_km(coord_a: Coordinate, coord_b: Coordinate) -> float:
    """
    Compute the great-circle distance in kilometres between two WGS84 points
    using the Haversine formula.
    """
    lat1 = math.radians(coord_a.latitude)
    lat2 = math.radians(coord_b.latitude)
    dlat = math.radians(coord_b.latitude - coord_a.latitude)
    dlon = math.radians(coord_b.longitude - coord_a.longitude)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a marginally past 1.0 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def proximity_score(distance_km: float, max_distance_km: float = MAX_GREAT_CIRCLE_KM) -> float:
    """
    Map a distance onto a proximity score in [0.0, 1.0].

    Scoring curve:
        - distance == 0                → 1.0
        - 0 < distance < max_distance  → linear decay from 1.0 to 0.0
        - distance >= max_distance     → 0.0
    """
    if max_distance_km <= 0:
        raise ValueError("max_distance_km must be positive")
    return min(1.0, max(0.0, 1.0 - distance_km / max_distance_km))


class GeoDistanceScorer:
    """
    Haversine-based proximity scorer.

    Parameters
    ----------
    max_distance_km : float
        Distance at which proximity reaches 0.0. Defaults to the antipodal
        distance, so every pair on the globe gets a graded score.
    """

    def __init__(self, max_distance_km: float = MAX_GREAT_CIRCLE_KM):
        if not (math.isfinite(max_distance_km) and max_distance_km > 0):
            raise ValueError("max_distance_km must be a positive finite number")
        self._max_distance_km = max_distance_km

    @property
    def max_distance_km(self) -> float:
        return self._max_distance_km

    def distance_km(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Validated great-circle distance in kilometres."""
        coord_a = validate_coordinate(lat1, lon1)
        coord_b = validate_coordinate(lat2, lon2)
        return haversine_km(coord_a, coord_b)

    def normalize(self, distance_km: float) -> float:
        """Proximity score for an already computed distance."""
        return proximity_score(distance_km, self._max_distance_km)

    def score(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Normalised proximity of the two points in [0.0, 1.0]."""
        return self.normalize(self.distance_km(lat1, lon1, lat2, lon2))

    def distance(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        score_type: ScoreType = ScoreType.NORMALIZED,
    ) -> float:
        """
        Distance between the two points in the representation chosen by
        *score_type*: normalised proximity or raw kilometres.
        """
        if score_type is ScoreType.NORMALIZED:
            return self.score(lat1, lon1, lat2, lon2)
        if score_type is ScoreType.RAW:
            return self.distance_km(lat1, lon1, lat2, lon2)
        raise ValueError(f"Unsupported score type: {score_type!r}")

"""Tests for the haversine proximity scorer."""

import math

import pytest

from suggestion_scoring.exceptions import InvalidCoordinate
from suggestion_scoring.geo_distance import (
    EARTH_RADIUS_KM,
    MAX_GREAT_CIRCLE_KM,
    GeoDistanceScorer,
    haversine_km,
    proximity_score,
    validate_coordinate,
)
from suggestion_scoring.models import Coordinate
from suggestion_scoring.score_type import ScoreType

MADRID = Coordinate(40.4168, -3.7038)
BARCELONA = Coordinate(41.3874, 2.1686)


# ---- validate_coordinate ----------------------------------------------------


class TestValidateCoordinate:
    def test_valid(self):
        assert validate_coordinate(40.4168, -3.7038) == MADRID

    @pytest.mark.parametrize(("lat", "lon"), [(90.0, 180.0), (-90.0, -180.0), (0.0, 0.0)])
    def test_boundaries_accepted(self, lat, lon):
        assert validate_coordinate(lat, lon).is_valid()

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(200.0, 0.0), (-90.5, 0.0), (0.0, 180.1), (0.0, -200.0)],
    )
    def test_out_of_range_rejected(self, lat, lon):
        with pytest.raises(InvalidCoordinate) as exc_info:
            validate_coordinate(lat, lon)
        assert exc_info.value.latitude == lat
        assert exc_info.value.longitude == lon

    @pytest.mark.parametrize(("lat", "lon"), [(math.nan, 0.0), (0.0, math.inf)])
    def test_non_finite_rejected(self, lat, lon):
        with pytest.raises(InvalidCoordinate):
            validate_coordinate(lat, lon)


# ---- haversine_km -----------------------------------------------------------


class TestHaversineKm:
    def test_same_point_is_zero(self):
        assert haversine_km(MADRID, MADRID) == 0.0

    def test_known_distance_madrid_to_barcelona(self):
        """Madrid to Barcelona is roughly 505 km as the crow flies."""
        assert 490.0 < haversine_km(MADRID, BARCELONA) < 520.0

    def test_one_degree_of_latitude(self):
        dist = haversine_km(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
        assert dist == pytest.approx(EARTH_RADIUS_KM * math.pi / 180.0)

    def test_antipodal_points(self):
        dist = haversine_km(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
        assert dist == pytest.approx(MAX_GREAT_CIRCLE_KM)

    def test_symmetry(self):
        assert haversine_km(MADRID, BARCELONA) == pytest.approx(haversine_km(BARCELONA, MADRID))


# ---- proximity_score --------------------------------------------------------


class TestProximityScore:
    def test_zero_distance_scores_one(self):
        assert proximity_score(0.0, 100.0) == 1.0

    def test_linear_decay(self):
        assert proximity_score(25.0, 100.0) == pytest.approx(0.75)

    def test_at_and_beyond_max_scores_zero(self):
        assert proximity_score(100.0, 100.0) == 0.0
        assert proximity_score(5000.0, 100.0) == 0.0

    def test_non_positive_max_rejected(self):
        with pytest.raises(ValueError):
            proximity_score(1.0, 0.0)


# ---- GeoDistanceScorer ------------------------------------------------------


class TestGeoDistanceScorer:
    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(0.0, 0.0), (40.4168, -3.7038), (-33.8688, 151.2093), (90.0, 0.0), (-90.0, 180.0)],
    )
    def test_coincident_points_score_one(self, lat, lon):
        assert GeoDistanceScorer().score(lat, lon, lat, lon) == 1.0

    def test_monotonically_non_increasing(self):
        scorer = GeoDistanceScorer()
        latitudes = [0.0, 0.001, 0.1, 1.0, 5.0, 20.0, 45.0, 89.0, 90.0]
        scores = [scorer.score(0.0, 0.0, lat, 0.0) for lat in latitudes]
        assert scores == sorted(scores, reverse=True)

    def test_monotonic_with_small_reference_distance(self):
        scorer = GeoDistanceScorer(max_distance_km=50.0)
        offsets = [0.0, 0.05, 0.1, 0.3, 0.5, 1.0, 10.0]
        scores = [scorer.score(40.0, -3.0, 40.0 + d, -3.0) for d in offsets]
        assert scores == sorted(scores, reverse=True)
        assert scores[-1] == 0.0

    def test_antipodal_scores_zero(self):
        assert GeoDistanceScorer().score(0.0, 0.0, 0.0, 180.0) == pytest.approx(0.0, abs=1e-12)

    def test_scores_are_bounded(self):
        scorer = GeoDistanceScorer()
        score = scorer.score(MADRID.latitude, MADRID.longitude, BARCELONA.latitude, BARCELONA.longitude)
        assert 0.0 < score < 1.0

    def test_invalid_latitude_raises(self):
        with pytest.raises(InvalidCoordinate):
            GeoDistanceScorer().score(200.0, 0.0, 0.0, 0.0)

    def test_invalid_second_point_raises(self):
        with pytest.raises(InvalidCoordinate):
            GeoDistanceScorer().score(0.0, 0.0, 0.0, 181.0)

    def test_raw_score_type_returns_kilometres(self):
        scorer = GeoDistanceScorer()
        raw = scorer.distance(
            MADRID.latitude, MADRID.longitude, BARCELONA.latitude, BARCELONA.longitude, ScoreType.RAW
        )
        assert raw == pytest.approx(haversine_km(MADRID, BARCELONA))

    def test_normalize_matches_score(self):
        scorer = GeoDistanceScorer(max_distance_km=1000.0)
        dist = scorer.distance_km(MADRID.latitude, MADRID.longitude, BARCELONA.latitude, BARCELONA.longitude)
        assert scorer.normalize(dist) == pytest.approx(1 - dist / 1000.0)

    @pytest.mark.parametrize("bad", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_reference_distance(self, bad):
        with pytest.raises(ValueError):
            GeoDistanceScorer(max_distance_km=bad)

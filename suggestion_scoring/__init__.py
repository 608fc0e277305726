"""Suggestion Scoring — rank location suggestions by name similarity and proximity."""

from .config import ScorerConfig, load_config
from .exceptions import (
    InputTooLong,
    InvalidConfiguration,
    InvalidCoordinate,
    SuggestionScoringError,
)
from .geo_distance import (
    EARTH_RADIUS_KM,
    MAX_GREAT_CIRCLE_KM,
    GeoDistanceScorer,
    haversine_km,
    proximity_score,
    validate_coordinate,
)
from .models import Candidate, Coordinate, Query, RankedSuggestion, ScoreBreakdown
from .ranking import rank_suggestions
from .score_type import ScoreType
from .string_matching import StringMatchScorer, levenshtein_distance, levenshtein_similarity
from .suggestion_scorer import SuggestionScorer

__all__ = [
    "ScorerConfig",
    "load_config",
    "SuggestionScoringError",
    "InvalidCoordinate",
    "InputTooLong",
    "InvalidConfiguration",
    "EARTH_RADIUS_KM",
    "MAX_GREAT_CIRCLE_KM",
    "GeoDistanceScorer",
    "haversine_km",
    "proximity_score",
    "validate_coordinate",
    "Coordinate",
    "Query",
    "Candidate",
    "ScoreBreakdown",
    "RankedSuggestion",
    "rank_suggestions",
    "ScoreType",
    "StringMatchScorer",
    "levenshtein_distance",
    "levenshtein_similarity",
    "SuggestionScorer",
]

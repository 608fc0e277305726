#!/usr/bin/env python3
"""
Suggestion Scoring — Composite Suggestion Scorer

Combines text similarity and geospatial proximity into a single relevance
score for ranking suggestions:

    score = matching_weight * text_similarity
          + geo_distance_weight * geo_proximity

The geo signal is only computed when the query carries a location. Without
one it contributes exactly 0: the weight is not redistributed, so geo-less
queries rank purely on text and their scores top out at matching_weight.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ScorerConfig
from .geo_distance import GeoDistanceScorer
from .models import Candidate, Query, ScoreBreakdown
from .score_type import ScoreType
from .string_matching import StringMatchScorer

logger = logging.getLogger(__name__)


class SuggestionScorer:
    """
    Weighted text + geo scorer.

    Holds no state beyond the frozen configuration, so one instance can be
    shared by any number of concurrent callers.
    """

    def __init__(self, config: ScorerConfig | None = None):
        if config is None:
            config = ScorerConfig()
        self._config = config
        self._string_scorer = StringMatchScorer(max_text_length=config.max_text_length)
        self._geo_scorer = GeoDistanceScorer(max_distance_km=config.max_distance_km)

    @classmethod
    def from_config_file(cls, path: str | Path) -> SuggestionScorer:
        """Build a scorer from a scoring.yaml file."""
        return cls(ScorerConfig.from_yaml(path))

    @property
    def config(self) -> ScorerConfig:
        return self._config

    @property
    def matching_weight(self) -> float:
        return self._config.matching_weight

    @property
    def geo_distance_weight(self) -> float:
        return self._config.geo_distance_weight

    def calculate_score(self, query: Query, candidate: Candidate) -> float:
        """
        Final relevance score of *candidate* for *query*.

        Raises InvalidCoordinate or InputTooLong when an input fails
        validation; no score is produced in that case.
        """
        return self.explain(query, candidate).score

    def explain(self, query: Query, candidate: Candidate) -> ScoreBreakdown:
        """
        Score *candidate* for *query* and return every intermediate value.

        Returns
        -------
        ScoreBreakdown with the unweighted sub-scores, the great-circle
        distance (None without a query location), the signals that
        contributed and the final weighted score.
        """
        score_type = ScoreType.NORMALIZED

        # ------------------------------------------------------------------
        # Signal 1: text similarity (always)
        # ------------------------------------------------------------------
        match_score = self._string_scorer.distance(query.text, candidate.name, score_type)
        weighted_match = self._config.matching_weight * match_score
        signals_used: tuple[str, ...] = ("text",)

        # ------------------------------------------------------------------
        # Signal 2: geo proximity (only with a query location)
        # ------------------------------------------------------------------
        geo_score: float | None = None
        geo_distance_km: float | None = None
        weighted_geo = 0.0

        location = query.location
        if location is not None:
            geo_distance_km = self._geo_scorer.distance(
                location.latitude,
                location.longitude,
                candidate.latitude,
                candidate.longitude,
                ScoreType.RAW,
            )
            geo_score = self._geo_scorer.normalize(geo_distance_km)
            weighted_geo = self._config.geo_distance_weight * geo_score
            signals_used += ("geo",)

        score = weighted_match + weighted_geo
        logger.debug(
            "Scored %r against %r: text=%.4f geo=%s total=%.4f",
            candidate.name,
            query.text,
            match_score,
            f"{geo_score:.4f}" if geo_score is not None else "n/a",
            score,
        )

        return ScoreBreakdown(
            match_score=match_score,
            geo_score=geo_score,
            geo_distance_km=geo_distance_km,
            signals_used=signals_used,
            score=score,
        )

"""Batch ranking of candidate suggestions against one query."""

from __future__ import annotations

import logging
from typing import Iterable

from .exceptions import InputTooLong, SuggestionScoringError
from .geo_distance import validate_coordinate
from .models import Candidate, Query, RankedSuggestion
from .suggestion_scorer import SuggestionScorer

logger = logging.getLogger(__name__)


def rank_suggestions(
    scorer: SuggestionScorer,
    query: Query,
    candidates: Iterable[Candidate],
    *,
    limit: int | None = None,
    skip_invalid: bool = False,
) -> list[RankedSuggestion]:
    """
    Score every candidate for *query* and return them best first.

    Ties keep their input order. When *skip_invalid* is True, candidates
    that fail validation are logged and left out; otherwise the first
    failure propagates and nothing is returned. A faulty query (invalid
    location or over-long text) always raises, whatever *skip_invalid* says.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    if query.location is not None:
        validate_coordinate(query.location.latitude, query.location.longitude)
    max_text_length = scorer.config.max_text_length
    if max_text_length is not None and len(query.text) > max_text_length:
        raise InputTooLong(len(query.text), max_text_length)

    ranked: list[RankedSuggestion] = []
    skipped = 0
    for candidate in candidates:
        try:
            breakdown = scorer.explain(query, candidate)
        except SuggestionScoringError as exc:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning("Skipping candidate %s (%r): %s", candidate.id, candidate.name, exc)
            continue
        ranked.append(RankedSuggestion(candidate=candidate, breakdown=breakdown))

    ranked.sort(key=lambda r: r.score, reverse=True)
    if skipped:
        logger.info("Ranked %d candidates, skipped %d invalid", len(ranked), skipped)

    if limit is not None:
        ranked = ranked[:limit]
    return ranked

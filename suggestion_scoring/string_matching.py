#!/usr/bin/env python3
"""
Suggestion Scoring — Text Similarity

Scores how closely a query term matches a candidate name using the
Levenshtein edit distance, normalised by the longer string's length.

Strings are compared exactly as given: case folding, whitespace trimming
and accent stripping are the caller's job.

Dependencies:
    pip install rapidfuzz
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from .exceptions import InputTooLong
from .score_type import ScoreType


# ---------------------------------------------------------------------------
# Core distance calculation
# ---------------------------------------------------------------------------


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions needed to turn *a* into *b*.
    """
    return Levenshtein.distance(a, b)


def levenshtein_similarity(a: str, b: str) -> float:
    """
    Normalised Levenshtein similarity between two strings.

    Returns a value in [0.0, 1.0] where 1.0 means identical:
        - both empty     → 1.0
        - exactly one empty → 0.0
        - otherwise      → 1 - distance / max(len(a), len(b))
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    max_len = max(len(a), len(b))
    dist = levenshtein_distance(a, b)
    return min(1.0, max(0.0, 1.0 - (dist / max_len)))


# ---------------------------------------------------------------------------
# Scorer
# ---------------------------------------------------------------------------


class StringMatchScorer:
    """
    Edit-distance based text scorer.

    Parameters
    ----------
    max_text_length : int, optional
        Longest input accepted. Longer strings raise InputTooLong instead
        of paying the O(len(a) * len(b)) cost. None disables the check.
    """

    def __init__(self, max_text_length: int | None = None):
        self._max_text_length = max_text_length

    @property
    def max_text_length(self) -> int | None:
        return self._max_text_length

    def score(self, a: str, b: str) -> float:
        """Normalised similarity of *a* and *b* in [0.0, 1.0]."""
        self._check_length(a)
        self._check_length(b)
        return levenshtein_similarity(a, b)

    def distance(
        self,
        a: str,
        b: str,
        score_type: ScoreType = ScoreType.NORMALIZED,
    ) -> float:
        """
        Distance between *a* and *b* in the representation chosen by
        *score_type*: the normalised similarity or the raw edit count.
        """
        if score_type is ScoreType.NORMALIZED:
            return self.score(a, b)
        if score_type is ScoreType.RAW:
            self._check_length(a)
            self._check_length(b)
            return float(levenshtein_distance(a, b))
        raise ValueError(f"Unsupported score type: {score_type!r}")

    def _check_length(self, text: str) -> None:
        if self._max_text_length is not None and len(text) > self._max_text_length:
            raise InputTooLong(len(text), self._max_text_length)

"""Score representations returned by the distance scorers."""

from __future__ import annotations

from enum import Enum


class ScoreType(str, Enum):
    """
    Selects how a scorer reports a distance.

    NORMALIZED — similarity in [0.0, 1.0], 1.0 meaning identical / coincident.
    RAW        — the untransformed metric (edit count or kilometres).
    """

    NORMALIZED = "normalized"
    RAW = "raw"

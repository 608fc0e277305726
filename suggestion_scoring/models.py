"""Typed input and result models for suggestion scoring."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 coordinate pair in decimal degrees."""

    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """Check that both values are finite and inside the WGS84 ranges."""
        return (
            math.isfinite(self.latitude)
            and math.isfinite(self.longitude)
            and -90.0 <= self.latitude <= 90.0
            and -180.0 <= self.longitude <= 180.0
        )


@dataclass(frozen=True)
class Query:
    """
    A user search: a text term plus an optional location.

    ``location`` is None for purely textual searches; the geo signal is
    only computed when it is present.
    """

    text: str
    location: Coordinate | None = None

    @classmethod
    def from_parts(
        cls,
        text: str,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> Query:
        """Build a query from loose request values.

        A location is attached only when both latitude and longitude are
        given; a lone coordinate is treated as no location at all.
        """
        if latitude is None or longitude is None:
            return cls(text=text)
        return cls(
            text=text,
            location=Coordinate(latitude=float(latitude), longitude=float(longitude)),
        )

    @property
    def latitude(self) -> float | None:
        return self.location.latitude if self.location is not None else None

    @property
    def longitude(self) -> float | None:
        return self.location.longitude if self.location is not None else None


@dataclass(frozen=True)
class Candidate:
    """One location record being scored against a query."""

    name: str
    latitude: float
    longitude: float
    id: str | None = None

    @property
    def location(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Candidate:
        """
        Build a candidate from a plain record (name, latitude, longitude, id).

        Raises TypeError when *record* is not a mapping, KeyError when a
        required field is missing, and ValueError when ``name`` is not a
        string or a coordinate is not a real number.
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"candidate record must be an object, got {type(record).__name__}")
        name = record["name"]
        if not isinstance(name, str):
            raise ValueError(f"candidate name must be a string, got {name!r}")
        raw_id = record.get("id")
        return cls(
            name=name,
            latitude=_require_number(record, "latitude"),
            longitude=_require_number(record, "longitude"),
            id=str(raw_id) if raw_id is not None else None,
        )


def _require_number(record: Mapping[str, Any], key: str) -> float:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"candidate {key} must be a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Detailed result of scoring one candidate against one query."""

    match_score: float                 # normalised text similarity, unweighted
    geo_score: float | None            # normalised proximity, None without query location
    geo_distance_km: float | None
    signals_used: tuple[str, ...] = ()
    score: float = 0.0                 # final weighted score

    def to_dict(self) -> dict[str, Any]:
        return {
            "match_score": round(self.match_score, 4),
            "geo_score": round(self.geo_score, 4) if self.geo_score is not None else None,
            "geo_distance_km": (
                round(self.geo_distance_km, 4) if self.geo_distance_km is not None else None
            ),
            "signals_used": list(self.signals_used),
            "score": self.score,
        }


@dataclass(frozen=True)
class RankedSuggestion:
    """A candidate paired with its score breakdown, as returned by ranking."""

    candidate: Candidate
    breakdown: ScoreBreakdown

    @property
    def score(self) -> float:
        return self.breakdown.score

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "id": self.candidate.id,
            "name": self.candidate.name,
            "latitude": self.candidate.latitude,
            "longitude": self.candidate.longitude,
            **self.breakdown.to_dict(),
        }

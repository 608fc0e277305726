#!/usr/bin/env python3
"""
Suggestion Scoring — Scorer Configuration

Weights and normalisation parameters are process-wide constants: loaded
once at startup from scoring.yaml and/or environment variables, then handed
to the scorer as a frozen ScorerConfig.

Environment variables (override the YAML values):
    SUGGESTION_SCORING_CONFIG        Path to a scoring.yaml file
    SUGGESTION_MATCHING_WEIGHT       Weight of the text similarity signal
    SUGGESTION_GEO_DISTANCE_WEIGHT   Weight of the geo proximity signal
    SUGGESTION_MAX_DISTANCE_KM       Distance at which proximity reaches 0
    SUGGESTION_MAX_TEXT_LENGTH       Longest accepted text ("none" disables)

Dependencies:
    pip install pyyaml
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import InvalidConfiguration
from .geo_distance import MAX_GREAT_CIRCLE_KM

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Defaults (overridden by scoring.yaml / environment at runtime)
# ---------------------------------------------------------------------------

DEFAULT_MATCHING_WEIGHT = 0.7
DEFAULT_GEO_DISTANCE_WEIGHT = 0.3
DEFAULT_MAX_TEXT_LENGTH = 1024

CONFIG_PATH_ENV = "SUGGESTION_SCORING_CONFIG"

_ENV_KEYS = {
    "matching_weight": "SUGGESTION_MATCHING_WEIGHT",
    "geo_distance_weight": "SUGGESTION_GEO_DISTANCE_WEIGHT",
    "max_distance_km": "SUGGESTION_MAX_DISTANCE_KM",
    "max_text_length": "SUGGESTION_MAX_TEXT_LENGTH",
}


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScorerConfig:
    """Immutable scorer configuration."""

    matching_weight: float = DEFAULT_MATCHING_WEIGHT
    geo_distance_weight: float = DEFAULT_GEO_DISTANCE_WEIGHT
    max_distance_km: float = MAX_GREAT_CIRCLE_KM
    max_text_length: int | None = DEFAULT_MAX_TEXT_LENGTH

    def __post_init__(self) -> None:
        for name in ("matching_weight", "geo_distance_weight"):
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value) or value < 0:
                raise InvalidConfiguration(f"{name} must be a finite number >= 0, got {value!r}")
        # Sub-scores are at most 1.0, so a finite weight sum keeps every score finite
        if not math.isfinite(self.matching_weight + self.geo_distance_weight):
            raise InvalidConfiguration(
                "matching_weight + geo_distance_weight must be finite, got "
                f"{self.matching_weight!r} + {self.geo_distance_weight!r}"
            )
        if (
            not _is_number(self.max_distance_km)
            or not math.isfinite(self.max_distance_km)
            or self.max_distance_km <= 0
        ):
            raise InvalidConfiguration(
                f"max_distance_km must be a finite number > 0, got {self.max_distance_km!r}"
            )
        if self.max_text_length is not None and (
            isinstance(self.max_text_length, bool)
            or not isinstance(self.max_text_length, int)
            or self.max_text_length <= 0
        ):
            raise InvalidConfiguration(
                f"max_text_length must be a positive integer or None, got {self.max_text_length!r}"
            )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ScorerConfig:
        """Load configuration from the ``scoring`` section of a YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except OSError as exc:
            raise InvalidConfiguration(f"cannot read {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise InvalidConfiguration(f"cannot parse {path}: {exc}") from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise InvalidConfiguration(f"{path} must contain a mapping")
        section = raw.get("scoring", {}) or {}
        if not isinstance(section, dict):
            raise InvalidConfiguration(f"'scoring' in {path} must be a mapping")
        unknown = sorted(str(k) for k in set(section) - set(_ENV_KEYS))
        if unknown:
            raise InvalidConfiguration(
                f"unknown key(s) under 'scoring' in {path}: {', '.join(unknown)}"
            )

        return cls(
            matching_weight=section.get("matching_weight", DEFAULT_MATCHING_WEIGHT),
            geo_distance_weight=section.get("geo_distance_weight", DEFAULT_GEO_DISTANCE_WEIGHT),
            max_distance_km=section.get("max_distance_km", MAX_GREAT_CIRCLE_KM),
            max_text_length=section.get("max_text_length", DEFAULT_MAX_TEXT_LENGTH),
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        base: ScorerConfig | None = None,
    ) -> ScorerConfig:
        """
        Apply SUGGESTION_* environment overrides on top of *base*
        (or the defaults). Unset variables leave the base value untouched.
        """
        if environ is None:
            environ = os.environ
        if base is None:
            base = cls()

        overrides: dict[str, Any] = {}
        for field_name, env_key in _ENV_KEYS.items():
            raw = environ.get(env_key)
            if raw is None or raw.strip() == "":
                continue
            overrides[field_name] = _parse_env_value(field_name, env_key, raw.strip())

        if not overrides:
            return base
        return replace(base, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "matching_weight": self.matching_weight,
            "geo_distance_weight": self.geo_distance_weight,
            "max_distance_km": self.max_distance_km,
            "max_text_length": self.max_text_length,
        }


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ScorerConfig:
    """
    Build the process configuration: YAML first (explicit *path*, else the
    file named by SUGGESTION_SCORING_CONFIG, else defaults), then
    environment overrides.
    """
    if environ is None:
        environ = os.environ

    config_path = path or environ.get(CONFIG_PATH_ENV) or None
    if config_path:
        base = ScorerConfig.from_yaml(config_path)
        logger.info("Loaded scorer config from %s", config_path)
    else:
        base = ScorerConfig()
        logger.info("No scorer config file given, using defaults")

    config = ScorerConfig.from_env(environ, base=base)
    logger.debug(
        "Scorer config: matching_weight=%s geo_distance_weight=%s max_distance_km=%s max_text_length=%s",
        config.matching_weight,
        config.geo_distance_weight,
        config.max_distance_km,
        config.max_text_length,
    )
    return config


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_env_value(field_name: str, env_key: str, raw: str) -> Any:
    if field_name == "max_text_length":
        if raw.lower() == "none":
            return None
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidConfiguration(f"{env_key} must be an integer or 'none', got {raw!r}") from exc
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidConfiguration(f"{env_key} must be a number, got {raw!r}") from exc

"""Shared test fixtures — scorers, configs and a handful of real places."""

import pytest

from suggestion_scoring import Candidate, ScorerConfig, SuggestionScorer

_ENV_VARS = (
    "SUGGESTION_SCORING_CONFIG",
    "SUGGESTION_MATCHING_WEIGHT",
    "SUGGESTION_GEO_DISTANCE_WEIGHT",
    "SUGGESTION_MAX_DISTANCE_KM",
    "SUGGESTION_MAX_TEXT_LENGTH",
)


@pytest.fixture(autouse=True)
def _clean_scoring_env(monkeypatch):
    """Keep SUGGESTION_* variables from the developer's shell out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def config() -> ScorerConfig:
    return ScorerConfig(matching_weight=0.7, geo_distance_weight=0.3)


@pytest.fixture()
def scorer(config: ScorerConfig) -> SuggestionScorer:
    return SuggestionScorer(config)


@pytest.fixture()
def places() -> list[Candidate]:
    """Four cafes/restaurants: three in Madrid, one in Barcelona."""
    return [
        Candidate(id="1", name="Cafe Central", latitude=40.4139, longitude=-3.7012),
        Candidate(id="2", name="Cafe Comercial", latitude=40.4321, longitude=-3.7025),
        Candidate(id="3", name="Pizza Hut", latitude=40.4168, longitude=-3.7038),
        Candidate(id="4", name="Cafe Central", latitude=41.3874, longitude=2.1686),
    ]

"""Exception hierarchy for suggestion scoring."""

from __future__ import annotations


class SuggestionScoringError(Exception):
    """Base exception for all suggestion scoring errors."""


class InvalidCoordinate(SuggestionScoringError):
    """A latitude/longitude pair is outside the WGS84 range or not finite."""

    def __init__(self, latitude: float, longitude: float, detail: str):
        self.latitude = latitude
        self.longitude = longitude
        self.detail = detail
        super().__init__(
            f"Invalid coordinate ({latitude}, {longitude}): {detail}"
        )


class InputTooLong(SuggestionScoringError):
    """A text input exceeds the configured edit-distance length cap."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Text of length {length} exceeds the limit of {limit} characters"
        )


class InvalidConfiguration(SuggestionScoringError):
    """Scorer configuration is missing, malformed or out of range."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid scoring configuration: {detail}")

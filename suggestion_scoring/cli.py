#!/usr/bin/env python3
"""
Suggestion Scoring — Rank Candidates from the Command Line

Reads a JSON list of candidate records, scores each one against the query
and prints the ranked results as JSON.

Usage:
    suggestion-rank "pizza hut" --candidates candidates.json
    suggestion-rank cafe --candidates candidates.json \
        --latitude 40.4168 --longitude -3.7038 --limit 5

Candidate file format:
    [{"id": "1", "name": "Pizza Hut", "latitude": 40.41, "longitude": -3.70}, ...]

Weights are read from --config, else SUGGESTION_SCORING_CONFIG, else the
built-in defaults; SUGGESTION_* environment variables override either.

Exit codes: 0 success, 1 scoring error, 2 bad input or configuration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .config import load_config
from .exceptions import InvalidConfiguration, SuggestionScoringError
from .models import Candidate, Query
from .ranking import rank_suggestions
from .suggestion_scorer import SuggestionScorer

logger = logging.getLogger(__name__)


def load_candidates(path: str | Path) -> list[Candidate]:
    """Load candidate records from a JSON file containing a list of objects."""
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON list of candidate records")
    candidates = [Candidate.from_dict(r) for r in records]
    logger.info("Loaded %d candidates from %s", len(candidates), path)
    return candidates


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rank location suggestions by text similarity and proximity.",
    )
    parser.add_argument("query", help="Query term to match against candidate names")
    parser.add_argument(
        "--candidates",
        required=True,
        help="Path to a JSON file with a list of candidate records",
    )
    parser.add_argument("--latitude", type=float, default=None, help="Query latitude (decimal degrees)")
    parser.add_argument("--longitude", type=float, default=None, help="Query longitude (decimal degrees)")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to scoring.yaml (default: $SUGGESTION_SCORING_CONFIG or built-in defaults)",
    )
    parser.add_argument("--limit", type=int, default=None, help="Return at most N suggestions")
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Leave out candidates that fail validation instead of aborting.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be >= 0")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config)
    except InvalidConfiguration as exc:
        logger.error("%s", exc)
        return 2

    try:
        candidates = load_candidates(args.candidates)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        logger.error("Cannot load candidates from %s: %s", args.candidates, exc)
        return 2

    query = Query.from_parts(args.query, args.latitude, args.longitude)
    scorer = SuggestionScorer(config)

    try:
        ranked = rank_suggestions(
            scorer,
            query,
            candidates,
            limit=args.limit,
            skip_invalid=args.skip_invalid,
        )
    except SuggestionScoringError as exc:
        logger.error("Scoring failed: %s", exc)
        return 1

    output: list[dict[str, Any]] = [r.to_dict() for r in ranked]
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

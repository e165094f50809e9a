"""Comparison of the search against baseline players."""

from .match import MatchResult, play_game, play_match
from .statistical_tests import (
    RANDOM_OUTCOME_RATES,
    loss_rate_test,
    outcome_chisquare,
    match_significance_test
)

__all__ = [
    "MatchResult",
    "play_game",
    "play_match",
    "RANDOM_OUTCOME_RATES",
    "loss_rate_test",
    "outcome_chisquare",
    "match_significance_test"
]

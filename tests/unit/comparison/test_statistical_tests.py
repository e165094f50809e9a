"""Unit tests for match bookkeeping and significance tests."""

import pytest

from arena_mcts.comparison.match import MatchResult, play_game, play_match
from arena_mcts.comparison.statistical_tests import (
    RANDOM_OUTCOME_RATES,
    baseline_rates,
    loss_rate_test,
    match_significance_test,
    outcome_chisquare
)
from arena_mcts.games.tictactoe import Player


class TestMatchResult:
    """Tests for MatchResult."""

    def test_record(self):
        result = MatchResult()
        for reward in (1.0, 1.0, 0.0, -1.0):
            result.record(reward)

        assert result.as_list() == [2, 1, 1]
        assert result.games == 4
        assert result.loss_rate == 0.25

    def test_empty(self):
        assert MatchResult().loss_rate == 0.0


class TestRandomPlay:
    """Tests for games without search."""

    def test_play_game(self, seed):
        for _ in range(20):
            assert play_game(None) in (-1.0, 0.0, 1.0)

    def test_play_match(self, seed):
        result = play_match(None, 30, first=Player.COMPUTER)
        assert result.games == 30


class TestSignificance:
    """Tests for the binomial and chi-square tests."""

    def test_baseline_rates(self):
        assert sum(RANDOM_OUTCOME_RATES) == pytest.approx(1.0)
        assert baseline_rates(Player.HUMAN) == (0.2881, 0.1270, 0.5849)
        assert baseline_rates(Player.COMPUTER) == (0.5849, 0.1270, 0.2881)

    def test_few_losses_are_significant(self):
        result = MatchResult(wins=35, draws=10, losses=5)
        loss_rate, p_value, significant = loss_rate_test(result, 0.5849)

        assert loss_rate == 0.1
        assert p_value < 1e-6
        assert significant

    def test_random_level_losses_are_not_significant(self):
        result = MatchResult(wins=15, draws=6, losses=29)
        _, p_value, significant = loss_rate_test(result, 0.5849)

        assert p_value > 0.05
        assert not significant

    def test_no_games(self):
        with pytest.raises(ValueError):
            loss_rate_test(MatchResult(), 0.5)

    def test_chisquare_matches_baseline(self):
        result = MatchResult(wins=288, draws=127, losses=585)
        chi2, p_value, significant = outcome_chisquare(result, baseline_rates(Player.HUMAN))

        assert chi2 == pytest.approx(0.0, abs=1e-2)
        assert not significant

    def test_summary(self):
        result = MatchResult(wins=30, draws=15, losses=5)
        summary = match_significance_test(result, Player.HUMAN)

        assert summary['significant']
        assert summary['baseline_loss_rate'] == 0.5849
        assert summary['chi2_p_value'] < 0.05

    def test_summary_needs_enough_games(self):
        summary = match_significance_test(MatchResult(wins=3), Player.HUMAN)

        assert not summary['significant']
        assert 'error' in summary

"""Test the tic-tac-toe domain."""

import pytest
from arena_mcts.games.tictactoe import GameState, Player, move_between


def make_board(marks: str) -> list:
    """Board from a 9-character string of '.', 'x' (human) and 'o' (computer)."""
    symbols = {".": Player.NONE, "x": Player.HUMAN, "o": Player.COMPUTER}
    return [symbols[c] for c in marks]


class TestRules:
    """Tests for moves, winners and rewards."""

    def test_default_state(self):
        state = GameState()

        assert state.player is Player.HUMAN
        assert state.legal_moves() == list(range(9))
        assert not state.is_terminal()
        assert state.winner() is Player.NONE

    @pytest.mark.parametrize("marks,winner", [
        ("xxx......", Player.HUMAN),
        ("...ooo...", Player.COMPUTER),
        ("x..x..x..", Player.HUMAN),
        ("..o..o..o", Player.COMPUTER),
        ("o...o...o", Player.COMPUTER),
        ("..x.x.x..", Player.HUMAN),
    ])
    def test_lines(self, marks, winner):
        state = GameState(board=make_board(marks))

        assert state.winner() is winner
        assert state.is_terminal()
        assert state.legal_moves() == []
        assert state.available_moves() == []

    def test_draw(self):
        state = GameState(board=make_board("xoxxoooxx"))

        assert state.winner() is Player.NONE
        assert state.is_terminal()
        assert state.reward() == 0.0

    def test_rewards(self):
        assert GameState(board=make_board("ooo.xx...")).reward() == 1.0
        assert GameState(board=make_board("xxx.oo...")).reward() == -1.0

    def test_reward_of_running_game(self):
        with pytest.raises(ValueError):
            GameState().reward()

    def test_play_alternates(self):
        state = GameState()
        state.play(4)

        assert state.board[4] is Player.HUMAN
        assert state.player is Player.COMPUTER

    def test_play_taken_cell(self):
        state = GameState()
        state.play(0)

        with pytest.raises(ValueError, match="already taken"):
            state.play(0)

    def test_play_off_board(self):
        with pytest.raises(ValueError):
            GameState().play(9)

    def test_play_after_game_over(self):
        state = GameState(board=make_board("xxx.oo..."), player=Player.COMPUTER)

        with pytest.raises(ValueError):
            state.play(8)

    def test_winning_move_keeps_winner_as_player(self):
        state = GameState(board=make_board("oo.xx...."), player=Player.COMPUTER)
        state.play(2)

        assert state.winner() is Player.COMPUTER
        assert state.player is Player.COMPUTER

    def test_board_size_validated(self):
        with pytest.raises(ValueError):
            GameState(board=[Player.NONE] * 8)

    def test_render(self):
        state = GameState(board=make_board("x...o...."))
        assert str(state) == "x . .\n. o .\n. . .\n"


class TestSearchDomain:
    """Tests for the search capability."""

    def test_available_moves_do_not_mutate(self):
        state = GameState(board=make_board("x...o...."))
        before = state.copy()

        successors = state.available_moves()

        assert state == before
        assert len(successors) == 7
        for cell, successor in zip(state.legal_moves(), successors):
            assert move_between(state, successor) == cell
            assert successor.board[cell] is Player.HUMAN

    def test_terminate_returns_reward(self, seed):
        state = GameState()
        results = {state.terminate() for _ in range(200)}

        assert results <= {-1.0, 0.0, 1.0}
        assert len(results) > 1
        assert state == GameState()

    def test_terminate_on_finished_game(self):
        state = GameState(board=make_board("ooo.xx.x."))
        assert state.terminate() == 1.0

    def test_random_move_is_legal(self, seed):
        state = GameState(board=make_board("xo.xo...."))
        for _ in range(50):
            assert state.random_move() in state.legal_moves()

    def test_random_move_when_over(self):
        assert GameState(board=make_board("xxx.oo...")).random_move() is None

    def test_move_between_rejects_unrelated_states(self):
        with pytest.raises(ValueError):
            move_between(GameState(), GameState(board=make_board("xo.......")))

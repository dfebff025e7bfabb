"""Tests for move evaluation and the lookahead search."""

import pytest

from connect4ai.game import Board, Team, other_team
from connect4ai.play import RandomPlayer
from connect4ai.search import AI, MoveEvaluation, raw_score


class TestMoveEvaluation:
    def test_does_not_modify_board(self):
        board = Board()
        before = board.copy()
        move = MoveEvaluation(Team.BLUE, board, 3)

        assert board == before
        assert move.board.get_cell_team((3, 0)) == Team.BLUE
        assert move.position == (3, 0)

    def test_immediate_win(self):
        board = Board.from_columns([[1], [1], [1], [1], [1]])
        move = MoveEvaluation(Team.BLUE, board, 5)

        assert move.has_winning_run
        assert move.get_win_probability(Team.BLUE) == 1.0
        assert move.get_win_probability(Team.RED) == 0.0

    def test_static_estimate(self, cutoff_board):
        expected = {0: 0.125, 2: 0.125, 4: 0.25, 6: 0.5}
        for column, probability in expected.items():
            move = MoveEvaluation(Team.BLUE, cutoff_board, column)
            assert not move.has_winning_run
            assert move.get_win_probability(Team.BLUE) == probability
            assert move.get_win_probability(Team.RED) == 1.0 - probability

    def test_runs(self, cutoff_board):
        assert MoveEvaluation(Team.BLUE, cutoff_board, 0).runs == [2, 0, 0, 0]
        assert MoveEvaluation(Team.BLUE, cutoff_board, 4).runs == [0, 2, 0, 0]
        assert MoveEvaluation(Team.BLUE, cutoff_board, 6).runs == [0, 0, 2, 0]

    def test_compare(self, cutoff_board):
        col0 = MoveEvaluation(Team.BLUE, cutoff_board, 0)
        col2 = MoveEvaluation(Team.BLUE, cutoff_board, 2)
        col4 = MoveEvaluation(Team.BLUE, cutoff_board, 4)
        col6 = MoveEvaluation(Team.BLUE, cutoff_board, 6)

        assert col6.compare(col4) == 4
        assert col4.compare(col6) == -4
        assert col4.compare(col0) == 2
        assert col0.compare(col2) == 0

    def test_full_column_raises(self, full_board):
        with pytest.raises(ValueError):
            MoveEvaluation(Team.BLUE, full_board, 0)

    def test_invalid_team_raises(self):
        with pytest.raises(ValueError):
            MoveEvaluation(Team.EMPTY, Board(), 0)


class TestRawScore:
    def test_weights(self):
        assert raw_score([1, 0, 0, 0]) == 1 / 16
        assert raw_score([0, 1, 0, 0]) == 1 / 8
        assert raw_score([0, 0, 1, 0]) == 1 / 4
        assert raw_score([0, 0, 0, 1]) == 1 / 2

    def test_clamped_probability(self):
        # eight length-3 scans push the raw score past 1
        assert min(raw_score([0, 0, 8, 0]), 1.0) == 1.0


class TestAIConstruction:
    def test_invalid_difficulty(self):
        with pytest.raises(ValueError):
            AI(Team.BLUE, 0)

    def test_invalid_team(self):
        with pytest.raises(ValueError):
            AI(Team.EMPTY, 2)

    def test_acting_team_alternates(self):
        ai = AI(Team.BLUE, 3)
        assert ai.acting_team(1) == Team.RED
        assert ai.acting_team(2) == Team.BLUE
        assert ai.acting_team(3) == Team.RED

        ai = AI(Team.RED, 3)
        assert ai.acting_team(1) == Team.BLUE
        assert ai.acting_team(2) == Team.RED


class TestFindWinProbability:
    def test_mean_of_static_estimates(self, cutoff_board):
        ai = AI(Team.BLUE, 2)
        assert ai.find_win_probability(cutoff_board, 2, 2) == 0.25

    @pytest.mark.parametrize("depth,max_depth", [(1, 1), (1, 3), (2, 2), (4, 5)])
    def test_full_board_is_zero(self, full_board, depth, max_depth):
        ai = AI(Team.BLUE, max_depth)
        assert ai.find_win_probability(full_board, depth, max_depth) == 0.0

    def test_opponent_win_is_zero(self):
        # Red to act at depth 1 and red can complete the bottom row
        board = Board.from_columns([[2], [2], [2], [], [1], [1], [1]])
        ai = AI(Team.BLUE, 3)
        assert ai.find_win_probability(board, 1, 3) == 0.0

    def test_own_win_is_one(self):
        board = Board.from_columns([[1], [1], [1], [], [2], [2]])
        ai = AI(Team.BLUE, 3)
        assert ai.find_win_probability(board, 2, 3) == 1.0

    def test_bounds_on_random_positions(self):
        randomizer = RandomPlayer(seed=3)
        for _ in range(5):
            board = Board()
            team = Team.BLUE
            for _ in range(10):
                board.insert(randomizer.choose_move(board, team), team)
                team = other_team(team)

            ai = AI(team, 2)
            for column in board.available_columns():
                move = MoveEvaluation(team, board, column)
                probability = ai.find_win_probability(move.board, 1, 2)
                assert 0.0 <= probability <= 1.0


class TestPickBestMove:
    def test_takes_immediate_win(self):
        board = Board.from_columns([[1], [1], [1], [], [2], [2], [2]])
        assert AI(Team.BLUE, 2).pick_best_move(board) == 3

    def test_first_winning_column(self):
        board = Board.from_columns([[], [1], [1], [1], [], [2, 2], [2]])
        assert MoveEvaluation(Team.BLUE, board, 4).has_winning_run
        assert AI(Team.BLUE, 2).pick_best_move(board) == 0

    def test_blocks_opponent_win(self):
        board = Board.from_columns([[1], [1], [1], [], [], [], [2, 2]])
        assert AI(Team.RED, 1).pick_best_move(board) == 3

    def test_full_board(self, full_board):
        assert AI(Team.BLUE, 2).pick_best_move(full_board) == -1

    def test_does_not_modify_board(self):
        board = Board.from_columns([[1, 2], [2], [1], [], [1, 2, 1]])
        before = board.copy()
        AI(Team.RED, 2).pick_best_move(board)
        assert board == before

    def test_deterministic(self):
        board = Board.from_columns([[1], [2, 1], [], [2]])
        ai = AI(Team.RED, 2)
        assert ai.pick_best_move(board) == ai.pick_best_move(board)

    def test_equal_scores_keep_latest_column(self):
        ai = AI(Team.BLUE, 2)
        ai.find_win_probability = lambda board, depth, max_depth: 0.5
        assert ai.pick_best_move(Board()) == 6

    def test_ties_overwrite_earlier_best(self):
        scores = iter([0.3, 0.7, 0.7, 0.1, 0.2, 0.7, 0.0])
        ai = AI(Team.BLUE, 2)
        ai.find_win_probability = lambda board, depth, max_depth: next(scores)
        assert ai.pick_best_move(Board()) == 5

    def test_certain_win_stops_scan(self):
        calls = []

        def fake(board, depth, max_depth):
            calls.append(depth)
            return [0.2, 1.0, 0.9][len(calls) - 1]

        ai = AI(Team.BLUE, 2)
        ai.find_win_probability = fake
        assert ai.pick_best_move(Board()) == 1
        assert calls == [1, 1]

    def test_skips_full_columns(self):
        columns = [[1, 2, 1, 2, 1, 2]] * 6 + [[]]
        board = Board.from_columns(columns)
        assert AI(Team.BLUE, 3).pick_best_move(board) == 6

"""Tests for difficulty presets, the slider and adaptive difficulty."""

import pytest

from connect4ai.play import (
    AdaptiveDifficulty,
    Difficulty,
    DifficultyConfig,
    DIFFICULTY_PRESETS,
    difficulty_from_slider,
    get_difficulty_config,
    parse_difficulty,
)


class TestPresets:
    def test_every_level_has_a_preset(self):
        assert set(DIFFICULTY_PRESETS) == set(Difficulty)

    def test_depth_grows_with_difficulty(self):
        depths = [get_difficulty_config(d).depth for d in Difficulty]
        assert depths == [1, 2, 3, 4]

    def test_parse(self):
        assert parse_difficulty("hard") is Difficulty.HARD
        assert parse_difficulty("Impossible") is Difficulty.IMPOSSIBLE

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="easy"):
            parse_difficulty("brutal")

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            DifficultyConfig(depth=0)
        with pytest.raises(ValueError):
            DifficultyConfig(depth=2, move_delay_ticks=-1)


class TestSlider:
    def test_ends(self):
        assert difficulty_from_slider(0).depth == 1
        assert difficulty_from_slider(100).depth == 5

    def test_monotonic(self):
        depths = [difficulty_from_slider(v).depth for v in range(0, 101, 5)]
        assert depths == sorted(depths)

    def test_clamped(self):
        assert difficulty_from_slider(-20).depth == 1
        assert difficulty_from_slider(250).depth == 5

    def test_names(self):
        assert difficulty_from_slider(10).name == "Beginner"
        assert difficulty_from_slider(99).name == "Maximum"


class TestAdaptive:
    def test_needs_a_few_games(self):
        adaptive = AdaptiveDifficulty(initial_depth=2)
        adaptive.record_result(player_won=True)
        adaptive.record_result(player_won=True)
        assert adaptive.current_depth == 2

    def test_player_winning_raises_depth(self):
        adaptive = AdaptiveDifficulty(initial_depth=2)
        for _ in range(3):
            adaptive.record_result(player_won=True)
        assert adaptive.current_depth == 3
        assert adaptive.get_config().depth == 3

    def test_player_losing_lowers_depth(self):
        adaptive = AdaptiveDifficulty(initial_depth=3)
        for _ in range(3):
            adaptive.record_result(player_won=False)
        assert adaptive.current_depth == 2

    def test_depth_stays_in_bounds(self):
        adaptive = AdaptiveDifficulty(min_depth=1, max_depth=3, initial_depth=2)
        for _ in range(10):
            adaptive.record_result(player_won=True)
        assert adaptive.current_depth == 3

        for _ in range(30):
            adaptive.record_result(player_won=False)
        assert adaptive.current_depth == 1

    def test_draws_hold_depth(self):
        adaptive = AdaptiveDifficulty(initial_depth=2)
        for _ in range(5):
            adaptive.record_result(player_won=False, draw=True)
        assert adaptive.current_win_rate == 0.5
        assert adaptive.current_depth == 2

    def test_window(self):
        adaptive = AdaptiveDifficulty(window_size=4)
        for _ in range(10):
            adaptive.record_result(player_won=True)
        assert len(adaptive.results) == 4

    def test_reset(self):
        adaptive = AdaptiveDifficulty(initial_depth=2)
        for _ in range(5):
            adaptive.record_result(player_won=True)
        adaptive.reset()
        assert adaptive.current_depth == 2
        assert adaptive.current_win_rate is None

    def test_initial_depth_out_of_range(self):
        with pytest.raises(ValueError):
            AdaptiveDifficulty(min_depth=2, max_depth=4, initial_depth=5)

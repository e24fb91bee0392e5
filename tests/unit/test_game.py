from __future__ import annotations

from game.models import MASSIVE_POINTS, Game, GameState


def test_new_game_has_defaults():
    game = Game()
    assert game.state == GameState(attempts_remaining=3, level=1, score=0)


def test_monsters_eat_player_decrements_attempts_only():
    game = Game()
    game.monsters_eat_player()

    assert game.state.attempts_remaining == 2
    assert game.state.level == 1
    assert game.state.score == 0


def test_rack_up_massive_points_increments_score_only():
    game = Game()
    game.rack_up_massive_points()
    game.rack_up_massive_points()

    assert game.state.score == 2 * MASSIVE_POINTS
    assert game.state.attempts_remaining == 3
    assert game.state.level == 1


def test_state_is_read_only_view():
    game = Game()
    view = game.state
    view.score = 1

    assert game.state.score == 0


def test_from_state_owns_a_private_copy():
    src = GameState(attempts_remaining=1, level=4, score=10)
    game = Game.from_state(src)
    src.score = 999

    assert game.state == GameState(attempts_remaining=1, level=4, score=10)

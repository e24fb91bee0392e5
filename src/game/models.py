from __future__ import annotations

from pydantic import BaseModel, Field


class GameState(BaseModel):
    """
    Snapshot-able state of a `Game`.

    Fields
    - attempts_remaining: lives left before game over.
    - level: current level, starting at 1.
    - score: accumulated points.
    """

    attempts_remaining: int = Field(default=3, description="Lives left")
    level: int = Field(default=1, description="Current level")
    score: int = Field(default=0, description="Accumulated points")


MASSIVE_POINTS = 9002


class Game:
    """A tiny game that owns exactly one `GameState`."""

    state_type = GameState

    def __init__(self) -> None:
        self._state = GameState()

    @classmethod
    def from_state(cls, state: GameState) -> "Game":
        game = cls()
        game._state = state.model_copy()
        return game

    @property
    def state(self) -> GameState:
        # Copy so callers cannot mutate the game behind its back
        return self._state.model_copy()

    def rack_up_massive_points(self) -> None:
        self._state.score += MASSIVE_POINTS

    def monsters_eat_player(self) -> None:
        self._state.attempts_remaining -= 1

    def __repr__(self) -> str:
        s = self._state
        return f"Game(attempts_remaining={s.attempts_remaining}, level={s.level}, score={s.score})"

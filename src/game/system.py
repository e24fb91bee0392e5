from __future__ import annotations

import os
from typing import Any, Optional

from memento import Caretaker, Codec, FernetCodec, JsonCodec, KeyValueStore
from stores import store_from_env

from .models import Game, GameState


ENV_FERNET_KEY = "MEMENTO_FERNET_KEY"


class GameSystem(Caretaker[Game]):
    """Caretaker for `Game` save slots, keyed by slot title."""

    def __init__(self, store: KeyValueStore, *, codec: Optional[Codec[Any]] = None) -> None:
        super().__init__(Game, store, codec=codec)

    @classmethod
    def from_env(cls) -> "GameSystem":
        """Build from environment: store backend via `MEMENTO_STORE`, optional
        encryption at rest when `MEMENTO_FERNET_KEY` is set."""
        codec: Codec[GameState] = JsonCodec(GameState)
        fkey = os.environ.get(ENV_FERNET_KEY)
        if fkey:
            codec = FernetCodec(codec, fkey)
        return cls(store_from_env(), codec=codec)

from __future__ import annotations

import logging
from typing import Any, Generic, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel

from .codec import Codec, JsonCodec
from .errors import DecodingError, NotFoundError


logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistence substrate: opaque bytes under string keys."""

    def get(self, key: str) -> Optional[bytes]: ...

    def set(self, key: str, value: bytes) -> None: ...


class HasEncodableState(Protocol):
    """
    Capability required of an originator.

    - `state_type`: the pydantic model describing its state.
    - `state`: the current state, read-only from the outside.
    - `from_state()`: build a new originator owning the given state.
    """

    state_type: Type[BaseModel]

    @property
    def state(self) -> Any: ...

    @classmethod
    def from_state(cls, state: Any) -> "HasEncodableState": ...


O = TypeVar("O", bound=HasEncodableState)


def _check_key(key: str) -> str:
    if not isinstance(key, str) or not key:
        raise ValueError("key must be a non-empty string")
    return key


class Caretaker(Generic[O]):
    """
    Saves and restores originators through a codec and a key-value store.

    Notes
    - Snapshots are treated as opaque bytes; only the codec knows their shape.
    - `save` encodes before touching the store, so an encoding failure never
      leaves a partial write behind.
    - `load` always returns a new originator; it never patches an existing one.
    - Holds no state between calls. Concurrent saves to one key are
      last-write-wins, as provided by the store.
    """

    def __init__(
        self,
        originator_type: Type[O],
        store: KeyValueStore,
        *,
        codec: Optional[Codec[Any]] = None,
    ) -> None:
        self._originator_type = originator_type
        self._store = store
        self._codec = codec or JsonCodec(originator_type.state_type)

    def save(self, originator: O, key: str) -> None:
        """Encode the originator's current state and store it under `key`.

        Raises:
        - ValueError for an empty key.
        - EncodingError if the state cannot be serialized (store untouched).
        - StoreError if the store write fails.
        """
        _check_key(key)
        data = self._codec.encode(originator.state)
        self._store.set(key, data)
        logger.debug("Saved %s under key=%r (%d bytes)", self._originator_type.__name__, key, len(data))

    def load(self, key: str) -> O:
        """Read the snapshot under `key` and rebuild a new originator from it.

        Raises:
        - NotFoundError if nothing is stored under `key`.
        - DecodingError if the stored bytes are unreadable.
        - StoreError if the store read fails.
        Both NotFoundError and DecodingError are LoadError subclasses.
        """
        _check_key(key)
        data = self._store.get(key)
        if data is None:
            raise NotFoundError(key)
        try:
            state = self._codec.decode(data)
        except DecodingError:
            logger.warning("Saved state under key=%r could not be decoded", key)
            raise
        logger.debug("Loaded %s from key=%r", self._originator_type.__name__, key)
        return self._originator_type.from_state(state)

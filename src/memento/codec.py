from __future__ import annotations

import json
from typing import Generic, Protocol, Type, TypeVar

from cryptography.fernet import Fernet, InvalidToken
from pydantic import BaseModel, ValidationError

from .errors import DecodingError, EncodingError


# Opaque snapshot of an originator's state. Only codecs look inside.
Memento = bytes

S = TypeVar("S", bound=BaseModel)


class Codec(Protocol[S]):
    def encode(self, state: S) -> Memento: ...

    def decode(self, data: Memento) -> S: ...


class JsonCodec(Generic[S]):
    """
    Generic JSON codec for any pydantic state model.

    - Output is deterministic: sorted keys, no extra whitespace, UTF-8.
    - NaN/Infinity are rejected rather than written as non-standard JSON.
    - Decoding validates against the model, so missing or mistyped fields
      fail loudly instead of falling back to defaults.
    - Fields are dumped in python mode, so only JSON-native values (int,
      float, str, bool, None, and lists/dicts of those) encode. Models with
      datetime, UUID, Decimal or Enum fields raise EncodingError.
    """

    def __init__(self, model: Type[S]) -> None:
        self._model = model

    @property
    def model(self) -> Type[S]:
        return self._model

    def encode(self, state: S) -> Memento:
        if not isinstance(state, self._model):
            raise EncodingError(
                f"Expected {self._model.__name__}, got {type(state).__name__}"
            )
        try:
            payload = json.dumps(
                state.model_dump(),
                separators=(",", ":"),
                sort_keys=True,
                allow_nan=False,
            )
        except (TypeError, ValueError) as ex:
            raise EncodingError(f"Failed to encode {self._model.__name__}: {ex}") from ex
        return payload.encode("utf-8")

    def decode(self, data: Memento) -> S:
        try:
            raw = json.loads(bytes(data).decode("utf-8"))
        except (UnicodeDecodeError, ValueError, RecursionError) as ex:
            raise DecodingError("Stored state is not valid UTF-8 JSON") from ex
        if not isinstance(raw, dict):
            raise DecodingError("Stored state is not a JSON object")
        try:
            return self._model.model_validate(raw)
        except ValidationError as ex:
            raise DecodingError(f"Stored state does not match {self._model.__name__}") from ex


def _to_fernet(key: str | bytes) -> Fernet:
    """Construct a Fernet instance from a user-provided key.

    The key must be a URL-safe base64-encoded 32-byte key (str or bytes),
    as returned by `cryptography.fernet.Fernet.generate_key()`.
    """
    if isinstance(key, str):
        key_bytes = key.encode("utf-8")
    else:
        key_bytes = key
    return Fernet(key_bytes)


class FernetCodec(Generic[S]):
    """Wraps another codec and encrypts its output at rest using Fernet."""

    def __init__(self, inner: Codec[S], key: str | bytes) -> None:
        self._inner = inner
        self._fernet = _to_fernet(key)

    def encode(self, state: S) -> Memento:
        return self._fernet.encrypt(self._inner.encode(state))

    def decode(self, data: Memento) -> S:
        try:
            plaintext = self._fernet.decrypt(bytes(data))
        except InvalidToken as ex:
            raise DecodingError("Failed to decrypt state: invalid Fernet token") from ex
        return self._inner.decode(plaintext)

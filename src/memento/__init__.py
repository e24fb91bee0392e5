"""
Memento save/load core.

- codec: generic JSON codec for pydantic state models, optional Fernet layer
- caretaker: saves/loads originators through a codec and a key-value store
- errors: typed failures for encoding, decoding, storage and missing keys
"""

from .caretaker import Caretaker, HasEncodableState, KeyValueStore
from .codec import Codec, FernetCodec, JsonCodec, Memento
from .errors import (
    DecodingError,
    EncodingError,
    LoadError,
    MementoError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "Caretaker",
    "Codec",
    "DecodingError",
    "EncodingError",
    "FernetCodec",
    "HasEncodableState",
    "JsonCodec",
    "KeyValueStore",
    "LoadError",
    "Memento",
    "MementoError",
    "NotFoundError",
    "StoreError",
]

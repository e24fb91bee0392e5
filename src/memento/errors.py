from __future__ import annotations


class MementoError(RuntimeError):
    """Base error for save/load operations."""


class EncodingError(MementoError):
    """State could not be converted to its serialized form."""


class LoadError(MementoError):
    """A saved snapshot could not be loaded (missing or unreadable)."""


class DecodingError(LoadError):
    """Stored bytes could not be converted back to a state aggregate."""


class NotFoundError(LoadError):
    """No snapshot is stored under the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No saved state under key {key!r}")
        self.key = key


class StoreError(MementoError):
    """The underlying key-value store failed to read or write."""

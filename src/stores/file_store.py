from __future__ import annotations

import hashlib
import os
import tempfile
from pathlib import Path
from typing import Optional

from memento.errors import StoreError


DEFAULT_ROOT = ".saves"


def _filename(key: str) -> str:
    # Fixed-length name: safe for any key and within filesystem name limits
    return hashlib.sha256(key.encode("utf-8")).hexdigest() + ".bin"


class FileStore:
    """
    Directory-backed key-value store: one file per key.

    - Intended to be durable between runs (local saves, persisted volume).
    - Writes go to a temp file in the same directory and are renamed into
      place, so readers never see a half-written value.
    - Filesystem errors surface as `StoreError`.
    """

    def __init__(self, root: os.PathLike[str] | str = DEFAULT_ROOT) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, key: str) -> Path:
        return self._root / _filename(key)

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, value: bytes) -> None:
        path = self._path(key)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self._root, prefix=".tmp-")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(value)
                os.replace(tmp, path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(f"Failed to write {path}: {e}") from e

from __future__ import annotations

import os
from typing import Optional

from memento import KeyValueStore

from .file_store import DEFAULT_ROOT, FileStore
from .memory_store import InMemoryStore
from .s3_store import S3Store


# Environment variable names
ENV_STORE = "MEMENTO_STORE"  # memory | file | s3; defaults to memory
ENV_FILE_ROOT = "MEMENTO_FILE_ROOT"
ENV_S3_BUCKET = "MEMENTO_S3_BUCKET"
ENV_S3_PREFIX = "MEMENTO_S3_PREFIX"
ENV_AWS_REGION = "AWS_REGION"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.environ.get(name)
    return val if val not in (None, "") else default


def _require(v: Optional[str], what: str) -> str:
    if not v:
        raise RuntimeError(f"Missing required configuration: {what}")
    return v


def store_from_env() -> KeyValueStore:
    """Select and build a store backend from environment variables."""
    kind = (_getenv(ENV_STORE, "memory") or "memory").strip().lower()
    if kind == "memory":
        return InMemoryStore()
    if kind == "file":
        return FileStore(_getenv(ENV_FILE_ROOT, DEFAULT_ROOT) or DEFAULT_ROOT)
    if kind == "s3":
        bucket = _require(_getenv(ENV_S3_BUCKET), ENV_S3_BUCKET)
        return S3Store(
            bucket=bucket,
            prefix=_getenv(ENV_S3_PREFIX, "") or "",
            region_name=_getenv(ENV_AWS_REGION),
        )
    raise ValueError(f"Unknown {ENV_STORE} backend: {kind!r} (expected memory, file or s3)")

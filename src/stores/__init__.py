"""
Key-value store adapters for saved state.

- memory_store: in-process dict, for tests and ephemeral sessions
- file_store: one file per key in a local directory
- s3_store: one S3 object per key
"""

from memento import KeyValueStore

from .factory import store_from_env
from .file_store import FileStore
from .memory_store import InMemoryStore
from .s3_store import S3Store

__all__ = ["FileStore", "InMemoryStore", "KeyValueStore", "S3Store", "store_from_env"]

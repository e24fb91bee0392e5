from __future__ import annotations

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from memento.errors import StoreError


_NOT_FOUND_CODES = ("NoSuchKey", "404")


class S3Store:
    """
    S3-backed key-value store: each key maps to one object under `prefix`.

    Usage
    - Provide the bucket and an optional key prefix (e.g. "saves/").
    - `get()` returns the object body, or None if the object does not exist.
    - `set()` overwrites the object (last write wins; no conditional update).
    - S3 failures other than a missing object raise `StoreError`.
    """

    def __init__(
        self,
        *,
        s3: Optional[object] = None,
        bucket: str,
        prefix: str = "",
        region_name: Optional[str] = None,
    ) -> None:
        if not bucket:
            raise ValueError("bucket is required")
        self._s3 = s3 or boto3.client("s3", region_name=region_name)
        self._bucket = bucket
        self._prefix = prefix

    def _object_key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[bytes]:
        obj_key = self._object_key(key)
        try:
            resp = self._s3.get_object(Bucket=self._bucket, Key=obj_key)
            return resp["Body"].read()
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code in _NOT_FOUND_CODES:
                return None
            raise StoreError(f"Failed to read s3://{self._bucket}/{obj_key}: {code}") from e
        except BotoCoreError as e:
            raise StoreError(f"Failed to read s3://{self._bucket}/{obj_key}: {e}") from e

    def set(self, key: str, value: bytes) -> None:
        obj_key = self._object_key(key)
        try:
            self._s3.put_object(
                Bucket=self._bucket,
                Key=obj_key,
                Body=value,
                ContentType="application/octet-stream",
            )
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            raise StoreError(f"Failed to write s3://{self._bucket}/{obj_key}: {code}") from e
        except BotoCoreError as e:
            raise StoreError(f"Failed to write s3://{self._bucket}/{obj_key}: {e}") from e

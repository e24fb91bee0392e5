from __future__ import annotations

import pytest
from botocore.exceptions import ClientError

from game import Game, GameState, GameSystem
from memento import NotFoundError, StoreError
from stores import S3Store


class _FakeBody:
    def __init__(self, data: bytes) -> None:
        self._data = data

    def read(self) -> bytes:
        return self._data


class _FakeS3:
    def __init__(self, *, fail_with: str | None = None) -> None:
        self._store = {}  # (bucket, key) -> bytes
        self._fail_with = fail_with
        self.puts = []

    def _maybe_fail(self, op: str) -> None:
        if self._fail_with:
            raise ClientError({"Error": {"Code": self._fail_with}}, op)

    def put_object(self, *, Bucket: str, Key: str, Body: bytes, ContentType: str):
        self._maybe_fail("PutObject")
        self.puts.append((Bucket, Key, ContentType))
        self._store[(Bucket, Key)] = Body
        return {"ETag": f'"fake-{len(Body)}"'}

    def get_object(self, *, Bucket: str, Key: str):
        self._maybe_fail("GetObject")
        item = self._store.get((Bucket, Key))
        if item is None:
            raise ClientError({"Error": {"Code": "NoSuchKey"}}, "GetObject")
        return {"Body": _FakeBody(item), "ETag": f'"fake-{len(item)}"'}


def test_get_missing_returns_none():
    store = S3Store(s3=_FakeS3(), bucket="b")
    assert store.get("slot") is None


def test_set_and_get_roundtrip_with_prefix():
    s3 = _FakeS3()
    store = S3Store(s3=s3, bucket="b", prefix="saves/")

    store.set("slot1", b"bytes")
    assert store.get("slot1") == b"bytes"
    assert s3.puts == [("b", "saves/slot1", "application/octet-stream")]


def test_game_system_over_s3():
    system = GameSystem(S3Store(s3=_FakeS3(), bucket="b"))
    game = Game()
    game.monsters_eat_player()
    game.rack_up_massive_points()

    system.save(game, "slot1")
    assert system.load("slot1").state == GameState(attempts_remaining=2, level=1, score=9002)
    with pytest.raises(NotFoundError):
        system.load("slot2")


def test_read_error_raises_store_error():
    store = S3Store(s3=_FakeS3(fail_with="AccessDenied"), bucket="b")
    with pytest.raises(StoreError):
        store.get("slot")


def test_write_error_raises_store_error():
    store = S3Store(s3=_FakeS3(fail_with="InternalError"), bucket="b")
    with pytest.raises(StoreError):
        store.set("slot", b"x")


def test_bucket_is_required():
    with pytest.raises(ValueError):
        S3Store(s3=_FakeS3(), bucket="")

"""Тестовые заменители коллабораторов: хэш-функция, подписант, транспорт."""

import json
from typing import Any

from src.commitment.hash_builder import FIELD_PRIME
from src.core.domain import L2Signature


def toy_hash(left: int, right: int) -> int:
    """Детерминированная замена Pedersen для тестов порядка полей."""
    return (left * 0x1000193 + right + 1) % FIELD_PRIME


class RecordingHash:
    """Хэш-функция, запоминающая аргументы вызовов."""

    def __init__(self):
        self.calls: list[tuple[int, int]] = []

    def __call__(self, left: int, right: int) -> int:
        self.calls.append((left, right))
        return toy_hash(left, right)


class FakeSigner:
    """Подписант с фиксированной подписью."""

    def __init__(self, signature: L2Signature | None = None, error: Exception | None = None):
        self.signature = signature or L2Signature(r="0a" * 32, s="0b" * 32, v="0c" * 32)
        self.error = error
        self.signed: list[int] = []

    def sign(self, message_hash: int) -> L2Signature:
        self.signed.append(message_hash)
        if self.error is not None:
            raise self.error
        return self.signature


class FakeTransport:
    """Транспорт, возвращающий заготовленные ответы и запоминающий запросы."""

    def __init__(self, responses: list[Any] | None = None, error: Exception | None = None):
        self.responses = list(responses or [])
        self.error = error
        self.requests: list[dict[str, Any]] = []

    def request(self, path, method, body=None, params=None) -> bytes:
        self.requests.append({"path": path, "method": method, "body": body, "params": params})
        if self.error is not None:
            raise self.error
        response = self.responses.pop(0) if self.responses else {"code": "SUCCESS", "data": None}
        return json.dumps(response).encode("utf-8")

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]

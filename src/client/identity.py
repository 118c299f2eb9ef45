"""
Подписант и идентичность аккаунта

Клиент получает обе возможности через конструктор (dependency injection).
Сам алгоритм подписи здесь не реализуется.
"""

from dataclasses import dataclass
from typing import Protocol

from src.core.domain.commitment import L2Signature
from src.core.errors import SigningFailed


class Signer(Protocol):
    """Подписывает хэш сообщения L2"""

    def sign(self, message_hash: int) -> L2Signature:
        ...


class AccountProvider(Protocol):
    """Идентификатор аккаунта (он же position_id в L2)"""

    @property
    def account_id(self) -> int:
        ...


@dataclass(frozen=True)
class StaticAccount:
    """Фиксированный аккаунт"""

    account_id: int

    def __post_init__(self):
        if self.account_id < 0:
            raise ValueError(f"account_id must be non-negative, got {self.account_id}")


def sign_message_hash(signer: Signer, message_hash: int) -> L2Signature:
    """
    Подпись хэша с единым типом ошибки.

    Raises:
        SigningFailed: Любой сбой подписанта
    """
    try:
        signature = signer.sign(message_hash)
    except SigningFailed:
        raise
    except Exception as e:
        raise SigningFailed(f"failed to sign order hash {hex(message_hash)}: {e}") from e

    if not isinstance(signature, L2Signature):
        raise SigningFailed(f"signer returned {type(signature).__name__}, expected L2Signature")
    if not signature.r or not signature.s:
        raise SigningFailed(f"signer returned an empty signature for order hash {hex(message_hash)}")
    return signature

"""
Nonce и экспирация ордера для settlement-слоя

- nonce — детерминированная функция client_order_id (не времени), поэтому
  повторная отправка с тем же client_order_id даёт тот же nonce и хэш
- экспирация L2 = expire_time + 9 дней (запас на matching/settlement)
- в тело запроса уходит экспирация в мс, в хэш — часовой bucket

Обе формы экспирации вычисляются одной функцией из одного таймстампа.
"""

import hashlib
import uuid
from dataclasses import dataclass
from typing import Final


# Буфер экспирации L2 относительно экспирации ордера
L2_EXPIRE_BUFFER_MS: Final[int] = 9 * 24 * 60 * 60 * 1000

MS_PER_HOUR: Final[int] = 60 * 60 * 1000

# Nonce занимает 32 бита в упакованном сообщении ордера
NONCE_HEX_DIGITS: Final[int] = 8


def calc_nonce(client_order_id: str) -> int:
    """
    Nonce из client_order_id.

    Первые 32 бита SHA-256 от UTF-8 представления идентификатора.

    Args:
        client_order_id: Клиентский идентификатор ордера

    Returns:
        int в диапазоне [0, 2^32)
    """
    digest = hashlib.sha256(client_order_id.encode("utf-8")).hexdigest()
    return int(digest[:NONCE_HEX_DIGITS], 16)


def generate_client_order_id() -> str:
    """Случайный client_order_id для ордеров без явного идентификатора"""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class L2Expiry:
    """Экспирация L2 в двух представлениях."""

    expire_time_ms: int  # Исходная экспирация ордера, мс
    l2_expire_time_ms: int  # С буфером, мс (тело запроса)
    l2_expire_hour: int  # Часовой bucket (хэш)


def calc_l2_expiry(expire_time_ms: int) -> L2Expiry:
    """
    Экспирация L2 из экспирации ордера.

    l2_expire_time_ms = expire_time_ms + 9 дней
    l2_expire_hour    = l2_expire_time_ms // 3_600_000

    Args:
        expire_time_ms: Экспирация ордера в мс от эпохи

    Returns:
        L2Expiry
    """
    l2_expire_time_ms = expire_time_ms + L2_EXPIRE_BUFFER_MS
    return L2Expiry(
        expire_time_ms=expire_time_ms,
        l2_expire_time_ms=l2_expire_time_ms,
        l2_expire_hour=l2_expire_time_ms // MS_PER_HOUR,
    )

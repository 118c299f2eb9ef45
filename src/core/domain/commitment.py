"""
Производные модели L2-коммитмента

QuantizedOrder, Commitment и L2Signature вычисляются один раз на ордер,
используются для получения хэша и подписи и отбрасываются. Все модели
immutable (frozen dataclass).
"""

from dataclasses import dataclass
from decimal import Decimal

from src.core.domain.order import OrderIntent


@dataclass(frozen=True)
class QuantizedOrder:
    """Целочисленные величины ордера в единицах settlement-слоя."""

    amount_synthetic: int
    amount_collateral: int
    amount_fee: int  # Fee cap, масштабированный resolution котировки

    nonce: int
    l2_expire_time_ms: int  # Экспирация с буфером, в мс (уходит на биржу)
    l2_expire_hour: int  # Часовой bucket той же экспирации (уходит в хэш)

    # Десятичные величины для тела запроса
    value: Decimal  # price * size
    limit_fee: Decimal  # ceil(price * size * fee_rate)
    fee_rate: Decimal


@dataclass(frozen=True)
class Commitment:
    """
    Упорядоченный кортеж полей, хэш которого подписывается.

    Порядок полей совпадает с порядком аргументов хэша и является
    частью протокола settlement-слоя.
    """

    synthetic_asset_id: int
    collateral_asset_id: int
    fee_asset_id: int
    is_buying_synthetic: bool
    amount_synthetic: int
    amount_collateral: int
    amount_fee: int
    nonce: int
    position_id: int
    expiration_hour: int

    def as_tuple(self) -> tuple:
        return (
            self.synthetic_asset_id,
            self.collateral_asset_id,
            self.fee_asset_id,
            self.is_buying_synthetic,
            self.amount_synthetic,
            self.amount_collateral,
            self.amount_fee,
            self.nonce,
            self.position_id,
            self.expiration_hour,
        )


@dataclass(frozen=True)
class OrderCommitment:
    """
    Результат построения коммитмента: величины, кортеж и хэш.

    intent — нормализованный ордер (с подставленными time_in_force и
    client_order_id), именно он уходит в тело запроса.
    """

    intent: OrderIntent
    quantized: QuantizedOrder
    commitment: Commitment
    message_hash: int

    @property
    def client_order_id(self) -> str:
        return self.intent.client_order_id

    @property
    def message_hash_hex(self) -> str:
        return hex(self.message_hash)


@dataclass(frozen=True)
class L2Signature:
    """Подпись (r, s, v) над хэшем. Содержимое не интерпретируется."""

    r: str
    s: str
    v: str = ""

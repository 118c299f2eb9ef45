"""
Сборка тела запроса createOrder

Объединяет исходные десятичные поля ордера (дословно, строками), nonce,
обе формы экспирации, номинал, fee cap и подпись в каноническое тело
запроса. Отправкой занимается транспорт.
"""

from typing import Any

from src.core.domain.commitment import L2Signature, QuantizedOrder
from src.core.domain.order import OrderIntent, TimeInForce
from src.core.math.fixed_point import format_decimal


def serialize_signature(signature: L2Signature) -> str:
    """
    Подпись для передачи: r, затем s, затем v, без разделителей.

    Формат задан протоколом биржи.
    """
    return f"{signature.r}{signature.s}{signature.v}"


def default_time_in_force(intent: OrderIntent) -> TimeInForce:
    """MARKET-семейство → IMMEDIATE_OR_CANCEL, LIMIT-семейство → GOOD_TIL_CANCEL"""
    if intent.order_type.is_market:
        return TimeInForce.IMMEDIATE_OR_CANCEL
    return TimeInForce.GOOD_TIL_CANCEL


def apply_default_time_in_force(intent: OrderIntent) -> OrderIntent:
    """
    Подстановка time_in_force, если он не задан.

    Применяется до квантования, чтобы значение попало в тело запроса.

    Returns:
        Исходный intent, если time_in_force задан, иначе копия с дефолтом
    """
    if intent.time_in_force is not None:
        return intent
    return intent.model_copy(update={"time_in_force": default_time_in_force(intent)})


def assemble_order_request(
    intent: OrderIntent,
    quantized: QuantizedOrder,
    account_id: int,
) -> dict[str, Any]:
    """
    Тело запроса createOrder без подписи.

    Args:
        intent: Нормализованный ордер (time_in_force и client_order_id заданы)
        quantized: Квантованные величины (nonce, экспирация, номинал, fee cap)
        account_id: Идентификатор аккаунта (он же position_id в L2)

    Returns:
        dict с полями в формате биржи, кроме l2Signature
    """
    intent = apply_default_time_in_force(intent)
    if intent.client_order_id is None:
        raise ValueError("client_order_id must be set before assembling the request")

    return {
        "accountId": str(account_id),
        "contractId": intent.contract_id,
        "price": intent.price,
        "size": intent.size,
        "type": intent.order_type.value,
        "side": intent.side.value,
        "timeInForce": intent.time_in_force.value,
        "clientOrderId": intent.client_order_id,
        "expireTime": str(intent.expire_time_ms),
        "l2Nonce": str(quantized.nonce),
        "l2ExpireTime": str(quantized.l2_expire_time_ms),
        "l2Value": format_decimal(quantized.value),
        "l2Size": intent.size,
        "l2LimitFee": format_decimal(quantized.limit_fee),
        "reduceOnly": intent.reduce_only,
    }


def sign_order_request(body: dict[str, Any], signature: L2Signature) -> dict[str, Any]:
    """Копия тела запроса с полем l2Signature"""
    return {**body, "l2Signature": serialize_signature(signature)}


def assemble_signed_order_request(
    intent: OrderIntent,
    quantized: QuantizedOrder,
    account_id: int,
    signature: L2Signature,
) -> dict[str, Any]:
    """
    Тело запроса createOrder.

    Args:
        intent: Нормализованный ордер (time_in_force и client_order_id заданы)
        quantized: Квантованные величины (nonce, экспирация, номинал, fee cap)
        account_id: Идентификатор аккаунта (он же position_id в L2)
        signature: Подпись над хэшем коммитмента

    Returns:
        dict с полями в формате биржи
    """
    return sign_order_request(assemble_order_request(intent, quantized, account_id), signature)

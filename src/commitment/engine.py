"""
OrderCommitmentEngine — построение L2-коммитмента ордера

Пайплайн:
1. Дефолтный time_in_force и client_order_id
2. Квантование размера, номинала и fee cap
3. Nonce и экспирация
4. Кортеж коммитмента и хэш

Либо возвращается полный согласованный OrderCommitment, либо ошибка;
частичный коммитмент не возвращается никогда. Функции чистые и не имеют
общего изменяемого состояния.
"""

import logging
from decimal import Decimal

from src.commitment.assembler import apply_default_time_in_force
from src.commitment.hash_builder import (
    HashFunction,
    calc_limit_order_hash,
    parse_asset_id,
    pedersen_hash,
)
from src.core.domain.commitment import Commitment, OrderCommitment, QuantizedOrder
from src.core.domain.metadata import Coin, Contract, MetaData
from src.core.domain.order import OrderIntent
from src.core.math.fixed_point import (
    DEFAULT_FEE_RATE,
    parse_decimal,
    parse_resolution,
    quantize_amounts,
    resolve_fee_rate,
)
from src.core.math.nonce_expiry import calc_l2_expiry, calc_nonce, generate_client_order_id


logger = logging.getLogger(__name__)


def normalize_intent(intent: OrderIntent) -> OrderIntent:
    """Подстановка time_in_force и client_order_id, если они не заданы"""
    intent = apply_default_time_in_force(intent)
    if intent.client_order_id is None:
        intent = intent.model_copy(update={"client_order_id": generate_client_order_id()})
    return intent


def quantize_order(
    intent: OrderIntent,
    contract: Contract,
    quote_coin: Coin,
    l2_price: str | Decimal,
    default_fee_rate: str = DEFAULT_FEE_RATE,
) -> QuantizedOrder:
    """
    Квантование ордера.

    Args:
        intent: Нормализованный ордер (client_order_id задан)
        contract: Метаданные контракта
        quote_coin: Метаданные монеты котировки
        l2_price: Цена для L2 (для MARKET — худшая допустимая цена)
        default_fee_rate: Ставка, если контракт не задаёт taker fee rate

    Returns:
        QuantizedOrder

    Raises:
        InvalidDecimal: Некорректные price/size/l2_price/fee rate
        MissingResolution: Некорректный resolution актива
    """
    synthetic_resolution = parse_resolution(
        f"contract {contract.contract_id}", contract.stark_ex_resolution
    )
    collateral_resolution = parse_resolution(
        f"coin {quote_coin.coin_id}", quote_coin.stark_ex_resolution
    )

    size = parse_decimal("size", intent.size)
    parse_decimal("price", intent.price)
    price = parse_decimal("l2_price", l2_price)
    fee_rate = resolve_fee_rate(contract.default_taker_fee_rate, default_fee_rate)

    amounts = quantize_amounts(size, price, fee_rate, synthetic_resolution, collateral_resolution)
    expiry = calc_l2_expiry(intent.expire_time_ms)
    nonce = calc_nonce(intent.client_order_id)

    return QuantizedOrder(
        amount_synthetic=amounts.amount_synthetic,
        amount_collateral=amounts.amount_collateral,
        amount_fee=amounts.amount_fee,
        nonce=nonce,
        l2_expire_time_ms=expiry.l2_expire_time_ms,
        l2_expire_hour=expiry.l2_expire_hour,
        value=amounts.value,
        limit_fee=amounts.limit_fee,
        fee_rate=fee_rate,
    )


def build_commitment(
    intent: OrderIntent,
    contract: Contract,
    quote_coin: Coin,
    quantized: QuantizedOrder,
    account_id: int,
) -> Commitment:
    """
    Кортеж коммитмента.

    Актив котировки используется и для collateral, и для fee.

    Raises:
        InvalidCommitmentField: Некорректный идентификатор актива
    """
    quote_asset_id = parse_asset_id(
        f"coin {quote_coin.coin_id} stark_ex_asset_id", quote_coin.stark_ex_asset_id
    )
    return Commitment(
        synthetic_asset_id=parse_asset_id(
            f"contract {contract.contract_id} stark_ex_synthetic_asset_id",
            contract.stark_ex_synthetic_asset_id,
        ),
        collateral_asset_id=quote_asset_id,
        fee_asset_id=quote_asset_id,
        is_buying_synthetic=intent.is_buy,
        amount_synthetic=quantized.amount_synthetic,
        amount_collateral=quantized.amount_collateral,
        amount_fee=quantized.amount_fee,
        nonce=quantized.nonce,
        position_id=account_id,
        expiration_hour=quantized.l2_expire_hour,
    )


def build_order_commitment(
    intent: OrderIntent,
    contract: Contract,
    quote_coin: Coin,
    l2_price: str | Decimal,
    account_id: int,
    default_fee_rate: str = DEFAULT_FEE_RATE,
    hash_fn: HashFunction = pedersen_hash,
) -> OrderCommitment:
    """
    Полный коммитмент ордера: квантование, nonce, экспирация, хэш.

    Args:
        intent: Ордер
        contract: Метаданные контракта
        quote_coin: Метаданные монеты котировки контракта
        l2_price: Цена для L2
        account_id: Идентификатор аккаунта (position_id)
        default_fee_rate: Ставка по умолчанию
        hash_fn: Хэш-функция над полем STARK

    Returns:
        OrderCommitment
    """
    if contract.quote_coin_id != quote_coin.coin_id:
        raise ValueError(
            f"coin {quote_coin.coin_id} is not the quote coin of contract "
            f"{contract.contract_id} (expected {contract.quote_coin_id})"
        )

    intent = normalize_intent(intent)
    quantized = quantize_order(intent, contract, quote_coin, l2_price, default_fee_rate)
    commitment = build_commitment(intent, contract, quote_coin, quantized, account_id)
    message_hash = calc_limit_order_hash(commitment, hash_fn)

    logger.debug(
        "order commitment built: contract=%s clientOrderId=%s nonce=%d l2ExpireHour=%d",
        intent.contract_id,
        intent.client_order_id,
        quantized.nonce,
        quantized.l2_expire_hour,
    )
    return OrderCommitment(
        intent=intent,
        quantized=quantized,
        commitment=commitment,
        message_hash=message_hash,
    )


def build_order_commitment_from_metadata(
    intent: OrderIntent,
    metadata: MetaData,
    l2_price: str | Decimal,
    account_id: int,
    default_fee_rate: str = DEFAULT_FEE_RATE,
    hash_fn: HashFunction = pedersen_hash,
) -> OrderCommitment:
    """
    Коммитмент с поиском контракта и монеты котировки в метаданных.

    Raises:
        NotFound: Контракт или монета отсутствуют (до квантования и хэширования)
    """
    contract = metadata.get_contract(intent.contract_id)
    quote_coin = metadata.get_quote_coin(contract)
    return build_order_commitment(
        intent,
        contract,
        quote_coin,
        l2_price,
        account_id,
        default_fee_rate=default_fee_rate,
        hash_fn=hash_fn,
    )

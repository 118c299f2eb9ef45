"""
Хэш лимитного ордера (LIMIT_ORDER_WITH_FEES)

Собирает упорядоченный кортеж полей коммитмента в прообраз хэша и
вычисляет хэш Pedersen над полем STARK.

Раскладка сообщения:
    если покупаем синтетику: sell = collateral, buy = synthetic, иначе наоборот

    assets_hash = H(H(asset_id_sell, asset_id_buy), asset_id_fee)
    packed_0    = amount_sell(64) | amount_buy(64) | amount_fee(64) | nonce(32)
    packed_1    = 3 | position_id(64) x3 | expiration_hour(32) | padding(17)
    hash        = H(H(assets_hash, packed_0), packed_1)

Порядок и роль каждого поля — часть протокола settlement-слоя: перестановка
даёт хэш, который проходит проверку подписи, но описывает другой ордер.
"""

import logging
from typing import Callable, Final

from src.core.domain.commitment import Commitment
from src.core.errors import InvalidCommitmentField


logger = logging.getLogger(__name__)

HashFunction = Callable[[int, int], int]


# =============================================================================
# ПАРАМЕТРЫ СООБЩЕНИЯ
# =============================================================================

# Модуль поля STARK
FIELD_PRIME: Final[int] = 2**251 + 17 * 2**192 + 1

# Тип сообщения LIMIT_ORDER_WITH_FEES
LIMIT_ORDER_WITH_FEES: Final[int] = 3

AMOUNT_BITS: Final[int] = 64
NONCE_BITS: Final[int] = 32
POSITION_ID_BITS: Final[int] = 64
EXPIRATION_BITS: Final[int] = 32
ORDER_PADDING_BITS: Final[int] = 17


def pedersen_hash(left: int, right: int) -> int:
    """Pedersen hash над полем STARK (starknet_py)"""
    from starknet_py.hash.utils import pedersen_hash as _pedersen_hash

    return _pedersen_hash(left, right)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def parse_asset_id(field: str, value: str | int) -> int:
    """
    Парсинг идентификатора актива L2.

    Принимает "0x"-hex строку, десятичную строку или int.

    Raises:
        InvalidCommitmentField: Если значение не парсится или вне поля STARK
    """
    if isinstance(value, int) and not isinstance(value, bool):
        asset_id = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        try:
            asset_id = int(raw, 16) if raw[:2].lower() == "0x" else int(raw, 10)
        except ValueError:
            raise InvalidCommitmentField(field, value, "not a hex or decimal integer") from None
    else:
        raise InvalidCommitmentField(field, value, "missing")

    if not 0 <= asset_id < FIELD_PRIME:
        raise InvalidCommitmentField(field, value, "outside STARK field")
    return asset_id


def _check_bits(field: str, value: int, bits: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCommitmentField(field, value, "not an integer")
    if not 0 <= value < 2**bits:
        raise InvalidCommitmentField(field, value, f"must fit in {bits} unsigned bits")


def validate_commitment(commitment: Commitment) -> None:
    """
    Проверка диапазонов всех полей до хэширования.

    Raises:
        InvalidCommitmentField: Если поле не помещается в свою ширину
    """
    for field in ("synthetic_asset_id", "collateral_asset_id", "fee_asset_id"):
        value = getattr(commitment, field)
        if not 0 <= value < FIELD_PRIME:
            raise InvalidCommitmentField(field, value, "outside STARK field")

    _check_bits("amount_synthetic", commitment.amount_synthetic, AMOUNT_BITS)
    _check_bits("amount_collateral", commitment.amount_collateral, AMOUNT_BITS)
    _check_bits("amount_fee", commitment.amount_fee, AMOUNT_BITS)
    _check_bits("nonce", commitment.nonce, NONCE_BITS)
    _check_bits("position_id", commitment.position_id, POSITION_ID_BITS)
    _check_bits("expiration_hour", commitment.expiration_hour, EXPIRATION_BITS)


# =============================================================================
# ПРООБРАЗ И ХЭШ
# =============================================================================


def pack_amounts(amount_sell: int, amount_buy: int, amount_fee: int, nonce: int) -> int:
    """packed_0 = amount_sell | amount_buy | amount_fee | nonce"""
    packed = amount_sell
    packed = (packed << AMOUNT_BITS) + amount_buy
    packed = (packed << AMOUNT_BITS) + amount_fee
    packed = (packed << NONCE_BITS) + nonce
    return packed


def pack_order_header(position_id: int, expiration_hour: int) -> int:
    """packed_1 = type | position_id x3 | expiration_hour | padding"""
    packed = LIMIT_ORDER_WITH_FEES
    # Позиции sell, buy и fee совпадают: это один аккаунт
    for _ in range(3):
        packed = (packed << POSITION_ID_BITS) + position_id
    packed = (packed << EXPIRATION_BITS) + expiration_hour
    packed <<= ORDER_PADDING_BITS
    return packed


def build_hash_preimage(commitment: Commitment) -> tuple[int, int, int, int, int]:
    """
    Прообраз хэша: (asset_id_sell, asset_id_buy, asset_id_fee, packed_0, packed_1).

    Raises:
        InvalidCommitmentField: Если поля коммитмента вне диапазона
    """
    validate_commitment(commitment)

    if commitment.is_buying_synthetic:
        asset_id_sell = commitment.collateral_asset_id
        asset_id_buy = commitment.synthetic_asset_id
        amount_sell = commitment.amount_collateral
        amount_buy = commitment.amount_synthetic
    else:
        asset_id_sell = commitment.synthetic_asset_id
        asset_id_buy = commitment.collateral_asset_id
        amount_sell = commitment.amount_synthetic
        amount_buy = commitment.amount_collateral

    packed_0 = pack_amounts(amount_sell, amount_buy, commitment.amount_fee, commitment.nonce)
    packed_1 = pack_order_header(commitment.position_id, commitment.expiration_hour)
    return asset_id_sell, asset_id_buy, commitment.fee_asset_id, packed_0, packed_1


def calc_limit_order_hash(commitment: Commitment, hash_fn: HashFunction = pedersen_hash) -> int:
    """
    Хэш лимитного ордера.

    Args:
        commitment: Кортеж полей коммитмента
        hash_fn: Двухаргументная хэш-функция над полем (по умолчанию Pedersen)

    Returns:
        Хэш сообщения (int < FIELD_PRIME для Pedersen)
    """
    asset_id_sell, asset_id_buy, asset_id_fee, packed_0, packed_1 = build_hash_preimage(commitment)

    assets_hash = hash_fn(hash_fn(asset_id_sell, asset_id_buy), asset_id_fee)
    message_hash = hash_fn(hash_fn(assets_hash, packed_0), packed_1)

    logger.debug(
        "limit order hash computed: nonce=%d position_id=%d expiration_hour=%d hash=%s",
        commitment.nonce,
        commitment.position_id,
        commitment.expiration_hour,
        hex(message_hash),
    )
    return message_hash

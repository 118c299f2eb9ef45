"""
FixedPoint — Квантование десятичных величин в единицы settlement-слоя

Конвертирует десятичные размер, цену и fee rate в целые единицы L2
с помощью resolution каждого актива.

Правила округления:
- amount_synthetic  = trunc(size * synthetic_resolution)
- value             = price * size  (остаётся десятичным)
- amount_collateral = trunc(value * collateral_resolution)
- limit_fee         = ceil(size * price * fee_rate)
- amount_fee        = limit_fee * collateral_resolution

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Fee cap округляется ВВЕРХ до масштабирования (никогда не недоплачивает)
2. Все остальные конверсии усекаются к нулю (без banker's rounding)
3. Все операции детерминированы и не зависят от глобального decimal-контекста
"""

import re
from dataclasses import dataclass
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    Context,
    Decimal,
    InvalidOperation,
)
from typing import Final

from src.core.errors import InvalidDecimal, MissingResolution


# Fee rate, если контракт не задаёт taker fee rate
DEFAULT_FEE_RATE: Final[str] = "0.001"

# Собственный контекст: точность с запасом для произведений 256-битных величин
_DECIMAL_CONTEXT: Final[Context] = Context(prec=200, rounding=ROUND_DOWN)

# Формат десятичной строки в теле запроса (decimalString в create_order_request.json)
DECIMAL_PATTERN: Final[re.Pattern] = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_decimal(field: str, value: str | Decimal) -> Decimal:
    """
    Парсинг десятичной строки.

    Строка должна целиком соответствовать формату тела запроса
    (DECIMAL_PATTERN): без пробелов, знака и разделителей "_". В хэш
    попадает ровно то число, которое записано в строке тела запроса.

    Args:
        field: Имя поля (для сообщения об ошибке)
        value: Десятичная строка или Decimal

    Returns:
        Конечный неотрицательный Decimal

    Raises:
        InvalidDecimal: Если строка не соответствует формату, не конечна или отрицательна
    """
    if isinstance(value, Decimal):
        result = value
    else:
        if not isinstance(value, str) or DECIMAL_PATTERN.fullmatch(value) is None:
            raise InvalidDecimal(field, value)
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise InvalidDecimal(field, value) from None

    if not result.is_finite() or result.is_signed():
        raise InvalidDecimal(field, value)

    return result


def parse_resolution(asset: str, value: str | int | None) -> int:
    """
    Парсинг resolution актива.

    Метаданные отдают resolution в hex ("0x2540be400" = 10^10); префикс 0x
    опционален, строка всегда трактуется как hex.

    Args:
        asset: Имя актива (для сообщения об ошибке)
        value: Hex-строка или уже распарсенный int

    Returns:
        Положительный int

    Raises:
        MissingResolution: Если значение отсутствует, не парсится или <= 0
    """
    if isinstance(value, int) and not isinstance(value, bool):
        resolution = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw[:2].lower() == "0x":
            raw = raw[2:]
        try:
            resolution = int(raw, 16)
        except ValueError:
            raise MissingResolution(asset, value) from None
    else:
        raise MissingResolution(asset, value)

    if resolution <= 0:
        raise MissingResolution(asset, value)

    return resolution


def resolve_fee_rate(contract_fee_rate: str | None, default_fee_rate: str = DEFAULT_FEE_RATE) -> Decimal:
    """
    Выбор fee rate: taker fee rate контракта, иначе default.

    Raises:
        InvalidDecimal: Если выбранная ставка не парсится
    """
    if contract_fee_rate:
        return parse_decimal("fee_rate", contract_fee_rate)
    return parse_decimal("default_fee_rate", default_fee_rate)


# =============================================================================
# КВАНТОВАНИЕ
# =============================================================================


def truncate_to_int(value: Decimal) -> int:
    """Усечение к нулю"""
    return int(value.to_integral_value(rounding=ROUND_DOWN, context=_DECIMAL_CONTEXT))


def ceil_to_whole(value: Decimal) -> Decimal:
    """Округление вверх до целого (остаётся Decimal)"""
    return value.to_integral_value(rounding=ROUND_CEILING, context=_DECIMAL_CONTEXT)


def format_decimal(value: Decimal) -> str:
    """
    Строковое представление для тела запроса.

    Фиксированная точка, без экспоненты и без хвостовых нулей:
    Decimal("300.0050") → "300.005", Decimal("1E+2") → "100".
    """
    if value.is_zero():
        return "0"
    return format(value.normalize(_DECIMAL_CONTEXT), "f")


@dataclass(frozen=True)
class QuantizedAmounts:
    """Результат квантования."""

    amount_synthetic: int
    amount_collateral: int
    amount_fee: int
    value: Decimal
    limit_fee: Decimal


def quantize_amounts(
    size: Decimal,
    price: Decimal,
    fee_rate: Decimal,
    synthetic_resolution: int,
    collateral_resolution: int,
) -> QuantizedAmounts:
    """
    Квантование размера, номинала и fee cap.

    Args:
        size: Размер ордера (в синтетическом активе)
        price: Цена для L2 (в активе котировки)
        fee_rate: Fee rate (доля)
        synthetic_resolution: Resolution синтетического актива
        collateral_resolution: Resolution актива котировки

    Returns:
        QuantizedAmounts

    Examples:
        >>> quantize_amounts(Decimal("1.9999999"), Decimal("1"), Decimal("0"), 10**6, 10**6).amount_synthetic
        1999999
    """
    ctx = _DECIMAL_CONTEXT
    synthetic_factor = Decimal(synthetic_resolution)
    collateral_factor = Decimal(collateral_resolution)

    value = ctx.multiply(price, size)
    amount_synthetic = truncate_to_int(ctx.multiply(size, synthetic_factor))
    amount_collateral = truncate_to_int(ctx.multiply(value, collateral_factor))

    # Fee cap: сначала ceil в натуральных единицах котировки, затем масштаб.
    # После ceil значение целое, поэтому масштабирование точное.
    limit_fee = ceil_to_whole(ctx.multiply(ctx.multiply(size, price), fee_rate))
    amount_fee = int(ctx.multiply(limit_fee, collateral_factor))

    return QuantizedAmounts(
        amount_synthetic=amount_synthetic,
        amount_collateral=amount_collateral,
        amount_fee=amount_fee,
        value=value,
        limit_fee=limit_fee,
    )

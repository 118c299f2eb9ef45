"""
OrderIntent — Модель намерения разместить ордер

Immutable Pydantic модель, описывающая ордер до построения L2-коммитмента.
Цена и размер хранятся как десятичные строки (никогда не float): от точной
десятичной семантики зависит корректность расчётов settlement-слоя.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.math.fixed_point import DECIMAL_PATTERN


# Окно экспирации по умолчанию, если вызывающий код не задал expire_time
DEFAULT_EXPIRE_DAYS = 28


# =============================================================================
# ENUMS
# =============================================================================


class Side(str, Enum):
    """Сторона ордера"""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    """Тип ордера"""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LIMIT = "STOP_LIMIT"
    STOP_MARKET = "STOP_MARKET"
    TAKE_PROFIT_LIMIT = "TAKE_PROFIT_LIMIT"
    TAKE_PROFIT_MARKET = "TAKE_PROFIT_MARKET"

    @property
    def is_market(self) -> bool:
        return self in (OrderType.MARKET, OrderType.STOP_MARKET, OrderType.TAKE_PROFIT_MARKET)


class TimeInForce(str, Enum):
    """Время жизни ордера"""

    GOOD_TIL_CANCEL = "GOOD_TIL_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    POST_ONLY = "POST_ONLY"


def _default_expire_time() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=DEFAULT_EXPIRE_DAYS)


# =============================================================================
# ORDER INTENT
# =============================================================================


class OrderIntent(BaseModel):
    """
    Намерение разместить ордер.

    Создаётся на каждый вызов и далее не изменяется. Дефолтный
    time_in_force подставляется через model_copy, а не мутацией.
    """

    contract_id: str = Field(..., min_length=1, description="Идентификатор контракта")
    side: Side = Field(..., description="Сторона (BUY/SELL)")
    order_type: OrderType = Field(..., description="Тип ордера")
    price: str = Field(..., min_length=1, description="Цена (десятичная строка)")
    size: str = Field(..., min_length=1, description="Размер (десятичная строка)")
    time_in_force: TimeInForce | None = Field(None, description="Время жизни ордера")
    reduce_only: bool = Field(False, description="Только сокращение позиции")
    client_order_id: str | None = Field(
        None, min_length=1, description="Клиентский идентификатор ордера"
    )
    expire_time: datetime = Field(
        default_factory=_default_expire_time, description="Абсолютное время экспирации"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("price", "size", mode="before")
    @classmethod
    def coerce_decimal_string(cls, v):
        """Decimal/int допускаются и приводятся к строке; float запрещён"""
        if isinstance(v, float):
            raise ValueError("float is not allowed for price/size, use str or Decimal")
        if isinstance(v, (Decimal, int)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("price", "size")
    @classmethod
    def check_decimal_format(cls, v: str) -> str:
        """Только формат тела запроса: цифры, точка, экспонента"""
        if DECIMAL_PATTERN.fullmatch(v) is None:
            raise ValueError(f"not a plain non-negative decimal string: {v!r}")
        return v

    @field_validator("expire_time")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Наивное время трактуется как UTC"""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def is_buy(self) -> bool:
        return self.side == Side.BUY

    @property
    def expire_time_ms(self) -> int:
        """Время экспирации в миллисекундах от эпохи"""
        # Через timedelta, чтобы не терять точность float-таймстампа
        delta = self.expire_time - datetime(1970, 1, 1, tzinfo=timezone.utc)
        return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000

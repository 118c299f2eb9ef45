"""
Модели параметров и результатов операций с ордерами

Результаты принимают camelCase поля ответа биржи; неизвестные поля
сохраняются (extra="allow"), чтобы не терять данные при расширении API.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_WIRE_CONFIG = ConfigDict(
    frozen=True, alias_generator=to_camel, populate_by_name=True, extra="allow"
)


# =============================================================================
# РЕЗУЛЬТАТЫ
# =============================================================================


class CreateOrderResult(BaseModel):
    """Результат createOrder"""

    order_id: str = Field(..., description="Идентификатор ордера на бирже")
    client_order_id: str | None = Field(None, description="Клиентский идентификатор")

    model_config = _WIRE_CONFIG


class Order(BaseModel):
    """Ордер (как его возвращает биржа)"""

    id: str
    account_id: str | None = None
    contract_id: str | None = None
    side: str | None = None
    type: str | None = None
    price: str | None = None
    size: str | None = None
    status: str | None = None
    client_order_id: str | None = None
    time_in_force: str | None = None
    reduce_only: bool | None = None
    cum_fill_size: str | None = None

    model_config = _WIRE_CONFIG


class OrderFillTransaction(BaseModel):
    """Исполнение ордера"""

    id: str
    order_id: str | None = None
    contract_id: str | None = None
    order_side: str | None = None
    fill_size: str | None = None
    fill_price: str | None = None
    fill_fee: str | None = None
    created_time: str | None = None

    model_config = _WIRE_CONFIG


class PageDataOrder(BaseModel):
    """Страница ордеров"""

    data_list: list[Order] = Field(default_factory=list)
    next_page_offset_data: str = ""

    model_config = _WIRE_CONFIG


class PageDataOrderFillTransaction(BaseModel):
    """Страница исполнений"""

    data_list: list[OrderFillTransaction] = Field(default_factory=list)
    next_page_offset_data: str = ""

    model_config = _WIRE_CONFIG


class MaxCreateOrderSize(BaseModel):
    """Максимальный размер ордера"""

    max_buy_size: str | None = None
    max_sell_size: str | None = None
    ask1_price: str | None = None
    bid1_price: str | None = None

    model_config = _WIRE_CONFIG


# =============================================================================
# ПАРАМЕТРЫ ЗАПРОСОВ
# =============================================================================


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


class _PageFilterParams(BaseModel):
    """Общие параметры пагинации и фильтров"""

    size: str = ""
    offset_data: str = ""
    filter_coin_id_list: list[str] = Field(default_factory=list)
    filter_contract_id_list: list[str] = Field(default_factory=list)
    filter_is_liquidate: bool | None = None
    filter_is_deleverage: bool | None = None
    filter_is_position_tpsl: bool | None = None
    filter_start_created_time_inclusive: int = Field(0, ge=0)
    filter_end_created_time_exclusive: int = Field(0, ge=0)

    model_config = {"frozen": True}

    def to_query(self) -> dict[str, str]:
        """
        Query параметры.

        Пустые значения опускаются, списки склеиваются через запятую,
        bool передаются как "true"/"false", нулевые таймстампы опускаются.
        """
        query: dict[str, str] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            key = to_camel(name)
            if value is None or value == "" or value == []:
                continue
            if isinstance(value, bool):
                query[key] = _bool_param(value)
            elif isinstance(value, list):
                query[key] = ",".join(value)
            elif isinstance(value, int):
                if value > 0:
                    query[key] = str(value)
            else:
                query[key] = value
        return query


class GetActiveOrderParams(_PageFilterParams):
    """Параметры getActiveOrderPage"""

    filter_type_list: list[str] = Field(default_factory=list)
    filter_status_list: list[str] = Field(default_factory=list)


class OrderFillTransactionParams(_PageFilterParams):
    """Параметры getHistoryOrderFillTransactionPage"""

    filter_order_id_list: list[str] = Field(default_factory=list)

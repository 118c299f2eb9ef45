"""
MetaData — Статические свойства контрактов и монет

Контракты и монеты индексируются по идентификатору один раз при загрузке
метаданных; поиск на каждом вызове идёт по ключу, а не перебором списка.

Поля моделей принимают как snake_case, так и camelCase имена из ответа
биржи (например, starkExResolution).
"""

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.core.errors import NotFound


class Coin(BaseModel):
    """Монета (актив коллатерала / котировки)"""

    coin_id: str = Field(..., min_length=1, description="Идентификатор монеты")
    coin_name: str = Field("", description="Название монеты")
    stark_ex_asset_id: str = Field("", description="Идентификатор актива в L2 (hex)")
    stark_ex_resolution: str = Field("", description="Resolution актива в L2 (hex)")

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class Contract(BaseModel):
    """Перпетуальный контракт"""

    contract_id: str = Field(..., min_length=1, description="Идентификатор контракта")
    contract_name: str = Field("", description="Название контракта")
    quote_coin_id: str = Field(..., min_length=1, description="Монета котировки")
    stark_ex_synthetic_asset_id: str = Field(
        "", description="Идентификатор синтетического актива в L2 (hex)"
    )
    stark_ex_resolution: str = Field("", description="Resolution синтетического актива (hex)")
    default_taker_fee_rate: str = Field("", description="Taker fee rate (десятичная строка)")
    default_maker_fee_rate: str = Field("", description="Maker fee rate (десятичная строка)")
    tick_size: str = Field("", description="Шаг цены")
    step_size: str = Field("", description="Шаг размера")

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class MetaData(BaseModel):
    """
    Индексированные метаданные.

    Строится один раз (from_lists / from_response) и далее используется
    только для чтения.
    """

    contracts: dict[str, Contract] = Field(default_factory=dict)
    coins: dict[str, Coin] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def from_lists(cls, contracts: Iterable[Contract], coins: Iterable[Coin]) -> "MetaData":
        """Построение индекса из списков контрактов и монет"""
        return cls(
            contracts={c.contract_id: c for c in contracts},
            coins={c.coin_id: c for c in coins},
        )

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "MetaData":
        """
        Построение индекса из payload ответа getMetaData.

        Args:
            data: dict с ключами contractList и coinList

        Returns:
            MetaData
        """
        contracts = [Contract.model_validate(c) for c in data.get("contractList") or []]
        coins = [Coin.model_validate(c) for c in data.get("coinList") or []]
        return cls.from_lists(contracts, coins)

    def get_contract(self, contract_id: str) -> Contract:
        """
        Raises:
            NotFound: Если контракт отсутствует
        """
        try:
            return self.contracts[contract_id]
        except KeyError:
            raise NotFound("contract", contract_id) from None

    def get_coin(self, coin_id: str) -> Coin:
        """
        Raises:
            NotFound: Если монета отсутствует
        """
        try:
            return self.coins[coin_id]
        except KeyError:
            raise NotFound("coin", coin_id) from None

    def get_quote_coin(self, contract: Contract) -> Coin:
        """Монета котировки контракта"""
        return self.get_coin(contract.quote_coin_id)

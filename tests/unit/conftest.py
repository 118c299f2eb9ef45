"""Общие фикстуры: метаданные BTC/USDT и ордера."""

from datetime import datetime, timezone

import pytest

from src.core.domain import Coin, Contract, MetaData, OrderIntent, OrderType, Side


BTC_SYNTHETIC_ASSET_ID = "0x4254432d3130000000000000000000"
USDT_ASSET_ID = "0x33bda5c923bae4e84825b74762d5482889b9512465fbffc50d1ae4b82c345c3"

# 2024-01-01T00:00:00Z
EXPIRE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
EXPIRE_TIME_MS = 1_704_067_200_000


@pytest.fixture
def btc_contract():
    """Контракт BTCUSDT: resolution 10^10, taker fee 0.0005."""
    return Contract(
        contract_id="10000001",
        contract_name="BTCUSDT",
        quote_coin_id="1000",
        stark_ex_synthetic_asset_id=BTC_SYNTHETIC_ASSET_ID,
        stark_ex_resolution="0x2540be400",
        default_taker_fee_rate="0.0005",
    )


@pytest.fixture
def usdt_coin():
    """Монета USDT: resolution 10^6."""
    return Coin(
        coin_id="1000",
        coin_name="USDT",
        stark_ex_asset_id=USDT_ASSET_ID,
        stark_ex_resolution="0xf4240",
    )


@pytest.fixture
def metadata(btc_contract, usdt_coin):
    """Индексированные метаданные."""
    return MetaData.from_lists([btc_contract], [usdt_coin])


@pytest.fixture
def limit_intent():
    """LIMIT BUY 0.01 BTC @ 30000.5 без time_in_force."""
    return OrderIntent(
        contract_id="10000001",
        side=Side.BUY,
        order_type=OrderType.LIMIT,
        price="30000.5",
        size="0.01",
        client_order_id="abc",
        expire_time=EXPIRE_TIME,
    )


@pytest.fixture
def market_intent():
    """MARKET SELL 0.5 BTC без time_in_force."""
    return OrderIntent(
        contract_id="10000001",
        side=Side.SELL,
        order_type=OrderType.MARKET,
        price="0",
        size="0.5",
        client_order_id="client-1",
        expire_time=EXPIRE_TIME,
    )

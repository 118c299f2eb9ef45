"""
Тесты сборки тела запроса createOrder

Проверяет:
1. Сериализацию подписи (r‖s‖v без разделителей)
2. Дефолтный time_in_force
3. Поля тела запроса и их формат
"""

from decimal import Decimal

import pytest

from src.commitment.assembler import (
    apply_default_time_in_force,
    assemble_order_request,
    assemble_signed_order_request,
    default_time_in_force,
    serialize_signature,
    sign_order_request,
)
from src.core.domain import L2Signature, OrderType, QuantizedOrder, TimeInForce


@pytest.fixture
def quantized():
    """Квантованный LIMIT BUY 0.01 BTC @ 30000.5 (client_order_id="abc")."""
    return QuantizedOrder(
        amount_synthetic=100_000_000,
        amount_collateral=300_005_000,
        amount_fee=1_000_000,
        nonce=3_128_432_319,
        l2_expire_time_ms=1_704_844_800_000,
        l2_expire_hour=473_568,
        value=Decimal("300.005"),
        limit_fee=Decimal("1"),
        fee_rate=Decimal("0.0005"),
    )


@pytest.fixture
def signature():
    return L2Signature(r="aa" * 32, s="bb" * 32, v="cc")


class TestSerializeSignature:
    """Тесты serialize_signature"""

    def test_concatenation_order(self) -> None:
        assert serialize_signature(L2Signature(r="01", s="02", v="03")) == "010203"

    def test_no_delimiter(self, signature) -> None:
        result = serialize_signature(signature)
        assert result == "aa" * 32 + "bb" * 32 + "cc"
        assert len(result) == 130

    def test_empty_v(self) -> None:
        assert serialize_signature(L2Signature(r="0x1", s="0x2")) == "0x10x2"


class TestDefaultTimeInForce:
    """Тесты дефолтного time_in_force"""

    def test_market_defaults_to_ioc(self, market_intent) -> None:
        assert default_time_in_force(market_intent) == TimeInForce.IMMEDIATE_OR_CANCEL
        assert apply_default_time_in_force(market_intent).time_in_force == TimeInForce.IMMEDIATE_OR_CANCEL

    def test_limit_defaults_to_gtc(self, limit_intent) -> None:
        assert apply_default_time_in_force(limit_intent).time_in_force == TimeInForce.GOOD_TIL_CANCEL

    @pytest.mark.parametrize(
        "order_type,expected",
        [
            (OrderType.STOP_MARKET, TimeInForce.IMMEDIATE_OR_CANCEL),
            (OrderType.TAKE_PROFIT_MARKET, TimeInForce.IMMEDIATE_OR_CANCEL),
            (OrderType.STOP_LIMIT, TimeInForce.GOOD_TIL_CANCEL),
            (OrderType.TAKE_PROFIT_LIMIT, TimeInForce.GOOD_TIL_CANCEL),
        ],
    )
    def test_conditional_types(self, limit_intent, order_type, expected) -> None:
        intent = limit_intent.model_copy(update={"order_type": order_type})
        assert apply_default_time_in_force(intent).time_in_force == expected

    def test_explicit_value_kept(self, market_intent) -> None:
        intent = market_intent.model_copy(update={"time_in_force": TimeInForce.FILL_OR_KILL})
        result = apply_default_time_in_force(intent)
        assert result.time_in_force == TimeInForce.FILL_OR_KILL
        assert result is intent

    def test_original_not_mutated(self, limit_intent) -> None:
        apply_default_time_in_force(limit_intent)
        assert limit_intent.time_in_force is None


class TestAssembleSignedOrderRequest:
    """Тесты assemble_signed_order_request"""

    def test_payload_fields(self, limit_intent, quantized, signature) -> None:
        body = assemble_signed_order_request(limit_intent, quantized, 543_429_922_991_190_000, signature)
        assert body == {
            "accountId": "543429922991190000",
            "contractId": "10000001",
            "price": "30000.5",
            "size": "0.01",
            "type": "LIMIT",
            "side": "BUY",
            "timeInForce": "GOOD_TIL_CANCEL",
            "clientOrderId": "abc",
            "expireTime": "1704067200000",
            "l2Nonce": "3128432319",
            "l2Signature": "aa" * 32 + "bb" * 32 + "cc",
            "l2ExpireTime": "1704844800000",
            "l2Value": "300.005",
            "l2Size": "0.01",
            "l2LimitFee": "1",
            "reduceOnly": False,
        }

    def test_decimal_strings_verbatim(self, limit_intent, quantized, signature) -> None:
        """Цена и размер передаются дословно, без пересериализации"""
        intent = limit_intent.model_copy(update={"price": "30000.50", "size": "0.0100"})
        body = assemble_signed_order_request(intent, quantized, 1, signature)
        assert body["price"] == "30000.50"
        assert body["size"] == "0.0100"
        assert body["l2Size"] == "0.0100"

    def test_market_order_gets_ioc(self, market_intent, quantized, signature) -> None:
        body = assemble_signed_order_request(market_intent, quantized, 1, signature)
        assert body["timeInForce"] == "IMMEDIATE_OR_CANCEL"
        assert body["side"] == "SELL"

    def test_expire_time_wire_consistency(self, limit_intent, quantized, signature) -> None:
        body = assemble_signed_order_request(limit_intent, quantized, 1, signature)
        assert int(body["l2ExpireTime"]) - int(body["expireTime"]) == 9 * 24 * 3_600_000
        assert int(body["l2ExpireTime"]) // 3_600_000 == quantized.l2_expire_hour

    def test_reduce_only_boolean(self, limit_intent, quantized, signature) -> None:
        intent = limit_intent.model_copy(update={"reduce_only": True})
        body = assemble_signed_order_request(intent, quantized, 1, signature)
        assert body["reduceOnly"] is True

    def test_missing_client_order_id(self, limit_intent, quantized, signature) -> None:
        intent = limit_intent.model_copy(update={"client_order_id": None})
        with pytest.raises(ValueError):
            assemble_signed_order_request(intent, quantized, 1, signature)


class TestOrderTermsAndSigning:
    """Тесты assemble_order_request и sign_order_request"""

    def test_terms_without_signature(self, limit_intent, quantized) -> None:
        terms = assemble_order_request(limit_intent, quantized, 1)
        assert "l2Signature" not in terms
        assert len(terms) == 15

    def test_signing_adds_signature_only(self, limit_intent, quantized, signature) -> None:
        terms = assemble_order_request(limit_intent, quantized, 1)
        body = sign_order_request(terms, signature)
        assert body["l2Signature"] == "aa" * 32 + "bb" * 32 + "cc"
        assert {k: v for k, v in body.items() if k != "l2Signature"} == terms
        assert "l2Signature" not in terms

    def test_same_as_signed_assembly(self, limit_intent, quantized, signature) -> None:
        terms = assemble_order_request(limit_intent, quantized, 1)
        assert sign_order_request(terms, signature) == assemble_signed_order_request(
            limit_intent, quantized, 1, signature
        )

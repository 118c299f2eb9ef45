"""
Тесты nonce и экспирации L2

Проверяет:
1. Nonce — детерминированная функция client_order_id
2. Экспирация: +9 дней в мс и часовой bucket из одного таймстампа
"""

import pytest

from src.core.math.nonce_expiry import (
    L2_EXPIRE_BUFFER_MS,
    MS_PER_HOUR,
    calc_l2_expiry,
    calc_nonce,
    generate_client_order_id,
)


class TestCalcNonce:
    """Тесты calc_nonce"""

    def test_known_value(self) -> None:
        """sha256("abc") = ba7816bf... → 0xba7816bf"""
        assert calc_nonce("abc") == 0xBA7816BF
        assert calc_nonce("abc") == 3_128_432_319

    def test_stable_across_calls(self) -> None:
        assert calc_nonce("client-1") == calc_nonce("client-1")

    def test_different_ids_differ(self) -> None:
        assert calc_nonce("client-1") != calc_nonce("client-2")

    @pytest.mark.parametrize("client_order_id", ["a", "order-0001", "ünïcode", "x" * 256])
    def test_fits_32_bits(self, client_order_id) -> None:
        assert 0 <= calc_nonce(client_order_id) < 2**32


class TestGenerateClientOrderId:
    """Тесты generate_client_order_id"""

    def test_unique(self) -> None:
        ids = {generate_client_order_id() for _ in range(100)}
        assert len(ids) == 100

    def test_non_empty_string(self) -> None:
        assert isinstance(generate_client_order_id(), str)
        assert generate_client_order_id()


class TestCalcL2Expiry:
    """Тесты calc_l2_expiry"""

    def test_buffer_is_nine_days(self) -> None:
        assert L2_EXPIRE_BUFFER_MS == 9 * 24 * 3_600_000
        assert MS_PER_HOUR == 3_600_000

    def test_known_value(self) -> None:
        """2024-01-01T00:00Z + 9 дней"""
        expiry = calc_l2_expiry(1_704_067_200_000)
        assert expiry.expire_time_ms == 1_704_067_200_000
        assert expiry.l2_expire_time_ms == 1_704_844_800_000
        assert expiry.l2_expire_hour == 473_568

    @pytest.mark.parametrize(
        "expire_time_ms",
        [0, 1, 3_599_999, 1_704_067_200_000, 1_704_067_200_000 + 3_599_999, 1_893_456_000_123],
    )
    def test_wire_and_bucket_consistent(self, expire_time_ms) -> None:
        """Инвариант: bucket == floor(wire / 3_600_000)"""
        expiry = calc_l2_expiry(expire_time_ms)
        assert expiry.l2_expire_time_ms == expire_time_ms + L2_EXPIRE_BUFFER_MS
        assert expiry.l2_expire_hour == expiry.l2_expire_time_ms // MS_PER_HOUR

    def test_bucket_truncates_within_hour(self) -> None:
        base = calc_l2_expiry(1_704_067_200_000)
        late = calc_l2_expiry(1_704_067_200_000 + MS_PER_HOUR - 1)
        next_hour = calc_l2_expiry(1_704_067_200_000 + MS_PER_HOUR)
        assert late.l2_expire_hour == base.l2_expire_hour
        assert next_hour.l2_expire_hour == base.l2_expire_hour + 1

"""
Core math modules

Квантование десятичных величин, nonce и экспирация для settlement-слоя.
"""

# Fixed-point квантование
from src.core.math.fixed_point import (
    DEFAULT_FEE_RATE,
    QuantizedAmounts,
    ceil_to_whole,
    format_decimal,
    parse_decimal,
    parse_resolution,
    quantize_amounts,
    resolve_fee_rate,
    truncate_to_int,
)

# Nonce и экспирация
from src.core.math.nonce_expiry import (
    L2_EXPIRE_BUFFER_MS,
    MS_PER_HOUR,
    L2Expiry,
    calc_l2_expiry,
    calc_nonce,
    generate_client_order_id,
)

__all__ = [
    # Fixed-point
    "DEFAULT_FEE_RATE",
    "QuantizedAmounts",
    "ceil_to_whole",
    "format_decimal",
    "parse_decimal",
    "parse_resolution",
    "quantize_amounts",
    "resolve_fee_rate",
    "truncate_to_int",
    # Nonce & expiry
    "L2_EXPIRE_BUFFER_MS",
    "MS_PER_HOUR",
    "L2Expiry",
    "calc_l2_expiry",
    "calc_nonce",
    "generate_client_order_id",
]

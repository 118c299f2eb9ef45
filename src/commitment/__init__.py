"""
L2 Order Commitment Engine

Квантование, nonce/экспирация, хэш коммитмента, сборка тела запроса и
интерпретация ответа биржи.
"""

from src.commitment.assembler import (
    apply_default_time_in_force,
    assemble_order_request,
    assemble_signed_order_request,
    default_time_in_force,
    serialize_signature,
    sign_order_request,
)
from src.commitment.engine import (
    build_commitment,
    build_order_commitment,
    build_order_commitment_from_metadata,
    normalize_intent,
    quantize_order,
)
from src.commitment.hash_builder import (
    FIELD_PRIME,
    LIMIT_ORDER_WITH_FEES,
    HashFunction,
    build_hash_preimage,
    calc_limit_order_hash,
    parse_asset_id,
    pedersen_hash,
)
from src.commitment.response import (
    SUCCESS_CODE,
    ResponseEnvelope,
    interpret_response,
    parse_envelope,
)

__all__ = [
    # Assembler
    "apply_default_time_in_force",
    "assemble_order_request",
    "assemble_signed_order_request",
    "default_time_in_force",
    "serialize_signature",
    "sign_order_request",
    # Engine
    "build_commitment",
    "build_order_commitment",
    "build_order_commitment_from_metadata",
    "normalize_intent",
    "quantize_order",
    # Hash
    "FIELD_PRIME",
    "LIMIT_ORDER_WITH_FEES",
    "HashFunction",
    "build_hash_preimage",
    "calc_limit_order_hash",
    "parse_asset_id",
    "pedersen_hash",
    # Response
    "SUCCESS_CODE",
    "ResponseEnvelope",
    "interpret_response",
    "parse_envelope",
]

"""
Domain models and value objects.

Contains order intent, exchange metadata and derived L2 commitment models.
"""

from src.core.domain.commitment import (
    Commitment,
    L2Signature,
    OrderCommitment,
    QuantizedOrder,
)
from src.core.domain.metadata import Coin, Contract, MetaData
from src.core.domain.order import (
    DEFAULT_EXPIRE_DAYS,
    OrderIntent,
    OrderType,
    Side,
    TimeInForce,
)

__all__ = [
    # Order intent
    "DEFAULT_EXPIRE_DAYS",
    "OrderIntent",
    "OrderType",
    "Side",
    "TimeInForce",
    # Metadata
    "Coin",
    "Contract",
    "MetaData",
    # Commitment
    "Commitment",
    "L2Signature",
    "OrderCommitment",
    "QuantizedOrder",
]

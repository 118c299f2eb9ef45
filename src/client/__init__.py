"""
Клиент ордеров: конфигурация, транспорт, подписант и операции.
"""

from src.client.config import ClientConfig, configure_logging, load_config
from src.client.identity import AccountProvider, Signer, StaticAccount, sign_message_hash
from src.client.models import (
    CreateOrderResult,
    GetActiveOrderParams,
    MaxCreateOrderSize,
    Order,
    OrderFillTransaction,
    OrderFillTransactionParams,
    PageDataOrder,
    PageDataOrderFillTransaction,
)
from src.client.order_client import OrderClient
from src.client.transport import RequestsTransport, Transport

__all__ = [
    "ClientConfig",
    "configure_logging",
    "load_config",
    "AccountProvider",
    "Signer",
    "StaticAccount",
    "sign_message_hash",
    "CreateOrderResult",
    "GetActiveOrderParams",
    "MaxCreateOrderSize",
    "Order",
    "OrderFillTransaction",
    "OrderFillTransactionParams",
    "PageDataOrder",
    "PageDataOrderFillTransaction",
    "OrderClient",
    "RequestsTransport",
    "Transport",
]

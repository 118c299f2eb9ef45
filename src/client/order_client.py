"""
OrderClient — операции с ордерами

Создание ордера строит L2-коммитмент, подписывает его хэш и отправляет
тело запроса через транспорт. Остальные операции — обычные запросы.
Все ответы интерпретируются одной функцией interpret_response.

Зависимости (транспорт, подписант, аккаунт, метаданные) передаются через
конструктор.
"""

import logging
from decimal import Decimal
from typing import Any

from src.client.config import ClientConfig
from src.client.identity import AccountProvider, Signer, sign_message_hash
from src.client.models import (
    CreateOrderResult,
    GetActiveOrderParams,
    MaxCreateOrderSize,
    Order,
    OrderFillTransactionParams,
    PageDataOrder,
    PageDataOrderFillTransaction,
)
from src.client.transport import Transport
from src.commitment.assembler import assemble_order_request, sign_order_request
from src.commitment.engine import build_order_commitment_from_metadata
from src.commitment.hash_builder import HashFunction, pedersen_hash
from src.commitment.response import interpret_response
from src.core.contracts import validate_create_order_request, validate_order_terms
from src.core.domain.metadata import MetaData
from src.core.domain.order import OrderIntent
from src.core.math.fixed_point import format_decimal, parse_decimal


logger = logging.getLogger(__name__)


# =============================================================================
# ENDPOINTS
# =============================================================================

_ORDER_API = "/api/v1/private/order"

CREATE_ORDER_PATH = f"{_ORDER_API}/createOrder"
CANCEL_ORDER_BY_ID_PATH = f"{_ORDER_API}/cancelOrderById"
CANCEL_ORDER_BY_CLIENT_ID_PATH = f"{_ORDER_API}/cancelOrderByClientOrderId"
CANCEL_ALL_ORDER_PATH = f"{_ORDER_API}/cancelAllOrder"
ACTIVE_ORDER_PAGE_PATH = f"{_ORDER_API}/getActiveOrderPage"
FILL_TRANSACTION_PAGE_PATH = f"{_ORDER_API}/getHistoryOrderFillTransactionPage"
ORDER_BY_ID_PATH = f"{_ORDER_API}/getOrderById"
ORDER_BY_CLIENT_ID_PATH = f"{_ORDER_API}/getOrderByClientOrderId"
MAX_CREATE_ORDER_SIZE_PATH = f"{_ORDER_API}/getMaxCreateOrderSize"


class OrderClient:
    """Клиент операций с ордерами."""

    def __init__(
        self,
        transport: Transport,
        signer: Signer,
        account: AccountProvider,
        metadata: MetaData,
        config: ClientConfig | None = None,
        hash_fn: HashFunction = pedersen_hash,
    ):
        """
        Args:
            transport: Транспорт запросов
            signer: Подписант хэшей L2
            account: Провайдер идентификатора аккаунта
            metadata: Индексированные метаданные контрактов и монет
            config: Конфигурация (опционально, используется default)
            hash_fn: Хэш-функция коммитмента
        """
        self.transport = transport
        self.signer = signer
        self.account = account
        self.metadata = metadata
        self.config = config or ClientConfig()
        self.hash_fn = hash_fn

    @property
    def _account_id(self) -> str:
        return str(self.account.account_id)

    # -------------------------------------------------------------------------
    # СОЗДАНИЕ
    # -------------------------------------------------------------------------

    def create_order(self, intent: OrderIntent, l2_price: str | Decimal) -> CreateOrderResult:
        """
        Создание ордера.

        Args:
            intent: Ордер
            l2_price: Цена для L2 коммитмента

        Returns:
            CreateOrderResult

        Raises:
            NotFound: Контракт или монета отсутствуют в метаданных
            InvalidDecimal, MissingResolution, InvalidCommitmentField: Некорректный ввод
            SigningFailed: Сбой подписанта
            TransportError: Сбой транспорта
            jsonschema.ValidationError: Тело запроса нарушает контракт createOrder
                (условия ордера проверяются до запроса подписи)
            RequestRejected: Биржа отклонила ордер
        """
        account_id = self.account.account_id
        order_commitment = build_order_commitment_from_metadata(
            intent,
            self.metadata,
            l2_price,
            account_id,
            default_fee_rate=self.config.default_fee_rate,
            hash_fn=self.hash_fn,
        )
        terms = assemble_order_request(
            order_commitment.intent, order_commitment.quantized, account_id
        )
        validate_order_terms(terms)

        signature = sign_message_hash(self.signer, order_commitment.message_hash)
        body = sign_order_request(terms, signature)
        validate_create_order_request(body)

        logger.info(
            "submitting order: contract=%s side=%s type=%s size=%s price=%s clientOrderId=%s",
            body["contractId"],
            body["side"],
            body["type"],
            body["size"],
            body["price"],
            body["clientOrderId"],
        )
        raw = self.transport.request(CREATE_ORDER_PATH, "POST", body=body)
        return interpret_response(raw, CreateOrderResult)

    # -------------------------------------------------------------------------
    # ОТМЕНА
    # -------------------------------------------------------------------------

    def cancel_order(
        self,
        order_id: str | None = None,
        client_order_id: str | None = None,
        contract_id: str | None = None,
    ) -> Any:
        """
        Отмена ордера по id, по client_order_id или всех ордеров контракта.

        Приоритет: order_id, затем client_order_id, затем contract_id.

        Raises:
            ValueError: Если не задан ни один идентификатор
        """
        if order_id:
            path = CANCEL_ORDER_BY_ID_PATH
            body = {"accountId": self._account_id, "orderIdList": [order_id]}
        elif client_order_id:
            path = CANCEL_ORDER_BY_CLIENT_ID_PATH
            body = {"accountId": self._account_id, "clientOrderIdList": [client_order_id]}
        elif contract_id:
            path = CANCEL_ALL_ORDER_PATH
            body = {"accountId": self._account_id, "filterContractIdList": [contract_id]}
        else:
            raise ValueError("must provide either order_id, client_order_id, or contract_id")

        raw = self.transport.request(path, "POST", body=body)
        return interpret_response(raw)

    # -------------------------------------------------------------------------
    # ЗАПРОСЫ
    # -------------------------------------------------------------------------

    def get_active_orders(self, params: GetActiveOrderParams | None = None) -> PageDataOrder:
        """Страница активных ордеров"""
        query = {"accountId": self._account_id}
        query.update((params or GetActiveOrderParams()).to_query())
        raw = self.transport.request(ACTIVE_ORDER_PAGE_PATH, "GET", params=query)
        return interpret_response(raw, PageDataOrder)

    def get_order_fill_transactions(
        self, params: OrderFillTransactionParams | None = None
    ) -> PageDataOrderFillTransaction:
        """Страница исполнений"""
        query = {"accountId": self._account_id}
        query.update((params or OrderFillTransactionParams()).to_query())
        raw = self.transport.request(FILL_TRANSACTION_PAGE_PATH, "GET", params=query)
        return interpret_response(raw, PageDataOrderFillTransaction)

    def get_orders_by_id(self, order_ids: list[str]) -> list[Order]:
        """
        Raises:
            ValueError: Если список пуст
        """
        if not order_ids:
            raise ValueError("order IDs must not be empty")
        query = {"accountId": self._account_id, "orderIdList": ",".join(order_ids)}
        raw = self.transport.request(ORDER_BY_ID_PATH, "GET", params=query)
        return interpret_response(raw, list[Order])

    def get_orders_by_client_order_id(self, client_order_ids: list[str]) -> list[Order]:
        """
        Raises:
            ValueError: Если список пуст
        """
        if not client_order_ids:
            raise ValueError("client order IDs must not be empty")
        query = {
            "accountId": self._account_id,
            "clientOrderIdList": ",".join(client_order_ids),
        }
        raw = self.transport.request(ORDER_BY_CLIENT_ID_PATH, "GET", params=query)
        return interpret_response(raw, list[Order])

    def get_max_order_size(self, contract_id: str, price: str | Decimal) -> MaxCreateOrderSize:
        """Максимальный размер ордера для контракта и цены"""
        body = {
            "accountId": self._account_id,
            "contractId": contract_id,
            "price": format_decimal(parse_decimal("price", price)),
        }
        raw = self.transport.request(MAX_CREATE_ORDER_SIZE_PATH, "POST", body=body)
        return interpret_response(raw, MaxCreateOrderSize)

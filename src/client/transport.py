"""
Транспорт — коллаборатор, отправляющий запросы

Транспорт получает путь, HTTP метод, тело и query параметры и возвращает
сырое тело ответа. Повторов и собственной логики таймаутов нет: retry
policy, если нужна, реализует вызывающий код.
"""

import json
import logging
from typing import Any, Mapping, Protocol

import requests

from src.client.config import ClientConfig
from src.core.errors import TransportError


logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Интерфейс транспорта"""

    def request(
        self,
        path: str,
        method: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> bytes:
        ...


class RequestsTransport:
    """
    Транспорт на requests.Session.

    Аутентификация запросов (заголовки подписи API) подключается через
    передаваемую сессию, например session.auth.
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        self.config = config
        self._session = session or requests.Session()

    def request(
        self,
        path: str,
        method: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> bytes:
        """
        Raises:
            TransportError: Сетевой сбой или HTTP статус не 2xx
        """
        url = f"{self.config.base_url}{path}"
        data = json.dumps(body) if body is not None else None

        logger.debug("%s %s params=%s", method, path, dict(params or {}))
        try:
            resp = self._session.request(
                method,
                url,
                data=data,
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=self.config.request_timeout_sec,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise TransportError(
                f"{method} {path} returned HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )

        return resp.content

    def close(self) -> None:
        self._session.close()

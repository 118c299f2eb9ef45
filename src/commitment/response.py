"""
Интерпретация ответа биржи

Единая для всех операций (create, cancel, list, query) классификация
конверта ответа:
- code == "SUCCESS" → типизированный payload из поля data
- иначе → RequestRejected с кодом (дословно) и деталями ошибки
"""

import json
import logging
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from src.core.errors import RequestRejected, TransportError


logger = logging.getLogger(__name__)

SUCCESS_CODE: Final[str] = "SUCCESS"


class ResponseEnvelope(BaseModel):
    """Конверт ответа биржи"""

    code: str = Field(..., description="Код результата")
    data: Any = Field(None, description="Payload")
    error_param: Any = Field(None, description="Структурированные параметры ошибки")
    error_msg: str | None = Field(None, description="Текст ошибки")
    request_time: str | None = None
    response_time: str | None = None
    trace_id: str | None = None

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE


def parse_envelope(raw_body: bytes | str | dict[str, Any]) -> ResponseEnvelope:
    """
    Парсинг конверта.

    Raises:
        TransportError: Если тело не JSON или не содержит code
    """
    if isinstance(raw_body, dict):
        payload = raw_body
    else:
        try:
            payload = json.loads(raw_body)
        except (TypeError, ValueError) as e:
            raise TransportError(f"failed to unmarshal response: {e}") from e

    if not isinstance(payload, dict):
        raise TransportError(f"unexpected response body type: {type(payload).__name__}")

    try:
        return ResponseEnvelope.model_validate(payload)
    except ValidationError as e:
        raise TransportError(f"malformed response envelope: {e}") from e


def interpret_response(raw_body: bytes | str | dict[str, Any], expected_schema: Any = None) -> Any:
    """
    Классификация ответа.

    Args:
        raw_body: Тело ответа (JSON bytes/str) или уже распарсенный dict
        expected_schema: Тип payload (pydantic модель, list[...] и т.п.);
            None: вернуть data как есть

    Returns:
        Типизированный payload

    Raises:
        RequestRejected: Если code != "SUCCESS"
        TransportError: Если ответ не парсится или payload не соответствует типу
    """
    envelope = parse_envelope(raw_body)

    if not envelope.is_success:
        logger.warning(
            "request rejected: code=%s errorMsg=%s traceId=%s",
            envelope.code,
            envelope.error_msg,
            envelope.trace_id,
        )
        raise RequestRejected(envelope.code, envelope.error_param, envelope.error_msg)

    if expected_schema is None:
        return envelope.data

    try:
        return TypeAdapter(expected_schema).validate_python(envelope.data)
    except ValidationError as e:
        raise TransportError(f"unexpected response payload: {e}") from e

"""
JSON Schema контракты тел запросов к бирже

Схемы (Draft 2020-12) лежат в schema/ рядом с модулем и поставляются
вместе с пакетом:
- create_order_request.json (тело POST createOrder)

Тело createOrder проверяется дважды: условия ордера до запроса подписи
(без l2Signature) и полное тело после подписи.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match


SCHEMA_DIR = Path(__file__).parent / "schema"

CREATE_ORDER_REQUEST_SCHEMA = "create_order_request"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузка и meta-валидация схем с кэшем по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя файла схемы без .json

        Raises:
            FileNotFoundError: Файла схемы нет
            ValueError: Схема не проходит meta-валидацию
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор тела запроса по схеме.

    optional — поля, которые схема требует, но которые на этом шаге ещё
    не заполнены (например, подпись до подписания).
    """

    def __init__(self, schema_name: str, optional: Iterable[str] = ()):
        self.schema_name = schema_name
        schema = _SCHEMA_LOADER.load_schema(schema_name)
        skipped = set(optional)
        if skipped:
            schema = {**schema, "required": [f for f in schema.get("required", []) if f not in skipped]}
        self.schema = schema
        self.validator = Draft202012Validator(schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение схемы
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error


class CreateOrderRequestValidator(ContractValidator):
    """Полное тело createOrder (с подписью)"""

    def __init__(self):
        super().__init__(CREATE_ORDER_REQUEST_SCHEMA)


class OrderTermsValidator(ContractValidator):
    """Условия ордера: тело createOrder до подписания"""

    def __init__(self):
        super().__init__(CREATE_ORDER_REQUEST_SCHEMA, optional=("l2Signature",))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_create_order_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Тело не соответствует create_order_request.json
    """
    CreateOrderRequestValidator().validate(data)


def validate_order_terms(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Условия ордера не соответствуют create_order_request.json
    """
    OrderTermsValidator().validate(data)

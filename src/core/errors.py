"""
Ошибки L2-клиента

Все ошибки наследуются от L2OrderError, чтобы вызывающий код мог
различать:
- некорректный ввод (исправляется на стороне клиента)
- отказ биржи (нужны другие условия ордера)
- сбой транспорта или подписи (можно повторить)
"""

from typing import Any


class L2OrderError(Exception):
    """Базовая ошибка клиента ордеров"""


# =============================================================================
# НЕКОРРЕКТНЫЙ ВВОД
# =============================================================================


class InvalidDecimal(L2OrderError, ValueError):
    """Строка не является корректным десятичным числом"""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid decimal for {field}: {value!r}")


class MissingResolution(L2OrderError, ValueError):
    """Resolution актива отсутствует или не парсится"""

    def __init__(self, asset: str, value: Any):
        self.asset = asset
        self.value = value
        super().__init__(f"Missing or malformed resolution for {asset}: {value!r}")


class InvalidCommitmentField(L2OrderError, ValueError):
    """Поле коммитмента вне допустимого диапазона settlement-слоя"""

    def __init__(self, field: str, value: Any, reason: str = "out of range"):
        self.field = field
        self.value = value
        super().__init__(f"Invalid commitment field {field}={value!r}: {reason}")


class NotFound(L2OrderError, LookupError):
    """Контракт или монета отсутствуют в метаданных"""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


# =============================================================================
# СБОИ КОЛЛАБОРАТОРОВ
# =============================================================================


class SigningFailed(L2OrderError):
    """Подписант не смог подписать хэш"""


class TransportError(L2OrderError):
    """Сетевой сбой или нечитаемый ответ"""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


# =============================================================================
# ОТКАЗ БИРЖИ
# =============================================================================


class RequestRejected(L2OrderError):
    """Биржа вернула код, отличный от SUCCESS"""

    def __init__(
        self,
        code: str,
        error_param: Any = None,
        error_msg: str | None = None,
    ):
        self.code = code
        self.error_param = error_param
        self.error_msg = error_msg
        if error_msg:
            message = f"request failed: {error_msg} (code: {code}, errorParam: {error_param})"
        else:
            message = f"request failed with code: {code}, errorParam: {error_param}"
        super().__init__(message)

"""
Contract Validation Module

Модуль для валидации JSON контрактов тел запросов к бирже.
"""

from .validators import (
    ContractValidator,
    CreateOrderRequestValidator,
    OrderTermsValidator,
    SchemaLoader,
    validate_create_order_request,
    validate_order_terms,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CreateOrderRequestValidator",
    "OrderTermsValidator",
    # Functions
    "validate_create_order_request",
    "validate_order_terms",
]

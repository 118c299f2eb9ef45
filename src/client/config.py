"""Конфигурация клиента ордеров (из окружения)."""

import logging
import os
from dataclasses import dataclass

from src.core.math.fixed_point import DEFAULT_FEE_RATE, parse_decimal


DEFAULT_BASE_URL = "https://pro.edgex.exchange"


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_float(name: str, default: float, min_value: float | None = None) -> float:
    raw = os.environ.get(name)
    if raw is None:
        value = default
    else:
        value = float(raw)
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class ClientConfig:
    """Конфигурация клиента.

    Буфер экспирации L2 (9 дней) задан протоколом и не настраивается.
    """

    base_url: str = DEFAULT_BASE_URL
    request_timeout_sec: float = 10.0
    default_fee_rate: str = DEFAULT_FEE_RATE
    log_level: str = "INFO"

    def __post_init__(self):
        parse_decimal("default_fee_rate", self.default_fee_rate)
        if self.request_timeout_sec <= 0:
            raise ValueError(f"request_timeout_sec must be positive, got {self.request_timeout_sec}")


def load_config() -> ClientConfig:
    """ClientConfig из переменных окружения L2ORDER_*"""
    return ClientConfig(
        base_url=_env_str("L2ORDER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        request_timeout_sec=_env_float("L2ORDER_TIMEOUT_SEC", 10.0, min_value=0.1),
        default_fee_rate=_env_str("L2ORDER_DEFAULT_FEE_RATE", DEFAULT_FEE_RATE),
        log_level=_env_str("L2ORDER_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Один stream handler на логгер пакета.

    Повторный вызов меняет только уровень.
    """
    logger = logging.getLogger("src")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger

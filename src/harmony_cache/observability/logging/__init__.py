"""Observability – structlog configuration and helpers."""
from harmony_cache.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from harmony_cache.observability.logging.factory import JsonLoggerFactory
from harmony_cache.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]

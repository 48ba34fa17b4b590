"""Observability – structured logging helpers."""
from flagstore.observability.logging.factory import JsonLoggerFactory
from flagstore.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

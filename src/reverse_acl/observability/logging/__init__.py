"""Observability – structured logging helpers."""
from reverse_acl.observability.logging.factory import JsonLoggerFactory
from reverse_acl.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]

"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- Request tracing middleware
- Defensive accessors for untrusted payloads
"""

from core.logging import configure_logging, get_logger
from core.utils import as_count, as_mapping, as_number, safe_get

__all__ = [
    "configure_logging",
    "get_logger",
    "as_count",
    "as_mapping",
    "as_number",
    "safe_get",
]

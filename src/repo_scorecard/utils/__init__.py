"""Shared utility functions.

This subpackage provides common utilities used across the
application.

Key modules:
    - cancellation: CancelScope for fetch cancellation and deadlines
    - logging: Logging configuration and token redaction
    - protocols: EvidenceProvider protocol for dependency injection
"""

from .cancellation import CancelScope
from .logging import configure_logging, get_logger
from .protocols import EvidenceProvider

__all__ = [
    # cancellation
    "CancelScope",
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "EvidenceProvider",
]

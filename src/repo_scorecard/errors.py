"""
Exception types for the check framework.

Evidence errors describe a failed fetch and are always converted into
retryable results. Configuration errors describe programming mistakes
(duplicate registration, unknown check names) and are never caught.
"""

from __future__ import annotations


class EvidenceError(Exception):
	"""An evidence fetch failed (transport, API or payload error)."""

	def __init__(self, message: str, status: int | None = None):
		super().__init__(message)
		self.status = status


class FetchCancelled(EvidenceError):
	"""The request scope was cancelled or timed out before the fetch landed."""


class InsufficientEvidence(Exception):
	"""Evidence was fetched but is absent or too sparse to decide."""


class CheckConfigError(Exception):
	"""Base class for check registry and runner misconfiguration."""


class DuplicateCheckError(CheckConfigError):
	"""A check name was registered twice."""


class RegistryFrozenError(CheckConfigError):
	"""A registration was attempted after initialization completed."""


class UnknownCheckError(CheckConfigError):
	"""A requested check name is not registered."""


__all__ = [
    "EvidenceError",
    "FetchCancelled",
    "InsufficientEvidence",
    "CheckConfigError",
    "DuplicateCheckError",
    "RegistryFrozenError",
    "UnknownCheckError",
]

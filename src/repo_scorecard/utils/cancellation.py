"""
Cancellation and deadline handling for evidence fetches.

A CancelScope is shared by every fetch made on behalf of one
CheckRequest. It can be cancelled explicitly from another thread or
expire on its own once the deadline passes.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from repo_scorecard.errors import FetchCancelled


class CancelScope:
	"""Cooperative cancellation token with an optional deadline."""

	def __init__(
	    self,
	    timeout: float | None = None,
	    *,
	    clock: Callable[[], float] = time.monotonic,
	):
		if timeout is not None and timeout <= 0:
			raise ValueError("timeout must be > 0")
		self._clock = clock
		self._event = threading.Event()
		self.deadline = None if timeout is None else clock() + timeout

	def cancel(self) -> None:
		"""Cancel the scope; in-flight and future fetches are abandoned."""
		self._event.set()

	@property
	def cancelled(self) -> bool:
		if self._event.is_set():
			return True
		return self.deadline is not None and self._clock() >= self.deadline

	def remaining(self) -> float | None:
		"""Return seconds left before the deadline, or None if unbounded."""
		if self.deadline is None:
			return None
		return max(0.0, self.deadline - self._clock())

	def raise_if_cancelled(self) -> None:
		"""Raise FetchCancelled when the scope is no longer live."""
		if self._event.is_set():
			raise FetchCancelled("evidence fetch cancelled")
		if self.deadline is not None and self._clock() >= self.deadline:
			raise FetchCancelled("evidence fetch deadline exceeded")


__all__ = ["CancelScope"]

"""
Check request model.

Defines the immutable CheckRequest passed to every check and
combinator during one evaluation, and the CheckSettings that tune
the heuristics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from pydantic import BaseModel, Field, field_validator

from repo_scorecard.utils.cancellation import CancelScope
from repo_scorecard.utils.logging import get_logger

if TYPE_CHECKING:
	from repo_scorecard.utils.protocols import EvidenceProvider

T = TypeVar("T")

DEFAULT_THRESHOLD = 0.75
DEFAULT_BOT_SUBSTRINGS = ("bot", "gardener")
DEFAULT_APPROVAL_LABELS = ("lgtm", "approved")


class CheckSettings(BaseModel):
	"""Tunables shared by the heuristic checks."""

	threshold: float = Field(
	    default=DEFAULT_THRESHOLD,
	    description="Fraction of sampled artifacts that must show review",
	)
	bot_substrings: list[str] = Field(
	    default_factory=lambda: list(DEFAULT_BOT_SUBSTRINGS),
	    description="Login substrings identifying automated accounts",
	)
	approval_labels: list[str] = Field(
	    default_factory=lambda: list(DEFAULT_APPROVAL_LABELS),
	    description="Pull request labels that record an approval",
	)

	@field_validator("threshold")
	@classmethod
	def validate_threshold(cls, v: float) -> float:
		if not 0.0 < v <= 1.0:
			raise ValueError("threshold must be in (0, 1]")
		return v

	@field_validator("bot_substrings", "approval_labels")
	@classmethod
	def normalize_terms(cls, v: list[str]) -> list[str]:
		return [t.strip().lower() for t in v if t.strip()]


@dataclass(frozen=True)
class CheckRequest:
	"""Everything a check needs to evaluate one repository."""

	owner: str
	repo: str
	client: EvidenceProvider
	scope: CancelScope = field(default_factory=CancelScope)
	logger: logging.Logger = field(
	    default_factory=lambda: get_logger("repo_scorecard.checks"))
	settings: CheckSettings = field(default_factory=CheckSettings)

	@property
	def full_name(self) -> str:
		return f"{self.owner}/{self.repo}"

	def logf(self, msg: str, *args: Any) -> None:
		"""Write a diagnostic line for this repository to the logging sink."""
		self.logger.info("%s: " + msg, self.full_name, *args)

	def fetch(self, fetch_fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
		"""Call an evidence provider method under this request's scope.

		Raises:
			FetchCancelled: if the scope is cancelled before the call or
				while it was in flight; a late result is discarded.
			EvidenceError: propagated from the provider.
		"""
		self.scope.raise_if_cancelled()
		result = fetch_fn(self.scope, *args, **kwargs)
		self.scope.raise_if_cancelled()
		return result


__all__ = [
    "CheckRequest",
    "CheckSettings",
    "DEFAULT_THRESHOLD",
    "DEFAULT_BOT_SUBSTRINGS",
    "DEFAULT_APPROVAL_LABELS",
]

"""
Protocol definitions for dependency injection.

Defines the EvidenceProvider interface consumed by heuristic checks so
that tests can substitute in-memory fakes for the GitHub client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from repo_scorecard.models.evidence import (
    BranchProtection,
    Commit,
    PullRequest,
    Repository,
    Review,
)

if TYPE_CHECKING:
	from repo_scorecard.utils.cancellation import CancelScope


class EvidenceProvider(Protocol):
	"""
	Protocol for repository evidence access.

	Every method takes the request's CancelScope first and raises
	EvidenceError when the fetch fails.
	"""

	def list_pull_requests(self, scope: "CancelScope", owner: str, repo: str,
	                       state: str = "closed") -> list[PullRequest]:
		"""List pull requests in the given state."""
		...

	def list_reviews(self, scope: "CancelScope", owner: str, repo: str,
	                 number: int) -> list[Review]:
		"""List reviews for one pull request."""
		...

	def get_commit(self, scope: "CancelScope", owner: str, repo: str,
	               sha: str) -> Commit:
		"""Get a single commit by SHA."""
		...

	def list_commits(self, scope: "CancelScope", owner: str,
	                 repo: str) -> list[Commit]:
		"""List recent commits on the default branch."""
		...

	def get_repository(self, scope: "CancelScope", owner: str,
	                   repo: str) -> Repository:
		"""Get repository metadata."""
		...

	def get_branch_protection(self, scope: "CancelScope", owner: str, repo: str,
	                          branch: str) -> BranchProtection:
		"""Get branch protection rules for a named branch."""
		...


__all__ = ["EvidenceProvider"]

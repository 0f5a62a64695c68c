"""
Evidence records.

Typed views of the repository metadata handed to heuristic checks:
pull requests, reviews, commits, repository settings and branch
protection. Each record can be built from a GitHub REST payload.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


def _login(user: Any) -> str:
	"""Extract a login from a GitHub user object that may be null."""
	if not isinstance(user, dict):
		return ""
	return str(user.get("login") or "")


class PullRequest(BaseModel):
	"""A pull request as listed for a repository."""

	number: int
	merged_at: datetime | None = None
	merge_commit_sha: str | None = None
	labels: list[str] = Field(default_factory=list)
	author_login: str = ""

	@property
	def merged(self) -> bool:
		return self.merged_at is not None

	@classmethod
	def from_api(cls, data: dict[str, Any]) -> "PullRequest":
		return cls(
		    number=data["number"],
		    merged_at=data.get("merged_at"),
		    merge_commit_sha=data.get("merge_commit_sha"),
		    labels=[
		        str(label.get("name", "")) for label in data.get("labels") or []
		        if isinstance(label, dict)
		    ],
		    author_login=_login(data.get("user")),
		)


class Review(BaseModel):
	"""A review left on a pull request."""

	id: int
	state: str = ""
	reviewer_login: str = ""

	@property
	def approved(self) -> bool:
		return self.state.upper() == "APPROVED"

	@classmethod
	def from_api(cls, data: dict[str, Any]) -> "Review":
		return cls(
		    id=data["id"],
		    state=data.get("state") or "",
		    reviewer_login=_login(data.get("user")),
		)


class Commit(BaseModel):
	"""A commit with the GitHub accounts linked to its author and committer."""

	sha: str
	message: str = ""
	author_login: str = ""
	committer_login: str = ""

	@classmethod
	def from_api(cls, data: dict[str, Any]) -> "Commit":
		commit = data.get("commit") or {}
		return cls(
		    sha=data["sha"],
		    message=commit.get("message") or "",
		    author_login=_login(data.get("author")),
		    committer_login=_login(data.get("committer")),
		)


class Repository(BaseModel):
	"""Repository metadata needed to locate the default branch."""

	full_name: str = ""
	default_branch: str

	@classmethod
	def from_api(cls, data: dict[str, Any]) -> "Repository":
		return cls(
		    full_name=data.get("full_name") or "",
		    default_branch=data["default_branch"],
		)


class BranchProtection(BaseModel):
	"""Branch protection settings relevant to code review."""

	required_approving_review_count: int | None = None

	@property
	def requires_review(self) -> bool:
		return (self.required_approving_review_count or 0) >= 1

	@classmethod
	def from_api(cls, data: dict[str, Any]) -> "BranchProtection":
		reviews = data.get("required_pull_request_reviews")
		if not isinstance(reviews, dict):
			return cls()
		return cls(required_approving_review_count=reviews.get(
		    "required_approving_review_count"))


__all__ = [
    "PullRequest",
    "Review",
    "Commit",
    "Repository",
    "BranchProtection",
]

"""
GitHub API utilities.

Provides the GitHub REST implementation of the EvidenceProvider
protocol: pull requests, reviews, commits, repository metadata and
branch protection for one owner/repo.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from repo_scorecard.errors import EvidenceError, FetchCancelled
from repo_scorecard.models.evidence import (
    BranchProtection,
    Commit,
    PullRequest,
    Repository,
    Review,
)
from repo_scorecard.utils.cancellation import CancelScope
from repo_scorecard.utils.logging import get_logger

DEFAULT_UA = "repo-scorecard"
DEFAULT_API_URL = "https://api.github.com"

logger = get_logger(__name__)


def get_github_client(
    token: str | None,
    base_url: str = DEFAULT_API_URL,
    user_agent: str = DEFAULT_UA,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
	"""Construct an httpx client for the GitHub REST API."""
	headers = {
	    "Accept": "application/vnd.github+json",
	    "User-Agent": user_agent,
	    "X-GitHub-Api-Version": "2022-11-28",
	}
	if token:
		headers["Authorization"] = f"Bearer {token}"
	return httpx.Client(
	    base_url=base_url,
	    headers=headers,
	    timeout=timeout,
	    transport=transport,
	)


def _wrap_error(exc: Exception) -> EvidenceError:
	status = None
	if isinstance(exc, httpx.HTTPStatusError):
		status = exc.response.status_code
	msg = str(exc)
	if status:
		return EvidenceError(f"GitHub API error {status}: {msg}", status=status)
	return EvidenceError(f"GitHub API error: {msg}")


class GitHubEvidenceProvider:
	"""EvidenceProvider backed by the GitHub REST API.

	Listings are paginated with ``per_page`` items per page and at most
	``max_pages`` pages; a short page ends pagination early.
	"""

	def __init__(self, client: httpx.Client, per_page: int = 30,
	             max_pages: int = 1):
		if per_page <= 0 or max_pages <= 0:
			raise ValueError("per_page and max_pages must be > 0")
		self._client = client
		self.per_page = per_page
		self.max_pages = max_pages

	def close(self) -> None:
		self._client.close()

	def __enter__(self) -> "GitHubEvidenceProvider":
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	def _get(self, scope: CancelScope, path: str,
	         params: dict[str, Any] | None = None) -> Any:
		scope.raise_if_cancelled()
		remaining = scope.remaining()
		timeout: Any = httpx.USE_CLIENT_DEFAULT
		if remaining is not None:
			client_timeout = self._client.timeout.read
			timeout = remaining if client_timeout is None else min(
			    remaining, client_timeout)
		logger.debug("GET %s %s", path, params or {})
		try:
			resp = self._client.get(path, params=params, timeout=timeout)
			resp.raise_for_status()
			return resp.json()
		except (httpx.HTTPError, ValueError) as exc:
			if scope.cancelled:
				raise FetchCancelled("evidence fetch cancelled") from exc
			raise _wrap_error(exc) from exc

	def _paged(self, scope: CancelScope, path: str,
	           params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
		"""Collect up to ``max_pages`` pages, stopping at the first short page."""
		items: list[dict[str, Any]] = []
		for page in range(1, self.max_pages + 1):
			query = {**(params or {}), "per_page": self.per_page, "page": page}
			batch = self._get(scope, path, query)
			if not isinstance(batch, list):
				raise EvidenceError(f"GitHub API error: expected a list from {path}")
			items.extend(batch)
			if len(batch) < self.per_page:
				break
		return items

	@staticmethod
	def _parse(parse, data: Any):
		try:
			return parse(data)
		except (ValidationError, KeyError, TypeError, AttributeError) as exc:
			raise EvidenceError(f"GitHub API error: malformed payload: {exc}") from exc

	def list_pull_requests(self, scope: CancelScope, owner: str, repo: str,
	                       state: str = "closed") -> list[PullRequest]:
		data = self._paged(scope, f"/repos/{owner}/{repo}/pulls",
		                   {"state": state})
		return [self._parse(PullRequest.from_api, d) for d in data]

	def list_reviews(self, scope: CancelScope, owner: str, repo: str,
	                 number: int) -> list[Review]:
		data = self._paged(scope, f"/repos/{owner}/{repo}/pulls/{number}/reviews")
		return [self._parse(Review.from_api, d) for d in data]

	def get_commit(self, scope: CancelScope, owner: str, repo: str,
	               sha: str) -> Commit:
		data = self._get(scope, f"/repos/{owner}/{repo}/commits/{sha}")
		return self._parse(Commit.from_api, data)

	def list_commits(self, scope: CancelScope, owner: str,
	                 repo: str) -> list[Commit]:
		data = self._paged(scope, f"/repos/{owner}/{repo}/commits")
		return [self._parse(Commit.from_api, d) for d in data]

	def get_repository(self, scope: CancelScope, owner: str,
	                   repo: str) -> Repository:
		data = self._get(scope, f"/repos/{owner}/{repo}")
		return self._parse(Repository.from_api, data)

	def get_branch_protection(self, scope: CancelScope, owner: str, repo: str,
	                          branch: str) -> BranchProtection:
		data = self._get(scope,
		                 f"/repos/{owner}/{repo}/branches/{branch}/protection")
		return self._parse(BranchProtection.from_api, data)


__all__ = [
    "get_github_client",
    "GitHubEvidenceProvider",
    "DEFAULT_UA",
    "DEFAULT_API_URL",
]

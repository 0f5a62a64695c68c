"""
Code-Review check.

Determines whether a project requires or practices review before code
gets merged. Four independent heuristics are merged with any_of():

- branch protection on the default branch requires approving reviews;
- most recently merged pull requests were approved on GitHub (or merged
  by someone other than their author);
- merged pull requests carry prow-style approval labels;
- commit messages carry Gerrit review trailers.
"""

from __future__ import annotations

from repo_scorecard.errors import (
    EvidenceError,
    FetchCancelled,
    InsufficientEvidence,
)
from repo_scorecard.models.check_request import CheckRequest
from repo_scorecard.models.check_result import CheckResult, MAX_CONFIDENCE
from repo_scorecard.models.evidence import Commit, PullRequest
from repo_scorecard.checker.combinators import any_of
from repo_scorecard.checker.results import (
    make_inconclusive_result,
    make_pass_result,
    make_retry_result,
)
from repo_scorecard.checker.scoring import make_proportional_result

CHECK_CODE_REVIEW = "Code-Review"

# Statuses returned when the token cannot read protection rules.
PROTECTION_UNREADABLE_STATUSES = (401, 403, 404)

# Gerrit appends both trailers when a change is submitted after review.
REVIEWED_ON_TRAILER = "\nReviewed-on: "
REVIEWED_BY_TRAILER = "\nReviewed-by: "


def is_bot_account(login: str, substrings: list[str]) -> bool:
	"""Return True if ``login`` contains any denylisted substring."""
	lowered = login.lower()
	return any(s in lowered for s in substrings)


def _merged_pull_requests(req: CheckRequest) -> list[PullRequest]:
	prs = req.fetch(req.client.list_pull_requests, req.owner, req.repo,
	                state="closed")
	return [pr for pr in prs if pr.merged]


def is_pr_review_required(req: CheckRequest) -> CheckResult:
	"""Pass with full confidence when branch protection enforces review."""
	try:
		repository = req.fetch(req.client.get_repository, req.owner, req.repo)
	except EvidenceError as exc:
		return make_retry_result(CHECK_CODE_REVIEW, exc)

	# Protection rules need admin rights; a permission or not-found reply
	# is missing evidence. Anything else is a failed fetch.
	try:
		protection = req.fetch(req.client.get_branch_protection, req.owner,
		                       req.repo, repository.default_branch)
	except EvidenceError as exc:
		if (not isinstance(exc, FetchCancelled)
		    and exc.status in PROTECTION_UNREADABLE_STATUSES):
			return make_inconclusive_result(CHECK_CODE_REVIEW, exc)
		return make_retry_result(CHECK_CODE_REVIEW, exc)

	if protection.requires_review:
		req.logf("pr review policy enforced on %s", repository.default_branch)
		return make_pass_result(CHECK_CODE_REVIEW, MAX_CONFIDENCE)
	return make_inconclusive_result(
	    CHECK_CODE_REVIEW,
	    InsufficientEvidence("branch protection does not require reviews"))


def _merged_by_someone_else(commit: Commit) -> bool:
	author = commit.author_login
	committer = commit.committer_login
	return bool(author) and bool(committer) and author != committer


def github_code_review(req: CheckRequest) -> CheckResult:
	"""Score merged pull requests by approvals or a distinct merger."""
	try:
		merged = _merged_pull_requests(req)
	except EvidenceError as exc:
		return make_retry_result(CHECK_CODE_REVIEW, exc)
	if not merged:
		return make_inconclusive_result(
		    CHECK_CODE_REVIEW, InsufficientEvidence("no merged pull requests"))

	total_reviewed = 0
	for pr in merged:
		try:
			reviews = req.fetch(req.client.list_reviews, req.owner, req.repo,
			                    pr.number)
		except EvidenceError as exc:
			return make_retry_result(CHECK_CODE_REVIEW, exc)
		if any(r.approved for r in reviews):
			req.logf("found review approved pr: %d", pr.number)
			total_reviewed += 1
			continue

		# Small PRs are often merged by a maintainer without clicking
		# approve; a merger other than the author counts as a review.
		if not pr.merge_commit_sha:
			continue
		try:
			commit = req.fetch(req.client.get_commit, req.owner, req.repo,
			                   pr.merge_commit_sha)
		except EvidenceError as exc:
			return make_retry_result(CHECK_CODE_REVIEW, exc)
		if _merged_by_someone_else(commit):
			req.logf("found pr with committer different than author: %d",
			         pr.number)
			total_reviewed += 1

	if total_reviewed > 0:
		req.logf("github code reviews found")
	return make_proportional_result(CHECK_CODE_REVIEW, total_reviewed,
	                                len(merged), req.settings.threshold)


def prow_code_review(req: CheckRequest) -> CheckResult:
	"""Score merged pull requests by prow approval labels."""
	try:
		merged = _merged_pull_requests(req)
	except EvidenceError as exc:
		return make_retry_result(CHECK_CODE_REVIEW, exc)
	if not merged:
		return make_inconclusive_result(
		    CHECK_CODE_REVIEW, InsufficientEvidence("no merged pull requests"))

	labels = set(req.settings.approval_labels)
	total_reviewed = sum(
	    1 for pr in merged
	    if any(label.lower() in labels for label in pr.labels))
	if total_reviewed == 0:
		return make_inconclusive_result(CHECK_CODE_REVIEW,
		                                InsufficientEvidence("no reviews found"))
	req.logf("prow code reviews found")
	return make_proportional_result(CHECK_CODE_REVIEW, total_reviewed,
	                                len(merged), req.settings.threshold)


def commit_message_hints(req: CheckRequest) -> CheckResult:
	"""Score human-authored commits by Gerrit review trailers."""
	try:
		commits = req.fetch(req.client.list_commits, req.owner, req.repo)
	except EvidenceError as exc:
		return make_retry_result(CHECK_CODE_REVIEW, exc)

	total = 0
	total_reviewed = 0
	for commit in commits:
		bot = next(
		    (login for login in (commit.committer_login, commit.author_login)
		     if login and is_bot_account(login, req.settings.bot_substrings)),
		    None,
		)
		if bot is not None:
			req.logf("skip commit from bot account: %s", bot)
			continue

		total += 1
		message = commit.message
		if REVIEWED_ON_TRAILER in message and REVIEWED_BY_TRAILER in message:
			total_reviewed += 1

	if total == 0:
		return make_inconclusive_result(
		    CHECK_CODE_REVIEW, InsufficientEvidence("no human commits found"))
	if total_reviewed == 0:
		return make_inconclusive_result(CHECK_CODE_REVIEW,
		                                InsufficientEvidence("no reviews found"))
	req.logf("code reviews found")
	return make_proportional_result(CHECK_CODE_REVIEW, total_reviewed, total,
	                                req.settings.threshold)


does_code_review = any_of(
    is_pr_review_required,
    github_code_review,
    prow_code_review,
    commit_message_hints,
    name=CHECK_CODE_REVIEW,
)

__all__ = [
    "CHECK_CODE_REVIEW",
    "does_code_review",
    "is_pr_review_required",
    "github_code_review",
    "prow_code_review",
    "commit_message_hints",
    "is_bot_account",
]

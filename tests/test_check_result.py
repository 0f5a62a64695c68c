"""Tests for the CheckResult model and result constructors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from repo_scorecard.errors import EvidenceError, InsufficientEvidence
from repo_scorecard.models.check_result import (
    CheckResult,
    ErrorKind,
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
)
from repo_scorecard.checker.results import (
    make_fail_result,
    make_inconclusive_result,
    make_pass_result,
    make_retry_result,
)


class TestCheckResultModel:
	"""Test the CheckResult Pydantic model."""

	def test_defaults(self):
		"""A bare result is a definitive fail at minimum confidence."""
		res = CheckResult(name="x")
		assert res.passed is False
		assert res.confidence == MIN_CONFIDENCE
		assert res.error is ErrorKind.NONE
		assert res.is_definitive
		assert not res.is_pass

	@pytest.mark.parametrize("confidence", [-1, MAX_CONFIDENCE + 1])
	def test_confidence_bounds(self, confidence):
		with pytest.raises(ValidationError):
			CheckResult(name="x", confidence=confidence)

	def test_frozen(self):
		res = CheckResult(name="x")
		with pytest.raises(ValidationError):
			res.passed = True

	def test_with_name_rewrites_only_name(self):
		res = make_pass_result("child", 7)
		renamed = res.with_name("parent")
		assert renamed.name == "parent"
		assert renamed.passed is True
		assert renamed.confidence == 7
		assert res.name == "child"

	def test_with_same_name_returns_self(self):
		res = make_pass_result("x", 7)
		assert res.with_name("x") is res

	def test_cause_excluded_from_dump(self):
		res = make_retry_result("x", EvidenceError("boom", status=502))
		dumped = res.model_dump(mode="json")
		assert "cause" not in dumped
		assert dumped["error"] == "retryable"
		assert dumped["message"] == "boom"


class TestConstructors:
	"""Test the make_*_result helpers."""

	def test_pass(self):
		res = make_pass_result("Code-Review", MAX_CONFIDENCE)
		assert res.is_pass
		assert res.confidence == MAX_CONFIDENCE

	def test_fail(self):
		res = make_fail_result("Code-Review", 8)
		assert res.is_definitive
		assert res.passed is False
		assert res.confidence == 8

	def test_retry_keeps_cause_and_asserts_nothing(self):
		cause = EvidenceError("GitHub API error 502", status=502)
		res = make_retry_result("Code-Review", cause)
		assert res.is_retryable
		assert not res.is_definitive
		assert res.passed is False
		assert res.confidence == MIN_CONFIDENCE
		assert res.cause is cause

	def test_retry_message_falls_back_to_type(self):
		res = make_retry_result("x", EvidenceError(""))
		assert res.message == "EvidenceError"

	def test_inconclusive_with_cause(self):
		cause = InsufficientEvidence("no merged pull requests")
		res = make_inconclusive_result("Code-Review", cause)
		assert res.is_inconclusive
		assert not res.is_retryable
		assert res.message == "no merged pull requests"
		assert res.cause is cause

	def test_inconclusive_without_cause(self):
		res = make_inconclusive_result("Code-Review")
		assert res.is_inconclusive
		assert res.message is None

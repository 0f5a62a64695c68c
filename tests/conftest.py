"""Shared fixtures."""

from __future__ import annotations

import pytest

from helpers_evidence import FakeEvidenceProvider
from repo_scorecard.models.check_request import CheckRequest, CheckSettings
from repo_scorecard.utils.cancellation import CancelScope


@pytest.fixture
def make_request():
	"""Factory for CheckRequests around a FakeEvidenceProvider."""

	def _make(
	    provider: FakeEvidenceProvider | None = None,
	    *,
	    scope: CancelScope | None = None,
	    settings: CheckSettings | None = None,
	) -> CheckRequest:
		return CheckRequest(
		    owner="o",
		    repo="r",
		    client=provider or FakeEvidenceProvider(),
		    scope=scope or CancelScope(),
		    settings=settings or CheckSettings(),
		)

	return _make

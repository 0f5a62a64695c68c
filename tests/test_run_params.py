import pytest
from pydantic import ValidationError

from repo_scorecard.models.run_params import RunParams


def test_valid_params():
	rp = RunParams(org_repo="org/repo", checks=["Code-Review"], timeout=10,
	               threshold=0.5)
	assert rp.owner == "org"
	assert rp.repo == "repo"
	assert rp.checks == ["Code-Review"]


@pytest.mark.parametrize("org_repo", ["noslash", "a/b/c", "a b/c", "/repo"])
def test_invalid_org_repo(org_repo):
	with pytest.raises(ValidationError):
		RunParams(org_repo=org_repo)


def test_empty_checks_mean_all():
	assert RunParams(org_repo="o/r", checks=[]).checks is None
	assert RunParams(org_repo="o/r", checks=[" ", ""]).checks is None


def test_checks_are_stripped():
	assert RunParams(org_repo="o/r", checks=[" A ", "B"]).checks == ["A", "B"]


@pytest.mark.parametrize("timeout", [0, -5])
def test_invalid_timeout(timeout):
	with pytest.raises(ValidationError):
		RunParams(org_repo="o/r", timeout=timeout)


@pytest.mark.parametrize("threshold", [0.0, 1.01])
def test_invalid_threshold(threshold):
	with pytest.raises(ValidationError):
		RunParams(org_repo="o/r", threshold=threshold)


def test_threshold_of_one_allowed():
	assert RunParams(org_repo="o/r", threshold=1.0).threshold == 1.0

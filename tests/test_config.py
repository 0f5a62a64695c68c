import pytest
from pydantic import ValidationError

from repo_scorecard.models.config import Config, load_env
from repo_scorecard.models.run_params import RunParams


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
	for var in ("GITHUB_TOKEN", "GITHUB_API_URL", "LOG_LEVEL",
	            "REVIEW_THRESHOLD", "BOT_SUBSTRINGS", "APPROVAL_LABELS",
	            "REQUEST_TIMEOUT_SECONDS", "CHECK_TIMEOUT_SECONDS", "PER_PAGE",
	            "MAX_PAGES", "MAX_PARALLEL_CHECKS"):
		monkeypatch.delenv(var, raising=False)


def test_defaults():
	cfg = Config()
	assert cfg.github_token is None
	assert cfg.github_api_url == "https://api.github.com"
	assert cfg.review_threshold == 0.75
	assert cfg.bot_substrings == ["bot", "gardener"]
	assert cfg.approval_labels == ["lgtm", "approved"]
	assert cfg.check_timeout_seconds == 300
	assert cfg.max_pages == 1


def test_bot_substrings_parsing():
	cfg = Config(BOT_SUBSTRINGS="bot, automation ,")
	assert cfg.bot_substrings == ["bot", "automation"]


def test_approval_labels_from_env(monkeypatch):
	monkeypatch.setenv("APPROVAL_LABELS", "lgtm,ship-it")
	cfg = Config()
	assert cfg.approval_labels == ["lgtm", "ship-it"]


def test_threshold_from_env(monkeypatch):
	monkeypatch.setenv("REVIEW_THRESHOLD", "0.5")
	assert Config().review_threshold == 0.5


@pytest.mark.parametrize("value", ["0", "1.5", "-0.1"])
def test_threshold_out_of_range(value):
	with pytest.raises(ValidationError):
		Config(REVIEW_THRESHOLD=value)


def test_positive_integers_enforced():
	with pytest.raises(ValidationError):
		Config(PER_PAGE=0)


def test_check_settings_normalized():
	"""Labels and bot substrings are lowercased for matching."""
	cfg = Config(REVIEW_THRESHOLD=0.6, APPROVAL_LABELS="LGTM,Approved")
	settings = cfg.check_settings
	assert settings.threshold == 0.6
	assert settings.approval_labels == ["lgtm", "approved"]


def test_apply_overrides():
	cfg = Config()
	cfg.apply_overrides(RunParams(org_repo="o/r", timeout=60, threshold=0.9))
	assert cfg.check_timeout_seconds == 60
	assert cfg.review_threshold == 0.9


def test_apply_overrides_keeps_env_defaults():
	cfg = Config(REVIEW_THRESHOLD=0.8)
	cfg.apply_overrides(RunParams(org_repo="o/r"))
	assert cfg.review_threshold == 0.8
	assert cfg.check_timeout_seconds == 300


def test_load_env_reads_file(tmp_path, monkeypatch):
	# record the unset state so teardown removes the loaded value
	monkeypatch.setenv("MAX_PARALLEL_CHECKS", "1")
	monkeypatch.delenv("MAX_PARALLEL_CHECKS")
	env = tmp_path / ".env"
	env.write_text("MAX_PARALLEL_CHECKS=4\n")
	load_env(env)
	assert Config().max_parallel_checks == 4


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "absent.env")

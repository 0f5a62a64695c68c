from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .check_request import (
    CheckSettings,
    DEFAULT_APPROVAL_LABELS,
    DEFAULT_BOT_SUBSTRINGS,
    DEFAULT_THRESHOLD,
)

if TYPE_CHECKING:
	from .run_params import RunParams


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


def _split_csv(v: Any) -> list[str]:
	"""Normalize a list-like setting regardless of input format."""
	if v is None or v == "":
		return []
	if isinstance(v, (list, tuple)):
		return [str(p).strip() for p in v if str(p).strip()]
	# fallback: comma-separated string
	return [p.strip() for p in str(v).split(",") if p.strip()]


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	github_token: str | None = Field(
	    default=None,
	    alias="GITHUB_TOKEN",
	    description="GitHub token for REST API access",
	)
	github_api_url: str = Field(
	    "https://api.github.com",
	    alias="GITHUB_API_URL",
	    description="GitHub REST API base URL",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")
	review_threshold: float = Field(
	    DEFAULT_THRESHOLD,
	    alias="REVIEW_THRESHOLD",
	    description="Fraction of sampled artifacts that must show review",
	)
	bot_substrings: Any = Field(
	    default_factory=lambda: list(DEFAULT_BOT_SUBSTRINGS),
	    alias="BOT_SUBSTRINGS",
	    description="Login substrings identifying bot accounts",
	)
	approval_labels: Any = Field(
	    default_factory=lambda: list(DEFAULT_APPROVAL_LABELS),
	    alias="APPROVAL_LABELS",
	    description="Pull request labels that record an approval",
	)
	request_timeout_seconds: int = Field(
	    30,
	    alias="REQUEST_TIMEOUT_SECONDS",
	    description="Per-request HTTP timeout in seconds",
	)
	check_timeout_seconds: int = Field(
	    300,
	    alias="CHECK_TIMEOUT_SECONDS",
	    description="Deadline for one repository evaluation in seconds",
	)
	per_page: int = Field(30, alias="PER_PAGE",
	                      description="Items per page for listings")
	max_pages: int = Field(1, alias="MAX_PAGES",
	                       description="Pages fetched per listing")
	max_parallel_checks: int = Field(
	    1,
	    alias="MAX_PARALLEL_CHECKS",
	    description="Named checks evaluated concurrently",
	)

	@field_validator("bot_substrings", "approval_labels", mode="before")
	@classmethod
	def split_lists(cls, v: Any) -> list[str]:
		return _split_csv(v)

	@field_validator("review_threshold")
	@classmethod
	def validate_threshold(cls, v: float) -> float:
		if not 0.0 < v <= 1.0:
			raise ValueError("review_threshold must be in (0, 1]")
		return v

	@field_validator("request_timeout_seconds", "check_timeout_seconds",
	                 "per_page", "max_pages", "max_parallel_checks")
	@classmethod
	def validate_positive(cls, v: Any, info: "ValidationInfo") -> Any:
		if int(v) <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@property
	def check_settings(self) -> CheckSettings:
		"""Return the heuristic tunables derived from this config."""
		return CheckSettings(
		    threshold=self.review_threshold,
		    bot_substrings=self.bot_substrings,
		    approval_labels=self.approval_labels,
		)

	def apply_overrides(self, run_params: "RunParams") -> None:
		"""Apply CLI overrides from RunParams onto this config.

		Only non-None fields in run_params are applied, preserving
		environment-based defaults for anything the user didn't set.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
		    ("timeout", "check_timeout_seconds"),
		    ("threshold", "review_threshold"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(run_params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "load_env"]

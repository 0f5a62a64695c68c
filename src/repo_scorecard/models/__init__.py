"""
Repo Scorecard models.

This subpackage contains the data structures shared by the check
framework, the evidence provider and the CLI.

Key models:
    - CheckResult / ErrorKind: per-check verdict and error classification
    - CheckRequest / CheckSettings: immutable evaluation input
    - PullRequest, Review, Commit, Repository, BranchProtection: evidence
    - RunReport: results of one evaluation
    - Config: Application configuration loaded from environment
    - RunParams: Validated CLI parameters
"""

from .check_result import CheckResult, ErrorKind, MAX_CONFIDENCE, MIN_CONFIDENCE
from .check_request import CheckRequest, CheckSettings
from .evidence import (
    BranchProtection,
    Commit,
    PullRequest,
    Repository,
    Review,
)
from .run_report import RunReport
from .config import Config, load_env
from .run_params import RunParams

__all__ = [
    "CheckResult",
    "ErrorKind",
    "MAX_CONFIDENCE",
    "MIN_CONFIDENCE",
    "CheckRequest",
    "CheckSettings",
    "BranchProtection",
    "Commit",
    "PullRequest",
    "Repository",
    "Review",
    "RunReport",
    "Config",
    "load_env",
    "RunParams",
]

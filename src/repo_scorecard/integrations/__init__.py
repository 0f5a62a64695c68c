"""External service integrations.

Key modules:
    - github: GitHub REST evidence provider
"""

from repo_scorecard.integrations.github import (
    get_github_client,
    GitHubEvidenceProvider,
    DEFAULT_UA,
    DEFAULT_API_URL,
)

__all__ = [
    "get_github_client",
    "GitHubEvidenceProvider",
    "DEFAULT_UA",
    "DEFAULT_API_URL",
]

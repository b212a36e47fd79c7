"""REST helper client for seeding and verifying repository data."""

from shared.repo_client.base import RepoClientError
from shared.repo_client.repo_client import RepoClient

__all__ = ["RepoClient", "RepoClientError"]

"""
Shared request plumbing for the repository REST helper APIs.

Every sub-API (people, sites, nodes) owns a reference to the same
authenticated ``requests.Session`` and funnels its calls through
``RepoApi.request`` so that URL building, timeouts, logging and error
translation happen in exactly one place.

Non-2xx responses never leak as raw ``requests`` objects: they are turned
into ``RepoClientError`` carrying the HTTP method, URL, status code and the
repository's own ``briefSummary`` so that a failing fixture explains itself
in the pytest report.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class RepoClientError(RuntimeError):
    """Raised when the repository REST API answers with a non-success status."""

    def __init__(self, method: str, url: str, status_code: int, summary: str = ""):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.summary = summary
        message = f"{method} {url} failed with {status_code}"
        if summary:
            message = f"{message}: {summary}"
        super().__init__(message)


def _error_summary(response: Any) -> str:
    """Extract ``error.briefSummary`` from an error body, or '' if absent."""
    try:
        data = response.json()
    except ValueError:
        return ""
    if not isinstance(data, dict):
        return ""
    error = data.get("error")
    if isinstance(error, dict):
        return str(error.get("briefSummary", ""))
    return ""


class RepoApi:
    """Base class for one area of the repository REST API."""

    def __init__(self, session: requests.Session, base_url: str, timeout: float):
        self.session = session
        self.base_url = base_url
        self.timeout = timeout

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send a request relative to the API base URL.

        Args:
            method: HTTP method.
            path: Path below the versioned API root, e.g. ``/sites``.
            **kwargs: Passed through to ``requests.Session.request``.

        Returns:
            The decoded JSON body, or ``None`` for empty responses.

        Raises:
            RepoClientError: If the server responds with a non-2xx status.
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        response = self.session.request(method=method, url=url, timeout=self.timeout, **kwargs)

        if not 200 <= response.status_code < 300:
            summary = _error_summary(response)
            logger.warning("%s %s -> %s %s", method, url, response.status_code, summary)
            raise RepoClientError(method, url, response.status_code, summary)

        if not response.content:
            return None
        return response.json()

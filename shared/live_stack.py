"""Shared live-application helpers for the browser suites."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Generator

import pytest
import requests

from config import API_PATH

logger = logging.getLogger(__name__)

READY_PROBE_PATH = f"{API_PATH}/probes/-ready-"


def is_app_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the content app answers 200 on its root page."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def is_repository_ready(host: str, timeout: int = 2) -> bool:
    """Return True when the repository readiness probe answers 200."""
    try:
        response = requests.get(f"{host}{READY_PROBE_PATH}", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app_ready(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the content app root until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Content app at {url} not ready after {timeout}s")


def wait_for_repository_ready(host: str, timeout: int = 120, interval: int = 2) -> None:
    """Poll the repository readiness probe until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_repository_ready(host):
            return
        time.sleep(interval)
    raise RuntimeError(f"Repository at {host} not ready after {timeout}s")


def live_app_url(
    *,
    base_url: str,
    api_host: str,
    suite_name: str,
    base_url_env: str = "E2E_BASE_URL",
) -> Generator[str, None, None]:
    """
    Yield a ready content-app base URL, or skip the suite when none is configured.

    The repository is polled too because the app is unusable (login fails)
    until the backend finishes starting.
    """
    if not base_url or not api_host:
        pytest.skip(
            f"content app not configured; set {base_url_env} and E2E_API_HOST to run {suite_name} tests"
        )

    base_url = base_url.rstrip("/")
    wait_for_repository_ready(api_host.rstrip("/"))
    wait_for_app_ready(base_url)
    logger.info("Running %s tests against %s (repository %s)", suite_name, base_url, api_host)
    yield base_url


def screenshot_path(directory: str, test_name: str) -> str:
    """Build a filesystem-safe screenshot path for a pytest item name."""
    os.makedirs(directory, exist_ok=True)
    safe_name = test_name.replace("/", "_").replace("::", "_")
    return f"{directory}/{safe_name}.png"

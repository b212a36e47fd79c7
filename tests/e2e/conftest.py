"""Playwright fixtures for content app E2E tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from config import Config, get_config
from shared.live_stack import live_app_url, screenshot_path
from shared.repo_client import RepoClient

logger = logging.getLogger(__name__)

PAGE_FIXTURES = ("suite_page",)


@pytest.fixture(scope="session")
def e2e_config() -> type[Config]:
    """Configuration class selected by ``E2E_ENV``."""
    return get_config()


@pytest.fixture(scope="session")
def live_server(e2e_config: type[Config]) -> Generator[str, None, None]:
    """
    Return a ready content app URL for E2E tests.

    The suite is skipped when ``E2E_BASE_URL`` / ``E2E_API_HOST`` are not set.
    """
    yield from live_app_url(
        base_url=e2e_config.BASE_URL,
        api_host=e2e_config.API_HOST,
        suite_name="e2e",
    )


@pytest.fixture(scope="session")
def repo_admin(live_server: str, e2e_config: type[Config]) -> Generator[RepoClient, None, None]:
    """REST client authenticated as the repository administrator."""
    client = RepoClient(
        e2e_config.ADMIN_USERNAME,
        e2e_config.ADMIN_PASSWORD,
        host=e2e_config.API_HOST,
    )
    yield client
    client.close()


@pytest.fixture(scope="session")
def browser_context_args(e2e_config: type[Config]):
    return {
        "viewport": e2e_config.VIEWPORT,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="module")
def suite_context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    """Browser context shared by every test of a module (one login per suite)."""
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="module")
def suite_page(suite_context: BrowserContext) -> Generator[Page, None, None]:
    page = suite_context.new_page()
    yield page
    page.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = next(
            (item.funcargs[name] for name in PAGE_FIXTURES if name in item.funcargs),
            None,
        )
        if page:
            path = screenshot_path(get_config().SCREENSHOT_DIR, item.name)
            try:
                page.screenshot(path=path)
                logger.info("Screenshot saved: %s", path)
            except Exception as exc:  # pragma: no cover - best effort logging
                logger.warning("Failed to capture screenshot: %s", exc)

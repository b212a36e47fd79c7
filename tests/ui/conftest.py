"""
Playwright fixtures for component tests.

This module provides fixtures for exercising the page objects and widget
components against static markup loaded with ``page.set_content``. No
content app or repository is needed, so these tests run anywhere a
Playwright browser is installed.

Key Concepts Demonstrated:
- Browser context management
- Testing page objects in isolation from the application
- Screenshot capture on failure
"""

import os
from typing import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from config import get_config
from shared.live_stack import screenshot_path


@pytest.fixture(scope="session")
def browser_context_args():
    """
    Configure browser context options.

    Returns:
        dict: Browser context configuration.
    """
    return {
        "viewport": {"width": 1280, "height": 720},
    }


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    Args:
        browser: Playwright browser instance.
        browser_context_args: Context configuration.

    Yields:
        BrowserContext: Fresh browser context.
    """
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    """
    Create a new page (tab) for each test.

    Args:
        context: Browser context fixture.

    Yields:
        Page: Playwright page object.
    """
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def render(page: Page):
    """
    Factory that loads markup into the test page.

    Returns:
        Callable taking an HTML string and returning the page.
    """

    def _render(markup: str) -> Page:
        page.set_content(markup)
        return page

    return _render


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on component test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            path = screenshot_path(get_config().SCREENSHOT_DIR, item.name)
            try:
                page.screenshot(path=path)
                print(f"\nScreenshot saved: {os.path.abspath(path)}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")

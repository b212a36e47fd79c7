"""
E2E harness configuration module.

This module defines configuration classes for the environments the browser
suites run in (local developer machine, CI). Values are loaded from
environment variables with sensible defaults, and the module-level
constants mirror the labels, routes and roles the content application
exposes.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

# Maximum time (ms) any explicit browser wait may block
BROWSER_WAIT_TIMEOUT: int = int(os.environ.get("E2E_BROWSER_WAIT_TIMEOUT", "10000"))

ADMIN_USERNAME: str = os.environ.get("E2E_ADMIN_USERNAME", "admin")
ADMIN_PASSWORD: str = os.environ.get("E2E_ADMIN_PASSWORD", "admin")

API_PATH = "/alfresco/api/-default-/public/alfresco/versions/1"

APP_ROUTES = {
    "FAVORITES": "/favorites",
    "FILE_LIBRARIES": "/libraries",
    "LOGIN": "/login",
    "LOGOUT": "/logout",
    "PERSONAL_FILES": "/personal-files",
    "RECENT_FILES": "/recent-files",
    "SHARED_FILES": "/shared",
    "TRASHCAN": "/trashcan",
}

SIDEBAR_LABELS = {
    "PERSONAL_FILES": "Personal Files",
    "FILE_LIBRARIES": "File Libraries",
    "SHARED_FILES": "Shared",
    "RECENT_FILES": "Recent Files",
    "FAVORITES": "Favorites",
    "TRASH": "Trash",
}

SITE_VISIBILITY = {
    "PUBLIC": "PUBLIC",
    "MODERATED": "MODERATED",
    "PRIVATE": "PRIVATE",
}

SITE_ROLES = {
    "SITE_CONSUMER": "SiteConsumer",
    "SITE_COLLABORATOR": "SiteCollaborator",
    "SITE_CONTRIBUTOR": "SiteContributor",
    "SITE_MANAGER": "SiteManager",
}


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("E2E_BASE_URL", "")
    API_HOST: str = os.environ.get("E2E_API_HOST", "")
    ADMIN_USERNAME: str = ADMIN_USERNAME
    ADMIN_PASSWORD: str = ADMIN_PASSWORD
    BROWSER_WAIT_TIMEOUT: int = BROWSER_WAIT_TIMEOUT

    # Seconds before a REST helper call is abandoned
    API_TIMEOUT: float = float(os.environ.get("E2E_API_TIMEOUT", "30"))

    SCREENSHOT_DIR: str = os.environ.get("E2E_SCREENSHOT_DIR", "test-results/screenshots")

    VIEWPORT: dict = {"width": 1280, "height": 720}


class LocalConfig(Config):
    """Developer machine configuration (app served by `ng serve`)."""

    BASE_URL: str = os.environ.get("E2E_BASE_URL", "http://localhost:4200")
    API_HOST: str = os.environ.get("E2E_API_HOST", "http://localhost:8080")


class CIConfig(Config):
    """CI configuration; the pipeline must export the URLs explicitly."""

    VIEWPORT: dict = {"width": 1920, "height": 1080}


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "default")
    return config.get(env, config["default"])

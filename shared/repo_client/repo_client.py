"""
Repository REST helper client.

``RepoClient`` is the out-of-band channel the browser suites use to seed
preconditions (users, sites, folders) and to read server-side truth the UI
cannot show. Each instance is one authenticated session, so a suite keeps
one client per permission level::

    apis = {
        "admin": RepoClient(),
        "user": RepoClient(username, username),
    }
    apis["admin"].people.create_user(username)
    apis["user"].nodes.create_folders(["child"], "parent")
"""

from __future__ import annotations

import requests

from config import ADMIN_PASSWORD, ADMIN_USERNAME, API_PATH, get_config
from shared.repo_client.nodes import NodesApi
from shared.repo_client.people import PeopleApi
from shared.repo_client.sites import SitesApi


class RepoClient:
    """
    Authenticated entry point to the people, sites and nodes APIs.

    Attributes:
        username: Account the session authenticates as.
        host: Repository origin, e.g. ``http://localhost:8080``.
        people: People API bound to this session.
        sites: Sites API bound to this session.
        nodes: Nodes API bound to this session.
    """

    def __init__(
        self,
        username: str = ADMIN_USERNAME,
        password: str = ADMIN_PASSWORD,
        host: str | None = None,
        timeout: float | None = None,
    ):
        settings = get_config()
        self.username = username
        self.host = (host or settings.API_HOST).rstrip("/")
        self.base_url = f"{self.host}{API_PATH}"

        self.session = requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({"Accept": "application/json"})

        request_timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.people = PeopleApi(self.session, self.base_url, request_timeout)
        self.sites = SitesApi(self.session, self.base_url, request_timeout)
        self.nodes = NodesApi(self.session, self.base_url, request_timeout)

    def close(self) -> None:
        self.session.close()

    def __repr__(self) -> str:
        return f"RepoClient(username={self.username!r}, host={self.host!r})"

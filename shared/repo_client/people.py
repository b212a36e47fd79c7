"""People API: repository user accounts."""

from __future__ import annotations

from typing import Any

from shared.repo_client.base import RepoApi


class PeopleApi(RepoApi):
    """Create repository users."""

    def create_user(
        self,
        username: str,
        password: str | None = None,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a user; the password defaults to the username.

        Returns:
            The created person ``entry``.
        """
        body = {
            "id": username,
            "firstName": first_name or username,
            "lastName": last_name or "lastName",
            "email": email or f"{username}@example.com",
            "password": password or username,
        }
        return self.request("POST", "/people", json=body)["entry"]

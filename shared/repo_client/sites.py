"""Sites API: libraries and their membership."""

from __future__ import annotations

from typing import Any

from config import SITE_VISIBILITY
from shared.repo_client.base import RepoApi


class SitesApi(RepoApi):
    """Create, inspect and delete sites (shown as *File Libraries* in the UI)."""

    def create_site(
        self,
        site_id: str,
        visibility: str = SITE_VISIBILITY["PUBLIC"],
        title: str | None = None,
        description: str = "",
    ) -> dict[str, Any]:
        """
        Create a site.

        Args:
            site_id: Short name of the site; also used as title by default.
            visibility: One of ``SITE_VISIBILITY`` values.
            title: Display title.
            description: Optional site description.

        Returns:
            The created site ``entry``.
        """
        body = {
            "id": site_id,
            "title": title or site_id,
            "description": description,
            "visibility": visibility,
        }
        return self.request("POST", "/sites", json=body)["entry"]

    def get_site(self, site_id: str) -> dict[str, Any]:
        return self.request("GET", f"/sites/{site_id}")["entry"]

    def add_site_member(self, site_id: str, username: str, role: str) -> dict[str, Any]:
        """Add ``username`` to the site with one of the ``SITE_ROLES`` roles."""
        body = {"role": role, "id": username}
        return self.request("POST", f"/sites/{site_id}/members", json=body)["entry"]

    def delete_site(self, site_id: str, permanent: bool = True) -> None:
        """Delete a site, bypassing the trashcan unless ``permanent`` is False."""
        self.request(
            "DELETE",
            f"/sites/{site_id}",
            params={"permanent": str(permanent).lower()},
        )

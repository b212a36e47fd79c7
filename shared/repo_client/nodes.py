"""
Nodes API: folders and documents in the repository.

Paths are resolved relative to a parent node id. ``-my-`` is the
authenticated user's home folder (what the UI shows as *Personal Files*)
and ``-root-`` is Company Home, under which site document libraries live
(``Sites/<site>/documentLibrary``).
"""

from __future__ import annotations

import logging
from typing import Any

from shared.repo_client.base import RepoApi

logger = logging.getLogger(__name__)

FOLDER_TYPE = "cm:folder"
DESCRIPTION_PROPERTY = "cm:description"


class NodesApi(RepoApi):
    """Create, look up and delete repository nodes."""

    def create_children(self, data: dict | list[dict], parent_id: str = "-my-") -> list[dict[str, Any]]:
        """
        Create one or many children of ``parent_id``.

        The repository accepts either a single node body or a list of them
        and answers with ``entry`` or ``list.entries`` respectively.

        Returns:
            The created node entries.
        """
        result = self.request(
            "POST",
            f"/nodes/{parent_id}/children",
            params={"autoRename": "false"},
            json=data,
        )
        if "entry" in result:
            return [result["entry"]]
        return [item["entry"] for item in result["list"]["entries"]]

    def create_folder(
        self,
        name: str,
        relative_path: str = "/",
        description: str | None = None,
        parent_id: str = "-my-",
    ) -> dict[str, Any]:
        """Create a single folder, creating any missing folders on ``relative_path``."""
        body: dict[str, Any] = {
            "name": name,
            "nodeType": FOLDER_TYPE,
            "relativePath": relative_path,
        }
        if description is not None:
            body["properties"] = {DESCRIPTION_PROPERTY: description}
        return self.create_children(body, parent_id=parent_id)[0]

    def create_folders(
        self,
        names: list[str],
        relative_path: str = "/",
        parent_id: str = "-my-",
    ) -> list[dict[str, Any]]:
        """
        Create sibling folders under ``relative_path`` in a single request.

        Intermediate folders on the path are created as needed, so
        ``create_folders(["child"], "parent")`` also creates ``parent``.
        """
        body = [
            {"name": name, "nodeType": FOLDER_TYPE, "relativePath": relative_path}
            for name in names
        ]
        return self.create_children(body, parent_id=parent_id)

    def get_node_by_path(self, relative_path: str = "/", parent_id: str = "-my-") -> dict[str, Any]:
        """Resolve ``relative_path`` under ``parent_id`` to its node entry."""
        return self.request(
            "GET",
            f"/nodes/{parent_id}",
            params={"relativePath": relative_path},
        )["entry"]

    def get_node_id(self, relative_path: str, parent_id: str = "-my-") -> str:
        return self.get_node_by_path(relative_path, parent_id=parent_id)["id"]

    def get_node_description(self, relative_path: str, parent_id: str = "-my-") -> str:
        """Return the stored ``cm:description`` of a node, or '' when unset."""
        entry = self.get_node_by_path(relative_path, parent_id=parent_id)
        properties = entry.get("properties") or {}
        return properties.get(DESCRIPTION_PROPERTY, "")

    def get_node_children_names(self, relative_path: str = "/", parent_id: str = "-my-") -> list[str]:
        """List the names of the direct children of a folder."""
        node_id = self.get_node_id(relative_path, parent_id=parent_id)
        result = self.request(
            "GET",
            f"/nodes/{node_id}/children",
            params={"maxItems": 1000},
        )
        return [item["entry"]["name"] for item in result["list"]["entries"]]

    def delete_node_by_id(self, node_id: str, permanent: bool = True) -> None:
        self.request(
            "DELETE",
            f"/nodes/{node_id}",
            params={"permanent": str(permanent).lower()},
        )

    def delete_nodes(
        self,
        names: list[str],
        relative_path: str = "",
        permanent: bool = True,
        parent_id: str = "-my-",
    ) -> None:
        """Delete nodes found by name under ``relative_path``, one after another."""
        for name in names:
            path = f"{relative_path}/{name}" if relative_path else name
            node_id = self.get_node_id(path, parent_id=parent_id)
            logger.debug("Deleting node %s (%s)", path, node_id)
            self.delete_node_by_id(node_id, permanent=permanent)

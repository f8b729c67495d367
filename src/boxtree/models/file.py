"""Box file."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any, Mapping, Optional

from boxtree.util.time import to_rfc3339

from .factory import register_item_type
from .item import Item, attribute


@register_item_type("file")
class File(Item):
    """A file stored on Box."""

    ID_FALLBACK_KEY = "file_id"

    sha1 = attribute("sha1")
    version_number = attribute("version_number")
    comment_count = attribute("comment_count")

    def download(self, path: Optional[str] = None) -> Optional[bytes]:
        """Return the content, or write it to ``path`` (returns None then)."""
        return _deliver(self._api.download_file(self.id), path)

    def upload_version(self, file: Any, *, name: Optional[str] = None) -> File:
        """Upload new content for this file (guarded by the current etag)."""
        response = self._api.upload_version(self.id, file, self.etag, name=name)
        return File(self._api, _first_entry(response))

    def update(self, **params: Any) -> File:
        """Update file info (name, description, parent, ...) and return the new file."""
        response = self._api.update_file_info(self.id, self._params_for_update(params))
        return File(self._api, response)

    def rename(self, name: str) -> File:
        return self.update(name=name)

    def move(self, parent: Any) -> File:
        return self.update(parent=parent)

    def copy(self, parent: Any, name: Optional[str] = None) -> File:
        parent_id = parent.id if isinstance(parent, Item) else str(parent)
        return File(self._api, self._api.copy_file(self.id, parent_id, name))

    def delete(self) -> bool:
        return self._api.delete_file(self.id, self.etag)

    def share(self, unshared_at: Optional[datetime] = None, **params: Any) -> File:
        """
        Create or change the shared link.

        params may contain:
            access: "open" | "company" | "collaborators"
            permissions: {"can_download": bool, "can_preview": bool}
        """
        if unshared_at is not None:
            params["unshared_at"] = to_rfc3339(unshared_at)
        return File(self._api, self._api.share_file(self.id, params))

    def unshare(self) -> File:
        return File(self._api, self._api.share_file(self.id, None))

    def comments(self) -> list[Any]:
        response = self._api.get_file_comments(self.id)
        return [self._construct(_tagged(c, "comment")) for c in _entries(response, "comments")]

    def add_comment(self, message: str) -> Any:
        response = self._api.add_comment(self.id, message)
        return self._construct(_tagged(response, "comment"))

    def versions(self) -> list[Any]:
        response = self._api.get_file_versions(self.id)
        return [self._version(v) for v in _entries(response, "versions")]

    def version(self, version_id: str) -> Any:
        return self._version(self._api.get_file_version_info(self.id, version_id))

    def delete_version(self, version_id: str) -> bool:
        return self._api.delete_file_version(self.id, version_id)

    def download_version(self, version_id: str, path: Optional[str] = None) -> Optional[bytes]:
        return _deliver(self._api.download_file_version(self.id, version_id), path)

    def _version(self, payload: Mapping[str, Any]) -> Any:
        fragment = _tagged(payload, "file_version")
        fragment["file"] = self
        return self._construct(fragment)

    def _get_info(self) -> Mapping[str, Any]:
        return self._api.get_file_info(self.id)


def _tagged(payload: Mapping[str, Any], tag: str) -> dict[str, Any]:
    fragment = dict(payload)
    fragment.setdefault("type", tag)
    return fragment


def _entries(payload: Mapping[str, Any], legacy_key: str) -> list[Any]:
    entries = payload.get("entries")
    if entries is None:
        entries = payload.get(legacy_key)
    return list(entries or [])


def _first_entry(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    entries = payload.get("entries")
    if isinstance(entries, list) and entries:
        return entries[0]
    return payload


def _deliver(content: bytes, path: Optional[str]) -> Optional[bytes]:
    if path is None:
        return content

    parent_dir = os.path.dirname(path)
    if parent_dir:
        os.makedirs(parent_dir, exist_ok=True)
    with open(path, "wb") as f:
        f.write(content)
    return None

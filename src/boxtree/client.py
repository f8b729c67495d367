"""BoxClient: entry point into the item tree."""

from __future__ import annotations

from typing import Any, Optional

from boxtree.auth import AuthInfo
from boxtree.controller import BoxApi
from boxtree.errors import InvalidArgumentError
from boxtree.models import Comment, Discussion, File, Folder, Item

ROOT_FOLDER_ID: str = "0"


class BoxClient:
    """High-level access to a Box account's files and folders."""

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        base_url: Optional[str] = None,
        upload_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._api = BoxApi(
            auth_info,
            base_url=base_url,
            upload_url=upload_url,
            timeout=timeout,
        )

    @classmethod
    def from_api(cls, api: Any) -> "BoxClient":
        """Create a client with an injected API object (useful for tests)."""
        obj = cls.__new__(cls)
        obj._api = api
        return obj

    @property
    def api(self) -> Any:
        return self._api

    def user_info(self) -> dict[str, Any]:
        """Info about the account the token belongs to."""
        return self._api.get_account_info()

    def root(self) -> Folder:
        """The account's root folder ("All Files"). Nothing is fetched yet."""
        return Folder(self._api, {"id": ROOT_FOLDER_ID})

    def folder(self, folder_id: str) -> Folder:
        return Folder(self._api, {"id": _require_id(folder_id)})

    def file(self, file_id: str) -> File:
        return File(self._api, {"id": _require_id(file_id)})

    def comment(self, comment_id: str) -> Comment:
        return Comment(self._api, {"id": _require_id(comment_id)})

    def discussion(self, discussion_id: str) -> Discussion:
        return Discussion(self._api, {"id": _require_id(discussion_id)})

    def at(self, path: str) -> Optional[Item]:
        """Resolve ``path`` from the root folder."""
        return self.root().at(path)


def _require_id(value: Any) -> str:
    if value is None or not str(value).strip():
        raise InvalidArgumentError("id must be a non-empty string")
    return str(value)

"""Box folder."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from boxtree.errors import FetchError
from boxtree.navigation.path import resolve_path
from boxtree.navigation.search import find_items
from boxtree.util.logging import get_logger
from boxtree.util.time import to_rfc3339

from .collection import fetched_count, first_hole
from .discussion import Discussion
from .factory import register_item_type
from .file import File, _first_entry
from .item import ITEM_COLLECTION_KEY, Item

logger = get_logger(__name__)


@register_item_type("folder")
class Folder(Item):
    """
    A folder stored on Box.

    Children live in the ``items`` attribute: an ordered list that may hold
    ``None`` holes for pages not fetched yet. ``items_count`` is the total
    reported by the server.
    """

    ID_FALLBACK_KEY = "folder_id"

    DEFAULT_PAGE_LIMIT: int = 100
    DEFAULT_FETCH_ALL_LIMIT: int = 1000

    # ----------------------------
    # Children
    # ----------------------------
    @property
    def items(self) -> list[Optional[Item]]:
        """Children fetched so far (holes are None)."""
        return list(self.get("items", None) or [])

    @property
    def items_count(self) -> Optional[int]:
        return self.get("items_count", None)

    def item_collection(
        self,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> list[Optional[Item]]:
        """Fetch one page of children, merge it and return ``items``."""
        response = self._api.get_folder_items(self.id, limit=limit, offset=offset)
        # The endpoint answers with the bare collection, without the
        # surrounding "item_collection" key used by folder info.
        self.update_info({ITEM_COLLECTION_KEY: response})
        return self.items

    def has_all_items(self) -> bool:
        total = self._store.peek("items_count", None)
        if total is None:
            return False
        return fetched_count(self._store.peek("items", None)) >= total

    def all_items(self, limit: int = DEFAULT_FETCH_ALL_LIMIT) -> list[Item]:
        """
        Page through the collection until every child is fetched.

        Raises:
            FetchError: if a page does not fill any missing slot.
        """
        while not self.has_all_items():
            children = self._store.peek("items", None)
            before = fetched_count(children)
            offset = first_hole(children)

            self.item_collection(limit, offset)

            if not self.has_all_items() and fetched_count(self._store.peek("items", None)) <= before:
                raise FetchError(
                    "Folder listing made no progress",
                    details={
                        "folder_id": self.id,
                        "offset": offset,
                        "limit": limit,
                        "fetched": before,
                        "total_count": self._store.peek("items_count", None),
                    },
                )

        logger.debug("Folder %s has all %s items", self.id, self._store.peek("items_count", None))
        return [child for child in self.items if child is not None]

    def files(self) -> list[File]:
        return [item for item in self.all_items() if isinstance(item, File)]

    def folders(self) -> list[Folder]:
        return [item for item in self.all_items() if isinstance(item, Folder)]

    # ----------------------------
    # Navigation
    # ----------------------------
    def find(
        self,
        criteria: Optional[Mapping[str, Any]] = None,
        *,
        recursive: bool = False,
        **kwargs: Any,
    ) -> list[Item]:
        """
        Search children using criteria.

        Every criterion must match. ``type`` compares the item kind
        ("file", "folder", ...). Other keys name attributes; the expected
        value can be a plain value, a compiled regex or a predicate. A
        ``recursive`` entry in ``criteria`` sets the search mode instead of
        naming an attribute.

        Example:
            folder.find(name="README")
            folder.find({"type": "file", "sha1": "abc"}, recursive=True)
            folder.find(name=re.compile(r"\\.pdf$"), recursive=True)
        """
        merged = dict(criteria or {})
        merged.update(kwargs)
        recursive = bool(merged.pop("recursive", recursive))
        return find_items(self, merged, recursive=recursive)

    def at(self, path: str) -> Optional[Item]:
        """
        Return the item at a Unix-style ``path`` (None when not found).

        Example:
            folder.at("/box/is/awesome")
            folder.at("awesome/file.pdf")
            folder.at("../other/folder/")
        """
        return resolve_path(self, path)

    # ----------------------------
    # Mutations
    # ----------------------------
    def create_folder(self, name: str) -> Folder:
        return Folder(self._api, self._api.create_folder(self.id, name))

    def upload_file(self, file: Any, *, name: Optional[str] = None) -> File:
        """Upload a local file (path or binary stream) into this folder."""
        response = self._api.upload_file(self.id, file, name=name)
        return File(self._api, _first_entry(response))

    def update(self, **params: Any) -> Folder:
        response = self._api.update_folder_info(self.id, self._params_for_update(params))
        return Folder(self._api, response)

    def rename(self, name: str) -> Folder:
        return self.update(name=name)

    def move(self, parent: Any) -> Folder:
        return self.update(parent=parent)

    def copy(self, parent: Any, name: Optional[str] = None) -> Folder:
        parent_id = parent.id if isinstance(parent, Item) else str(parent)
        return Folder(self._api, self._api.copy_folder(self.id, parent_id, name))

    def delete(self, recursive: bool = False) -> bool:
        """Delete this folder (and every sub-item when ``recursive``)."""
        return self._api.delete_folder(self.id, recursive)

    def share(self, unshared_at: Optional[datetime] = None, **params: Any) -> Folder:
        """
        Create or change the shared link.

        params may contain:
            access: "open" | "company" | "collaborators"
            permissions: {"can_download": bool, "can_preview": bool}
        """
        if unshared_at is not None:
            params["unshared_at"] = to_rfc3339(unshared_at)
        return Folder(self._api, self._api.share_folder(self.id, params))

    def unshare(self) -> Folder:
        return Folder(self._api, self._api.share_folder(self.id, None))

    def create_discussion(self, name: str, description: Optional[str] = None) -> Discussion:
        response = self._api.create_discussion(self.id, name, description)
        return Discussion(self._api, response)

    def discussions(self) -> list[Discussion]:
        response = self._api.get_folder_discussions(self.id)
        entries = response.get("entries")
        if entries is None:
            entries = response.get("discussions")
        return [Discussion(self._api, {k: v for k, v in d.items() if k != "type"}) for d in entries or []]

    def _get_info(self) -> Mapping[str, Any]:
        return self._api.get_folder_info(self.id)

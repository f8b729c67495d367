"""Base class for every remote Box resource."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Mapping, Optional

from boxtree.errors import InvalidStateError
from boxtree.util.logging import get_logger
from boxtree.util.time import parse_rfc3339

from .attributes import MISSING, AttributeStore
from .collection import CollectionPage, merge_page
from .factory import construct_item

logger = get_logger(__name__)

ITEM_COLLECTION_KEY: str = "item_collection"
PARENT_WIRE_KEY: str = "parent_folder"


def attribute(key: str, doc: Optional[str] = None) -> property:
    """Read-only accessor for one attribute (None when absent)."""

    def getter(self: Item) -> Any:
        return self.get(key, None)

    return property(getter, doc=doc or f"The '{key}' attribute (lazily fetched).")


def timestamp_attribute(key: str, doc: Optional[str] = None) -> property:
    """Accessor parsing an RFC3339 attribute into a tz-aware datetime."""

    def getter(self: Item) -> Optional[datetime]:
        value = self.get(key, None)
        if isinstance(value, str):
            return parse_rfc3339(value)
        return value

    return property(getter, doc=doc or f"The '{key}' timestamp (UTC datetime).")


class Item:
    """
    A remote resource (file, folder, comment, version or discussion).

    Attributes are fetched lazily: reading one that is not cached triggers a
    single full-info fetch; later reads are served from the cache unless a
    refresh is forced.

    Operations that change the resource remotely return a NEW item built
    from the server's answer; rebind your reference. Items are not notified
    of remote deletion, so an item whose resource was deleted elsewhere
    raises ``NotFoundError`` on its next fetch. Keeping references fresh is
    the caller's job.

    Two items are equal when they have the same class and the same id.
    """

    ITEM_TYPE: ClassVar[str] = ""
    ID_FALLBACK_KEY: ClassVar[Optional[str]] = None

    def __init__(self, api: Any, info: Optional[Mapping[str, Any]] = None) -> None:
        self._api = api
        self._store = AttributeStore(self._load_info)
        self.update_info(info or {})

    # ----------------------------
    # Identity
    # ----------------------------
    @property
    def api(self) -> Any:
        return self._api

    @property
    def id(self) -> Optional[str]:
        value = self._store.peek("id", None)
        if value is None and self.ID_FALLBACK_KEY:
            value = self._store.peek(self.ID_FALLBACK_KEY, None)
        return str(value) if value is not None else None

    @property
    def item_type(self) -> Optional[str]:
        return self.ITEM_TYPE or self.get("type", None)

    @property
    def cached(self) -> bool:
        return self._store.cached

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        if type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))

    def __repr__(self) -> str:
        name = self._store.peek("name", None)
        if name is None:
            return f"<{type(self).__name__} id={self.id!r}>"
        return f"<{type(self).__name__} id={self.id!r} name={name!r}>"

    # ----------------------------
    # Attributes
    # ----------------------------
    @property
    def data(self) -> dict[str, Any]:
        """Attributes cached so far (no fetch)."""
        return self._store.snapshot()

    def info(self, refresh: bool = False) -> Item:
        """Make sure full info is cached (forced with ``refresh``). Returns self."""
        self._store.load(refresh=refresh)
        return self

    def get(self, key: str, default: Any = MISSING, *, refresh: bool = False) -> Any:
        """
        Return attribute ``key``, fetching full info if it is not cached.

        Returns ``default`` (``MISSING`` unless given) when the resource has
        no such attribute.
        """
        return self._store.get(key, refresh=refresh, default=default)

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is MISSING:
            raise KeyError(key)
        return value

    def update_info(self, info: Mapping[str, Any]) -> None:
        """Normalize a payload fragment and merge it into the cache."""
        self._store.merge(self._normalize(info))

    name = attribute("name")
    description = attribute("description")
    etag = attribute("etag")
    sequence_id = attribute("sequence_id")
    size = attribute("size")
    shared_link = attribute("shared_link")
    created_by = attribute("created_by")
    modified_by = attribute("modified_by")
    owned_by = attribute("owned_by")
    created_at = timestamp_attribute("created_at")
    modified_at = timestamp_attribute("modified_at")

    @property
    def parent(self) -> Optional[Item]:
        """The parent folder, or None for the root (or a parentless resource)."""
        return self.get("parent", None)

    @property
    def path(self) -> str:
        """
        Absolute path from the root folder, e.g. ``/docs/report.pdf``.

        Raises:
            InvalidStateError: if an item below the root has no name.
        """
        names: list[str] = []
        current: Optional[Item] = self
        while current is not None:
            parent = current.parent
            if parent is None:
                break
            name = current.name
            if not name:
                raise InvalidStateError(
                    "Cannot build a path through an unnamed item",
                    details={"item_type": current.item_type, "item_id": current.id},
                )
            names.append(str(name))
            current = parent
        return "/" + "/".join(reversed(names))

    # ----------------------------
    # Internals
    # ----------------------------
    def _get_info(self) -> Mapping[str, Any]:
        """Fetch this item's full info from the API (raw payload)."""
        raise NotImplementedError

    def _load_info(self) -> dict[str, Any]:
        if not self.id:
            raise InvalidStateError(
                "Cannot fetch info for an item without id",
                details={"item_type": self.ITEM_TYPE},
            )
        logger.debug("Fetching %s %s", self.ITEM_TYPE, self.id)
        return self._normalize(self._get_info())

    def _construct(self, value: Any) -> Any:
        return construct_item(self._api, value)

    def _normalize(self, info: Mapping[str, Any]) -> dict[str, Any]:
        normalized: dict[str, Any] = {}

        for key, value in info.items():
            if key == ITEM_COLLECTION_KEY:
                if isinstance(value, Mapping):
                    self._normalize_collection(value, normalized)
                continue
            if key == PARENT_WIRE_KEY:
                key = "parent"

            if isinstance(value, list):
                normalized[key] = [self._construct(v) for v in value]
            else:
                normalized[key] = self._construct(value)

        return normalized

    def _normalize_collection(self, payload: Mapping[str, Any], out: dict[str, Any]) -> None:
        page = CollectionPage.from_payload(payload)
        current = out.get("items", self._store.peek("items", None))
        out["items"] = merge_page(current, page, self._construct)
        out["items_count"] = page.total_count
        logger.debug(
            "Merged page offset=%s limit=%s total=%s into %s",
            page.offset,
            page.limit,
            page.total_count,
            self.id,
        )

    def _params_for_update(self, params: Mapping[str, Any]) -> dict[str, Any]:
        body = dict(params)
        parent = body.get("parent")
        if isinstance(parent, Item):
            body["parent"] = parent.id
        return body

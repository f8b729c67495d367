"""Per-item attribute cache with on-demand refresh."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping

from boxtree.util.logging import get_logger

logger = get_logger(__name__)


class _Missing:
    """Sentinel type for "attribute does not exist on this resource"."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class AttributeStore:
    """
    Key/value cache for one remote item.

    ``loader`` performs the full-info fetch and returns already normalized
    attributes. It is called at most once unless a refresh is forced. A
    loader that raises leaves the store exactly as it was.
    """

    def __init__(self, loader: Callable[[], Mapping[str, Any]]) -> None:
        self._loader = loader
        self._data: dict[str, Any] = {}
        self._cached = False

    @property
    def cached(self) -> bool:
        """True once a full fetch has succeeded."""
        return self._cached

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def peek(self, key: str, default: Any = MISSING) -> Any:
        """Return the cached value without ever contacting the remote side."""
        return self._data.get(key, default)

    def get(self, key: str, *, refresh: bool = False, default: Any = MISSING) -> Any:
        """
        Return the value for ``key``, fetching full info when needed.

        Returns ``default`` (``MISSING`` unless given) when the attribute
        does not exist even after a fetch. Fetch failures propagate.
        """
        if key in self._data and not refresh:
            return self._data[key]

        self.load(refresh=refresh)
        return self._data.get(key, default)

    def load(self, *, refresh: bool = False) -> None:
        """Run the full fetch unless it already succeeded (or ``refresh``)."""
        if self._cached and not refresh:
            return

        attributes = self._loader()
        self.merge(attributes)
        self._cached = True

    def merge(self, attributes: Mapping[str, Any]) -> None:
        """Merge normalized attributes into the cache (new values win)."""
        if attributes:
            logger.debug("Merging attributes: %s", sorted(attributes))
        self._data.update(attributes)

    def snapshot(self) -> dict[str, Any]:
        """Shallow copy of what is cached right now."""
        return dict(self._data)

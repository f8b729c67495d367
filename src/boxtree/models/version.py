"""Box file version."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from boxtree.errors import InvalidStateError

from .factory import default_factory, register_item_type
from .item import Item


@register_item_type("version")
class Version(Item):
    """
    One historical version of a file.

    Versions are addressed through their file, so a version built without a
    ``file`` attribute cannot fetch, download or delete itself.
    """

    @property
    def file(self) -> Any:
        return self._store.peek("file", None)

    def download(self, path: Optional[str] = None) -> Optional[bytes]:
        return self._require_file().download_version(self.id, path)

    def delete(self) -> bool:
        return self._require_file().delete_version(self.id)

    def _require_file(self) -> Any:
        file = self.file
        if file is None:
            raise InvalidStateError(
                "Version is not attached to a file",
                details={"version_id": self.id},
            )
        return file

    def _get_info(self) -> Mapping[str, Any]:
        return self._api.get_file_version_info(self._require_file().id, self.id)


# Box tags versions as "file_version" on the wire.
default_factory.register("file_version", Version)

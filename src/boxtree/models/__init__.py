"""Public model exports for boxtree."""

from __future__ import annotations

from .attributes import MISSING, AttributeStore
from .collection import CollectionPage, fetched_count, first_hole, merge_page
from .factory import ItemFactory, construct_item, default_factory, item_class, register_item_type
from .item import Item
from .comment import Comment
from .discussion import Discussion
from .file import File
from .version import Version
from .folder import Folder

__all__ = [
    "MISSING",
    "AttributeStore",
    "CollectionPage",
    "merge_page",
    "fetched_count",
    "first_hole",
    "ItemFactory",
    "default_factory",
    "register_item_type",
    "construct_item",
    "item_class",
    "Item",
    "File",
    "Folder",
    "Comment",
    "Version",
    "Discussion",
]

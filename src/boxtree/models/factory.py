"""Polymorphic item construction keyed by the payload ``type`` tag."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, TypeVar

if TYPE_CHECKING:
    from .item import Item

T = TypeVar("T", bound=type)

TYPE_KEY: str = "type"


class ItemFactory:
    """Registry mapping a type tag to the item class that represents it."""

    def __init__(self) -> None:
        self._registry: dict[str, type[Item]] = {}

    def register(self, tag: str, cls: type[Item]) -> None:
        existing = self._registry.get(tag)
        if existing is not None and existing is not cls:
            raise ValueError(f"Item type '{tag}' is already registered to {existing.__name__}")
        self._registry[tag] = cls

    def resolve(self, tag: Any) -> Optional[type[Item]]:
        if not isinstance(tag, str):
            return None
        return self._registry.get(tag)

    def tags(self) -> list[str]:
        return sorted(self._registry)

    def construct(self, api: Any, value: Any) -> Any:
        """
        Build an item from a payload fragment.

        A mapping whose ``type`` is registered becomes an instance of that
        class (the tag itself is not passed on). Anything else is returned
        unchanged.
        """
        if not isinstance(value, Mapping):
            return value

        cls = self.resolve(value.get(TYPE_KEY))
        if cls is None:
            return value

        fragment = {k: v for k, v in value.items() if k != TYPE_KEY}
        return cls(api, fragment)


default_factory = ItemFactory()


def register_item_type(tag: str) -> Callable[[T], T]:
    """Class decorator registering an item class under ``tag``."""

    def decorator(cls: T) -> T:
        default_factory.register(tag, cls)  # type: ignore[arg-type]
        cls.ITEM_TYPE = tag  # type: ignore[attr-defined]
        return cls

    return decorator


def construct_item(api: Any, value: Any) -> Any:
    """Construct with the default registry."""
    return default_factory.construct(api, value)


def item_class(tag: Any) -> Optional[type[Item]]:
    """Return the class registered for ``tag`` (None when unknown)."""
    return default_factory.resolve(tag)

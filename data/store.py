# data/store.py
from __future__ import annotations

from typing import Generic, Protocol, TypeVar

from data.exceptions import DuplicateItemError, InvalidQuantityError, ItemNotFoundError


class Entity(Protocol):
    # anything with an integer id can live in a store; read-only, so frozen
    # dataclasses qualify
    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Entity)


class KeyedEntityStore(Generic[T]):
    """
    In-memory collection of entities keyed by their integer id.

    - add_item rejects ids that are already present
    - get_item_by_id returns the stored object itself, so changes made
      through it are visible on the next lookup
    - update_quantity only works for entities with a mutable `quantity`
    - ids are never generated or reused by the store
    """

    def __init__(self) -> None:
        self._items: dict[int, T] = {}  # id -> entity

    def add_item(self, item: T) -> None:
        if item.id in self._items:
            raise DuplicateItemError(item.id)
        self._items[item.id] = item

    def get_item_by_id(self, item_id: int) -> T:
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def remove_item(self, item_id: int) -> None:
        if item_id not in self._items:
            raise ItemNotFoundError(item_id)
        del self._items[item_id]

    def get_all_items(self) -> list[T]:
        # dicts keep insertion order; the list is a snapshot
        return list(self._items.values())

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        # validate before lookup so a bad value never touches the entity
        if new_quantity < 0:
            raise InvalidQuantityError(new_quantity)
        item = self.get_item_by_id(item_id)
        item.quantity = new_quantity

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

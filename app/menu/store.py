from __future__ import annotations

import threading
from collections.abc import Iterable

import structlog

from app.core.errors import MenuItemNotFoundError
from app.menu.models import MenuItem, MenuItemPayload
from app.menu.seed import seed_items

logger = structlog.get_logger(__name__)


def parse_item_id(raw: str | int) -> int | None:
    """Convert a path parameter to an id. Non-integers resolve to None."""
    if isinstance(raw, int):
        return raw
    try:
        number = float(raw.strip())
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)


class MenuStore:
    """In-memory menu collection, kept in insertion order.

    Every operation holds one lock so that id assignment and lookups stay
    consistent when handlers run concurrently.
    """

    def __init__(self, items: Iterable[MenuItem] | None = None) -> None:
        self._items: list[MenuItem] = list(items or [])
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> MenuStore:
        return cls(seed_items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list_items(self) -> list[MenuItem]:
        with self._lock:
            return list(self._items)

    def get_item(self, item_id: str | int) -> MenuItem:
        with self._lock:
            return self._items[self._find_index(item_id)]

    def create_item(self, payload: MenuItemPayload) -> MenuItem:
        with self._lock:
            item = MenuItem.from_payload(self._next_id(), payload)
            self._items.append(item)
        logger.info("menu_item_created", item_id=item.id, name=item.name)
        return item

    def replace_item(self, item_id: str | int, payload: MenuItemPayload) -> MenuItem:
        with self._lock:
            index = self._find_index(item_id)
            item = MenuItem.from_payload(self._items[index].id, payload)
            self._items[index] = item
        logger.info("menu_item_replaced", item_id=item.id)
        return item

    def delete_item(self, item_id: str | int) -> MenuItem:
        with self._lock:
            index = self._find_index(item_id)
            item = self._items.pop(index)
        logger.info("menu_item_deleted", item_id=item.id)
        return item

    def _find_index(self, raw_id: str | int) -> int:
        item_id = parse_item_id(raw_id)
        if item_id is not None:
            for index, item in enumerate(self._items):
                if item.id == item_id:
                    return index
        raise MenuItemNotFoundError(raw_id)

    def _next_id(self) -> int:
        # Recomputed from the current maximum, so a deleted max id can come back.
        return max((item.id for item in self._items), default=0) + 1

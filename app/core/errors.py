from __future__ import annotations

from typing import Any


class MenuItemNotFoundError(LookupError):
    def __init__(self, item_id: object) -> None:
        super().__init__(f"Menu item {item_id!r} not found")
        self.item_id = item_id


class MenuValidationError(ValueError):
    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(f"{len(errors)} invalid field(s)")
        self.errors = errors

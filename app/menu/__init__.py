from app.menu.models import Category, DeletedMenuItem, MenuItem, MenuItemPayload
from app.menu.store import MenuStore, parse_item_id
from app.menu.validation import validate_menu_item

__all__ = [
    "Category",
    "DeletedMenuItem",
    "MenuItem",
    "MenuItemPayload",
    "MenuStore",
    "parse_item_id",
    "validate_menu_item",
]

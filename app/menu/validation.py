"""
Field-level validation of create/replace bodies.

Each check inspects one field of the raw JSON object and returns at most one
error. All checks run, so a response lists every bad field at once.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from app.core.errors import MenuValidationError
from app.menu.models import Category, MenuItemPayload

FieldError = dict[str, Any]
FieldCheck = Callable[[Mapping[str, Any]], FieldError | None]

CATEGORIES = tuple(category.value for category in Category)

_MISSING = object()
_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


def _error(field: str, message: str, value: Any = _MISSING) -> FieldError:
    error: FieldError = {"field": field, "message": message}
    if value is not _MISSING:
        error["value"] = value
    return error


def _is_blank(value: Any) -> bool:
    """JSON falsiness: null, false, "", 0. Empty arrays and objects count as present."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, float):
        return value == 0 or math.isnan(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    return False


def _check_text(field: str, label: str, min_length: int) -> FieldCheck:
    def check(body: Mapping[str, Any]) -> FieldError | None:
        value = body.get(field)
        if _is_blank(value):
            return _error(field, f"{label} is required", body.get(field, _MISSING))
        if not isinstance(value, str):
            return _error(field, f"{label} must be a string", value)
        if len(value.strip()) < min_length:
            return _error(
                field, f"{label} must be at least {min_length} characters long", value
            )
        return None

    return check


def _parse_price(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_available(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
    return None


def check_price(body: Mapping[str, Any]) -> FieldError | None:
    if "price" not in body:
        return _error("price", "Price is required")
    value = body["price"]
    number = _parse_price(value)
    if number is None or number <= 0:
        return _error("price", "Price must be a positive number", value)
    return None


def check_category(body: Mapping[str, Any]) -> FieldError | None:
    value = body.get("category")
    if _is_blank(value):
        return _error("category", "Category is required", body.get("category", _MISSING))
    if not isinstance(value, str):
        return _error("category", "Category must be a string", value)
    if value.strip() not in CATEGORIES:
        return _error(
            "category", f"Category must be one of: {', '.join(CATEGORIES)}", value
        )
    return None


def check_ingredients(body: Mapping[str, Any]) -> FieldError | None:
    if "ingredients" not in body:
        return _error("ingredients", "Ingredients are required")
    value = body["ingredients"]
    if not isinstance(value, list) or not value:
        return _error(
            "ingredients", "Ingredients must be an array with at least one item", value
        )
    if not all(isinstance(ingredient, str) for ingredient in value):
        return _error("ingredients", "Each ingredient must be a string", value)
    return None


def check_available(body: Mapping[str, Any]) -> FieldError | None:
    if "available" not in body:
        return None
    value = body["available"]
    if _parse_available(value) is None:
        return _error("available", "Available must be a boolean value", value)
    return None


check_name = _check_text("name", "Name", 3)
check_description = _check_text("description", "Description", 10)

MENU_ITEM_CHECKS: tuple[FieldCheck, ...] = (
    check_name,
    check_description,
    check_price,
    check_category,
    check_ingredients,
    check_available,
)


def collect_errors(body: Mapping[str, Any]) -> list[FieldError]:
    errors: list[FieldError] = []
    for check in MENU_ITEM_CHECKS:
        error = check(body)
        if error is not None:
            errors.append(error)
    return errors


def validate_menu_item(body: Mapping[str, Any]) -> MenuItemPayload:
    """Validate a raw request body and coerce it into a typed payload.

    Raises MenuValidationError with every field failure, in field order.
    """
    errors = collect_errors(body)
    if errors:
        raise MenuValidationError(errors)

    available = True
    if "available" in body:
        available = bool(_parse_available(body["available"]))

    return MenuItemPayload(
        name=body["name"].strip(),
        description=body["description"].strip(),
        price=_parse_price(body["price"]),
        category=Category(body["category"].strip()),
        ingredients=list(body["ingredients"]),
        available=available,
    )

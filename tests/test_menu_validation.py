"""
Tests for field-level validation of menu item bodies.

Verifies that:
- Every field is checked and all failures are reported in field order
- Each field reports only its first failing check
- Valid bodies are trimmed and coerced into a typed payload
"""

from __future__ import annotations

import pytest

from app.core.errors import MenuValidationError
from app.menu import Category, validate_menu_item
from app.menu.validation import collect_errors


def _body(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "name": "Taco",
        "description": "Crunchy beef taco with cheese",
        "price": 4.5,
        "category": "entree",
        "ingredients": ["beef", "taco shell", "cheese"],
    }
    body.update(overrides)
    return body


def _messages(body: dict[str, object]) -> dict[str, str]:
    return {error["field"]: error["message"] for error in collect_errors(body)}


class TestValidPayloads:
    """Test coercion of accepted bodies."""

    def test_defaults_available_to_true(self) -> None:
        payload = validate_menu_item(_body())
        assert payload.available is True
        assert payload.category is Category.entree
        assert payload.ingredients == ["beef", "taco shell", "cheese"]

    def test_trims_string_fields(self) -> None:
        payload = validate_menu_item(
            _body(name="  Taco  ", description="  Crunchy beef taco  ", category=" dessert ")
        )
        assert payload.name == "Taco"
        assert payload.description == "Crunchy beef taco"
        assert payload.category is Category.dessert

    def test_coerces_numeric_string_price(self) -> None:
        assert validate_menu_item(_body(price="4.50")).price == 4.5

    def test_coerces_integer_price(self) -> None:
        price = validate_menu_item(_body(price=5)).price
        assert isinstance(price, float)
        assert price == 5.0

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(False, False), (True, True), ("false", False), ("true", True), ("0", False), (1, True)],
    )
    def test_coerces_available(self, raw: object, expected: bool) -> None:
        assert validate_menu_item(_body(available=raw)).available is expected


class TestFieldFailures:
    """Test the message reported for each failing field."""

    def test_short_name(self) -> None:
        assert _messages(_body(name="Ta")) == {
            "name": "Name must be at least 3 characters long"
        }

    def test_whitespace_padded_short_name(self) -> None:
        assert "name" in _messages(_body(name="  ab  "))

    def test_missing_name(self) -> None:
        assert _messages(_body(name="")) == {"name": "Name is required"}

    def test_non_string_name(self) -> None:
        assert _messages(_body(name=123)) == {"name": "Name must be a string"}

    @pytest.mark.parametrize("name", [[], {}, ["Taco"]])
    def test_empty_containers_are_present_but_not_strings(self, name: object) -> None:
        assert _messages(_body(name=name)) == {"name": "Name must be a string"}

    @pytest.mark.parametrize("name", [None, False, 0, 0.0])
    def test_falsy_scalars_are_missing(self, name: object) -> None:
        assert _messages(_body(name=name)) == {"name": "Name is required"}

    def test_short_description(self) -> None:
        assert _messages(_body(description="Too short")) == {
            "description": "Description must be at least 10 characters long"
        }

    @pytest.mark.parametrize(
        "price", [0, -1, -0.01, "abc", True, None, "inf", 10**400, -(10**400)]
    )
    def test_invalid_price(self, price: object) -> None:
        assert _messages(_body(price=price)) == {
            "price": "Price must be a positive number"
        }

    def test_missing_price(self) -> None:
        body = _body()
        del body["price"]
        assert _messages(body) == {"price": "Price is required"}

    def test_unknown_category(self) -> None:
        assert _messages(_body(category="side")) == {
            "category": "Category must be one of: appetizer, entree, dessert, beverage"
        }

    def test_empty_object_category_is_not_a_string(self) -> None:
        assert _messages(_body(category={})) == {"category": "Category must be a string"}

    def test_non_string_category(self) -> None:
        assert _messages(_body(category=["entree"])) == {
            "category": "Category must be a string"
        }

    def test_empty_ingredients(self) -> None:
        assert _messages(_body(ingredients=[])) == {
            "ingredients": "Ingredients must be an array with at least one item"
        }

    def test_ingredients_not_a_list(self) -> None:
        assert _messages(_body(ingredients="beef")) == {
            "ingredients": "Ingredients must be an array with at least one item"
        }

    def test_non_string_ingredient(self) -> None:
        assert _messages(_body(ingredients=["beef", 2])) == {
            "ingredients": "Each ingredient must be a string"
        }

    @pytest.mark.parametrize("available", ["yes", 2, None, "TRUE", " true ", "False"])
    def test_invalid_available(self, available: object) -> None:
        assert _messages(_body(available=available)) == {
            "available": "Available must be a boolean value"
        }


class TestAggregation:
    """Test that failures are collected across fields."""

    def test_empty_body_reports_every_required_field_in_order(self) -> None:
        errors = collect_errors({})
        assert [error["field"] for error in errors] == [
            "name",
            "description",
            "price",
            "category",
            "ingredients",
        ]
        assert all("value" not in error for error in errors)

    def test_submitted_value_is_echoed(self) -> None:
        (error,) = collect_errors(_body(price=-3))
        assert error == {
            "field": "price",
            "message": "Price must be a positive number",
            "value": -3,
        }

    def test_validate_raises_with_all_errors(self) -> None:
        with pytest.raises(MenuValidationError) as exc_info:
            validate_menu_item(_body(name="Ta", price=0, ingredients=[]))
        assert [error["field"] for error in exc_info.value.errors] == [
            "name",
            "price",
            "ingredients",
        ]

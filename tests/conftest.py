from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app import main
from app.menu import MenuStore


@pytest.fixture(autouse=True)
def menu_store() -> MenuStore:
    main.store = MenuStore.seeded()
    main.limiter.reset()
    return main.store


@pytest.fixture()
def client() -> TestClient:
    return TestClient(main.app)


@pytest.fixture()
def taco_payload() -> dict[str, object]:
    return {
        "name": "Taco",
        "description": "Crunchy beef taco with cheese",
        "price": 4.5,
        "category": "entree",
        "ingredients": ["beef", "taco shell", "cheese"],
    }

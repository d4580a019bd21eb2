from __future__ import annotations

import copy
from typing import Any

import pytest

from smartmenu.menu.models import Menu
from smartmenu.server import tools

MENU_DATA: list[dict[str, Any]] = [
    {
        "id": 1,
        "restaurantId": 100,
        "name": "Bistro",
        "cuisine": "French",
        "rating": 4.5,
        "numRatings": 120,
        "availableTimes": ["12:00-15:00", "18:00-22:00"],
        "categories": [
            {
                "name": "Starters",
                "items": [
                    {
                        "id": 10,
                        "name": "Soup",
                        "price": 8,
                        "description": "Seasonal vegetable soup",
                        "tags": ["vegan"],
                        "ageGroup": "Adults",
                        "rating": 4.2,
                    },
                    {
                        "id": 11,
                        "name": "Garlic Prawns",
                        "price": 12.5,
                        "description": "Pan-fried prawns with garlic butter",
                        "tags": ["seafood", "starter", "Spicy"],
                        "ageGroup": "Adults",
                        "rating": 4.7,
                    },
                ],
            },
            {
                "name": "Desserts",
                "items": [
                    {
                        "id": 12,
                        "name": "Chocolate Cake",
                        "price": 6,
                        "tags": ["vegetarian", "dessert"],
                        "ageGroup": "All",
                        "rating": 4.9,
                    },
                ],
            },
        ],
    },
    {
        "id": 2,
        "restaurantId": 100,
        "name": "Bistro Deluxe",
        "cuisine": "French",
        "rating": 4.8,
        "numRatings": 45,
        "availableTimes": ["18:00-23:00"],
        "categories": [
            {
                "name": "Mains",
                "items": [
                    {
                        "id": 20,
                        "name": "Kids Pasta",
                        "price": 8,
                        "description": "Pasta with tomato sauce",
                        "tags": ["vegetarian"],
                        "ageGroup": "Kids",
                        "rating": 4.0,
                    },
                    {
                        "id": 21,
                        "name": "Mushroom Soup",
                        "price": 9.5,
                        "description": None,
                        "tags": ["vegan", "gluten-free"],
                        "ageGroup": "Adults",
                        "rating": 4.4,
                    },
                ],
            },
        ],
    },
    {
        "id": 3,
        "restaurantId": 200,
        "name": "Sushi Place",
        "cuisine": "Japanese",
        "rating": 4.1,
        "numRatings": 30,
        "availableTimes": [],
        "categories": [],
    },
]

BISTRO_DATA: list[dict[str, Any]] = [
    {
        "id": 1,
        "restaurantId": 1,
        "name": "Bistro",
        "cuisine": "French",
        "rating": 4.0,
        "numRatings": 10,
        "availableTimes": [],
        "categories": [
            {
                "name": "Soups",
                "items": [
                    {
                        "id": 10,
                        "name": "Soup",
                        "price": 8,
                        "tags": ["vegan"],
                        "ageGroup": "Adults",
                        "rating": 4.0,
                    },
                ],
            },
        ],
    },
]


@pytest.fixture()
def menu_data() -> list[dict[str, Any]]:
    return copy.deepcopy(MENU_DATA)


@pytest.fixture()
def menus(menu_data: list[dict[str, Any]]) -> list[Menu]:
    return [Menu.model_validate(menu) for menu in menu_data]


@pytest.fixture()
def bistro_menus() -> list[Menu]:
    return [Menu.model_validate(menu) for menu in copy.deepcopy(BISTRO_DATA)]


@pytest.fixture()
def stub_fetch(monkeypatch, menus: list[Menu]) -> list[int]:
    """Serve the sample menus to the tool layer; returns the fetch call log."""
    calls: list[int] = []

    def fake_fetch() -> list[Menu]:
        calls.append(1)
        return menus

    monkeypatch.setattr(tools, "fetch_all_menus", fake_fetch)
    return calls


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"

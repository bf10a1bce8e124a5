"""Shared fixtures for unit tests: sample generated payloads."""

import pytest


def make_recipe_payload(name: str = "Aloo Paratha", **overrides) -> dict:
    payload = {
        "name": name,
        "description": "Whole wheat flatbread stuffed with spiced potato.",
        "cookingTime": "30 mins",
        "difficulty": "Medium",
        "calories": 320,
        "ingredients": ["Wheat flour", "Potato", "Green chilli", "Ghee"],
        "steps": ["Knead the dough", "Prepare the filling", "Roll and cook on a tawa"],
        "isVeg": True,
        "cuisine": "Punjabi",
        "imageKeyword": "aloo paratha",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def recipe_payload():
    return make_recipe_payload()


@pytest.fixture
def recipe_payloads():
    return [
        make_recipe_payload("Aloo Paratha"),
        make_recipe_payload("Paneer Bhurji", cookingTime="15 mins", difficulty="Easy", cuisine="North Indian"),
        make_recipe_payload("Masala Dosa", difficulty="Hard", cuisine="South Indian", calories=410.5),
    ]


@pytest.fixture
def weekly_plan_payload():
    days = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    return [
        {
            "day": day,
            "planetaryNote": f"{day} theme note.",
            "breakfast": make_recipe_payload(f"{day} Poha"),
            "lunch": make_recipe_payload(f"{day} Dal Chawal"),
            "dinner": make_recipe_payload(f"{day} Khichdi"),
        }
        for day in days
    ]

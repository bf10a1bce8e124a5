"""Unit tests for the Gemini response schemas."""

from google.genai import types

from src.models.schemas import (
    RECIPE_REQUIRED_FIELDS,
    RECIPE_SCHEMA,
    WEEKLY_PLAN_DAY_SCHEMA,
    array_of,
)


class TestRecipeSchema:
    def test_is_object(self):
        assert RECIPE_SCHEMA.type == types.Type.OBJECT

    def test_required_fields(self):
        assert set(RECIPE_SCHEMA.required) == {
            "name",
            "description",
            "cookingTime",
            "difficulty",
            "ingredients",
            "steps",
            "isVeg",
            "cuisine",
        }

    def test_optional_fields_are_declared_but_not_required(self):
        for field in ("calories", "imageKeyword"):
            assert field in RECIPE_SCHEMA.properties
            assert field not in RECIPE_REQUIRED_FIELDS

    def test_field_types(self):
        props = RECIPE_SCHEMA.properties

        assert props["calories"].type == types.Type.NUMBER
        assert props["isVeg"].type == types.Type.BOOLEAN
        assert props["ingredients"].type == types.Type.ARRAY
        assert props["ingredients"].items.type == types.Type.STRING
        assert props["steps"].items.type == types.Type.STRING

    def test_difficulty_enum(self):
        assert RECIPE_SCHEMA.properties["difficulty"].enum == ["Easy", "Medium", "Hard"]

    def test_image_keyword_description(self):
        description = RECIPE_SCHEMA.properties["imageKeyword"].description
        assert "keyword" in description
        assert "image" in description


class TestWeeklyPlanDaySchema:
    def test_required_fields(self):
        assert WEEKLY_PLAN_DAY_SCHEMA.required == ["day", "planetaryNote", "breakfast", "lunch", "dinner"]

    def test_meal_slots_are_recipes(self):
        for slot in ("breakfast", "lunch", "dinner"):
            assert WEEKLY_PLAN_DAY_SCHEMA.properties[slot] == RECIPE_SCHEMA


class TestArrayOf:
    def test_wraps_item_schema(self):
        schema = array_of(WEEKLY_PLAN_DAY_SCHEMA)

        assert schema.type == types.Type.ARRAY
        assert schema.items == WEEKLY_PLAN_DAY_SCHEMA

"""Response schemas sent to Gemini alongside every prompt.

These describe the JSON shape the model must emit. They are passed as
`response_schema` with `response_mime_type="application/json"`; the
client additionally validates parsed items against the pydantic models in
src.models.models.
"""

from google.genai import types


RECIPE_REQUIRED_FIELDS = [
    "name",
    "description",
    "cookingTime",
    "difficulty",
    "ingredients",
    "steps",
    "isVeg",
    "cuisine",
]

WEEKLY_PLAN_DAY_REQUIRED_FIELDS = ["day", "planetaryNote", "breakfast", "lunch", "dinner"]


def _string_list() -> types.Schema:
    return types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING))


RECIPE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "name": types.Schema(type=types.Type.STRING),
        "description": types.Schema(type=types.Type.STRING),
        "cookingTime": types.Schema(type=types.Type.STRING),
        "difficulty": types.Schema(type=types.Type.STRING, enum=["Easy", "Medium", "Hard"]),
        "calories": types.Schema(type=types.Type.NUMBER),
        "ingredients": _string_list(),
        "steps": _string_list(),
        "isVeg": types.Schema(type=types.Type.BOOLEAN),
        "cuisine": types.Schema(type=types.Type.STRING),
        "imageKeyword": types.Schema(
            type=types.Type.STRING,
            description=(
                "A simple english keyword suitable for an image lookup of this dish, "
                "e.g. 'paneer butter masala'"
            ),
        ),
    },
    required=RECIPE_REQUIRED_FIELDS,
)

WEEKLY_PLAN_DAY_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "day": types.Schema(type=types.Type.STRING),
        "planetaryNote": types.Schema(type=types.Type.STRING),
        "breakfast": RECIPE_SCHEMA,
        "lunch": RECIPE_SCHEMA,
        "dinner": RECIPE_SCHEMA,
    },
    required=WEEKLY_PLAN_DAY_REQUIRED_FIELDS,
)


def array_of(item_schema: types.Schema) -> types.Schema:
    """Wrap an object schema as the top-level array every operation requests."""
    return types.Schema(type=types.Type.ARRAY, items=item_schema)

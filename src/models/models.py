"""Data models for the Indian Meal Planner.

Defines Pydantic models for the records exchanged with the Gemini generation
client. Attributes are snake_case in Python and carry the camelCase names of
the generated JSON as aliases, so a parsed record dumps back to the exact
payload it came from:

    recipe.model_dump(mode="json", by_alias=True, exclude_none=True)

Recipe and WeeklyPlanDay keep any extra fields the model emits beyond the
schema, and integer calories stay integers.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class SpiceLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Cuisine(str, Enum):
    """Regional cuisines offered as filter choices. Free text is also accepted."""

    NORTH_INDIAN = "North Indian"
    SOUTH_INDIAN = "South Indian"
    MAHARASHTRIAN = "Maharashtrian"
    BENGALI = "Bengali"
    GUJARATI = "Gujarati"
    PUNJABI = "Punjabi"
    ASSAMESE = "Assamese"
    INDO_CHINESE = "Indo-Chinese"


class MealType(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"
    TIFFIN = "Tiffin"


class Recipe(BaseModel):
    """A single dish suggestion as generated by the model.

    Required fields mirror the response schema sent with every request;
    calories, image_keyword and id are optional.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    name: str
    description: str
    cooking_time: str = Field(alias="cookingTime", description='Free-text duration, e.g. "20 mins"')
    difficulty: Difficulty
    calories: Optional[Union[int, float]] = Field(None, description="Energy per serving in kcal")
    ingredients: list[str]
    steps: list[str]
    is_veg: bool = Field(alias="isVeg")
    cuisine: str
    image_keyword: Optional[str] = Field(None, alias="imageKeyword")


class WeeklyPlanDay(BaseModel):
    """One day of a 7-day plan: a themed note and one recipe per meal slot."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    day: str
    planetary_note: str = Field(alias="planetaryNote")
    breakfast: Recipe
    lunch: Recipe
    dinner: Recipe

    def meals(self) -> list[tuple[str, Recipe]]:
        """Return the meal slots in serving order."""
        return [("Breakfast", self.breakfast), ("Lunch", self.lunch), ("Dinner", self.dinner)]


class SearchFilters(BaseModel):
    """User-chosen request parameters for a recipe search.

    Empty ingredients, cuisine and meal_type mean "unconstrained".
    time_limit is a string-encoded minutes threshold ("15", "30", "45", "60").
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    is_veg: bool = Field(True, alias="isVeg")
    ingredients: str = ""
    time_limit: str = Field("30", alias="timeLimit")
    spice_level: SpiceLevel = Field(SpiceLevel.MEDIUM, alias="spiceLevel")
    cuisine: str = ""
    meal_type: str = Field("", alias="mealType")


class FailureKind(str, Enum):
    """Why a generation call produced no data."""

    TRANSPORT = "transport"
    MALFORMED = "malformed"
    SHAPE_MISMATCH = "shape_mismatch"


T = TypeVar("T")


class GenerationResult(BaseModel, Generic[T]):
    """Outcome of one generation call.

    Either ok (items may legitimately be empty) or failed with a kind and
    a human-readable reason. Failed results never carry items.
    """

    items: list[T] = Field(default_factory=list)
    failure: Optional[FailureKind] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, items: list) -> "GenerationResult":
        return cls(items=items)

    @classmethod
    def failed(cls, failure: FailureKind, reason: str) -> "GenerationResult":
        return cls(failure=failure, reason=reason)

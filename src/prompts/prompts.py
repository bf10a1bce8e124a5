"""Prompt builders for the Gemini recipe generation client.

Each builder turns caller-supplied parameters into the natural-language
prompt for one operation. The structural contract lives in the response
schema (src.models.schemas), so prompts only describe content.

Blank search filters degrade to the wildcard "Any" instead of failing.
"""

from src.models.models import SearchFilters

ANY = "Any"

WEEK_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def diet_label(is_veg: bool) -> str:
    """Veg constraint wording used by the search prompts."""
    return "Vegetarian ONLY" if is_veg else "Non-Veg allowed"


def _or_any(value: str) -> str:
    return value.strip() if value and value.strip() else ANY


def build_search_prompt(filters: SearchFilters, count: int = 6) -> str:
    """Build the filtered search prompt.

    Args:
        filters: Current search filters.
        count: Number of distinct recipes to request.

    Returns:
        Prompt interpolating every filter, with "Any" for blank fields.
    """
    return (
        f"Suggest {count} distinct Indian recipes based on these parameters:\n"
        f"- Ingredients available: {_or_any(filters.ingredients)}\n"
        f"- Meal Type: {_or_any(filters.meal_type)}\n"
        f"- Time Available: {filters.time_limit} minutes\n"
        f"- Spice Level: {filters.spice_level.value}\n"
        f"- Cuisine Preference: {_or_any(filters.cuisine)}\n"
        f"- Veg Preference: {diet_label(filters.is_veg)}\n"
        "\n"
        "Ensure the recipes are authentic and diverse."
    )


def build_quick_prompt(is_veg: bool, count: int = 5) -> str:
    """Build the "I have nothing" prompt. Only the veg constraint applies."""
    return (
        f"I have almost no ingredients. Suggest {count} ultra-simple Indian meals "
        "(like Maggi variations, Egg scramble, Aloo fry, Dal chawal, Quick snacks) "
        "using only basic pantry staples.\n"
        f"Strictly adhere to this veg preference: {diet_label(is_veg)}."
    )


def build_weekly_plan_prompt(is_veg: bool) -> str:
    """Build the 7-day plan prompt with day-of-week dietary theming."""
    diet = "Vegetarian" if is_veg else "Non-Vegetarian/Mixed"
    return (
        f"Generate a 7-day Indian meal plan ({WEEK_DAYS[0]} to {WEEK_DAYS[-1]}).\n"
        "\n"
        "Constraint:\n"
        f"- Diet: {diet}\n"
        "- Integration: Incorporate Ayurvedic/Astrological dietary principles for days of the week "
        "(e.g., White food on Monday for Moon, Red lentils/protein on Tuesday for Mars, "
        "Green/Easy digestion on Wednesday for Mercury, Yellow/Heavy meal on Thursday for Jupiter, etc.).\n"
        "- Balance: Ensure nutritional balance.\n"
        "\n"
        "For each day, provide a short 'planetaryNote' explaining why these foods were chosen based on the day.\n"
        "Provide detailed recipe objects for Breakfast, Lunch, and Dinner."
    )


def build_trending_prompt(count: int = 4) -> str:
    """Build the fixed trending prompt. No user filters apply."""
    return (
        f"Generate {count} currently trending or seasonal Indian recipes popular right now "
        "(e.g. winter specialties or monsoon snacks depending on general seasonality context). "
        "Make them diverse."
    )

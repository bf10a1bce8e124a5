#!/usr/bin/env python3
"""Ad hoc terminal runner for the Indian Meal Planner.

Calls one generation operation and renders the result without any UI.

Usage:
    python query.py trending
    python query.py search --ingredients "Potato, Paneer" --time 30 --spice Medium
    python query.py search --cuisine "South Indian" --meal Breakfast --nonveg
    python query.py nothing              # "I have nothing" quick mode
    python query.py plan --nonveg        # 7-day plan
    python query.py --debug trending     # Also print the raw JSON

Features:
- Recipe cards with cuisine, time, difficulty, calories and veg marker
- Weekly plan table with the planetary note for each day
- Neutral empty state, plus the failure reason when the call failed
"""

import asyncio
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.models.models import GenerationResult, Recipe, SearchFilters, SpiceLevel, WeeklyPlanDay
from src.services.gemini_service import RecipeGenerationClient
from src.utils.config import config
from src.utils.logger import logger

console = Console()

EMPTY_STATE = "Ready to cook? Enter ingredients or pick a quick option to get suggestions."

COMMANDS = ("trending", "search", "nothing", "plan")

# value flag -> SearchFilters field
FILTER_FLAGS = {
    "--ingredients": "ingredients",
    "--time": "time_limit",
    "--spice": "spice_level",
    "--cuisine": "cuisine",
    "--meal": "meal_type",
}


def veg_marker(is_veg: bool) -> str:
    return "[green]● Veg[/green]" if is_veg else "[red]▲ Non-Veg[/red]"


def render_recipe_card(recipe: Recipe) -> Panel:
    """Build a compact card for one recipe."""
    calories = f"{recipe.calories:.0f} kcal" if recipe.calories is not None else "? kcal"
    meta = (
        f"{veg_marker(recipe.is_veg)}  {recipe.cuisine}  ⏱ {recipe.cooking_time}  "
        f"{recipe.difficulty.value}  🔥 {calories}"
    )
    body = f"{meta}\n\n{recipe.description}"
    return Panel(body, title=f"[bold]{recipe.name}[/bold]", title_align="left", border_style="orange3")


def render_recipe_detail(recipe: Recipe) -> None:
    """Print the full recipe: ingredients and numbered steps."""
    console.print(render_recipe_card(recipe))
    console.print("[bold]Ingredients[/bold]")
    for ingredient in recipe.ingredients:
        console.print(f"  • {ingredient}")
    console.print("[bold]Steps[/bold]")
    for number, step in enumerate(recipe.steps, start=1):
        console.print(f"  {number}. {step}")
    console.print()


def render_weekly_plan(plan: list[WeeklyPlanDay]) -> Table:
    """Build a table with one row per day."""
    table = Table(title="Weekly Meal Plan", show_lines=True)
    table.add_column("Day", style="bold")
    table.add_column("Note", style="italic")
    table.add_column("Breakfast")
    table.add_column("Lunch")
    table.add_column("Dinner")
    for day in plan:
        table.add_row(day.day, day.planetary_note, *(recipe.name for _, recipe in day.meals()))
    return table


def render_empty(result: GenerationResult) -> None:
    console.print(f"[dim]{EMPTY_STATE}[/dim]")
    if not result.ok:
        console.print(f"[yellow]Request failed ({result.failure.value}): {result.reason}[/yellow]")


def parse_args(argv: list[str]) -> tuple[str, SearchFilters, bool, bool]:
    """Parse command, filters, debug and detail flags from argv.

    Raises:
        ValueError: Unknown command or flag, or a flag missing its value.
    """
    debug = False
    detail = False
    command = None
    values: dict[str, object] = {}

    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "--debug":
            debug = True
        elif arg == "--detail":
            detail = True
        elif arg == "--nonveg":
            values["is_veg"] = False
        elif arg in FILTER_FLAGS:
            idx += 1
            if idx >= len(argv):
                raise ValueError(f"{arg} flag requires a value")
            values[FILTER_FLAGS[arg]] = argv[idx]
        elif arg.startswith("--"):
            raise ValueError(f"Unknown flag: {arg}")
        elif command is None:
            command = arg
        else:
            raise ValueError(f"Unexpected argument: {arg}")
        idx += 1

    if command not in COMMANDS:
        raise ValueError(f"Command must be one of {', '.join(COMMANDS)}, got: {command}")

    if "spice_level" in values:
        values["spice_level"] = SpiceLevel(str(values["spice_level"]).capitalize())

    return command, SearchFilters(**values), debug, detail


async def execute(command: str, filters: SearchFilters, client: RecipeGenerationClient) -> GenerationResult:
    if command == "trending":
        return await client.get_trending_recipes_result()
    if command == "plan":
        return await client.generate_weekly_plan_result(filters.is_veg)
    return await client.suggest_recipes_result(filters, quick_mode=command == "nothing")


def run_query(command: str, filters: SearchFilters, debug: bool = False, detail: bool = False) -> None:
    """Run one operation and print the rendered result."""
    if not config.has_api_key:
        logger.warning("GEMINI_API_KEY is not set; requests will fail")

    client = RecipeGenerationClient()
    with console.status("Thinking..."):
        result = asyncio.run(execute(command, filters, client))

    if debug:
        console.print("[bold cyan]Debug Mode: Raw Items[/bold cyan]")
        console.print_json(
            data=[item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in result.items]
        )

    if not result.items:
        render_empty(result)
        return

    if command == "plan":
        console.print(render_weekly_plan(result.items))
        if detail:
            for day in result.items:
                console.rule(day.day)
                for slot, recipe in day.meals():
                    console.print(f"[bold orange3]{slot}[/bold orange3]")
                    render_recipe_detail(recipe)
        return

    for recipe in result.items:
        if detail:
            render_recipe_detail(recipe)
        else:
            console.print(render_recipe_card(recipe))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python query.py [--debug] [--detail] <trending|search|nothing|plan> [filters]")
        print("")
        print("Filters: --ingredients TEXT --time MINUTES --spice Low|Medium|High")
        print("         --cuisine TEXT --meal TEXT --nonveg")
        sys.exit(1)

    try:
        command, filters, debug_mode, detail_mode = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        run_query(command, filters, debug=debug_mode, detail=detail_mode)
    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        sys.exit(0)

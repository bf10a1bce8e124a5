"""Gemini recipe generation client.

The single point of contact with the Gemini API. Every operation is one
request/response round trip:

1. Build a prompt from the caller's parameters (src.prompts.prompts)
2. Call generate_content with JSON output constrained to an array schema
3. Parse the response text (lenient JSON array extraction)
4. Validate each item against the pydantic record model

Two forms are exposed per operation:
- *_result(): returns a GenerationResult that distinguishes "nothing found"
  (ok, empty items) from a failure (transport / malformed / shape mismatch)
- the plain form: returns result.items, i.e. an empty list on any failure.
  Never raises.

The client holds no state between calls besides its injected settings. No
retries, no caching, no timeout beyond the SDK transport defaults.
"""

import asyncio
import json
import re
from typing import Any, Optional

from google import genai
from google.genai import types
from pydantic import BaseModel, TypeAdapter, ValidationError

from src.models.models import GenerationResult, Recipe, SearchFilters, WeeklyPlanDay
from src.models.schemas import RECIPE_SCHEMA, WEEKLY_PLAN_DAY_SCHEMA, array_of
from src.prompts.prompts import (
    build_quick_prompt,
    build_search_prompt,
    build_trending_prompt,
    build_weekly_plan_prompt,
)
from src.services.exceptions import (
    GenerationError,
    MalformedResponseError,
    ShapeMismatchError,
    TransportError,
)
from src.utils.config import config
from src.utils.logger import logger

SUGGEST_COUNT = 6
QUICK_COUNT = 5
TRENDING_COUNT = 4
WEEK_LENGTH = 7


def parse_json_array(response_text: Optional[str]) -> list[Any]:
    """Parse the response text into a JSON array.

    Tries a direct json.loads first, then extracts the outermost [...] from
    surrounding text (e.g. a markdown code fence). Empty text counts as "[]".

    Args:
        response_text: Raw response text from Gemini.

    Returns:
        The parsed list (possibly empty).

    Raises:
        MalformedResponseError: No valid JSON found.
        ShapeMismatchError: Valid JSON that is not an array.
    """
    text = (response_text or "").strip() or "[]"

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as direct_error:
        match = re.search(r"\[.*\]", text, re.DOTALL)
        if not match:
            raise MalformedResponseError(f"Response is not valid JSON: {direct_error}") from direct_error
        try:
            parsed = json.loads(match.group())
        except (ValueError, RecursionError) as e:
            raise MalformedResponseError(f"Response is not valid JSON: {e}") from e
    except (ValueError, RecursionError) as e:
        # Oversized integer literals and nesting beyond the recursion limit
        raise MalformedResponseError(f"Response is not decodable JSON: {e}") from e

    if not isinstance(parsed, list):
        raise ShapeMismatchError(f"Expected a JSON array, got {type(parsed).__name__}")
    return parsed


def validate_items(raw_items: list[Any], item_model: type[BaseModel]) -> list[BaseModel]:
    """Validate parsed items against a record model. All or nothing.

    Raises:
        ShapeMismatchError: Any item is missing a required field or has a wrong type.
    """
    try:
        return TypeAdapter(list[item_model]).validate_python(raw_items)
    except ValidationError as e:
        raise ShapeMismatchError(
            f"Response does not match {item_model.__name__} schema "
            f"({e.error_count()} error(s)): {e.errors()[0]['loc']} {e.errors()[0]['msg']}"
        ) from e


class RecipeGenerationClient:
    """Client for the three recipe generation operations.

    Args:
        api_key: Gemini credential. Defaults to config.GEMINI_API_KEY. Not
            checked here; a missing key fails the call like any transport error.
        model: Model name. Defaults to config.GEMINI_MODEL.
        temperature: Optional sampling temperature. Defaults to config.TEMPERATURE.
        client: Pre-built genai.Client (or a substitute exposing
            models.generate_content). When omitted a fresh client is created
            per call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        client: Optional[Any] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        self.model = model or config.GEMINI_MODEL
        self.temperature = temperature if temperature is not None else config.TEMPERATURE
        self._client = client

    def _generation_config(self, item_schema: types.Schema) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=array_of(item_schema),
            temperature=self.temperature,
        )

    def _generate(self, prompt: str, item_schema: types.Schema) -> Optional[str]:
        """Blocking Gemini call. Any SDK or network failure becomes TransportError."""
        try:
            client = self._client or genai.Client(api_key=self.api_key)
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._generation_config(item_schema),
            )
            return response.text
        except Exception as e:
            raise TransportError(f"Gemini request failed: {e}") from e

    async def _run(
        self,
        operation: str,
        prompt: str,
        item_schema: types.Schema,
        item_model: type[BaseModel],
        expected_count: int,
    ) -> GenerationResult:
        log_context = {"operation": operation, "model": self.model}
        logger.debug(f"Requesting {expected_count} item(s)", extra=log_context)

        try:
            response_text = await asyncio.to_thread(self._generate, prompt, item_schema)
            items = validate_items(parse_json_array(response_text), item_model)
        except TransportError as e:
            logger.error(f"Generation failed: {e}", extra=log_context)
            return GenerationResult[item_model].failed(e.kind, str(e))
        except GenerationError as e:
            logger.warning(f"Unusable response: {e}", extra=log_context)
            return GenerationResult[item_model].failed(e.kind, str(e))

        if len(items) != expected_count:
            logger.debug(
                f"Model returned {len(items)} item(s), {expected_count} requested",
                extra=log_context,
            )
        logger.info(f"Received {len(items)} item(s)", extra=log_context)
        return GenerationResult[item_model].success(items)

    async def suggest_recipes_result(
        self, filters: SearchFilters, quick_mode: bool = False
    ) -> GenerationResult[Recipe]:
        """Suggest recipes for the given filters.

        In quick mode only filters.is_veg is used and QUICK_COUNT ultra-simple
        pantry meals are requested; otherwise SUGGEST_COUNT recipes honoring
        every filter.
        """
        if quick_mode:
            count = QUICK_COUNT
            prompt = build_quick_prompt(filters.is_veg, count=count)
        else:
            count = SUGGEST_COUNT
            prompt = build_search_prompt(filters, count=count)

        operation = "quick_recipes" if quick_mode else "suggest_recipes"
        return await self._run(operation, prompt, RECIPE_SCHEMA, Recipe, count)

    async def generate_weekly_plan_result(self, is_veg: bool) -> GenerationResult[WeeklyPlanDay]:
        """Generate a Monday to Sunday plan. Days are returned in the order emitted."""
        prompt = build_weekly_plan_prompt(is_veg)
        return await self._run("weekly_plan", prompt, WEEKLY_PLAN_DAY_SCHEMA, WeeklyPlanDay, WEEK_LENGTH)

    async def get_trending_recipes_result(self) -> GenerationResult[Recipe]:
        """Fetch currently trending or seasonal recipes. No filters apply."""
        count = TRENDING_COUNT
        prompt = build_trending_prompt(count=count)
        return await self._run("trending_recipes", prompt, RECIPE_SCHEMA, Recipe, count)

    async def suggest_recipes(self, filters: SearchFilters, quick_mode: bool = False) -> list[Recipe]:
        """Fail-soft form of suggest_recipes_result: empty list on any failure."""
        return (await self.suggest_recipes_result(filters, quick_mode)).items

    async def generate_weekly_plan(self, is_veg: bool) -> list[WeeklyPlanDay]:
        """Fail-soft form of generate_weekly_plan_result: empty list on any failure."""
        return (await self.generate_weekly_plan_result(is_veg)).items

    async def get_trending_recipes(self) -> list[Recipe]:
        """Fail-soft form of get_trending_recipes_result: empty list on any failure."""
        return (await self.get_trending_recipes_result()).items

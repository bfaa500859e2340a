"""
Nutrition lookup tools for the food info agent.
These tools give the agent access to the USDA FoodData Central search API and
normalize its nutrient lists into a fixed summary.
"""

import logging
from typing import List, Optional, Union

import httpx
from pydantic import ValidationError

from base.errors import NoResultsError, UpstreamLookupError
from base.models import (
    FetchCapability,
    InboundMessage,
    NutrientRecord,
    NutritionSummary,
    SearchResponse,
)
from utils.config import Settings
from utils.message_utils import extract_query_text

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "apple"
MINERAL_NAMES = ("Iron", "Calcium", "Potassium", "Magnesium", "Zinc", "Phosphorus")

LOW_CALORIE_THRESHOLD = 50
LOW_CALORIE_BENEFIT = "Low in calories, good for weight management"
VITAMIN_C_BENEFIT = "Rich in Vitamin C, supports immune system"
POTASSIUM_BENEFIT = "High in Potassium, supports heart health"
CALCIUM_BENEFIT = "Contains Calcium, supports bone health"
FALLBACK_BENEFIT = "General source of nutrients and minerals"


class USDAClient:
    """Client for the USDA FoodData Central search endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.nal.usda.gov/fdc/v1",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "USDAClient":
        return cls(
            api_key=settings.usda_api_key,
            base_url=settings.usda_base_url,
            timeout=settings.usda_timeout,
        )

    async def search(self, query: str) -> SearchResponse:
        """
        Search foods matching a free-text query, one candidate at most.

        Args:
            query: Free-text food description (e.g. "banana")

        Returns:
            Parsed search payload

        Raises:
            UpstreamLookupError: On transport failure, non-2xx status, or a
                payload that is not a search response
        """
        params = {"query": query, "pageSize": 1, "api_key": self.api_key}
        logger.info(f"Searching FoodData Central for: {query}")

        # Fresh client per call, nothing pooled across requests
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(f"{self.base_url}/foods/search", params=params)
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPStatusError as e:
                raise UpstreamLookupError(
                    f'Nutrition search for "{query}" failed with status {e.response.status_code}',
                    query=query
                ) from e
            except httpx.HTTPError as e:
                raise UpstreamLookupError(
                    f'Nutrition search for "{query}" failed: {e}',
                    query=query
                ) from e
            except ValueError as e:
                raise UpstreamLookupError(
                    f'Nutrition search for "{query}" returned invalid JSON',
                    query=query
                ) from e

        try:
            return SearchResponse.model_validate(payload)
        except ValidationError as e:
            raise UpstreamLookupError(
                f'Nutrition search for "{query}" returned an unexpected payload',
                query=query
            ) from e


def format_number(value: Union[int, float]) -> Union[int, float]:
    """Drop the fractional part of integral floats so 52.0 renders as 52."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _first_value(records: List[NutrientRecord], needle: str) -> Union[int, float]:
    for record in records:
        if needle in record.nutrient_name.lower():
            return format_number(record.value)
    return 0


def _describe(record: NutrientRecord) -> str:
    return f"{record.nutrient_name}: {format_number(record.value)}{record.unit_name}"


def _health_benefits(calories, vitamins: List[str], minerals: List[str]) -> List[str]:
    benefits = []
    if calories < LOW_CALORIE_THRESHOLD:
        benefits.append(LOW_CALORIE_BENEFIT)
    if any("Vitamin C" in v for v in vitamins):
        benefits.append(VITAMIN_C_BENEFIT)
    if any("Potassium" in m for m in minerals):
        benefits.append(POTASSIUM_BENEFIT)
    if any("Calcium" in m for m in minerals):
        benefits.append(CALCIUM_BENEFIT)
    return benefits or [FALLBACK_BENEFIT]


def extract_nutrition(food_name: str, records: List[NutrientRecord]) -> NutritionSummary:
    """
    Normalize a food's nutrient records into a NutritionSummary.

    Macronutrients always carry a " g" suffix, whatever unit the dataset
    declares. Missing nutrients default to 0 and empty vitamin or mineral
    lists are left out of the summary.

    Args:
        food_name: Description of the matched food
        records: The food's nutrient records, in dataset order

    Returns:
        Frozen NutritionSummary
    """
    calories = _first_value(records, "energy")
    protein = f"{_first_value(records, 'protein')} g"
    fat = f"{_first_value(records, 'total lipid')} g"
    carbs = f"{_first_value(records, 'carbohydrate')} g"

    vitamins = [_describe(r) for r in records if r.nutrient_name.startswith("Vitamin")]
    minerals = [
        _describe(r) for r in records
        if any(name in r.nutrient_name for name in MINERAL_NAMES)
    ]

    return NutritionSummary(
        food_name=food_name,
        calories=calories,
        protein=protein,
        fat=fat,
        carbs=carbs,
        vitamins=vitamins or None,
        minerals=minerals or None,
        health_benefits=_health_benefits(calories, vitamins, minerals),
    )


async def lookup_nutrition(query: str, client: USDAClient) -> NutritionSummary:
    """
    Search for a food and summarize the first match.

    Args:
        query: Free-text food description
        client: USDA search client

    Returns:
        NutritionSummary for the first candidate food

    Raises:
        NoResultsError: If the search yields no candidate foods
        UpstreamLookupError: If the search itself fails
    """
    search = await client.search(query)
    if not search.foods:
        raise NoResultsError(query)

    food = search.foods[0]
    logger.info(
        f"Matched '{food.description}' (fdcId={food.fdc_id}) "
        f"with {len(food.food_nutrients)} nutrients"
    )
    return extract_nutrition(food.description, food.food_nutrients)


def build_fetch_capability(messages: List[InboundMessage], client: USDAClient) -> FetchCapability:
    """
    Build the zero-argument data provider handed to the agent.

    The query is the text of the first part of the first message, or
    DEFAULT_QUERY when that part is missing, empty, or not text.

    Args:
        messages: Inbound protocol messages of the request
        client: USDA search client

    Returns:
        Async callable returning a NutritionSummary
    """
    query = extract_query_text(messages) or DEFAULT_QUERY

    async def fetch_nutrition() -> NutritionSummary:
        return await lookup_nutrition(query, client)

    return fetch_nutrition

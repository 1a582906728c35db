"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from macro_lookup.adapters.fdc_client import FdcClient
from macro_lookup.config import Settings
from macro_lookup.services.mass import MassResolver
from macro_lookup.services.nutrition import NutritionService
from macro_lookup.services.report import ReportService


def search_hit(
    fdc_id: int,
    description: str,
    *,
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
) -> dict[str, object]:
    """Build a search result in the FDC /foods/search shape."""
    return {
        "fdcId": fdc_id,
        "description": description,
        "dataType": "SR Legacy",
        "foodNutrients": [
            {
                "nutrientId": 1008,
                "nutrientName": "Energy",
                "nutrientNumber": "208",
                "unitName": "KCAL",
                "value": calories,
            },
            {
                "nutrientId": 1062,
                "nutrientName": "Energy",
                "nutrientNumber": "268",
                "unitName": "kJ",
                "value": calories * 4.184,
            },
            {
                "nutrientId": 1003,
                "nutrientName": "Protein",
                "nutrientNumber": "203",
                "unitName": "G",
                "value": protein,
            },
            {
                "nutrientId": 1005,
                "nutrientName": "Carbohydrate, by difference",
                "nutrientNumber": "205",
                "unitName": "G",
                "value": carbs,
            },
            {
                "nutrientId": 1004,
                "nutrientName": "Total lipid (fat)",
                "nutrientNumber": "204",
                "unitName": "G",
                "value": fat,
            },
        ],
    }


def default_foods() -> dict[str, dict[str, object]]:
    return {
        "ground beef": search_hit(
            174036, "Ground beef", calories=254, protein=26, carbs=0, fat=20
        ),
        "eggs": search_hit(171287, "Eggs", calories=143, protein=13, carbs=1.1, fat=11),
        "apple": search_hit(
            171688, "Apple", calories=52, protein=0.3, carbs=14, fat=0.2
        ),
        "slices bread": search_hit(
            172686, "Bread, white", calories=266, protein=8.9, carbs=49, fat=3.3
        ),
        "bread": search_hit(
            172686, "Bread, white", calories=266, protein=8.9, carbs=49, fat=3.3
        ),
    }


def default_details() -> dict[int, dict[str, object]]:
    return {
        172686: {
            "fdcId": 172686,
            "description": "Bread, white",
            "foodPortions": [
                {
                    "amount": 1.0,
                    "modifier": "oz",
                    "measureUnit": {"name": "undetermined"},
                    "gramWeight": 28.35,
                },
                {
                    "portionDescription": "1 slice",
                    "gramWeight": 25.0,
                },
                {
                    "portionDescription": "1 slice, large",
                    "gramWeight": 32.0,
                },
            ],
        },
    }


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses keyed by query."""

    foods: dict[str, dict[str, object]] = field(default_factory=default_foods)
    details: dict[int, dict[str, object]] = field(default_factory=default_details)
    failing_queries: set[str] = field(default_factory=set)
    failing_food_ids: set[int] = field(default_factory=set)
    search_calls: list[str] = field(default_factory=list)
    food_calls: list[int] = field(default_factory=list)

    async def search_foods(
        self, query: str, page_size: int = 1, data_types: list[str] | None = None
    ) -> dict[str, object]:
        self.search_calls.append(query)
        if query.lower() in self.failing_queries:
            raise httpx.ConnectError("connection refused")
        food = self.foods.get(query.lower())
        return {"foods": [food] if food else []}

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls.append(fdc_id)
        if fdc_id in self.failing_food_ids:
            raise httpx.ConnectError("portion fetch down")
        return self.details.get(fdc_id, {"fdcId": fdc_id, "foodPortions": []})


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, fdc_api_key="fdc-key")


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def nutrition_service(fdc_client: FakeFdcClient) -> NutritionService:
    return NutritionService(fdc_client=fdc_client)


@pytest.fixture
def report_service(nutrition_service: NutritionService) -> ReportService:
    return ReportService(
        nutrition_service=nutrition_service,
        mass_resolver=MassResolver(portion_source=nutrition_service),
    )

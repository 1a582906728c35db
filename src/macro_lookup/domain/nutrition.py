"""Nutrition domain models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NutrientKey:
    """Identifiers FoodData Central uses for one nutrient."""

    ids: frozenset[int]
    numbers: frozenset[str]
    names: frozenset[str]
    unit_name: str


class NutrientKind(Enum):
    """Nutrients tracked per food (single source of truth for FDC mapping)."""

    CALORIES = NutrientKey(
        ids=frozenset({1008, 2047, 2048}),
        numbers=frozenset({"208", "957", "958"}),
        names=frozenset(
            {
                "energy",
                "energy (atwater general factors)",
                "energy (atwater specific factors)",
            }
        ),
        unit_name="kcal",
    )
    PROTEIN = NutrientKey(
        ids=frozenset({1003}),
        numbers=frozenset({"203"}),
        names=frozenset({"protein"}),
        unit_name="g",
    )
    CARBS = NutrientKey(
        ids=frozenset({1005}),
        numbers=frozenset({"205"}),
        names=frozenset({"carbohydrate, by difference"}),
        unit_name="g",
    )
    FAT = NutrientKey(
        ids=frozenset({1004}),
        numbers=frozenset({"204"}),
        names=frozenset({"total lipid (fat)"}),
        unit_name="g",
    )


@dataclass(frozen=True)
class NutrientBaseline:
    """Macronutrients per 100 g of a matched food."""

    display_name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class FoodMatch:
    """Best FDC search hit for a query."""

    fdc_id: int
    baseline: NutrientBaseline
    data_type: str | None = None


@dataclass(frozen=True)
class PortionHint:
    """Food-specific household measure with its weight in grams."""

    description: str
    gram_weight: float


@dataclass(frozen=True)
class ScaledResult:
    """Macros for the requested amount, rounded to whole units."""

    name: str
    grams: float
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class Totals:
    """Running sum of scaled results."""

    calories: int = 0
    protein_g: int = 0
    carbs_g: int = 0
    fat_g: int = 0
    count: int = 0

    def add(self, result: ScaledResult) -> "Totals":
        """Return totals including one more result."""
        return Totals(
            calories=self.calories + result.calories,
            protein_g=self.protein_g + result.protein_g,
            carbs_g=self.carbs_g + result.carbs_g,
            fat_g=self.fat_g + result.fat_g,
            count=self.count + 1,
        )

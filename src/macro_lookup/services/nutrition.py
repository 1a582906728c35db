"""Nutrition service integrating USDA FDC."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from macro_lookup.adapters.fdc_client import FdcClient
from macro_lookup.domain.nutrition import (
    FoodMatch,
    NutrientBaseline,
    NutrientKind,
    PortionHint,
)
from macro_lookup.errors import LookupTransportError

_PREFERRED_ENERGY_ID = 1008
_GRAM_UNITS = {"g", "grm"}
_UNSPECIFIED_PORTION = "quantity not specified"

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionService:
    """Service for per-100g nutrient and portion lookups."""

    fdc_client: FdcClient
    data_types: list[str] | None = None

    async def find_food(self, query: str) -> FoodMatch | None:
        """Return the best FDC match for a query, or None when nothing matches."""
        payload = await self._call(
            lambda: self.fdc_client.search_foods(query, data_types=self.data_types),
            action="search",
        )
        foods = payload.get("foods") or []
        _logger.debug("Nutrition search FDC: query=%s results=%s", query, len(foods))
        if not foods:
            return None
        food = foods[0]
        return FoodMatch(
            fdc_id=int(food["fdcId"]),
            baseline=extract_baseline(
                str(food.get("description") or query),
                food.get("foodNutrients") or [],
            ),
            data_type=food.get("dataType"),
        )

    async def portion_hints(self, fdc_id: int) -> list[PortionHint]:
        """Return household portions with gram weights for a food."""
        payload = await self._call(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        hints = _extract_portions(payload)
        _logger.debug("Nutrition portions FDC: fdc_id=%s hints=%s", fdc_id, len(hints))
        return hints

    async def _call(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call the FDC client, wrapping transport failures."""
        try:
            return await func()
        except (httpx.HTTPError, ValueError) as exc:
            status_code = _status_code_from_exception(exc)
            _logger.warning(
                "Nutrition %s failed (status=%s): %s", action, status_code, exc
            )
            raise LookupTransportError(action, status_code, str(exc)) from exc


def extract_baseline(
    display_name: str, food_nutrients: list[dict[str, object]]
) -> NutrientBaseline:
    """Map raw FDC nutrient rows to a per-100g baseline."""
    values: dict[NutrientKind, float] = {}
    energy_id: object = None
    for row in food_nutrients:
        kind, nutrient_id, amount = _classify_nutrient(row)
        if kind is None or amount is None:
            continue
        if kind is NutrientKind.CALORIES:
            if kind in values and energy_id == _PREFERRED_ENERGY_ID:
                continue
            energy_id = nutrient_id
        elif kind in values:
            continue
        values[kind] = amount

    return NutrientBaseline(
        display_name=display_name,
        calories=values.get(NutrientKind.CALORIES, 0.0),
        protein_g=values.get(NutrientKind.PROTEIN, 0.0),
        carbs_g=values.get(NutrientKind.CARBS, 0.0),
        fat_g=values.get(NutrientKind.FAT, 0.0),
    )


def _classify_nutrient(
    row: dict[str, object],
) -> tuple[NutrientKind | None, object, float | None]:
    """Resolve a search-style or detail-style nutrient row to a kind."""
    info = row.get("nutrient") or {}
    nutrient_id = info.get("id") or row.get("nutrientId")
    number = str(info.get("number") or row.get("nutrientNumber") or "")
    name = str(info.get("name") or row.get("nutrientName") or "").lower()
    unit_name = str(info.get("unitName") or row.get("unitName") or "").lower()
    amount = row.get("amount", row.get("value"))

    for kind in NutrientKind:
        key = kind.value
        if unit_name and unit_name != key.unit_name:
            continue
        if nutrient_id in key.ids or number in key.numbers or name in key.names:
            value = float(amount) if isinstance(amount, int | float) else None
            return kind, nutrient_id, value
    return None, nutrient_id, None


def _extract_portions(payload: dict[str, object]) -> list[PortionHint]:
    hints: list[PortionHint] = []
    for portion in payload.get("foodPortions") or []:
        gram_weight = portion.get("gramWeight")
        if not isinstance(gram_weight, int | float) or gram_weight <= 0:
            continue
        description = _portion_description(portion)
        if description:
            hints.append(PortionHint(description, float(gram_weight)))

    serving_size = payload.get("servingSize")
    serving_unit = str(payload.get("servingSizeUnit") or "").lower()
    if (
        isinstance(serving_size, int | float)
        and serving_size > 0
        and serving_unit in _GRAM_UNITS
    ):
        household = payload.get("householdServingFullText")
        if household:
            hints.append(PortionHint(str(household), float(serving_size)))
        hints.append(PortionHint("serving", float(serving_size)))
    return hints


def _portion_description(portion: dict[str, object]) -> str:
    description = str(portion.get("portionDescription") or "").strip()
    if description and description.lower() != _UNSPECIFIED_PORTION:
        return description

    amount = portion.get("amount") or portion.get("value") or 1
    parts = [f"{amount:g}" if isinstance(amount, int | float) else str(amount)]
    measure_unit = portion.get("measureUnit") or {}
    unit_name = str(measure_unit.get("name") or "").strip()
    if unit_name and unit_name != "undetermined":
        parts.append(unit_name)
    modifier = str(portion.get("modifier") or "").strip()
    if modifier:
        parts.append(modifier)
    if len(parts) == 1:
        return ""
    return " ".join(parts)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"

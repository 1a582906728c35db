"""Resolution of quantities and units into grams."""

import logging
from dataclasses import dataclass
from typing import Protocol

from macro_lookup.domain.items import UnknownUnitPolicy
from macro_lookup.domain.nutrition import FoodMatch, PortionHint
from macro_lookup.errors import LookupTransportError, UnknownUnitError
from macro_lookup.services.units import canonical_unit, grams_per_unit

_logger = logging.getLogger(__name__)


class PortionSource(Protocol):
    """Interface for food-specific portion weights."""

    async def portion_hints(self, fdc_id: int) -> list[PortionHint]:
        """Return household portions for a food in source order."""


@dataclass
class MassResolver:
    """Convert (quantity, unit) into grams for a matched food."""

    portion_source: PortionSource
    unknown_unit_policy: UnknownUnitPolicy = UnknownUnitPolicy.DEFAULT
    default_grams_per_unit: float = 100.0

    async def resolve(
        self, quantity: float, unit: str | None, food: FoodMatch
    ) -> float:
        """Return the gram amount for a quantity of a food."""
        grams = table_grams(quantity, unit)
        if grams is not None:
            return grams

        if unit:
            hints = await self._portion_hints(food)
            hint = match_portion(hints, unit)
            if hint is not None:
                _logger.debug(
                    "Portion match: unit=%s hint=%s grams=%s",
                    unit,
                    hint.description,
                    hint.gram_weight,
                )
                return quantity * hint.gram_weight

        if self.unknown_unit_policy is UnknownUnitPolicy.STRICT:
            raise UnknownUnitError(unit or "", food.baseline.display_name)
        _logger.info(
            "No weight for unit=%s of %s, using %sg per unit",
            unit,
            food.baseline.display_name,
            self.default_grams_per_unit,
        )
        return quantity * self.default_grams_per_unit

    async def _portion_hints(self, food: FoodMatch) -> list[PortionHint]:
        try:
            return await self.portion_source.portion_hints(food.fdc_id)
        except LookupTransportError as exc:
            if self.unknown_unit_policy is UnknownUnitPolicy.STRICT:
                raise
            _logger.warning(
                "Portion lookup failed for %s, using default weight: %s",
                food.baseline.display_name,
                exc,
            )
            return []


def table_grams(quantity: float, unit: str | None) -> float | None:
    """Return grams for a unit-table unit, or None when the unit is unknown."""
    if unit is None or canonical_unit(unit) is None:
        return None
    return quantity * grams_per_unit(unit)


def match_portion(hints: list[PortionHint], unit: str) -> PortionHint | None:
    """Return the first hint describing one of the given unit."""
    candidates = [unit.lower()]
    if len(unit) > 1 and unit.lower().endswith("s"):
        candidates.append(unit.lower()[:-1])
    for hint in hints:
        description = hint.description.lower().strip()
        for candidate in candidates:
            if description == candidate or f"1 {candidate}" in description:
                return hint
    return None

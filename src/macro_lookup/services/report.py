"""Service that resolves food descriptions into macro totals."""

import logging
from dataclasses import dataclass

from macro_lookup.domain.items import BareItemDefault
from macro_lookup.domain.nutrition import ScaledResult, Totals
from macro_lookup.domain.report import ItemOutcome, ItemStatus, Report
from macro_lookup.errors import MacroLookupError
from macro_lookup.services.mass import MassResolver
from macro_lookup.services.nutrition import NutritionService
from macro_lookup.services.parser import parse_item
from macro_lookup.services.scaling import scale_baseline

_logger = logging.getLogger(__name__)


@dataclass
class ReportService:
    """Resolve items one at a time, isolating per-item failures."""

    nutrition_service: NutritionService
    mass_resolver: MassResolver
    bare_item_default: BareItemDefault = BareItemDefault.GRAMS

    async def build_report(self, items: list[str]) -> Report:
        """Resolve every item in order and total the successful ones."""
        outcomes: list[ItemOutcome] = []
        totals = Totals()
        for item_text in items:
            outcome = await self.resolve_item(item_text)
            if outcome.result is not None:
                totals = totals.add(outcome.result)
            outcomes.append(outcome)
        return Report(outcomes=outcomes, totals=totals)

    async def resolve_item(self, item_text: str) -> ItemOutcome:
        """Resolve a single item, reporting failures instead of raising."""
        try:
            result = await self._resolve(item_text)
        except MacroLookupError as exc:
            _logger.warning("Item failed: item=%s error=%s", item_text, exc)
            return ItemOutcome(item_text, ItemStatus.FAILED, error=str(exc))
        except Exception as exc:
            _logger.exception("Unexpected error resolving item=%s", item_text)
            return ItemOutcome(item_text, ItemStatus.FAILED, error=str(exc))
        if result is None:
            return ItemOutcome(item_text, ItemStatus.NOT_FOUND)
        return ItemOutcome(item_text, ItemStatus.RESOLVED, result=result)

    async def _resolve(self, item_text: str) -> ScaledResult | None:
        item = parse_item(item_text, self.bare_item_default)
        food = await self.nutrition_service.find_food(item.food_name)
        if food is None:
            _logger.info("No FDC match for %s", item.food_name)
            return None
        grams = await self.mass_resolver.resolve(item.quantity, item.unit, food)
        return scale_baseline(food.baseline, grams)

"""Linear scaling of per-100g baselines."""

from decimal import ROUND_HALF_UP, Decimal

from macro_lookup.domain.nutrition import NutrientBaseline, ScaledResult


def scale_baseline(baseline: NutrientBaseline, grams: float) -> ScaledResult:
    """Scale a per-100g baseline to a gram amount.

    Every field is rounded on its own; totals are summed from these rounded
    values.
    """
    multiplier = grams / 100.0
    return ScaledResult(
        name=baseline.display_name,
        grams=grams,
        calories=round_half_away(baseline.calories * multiplier),
        protein_g=round_half_away(baseline.protein_g * multiplier),
        carbs_g=round_half_away(baseline.carbs_g * multiplier),
        fat_g=round_half_away(baseline.fat_g * multiplier),
    )


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

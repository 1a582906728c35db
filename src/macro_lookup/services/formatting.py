"""Plain-text rendering of reports."""

from macro_lookup.domain.nutrition import ScaledResult, Totals
from macro_lookup.domain.report import ItemOutcome, ItemStatus, Report


def format_report(report: Report) -> list[str]:
    """Return output lines for a report in input order."""
    lines = [format_outcome(outcome) for outcome in report.outcomes]
    if report.show_totals:
        lines.append(format_totals(report.totals))
    return lines


def format_outcome(outcome: ItemOutcome) -> str:
    """Render one item outcome."""
    if outcome.status is ItemStatus.RESOLVED and outcome.result is not None:
        return format_result(outcome.result)
    if outcome.status is ItemStatus.NOT_FOUND:
        return f"Not found: {outcome.item_text}"
    return f"Error: {outcome.item_text}: {outcome.error}"


def format_result(result: ScaledResult) -> str:
    """Render a resolved item."""
    macros = _macros(result.calories, result.protein_g, result.carbs_g, result.fat_g)
    return f"{result.name} ({_grams(result.grams)}g): {macros}"


def format_totals(totals: Totals) -> str:
    """Render the totals line."""
    macros = _macros(totals.calories, totals.protein_g, totals.carbs_g, totals.fat_g)
    return f"Total: {macros}"


def _grams(grams: float) -> str:
    return f"{grams:.3f}".rstrip("0").rstrip(".")


def _macros(calories: int, protein_g: int, carbs_g: int, fat_g: int) -> str:
    return f"{calories} kcal, {protein_g}g protein, {carbs_g}g carbs, {fat_g}g fat"

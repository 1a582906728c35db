"""Domain models for a resolved batch of food descriptions."""

from dataclasses import dataclass, field
from enum import Enum

from macro_lookup.domain.nutrition import ScaledResult, Totals


class ItemStatus(Enum):
    """Outcome of resolving one food description."""

    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ItemOutcome:
    """Result of one food description, successful or not."""

    item_text: str
    status: ItemStatus
    result: ScaledResult | None = None
    error: str | None = None


@dataclass(frozen=True)
class Report:
    """Outcomes in input order plus totals over resolved items."""

    outcomes: list[ItemOutcome] = field(default_factory=list)
    totals: Totals = field(default_factory=Totals)

    @property
    def show_totals(self) -> bool:
        """Whether a totals line adds information."""
        return self.totals.count > 1

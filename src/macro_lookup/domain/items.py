"""Domain models for parsed food descriptions."""

from dataclasses import dataclass
from enum import Enum


class BareItemDefault(str, Enum):
    """What a food name without a quantity stands for."""

    GRAMS = "grams"
    SERVING = "serving"


@dataclass(frozen=True)
class ParsedItem:
    """A single food description split into quantity, unit and name."""

    quantity: float
    unit: str | None
    food_name: str
    raw: str


class UnknownUnitPolicy(str, Enum):
    """How units missing from the unit table and portion data are handled."""

    DEFAULT = "default"
    STRICT = "strict"

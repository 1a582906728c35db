"""Unit table mapping unit spellings to grams."""

# Volumes are converted as water (1 ml == 1 g).
GRAMS_PER_UNIT: dict[str, float] = {
    "g": 1.0,
    "mg": 0.001,
    "kg": 1000.0,
    "oz": 28.3495,
    "lb": 453.592,
    "ml": 1.0,
    "l": 1000.0,
    "tsp": 4.92892,
    "tbsp": 14.7868,
    "cup": 236.588,
    "egg": 50.0,
}

UNIT_ALIASES: dict[str, str] = {
    "g": "g",
    "gr": "g",
    "gram": "g",
    "grams": "g",
    "gramme": "g",
    "grammes": "g",
    "mg": "mg",
    "milligram": "mg",
    "milligrams": "mg",
    "kg": "kg",
    "kgs": "kg",
    "kilo": "kg",
    "kilos": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "tsp": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tbsp": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "cup": "cup",
    "cups": "cup",
    "egg": "egg",
    "eggs": "egg",
}


def canonical_unit(unit: str) -> str | None:
    """Return the canonical unit for a spelling, or None if unknown."""
    return UNIT_ALIASES.get(unit.strip().lower())


def is_known_unit(unit: str | None) -> bool:
    """Return whether a spelling is in the unit table."""
    return unit is not None and canonical_unit(unit) is not None


def grams_per_unit(unit: str) -> float:
    """Return grams per one unit; raises KeyError for unknown units."""
    canonical = canonical_unit(unit)
    if canonical is None:
        raise KeyError(unit)
    return GRAMS_PER_UNIT[canonical]

"""Error types raised by the lookup pipeline."""


class MacroLookupError(Exception):
    """Base class for errors reported to the user."""


class UsageError(MacroLookupError):
    """Raised when the tool is invoked incorrectly or is not set up."""


class ItemParseError(MacroLookupError):
    """Raised when a food description cannot be parsed."""

    def __init__(self, segment: str, reason: str) -> None:
        self.segment = segment
        self.reason = reason
        super().__init__(reason)


class EmptyFoodNameError(ItemParseError):
    """Raised when nothing is left for the food name after parsing."""

    def __init__(self, segment: str) -> None:
        super().__init__(segment, "missing food name")


class InvalidQuantityError(ItemParseError):
    """Raised when the leading quantity is zero or not a usable number."""

    def __init__(self, segment: str, quantity: str) -> None:
        self.quantity = quantity
        super().__init__(segment, f"invalid quantity '{quantity}'")


class UnknownUnitError(MacroLookupError):
    """Raised for units with no table entry or portion match (strict policy)."""

    def __init__(self, unit: str, food_name: str) -> None:
        self.unit = unit
        self.food_name = food_name
        super().__init__(f"unknown unit '{unit}' for {food_name}")


class LookupTransportError(MacroLookupError):
    """Raised when a FoodData Central request fails."""

    def __init__(self, action: str, status_code: str, detail: str) -> None:
        self.action = action
        self.status_code = status_code
        super().__init__(f"lookup failed ({action}, status={status_code}): {detail}")

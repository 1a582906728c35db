"""Parser for free-form food descriptions.

An input line holds one or more comma-separated items. Each item is one of::

    <food name>                      e.g. "apple"
    <quantity> <unit> <food name>    e.g. "1 lb ground beef", "100g rice"
    <quantity> <unit>                e.g. "500 eggs" (the unit names the food)
    <quantity> <food name>           e.g. "2 slices bread" (unit left opaque)

Quantities are integers, decimals ("1.5", ".5", "1.") or simple fractions.
"""

import math
import re

from macro_lookup.domain.items import BareItemDefault, ParsedItem
from macro_lookup.errors import EmptyFoodNameError, InvalidQuantityError
from macro_lookup.services.units import is_known_unit

_QUANTITY_RE = re.compile(
    r"^(?P<quantity>\d+/\d+|\d+(?:\.\d*)?|\.\d+)"
    r"(?P<attached>[^\s\d./]*)"
    r"(?:\s+(?P<rest>.*))?$"
)
_WHITESPACE_RE = re.compile(r"\s+")

BARE_ITEM_GRAMS = 100.0


def split_items(text: str) -> list[str]:
    """Split raw input on commas, dropping empty segments."""
    segments = [_clean(chunk) for chunk in text.split(",")]
    return [segment for segment in segments if segment]


def split_arguments(args: list[str]) -> list[str]:
    """Turn command-line arguments into item segments.

    Comma-separated input is split on commas. Otherwise an input starting with
    a quantity is a single item, and anything else is a list of bare food
    names, one per argument.
    """
    words = [word for word in (_clean(arg) for arg in args) if word]
    joined = " ".join(words)
    if "," in joined:
        return split_items(joined)
    if _match_quantity(joined) is not None:
        return [joined]
    return words


def parse_item(
    segment: str, bare_default: BareItemDefault = BareItemDefault.GRAMS
) -> ParsedItem:
    """Decompose one item segment into quantity, unit and food name."""
    text = _clean(segment)
    match = _match_quantity(text)
    if match is None:
        if not text:
            raise EmptyFoodNameError(segment)
        return _bare_item(text, bare_default)

    quantity = _parse_quantity(match.group("quantity"), text)
    tokens = (match.group("rest") or "").split()
    if match.group("attached"):
        tokens.insert(0, match.group("attached"))
    if not tokens:
        raise EmptyFoodNameError(segment)

    unit = tokens[0].lower()
    if is_known_unit(unit):
        food_name = " ".join(tokens[1:]) or tokens[0]
    else:
        food_name = " ".join(tokens)
    return ParsedItem(quantity=quantity, unit=unit, food_name=food_name, raw=text)


def _match_quantity(text: str) -> re.Match[str] | None:
    match = _QUANTITY_RE.match(text)
    if match is None:
        return None
    attached = match.group("attached")
    # "7up" is a food name, "100g" is a quantity with a unit.
    if attached and not is_known_unit(attached):
        return None
    return match


def _parse_quantity(raw: str, segment: str) -> float:
    try:
        if "/" in raw:
            numerator, denominator = raw.split("/", 1)
            quantity = int(numerator) / int(denominator)
        else:
            quantity = float(raw)
    except (ValueError, OverflowError, ZeroDivisionError) as exc:
        raise InvalidQuantityError(segment, raw) from exc
    if not math.isfinite(quantity) or quantity <= 0:
        raise InvalidQuantityError(segment, raw)
    return quantity


def _bare_item(text: str, bare_default: BareItemDefault) -> ParsedItem:
    if bare_default is BareItemDefault.SERVING:
        return ParsedItem(quantity=1.0, unit="serving", food_name=text, raw=text)
    return ParsedItem(quantity=BARE_ITEM_GRAMS, unit="g", food_name=text, raw=text)


def _clean(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()

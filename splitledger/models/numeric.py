"""
Exact numeric text handling for amounts and weights.

DESIGN DECISION: Money and weights are fractions.Fraction end to end.
Text is parsed straight into an exact rational and never passes through
a float, so splitting an amount never drifts by a cent.

Accepted input (shared by Amount and Weight):
- A decimal number: "100.99", "010.00", ".5", "1 ", "1. 0"
- Two decimal numbers separated by "/": "1/2", "1 / 2", "1.0/2.0"

Amounts may carry a leading minus sign on either part. Weights may not.
"""

import re
from decimal import Decimal
from fractions import Fraction


_DECIMAL = r"(?:\d+(?:\s*\.\s*\d*)?|\.\s*\d+)"
_SIGNED_DECIMAL = rf"-?{_DECIMAL}"

AMOUNT_PATTERN = re.compile(
    rf"\s*{_SIGNED_DECIMAL}\s*(?:/\s*{_SIGNED_DECIMAL}\s*)?"
)
WEIGHT_PATTERN = re.compile(
    rf"\s*{_DECIMAL}\s*(?:/\s*{_DECIMAL}\s*)?"
)

AMOUNT_CONSTRAINTS = (
    "Amounts should be a decimal number or a fraction of two decimal "
    "numbers (e.g. 12.50 or 1/3), optionally negative"
)
WEIGHT_CONSTRAINTS = (
    "Weights should be a non-negative decimal number or a fraction of two "
    "non-negative decimal numbers (e.g. 1, 0.5 or 1/3)"
)


def _require_text(text: str) -> str:
    if text is None:
        raise TypeError("text must not be None")
    return text


def is_valid_amount(text: str) -> bool:
    """Return True if text follows the amount grammar."""
    return AMOUNT_PATTERN.fullmatch(_require_text(text)) is not None


def is_valid_weight(text: str) -> bool:
    """Return True if text follows the weight grammar (no minus sign)."""
    return WEIGHT_PATTERN.fullmatch(_require_text(text)) is not None


def _parse_decimal(part: str) -> Fraction:
    return Fraction(Decimal("".join(part.split())))


def parse_fraction(text: str) -> Fraction:
    """
    Parse grammatical text into an exact Fraction.

    The slash form is divided after both sides are parsed, so
    "1.5/0.5" becomes Fraction(3).

    Raises:
        ZeroDivisionError: If the denominator part is zero.
    """
    numerator, _, denominator = _require_text(text).partition("/")
    value = _parse_decimal(numerator)
    if denominator:
        value = value / _parse_decimal(denominator)
    return value


def fraction_to_text(value: Fraction) -> str:
    """
    Render a Fraction as text that parses back to an equal value.

    Terminating values are written as plain decimals ("0.5", "-12.25").
    Everything else keeps the "n/d" form ("1/3").
    """
    denominator = value.denominator
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return f"{value.numerator}/{value.denominator}"

    places = max(twos, fives)
    scaled = abs(value.numerator) * 10 ** places // value.denominator
    sign = "-" if value < 0 else ""
    if places == 0:
        return f"{sign}{scaled}"
    digits = str(scaled).rjust(places + 1, "0")
    return f"{sign}{digits[:-places]}.{digits[-places:]}"


def format_fraction(value: Fraction, places: int = 2) -> str:
    """Round a Fraction for display only. Never feed the result back into arithmetic."""
    # round() on a Fraction is exact and half-even, so no precision limit applies
    scaled = round(value * 10 ** places)
    sign = "-" if scaled < 0 else ""
    digits = str(abs(scaled)).rjust(places + 1, "0")
    if places == 0:
        return sign + digits
    return f"{sign}{digits[:-places]}.{digits[-places:]}"


def coerce_fraction(value) -> Fraction:
    """
    Normalize an already-numeric value to Fraction.

    Floats are refused: they cannot represent most decimal amounts exactly.
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not numeric amounts")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, Decimal) and not value.is_finite():
        raise TypeError(f"non-finite decimal {value} is not an exact fraction")
    if isinstance(value, (int, Decimal)):
        return Fraction(value)
    raise TypeError(f"cannot convert {type(value).__name__} to an exact fraction")

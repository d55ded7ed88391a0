"""
parse.py - Literal normalisation for the fraction engine

Turns the loosely-typed literals callers hand us (strings typed into a form,
floats from JSON, Decimals from other ledgers) into an exact, finite Decimal.
Fraction.from_value() is the only consumer; everything numeric enters the system
through here.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation
import logging
from typing import Union

from .core import MAX_LITERAL_EXPONENT, ParseError

logger = logging.getLogger(__name__)


def _normalize_literal(value: str) -> str:
    # "" means zero and "12." means "12"
    value = value.strip()
    if value == "":
        return "0"
    if value.endswith("."):
        value = value[:-1]
    return value


def parse_raw_amount(value: Union[int, float, str, Decimal]) -> Decimal:
    """
    Parse a literal into a finite Decimal without any loss of precision.

    Args:
        value: An int, a decimal string (optionally with a trailing bare point,
            or empty), a float, or a Decimal.

    Returns:
        Decimal holding exactly the value the literal denotes. Floats are read
        through their shortest repr, so 0.15 becomes Decimal("0.15") rather than
        the binary expansion.

    Raises:
        ParseError: If the literal is malformed, non-finite, of an unsupported
            type, or has an exponent beyond MAX_LITERAL_EXPONENT.
    """
    if isinstance(value, bool):
        raise ParseError(f"{value!r} is not a valid number.")

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        text = repr(value)
    elif isinstance(value, str):
        text = _normalize_literal(value)
    elif isinstance(value, Decimal):
        text = None
    else:
        raise ParseError(f"Unsupported literal type {type(value).__name__}: {value!r}")

    if text is None:
        parsed = value
    else:
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            logger.debug("Rejected literal %r", value)
            raise ParseError(f"{value!r} is not a valid number.") from None

    if not parsed.is_finite():
        logger.debug("Rejected non-finite literal %r", value)
        raise ParseError(f"{value!r} is not a finite number.")
    # Bounds the integer Fraction.from_decimal expands to
    if parsed.adjusted() > MAX_LITERAL_EXPONENT or parsed.as_tuple().exponent < -MAX_LITERAL_EXPONENT:
        logger.debug("Rejected literal %r: exponent out of range", value)
        raise ParseError(f"{value!r} is out of range (exponent beyond {MAX_LITERAL_EXPONENT}).")
    return parsed

"""
percentage.py - Fraction-of-one values displayed as percentages

A Percentage stores 0.0154 for 1.54%, always at PERCENTAGE_DECIMALS (18)
fractional digits. Arithmetic comes in two flavours: add()/subtract()/
multiply()/divide() take another Percentage, the *_value() variants take a bare
literal. Display methods scale by 100 and round half-up by default.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..core import (
    DEFAULT_FORMAT, DEFAULT_PERCENTAGE_PLACES, DEFAULT_PERCENTAGE_SIGNIFICANT_DIGITS,
    PERCENTAGE_DECIMALS, FormatOptions, Numberish, Rounding,
)
from ..fraction import Fraction
from .. import fraction as fr


@dataclass(frozen=True, slots=True, eq=False, init=False)
class Percentage:
    """
    A fraction of one.

    Attributes:
        raw_amount: The value as a Fraction at PERCENTAGE_DECIMALS decimals
            (or at the decimals passed to the constructor).

    Example:
        Percentage(154, 10_000).to_fixed(2)   # "1.54"
        Percentage(1, 100).add(Percentage(2, 100)) == Percentage(3, 100)
    """
    raw_amount: Fraction

    def __init__(
        self,
        numerator: Numberish,
        denominator: Numberish = 1,
        decimals: int = PERCENTAGE_DECIMALS,
    ):
        object.__setattr__(self, "raw_amount", fr.divide(numerator, denominator, decimals))

    # ------------------------------------------------------------------------
    # Arithmetic with another Percentage
    # ------------------------------------------------------------------------

    def add(self, other: Percentage) -> Percentage:
        return Percentage(fr.add(self.raw_amount, other.raw_amount))

    def subtract(self, other: Percentage) -> Percentage:
        return Percentage(fr.subtract(self.raw_amount, other.raw_amount))

    def multiply(self, other: Percentage) -> Percentage:
        return Percentage(_exact_product(self.raw_amount, other.raw_amount))

    def divide(self, other: Percentage) -> Percentage:
        return Percentage(self.raw_amount, other.raw_amount)

    # ------------------------------------------------------------------------
    # Arithmetic with a bare literal
    # ------------------------------------------------------------------------

    def add_value(self, value: Numberish) -> Percentage:
        return Percentage(fr.add(self.raw_amount, value))

    def subtract_value(self, value: Numberish) -> Percentage:
        return Percentage(fr.subtract(self.raw_amount, value))

    def multiply_value(self, value: Numberish) -> Percentage:
        return Percentage(_exact_product(self.raw_amount, Fraction.from_value(value)))

    def divide_value(self, value: Numberish) -> Percentage:
        return Percentage(self.raw_amount, value)

    # ------------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Percentage):
            return NotImplemented
        return fr.equal(self.raw_amount, other.raw_amount)

    def __hash__(self):
        return hash(self.raw_amount)

    def __lt__(self, other):
        if not isinstance(other, Percentage):
            return NotImplemented
        return fr.less_than(self.raw_amount, other.raw_amount)

    def __le__(self, other):
        if not isinstance(other, Percentage):
            return NotImplemented
        return fr.less_than_or_equal(self.raw_amount, other.raw_amount)

    def __gt__(self, other):
        if not isinstance(other, Percentage):
            return NotImplemented
        return fr.greater_than(self.raw_amount, other.raw_amount)

    def __ge__(self, other):
        if not isinstance(other, Percentage):
            return NotImplemented
        return fr.greater_than_or_equal(self.raw_amount, other.raw_amount)

    # ------------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------------

    def to_significant(
        self,
        significant_digits: int = DEFAULT_PERCENTAGE_SIGNIFICANT_DIGITS,
        rounding: Rounding = Rounding.ROUND_HALF_UP,
        fmt: FormatOptions = DEFAULT_FORMAT,
    ) -> str:
        """Render value x 100 to significant digits (default 5, half-up)."""
        return fr.to_significant(self.raw_amount.shift(2), significant_digits, rounding, fmt)

    def to_fixed(
        self,
        decimal_places: int = DEFAULT_PERCENTAGE_PLACES,
        rounding: Rounding = Rounding.ROUND_HALF_UP,
        fmt: FormatOptions = DEFAULT_FORMAT,
    ) -> str:
        """Render value x 100 with fixed decimal places (default 2, half-up)."""
        return fr.to_fixed(self.raw_amount.shift(2), decimal_places, rounding, fmt)

    def __repr__(self) -> str:
        return f"Percentage({self.to_significant()}%)"


def _exact_product(a: Fraction, b: Fraction) -> Fraction:
    return fr.multiply(a, b, a.decimals + b.decimals)

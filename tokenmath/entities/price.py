"""
price.py - Exchange rates between two currencies

A Price says how much quote currency one unit of base currency is worth. It is
held as an exact ratio numerator / denominator, so inverting and composing
prices never loses digits; raw_price materialises that ratio as a Fraction at
max(base.decimals, quote.decimals) decimals (or finer, if the ratio's own
operands carry more). quote() multiplies by that materialised raw_price.

Construction:
    Price(base, quote, numerator, denominator=1)   # raw ratio
    Price.from_ratio(base, quote, Fraction("1.5"))  # pre-computed ratio
    Price.from_amounts(base_amount, quote_amount)   # quote_amount / base_amount

scalar (10**base.decimals / 10**quote.decimals) is derived from the currencies
and only affects display: adjusted_for_decimals, to_significant() and to_fixed().
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Optional

from ..core import (
    DEFAULT_FORMAT, DEFAULT_SIGNIFICANT_DIGITS,
    CurrencyChainError, CurrencyMismatchError, FormatOptions, Numberish,
    PrecisionError, Rounding, require_decimal_places,
)
from ..currency import Currency
from ..fraction import Fraction
from .. import fraction as fr
from .amount import CurrencyAmount

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Price:
    """
    Exchange rate of quote_currency per base_currency.

    Attributes:
        base_currency: Input currency (the denominator side).
        quote_currency: Output currency (the numerator side).
        numerator: Exact numerator of the ratio.
        denominator: Exact denominator of the ratio (non-zero).
        scalar: 10**base.decimals / 10**quote.decimals, computed on construction.
    """
    base_currency: Currency
    quote_currency: Currency
    numerator: Fraction
    denominator: Fraction = Fraction(1, 0)
    scalar: Fraction = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "numerator", Fraction.from_value(self.numerator))
        object.__setattr__(self, "denominator", Fraction.from_value(self.denominator))
        if self.denominator.is_zero:
            raise ZeroDivisionError("Price denominator cannot be zero")
        object.__setattr__(self, "scalar", _scalar(self.base_currency, self.quote_currency))

    @classmethod
    def from_ratio(cls, base_currency: Currency, quote_currency: Currency, ratio: Numberish) -> Price:
        """Create a price from a pre-computed quote-per-base ratio."""
        return cls(base_currency, quote_currency, Fraction.from_value(ratio))

    @classmethod
    def from_amounts(cls, base_amount: CurrencyAmount, quote_amount: CurrencyAmount) -> Price:
        """Create the price at which base_amount trades for quote_amount."""
        return cls(
            base_amount.currency,
            quote_amount.currency,
            quote_amount.raw_amount,
            base_amount.raw_amount,
        )

    # ------------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------------

    @property
    def decimals(self) -> int:
        """Fractional digits raw_price is expressed at."""
        return max(
            self.base_currency.decimals,
            self.quote_currency.decimals,
            self.numerator.decimals,
            self.denominator.decimals,
        )

    @property
    def raw_price(self) -> Fraction:
        """Quote per base, truncated at self.decimals."""
        return fr.divide(self.numerator, self.denominator, self.decimals)

    @property
    def adjusted_for_decimals(self) -> Fraction:
        """raw_price * scalar, applied as an exact power-of-ten shift."""
        return self.raw_price.shift(_decimal_difference(self))

    # ------------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------------

    def invert(self) -> Price:
        """Swap base and quote. Exact: p.invert().invert() has p's raw_price."""
        return Price(self.quote_currency, self.base_currency, self.denominator, self.numerator)

    def multiply(self, other: Price) -> Price:
        """
        Chain this price with another whose base is this price's quote.

        Raises:
            CurrencyChainError: If self.quote_currency is not other.base_currency.
        """
        if not self.quote_currency.equals(other.base_currency):
            raise CurrencyChainError(
                f"TOKEN: cannot chain {self.quote_currency!r} into {other.base_currency!r}"
            )
        return Price(
            self.base_currency,
            other.quote_currency,
            _exact_product(self.numerator, other.numerator),
            _exact_product(self.denominator, other.denominator),
        )

    def quote(self, currency_amount: CurrencyAmount) -> CurrencyAmount:
        """
        Convert an amount of base currency into quote currency.

        The amount is multiplied by raw_price (already truncated at
        self.decimals) exactly, and the product is truncated once more at the
        quote currency's decimals.

        Raises:
            CurrencyMismatchError: If the amount is not in the base currency.
            AmountOverflowError: If the quoted amount exceeds MAX_UINT256.
        """
        if not currency_amount.currency.equals(self.base_currency):
            raise CurrencyMismatchError(
                f"TOKEN: {currency_amount.currency!r} is not the base currency {self.base_currency!r}"
            )
        return CurrencyAmount.from_raw_amount(
            self.quote_currency,
            _exact_product(currency_amount.raw_amount, self.raw_price),
        )

    # ------------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------------

    def to_significant(
        self,
        significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
        rounding: Rounding = Rounding.ROUND_DOWN,
        fmt: FormatOptions = DEFAULT_FORMAT,
    ) -> str:
        """
        Render the decimal-adjusted price to significant digits.

        raw_price is rounded first, shifted by base.decimals - quote.decimals,
        and rounded again so the shift cannot surface extra digits.
        """
        rounded = fr.round_significant(self.raw_price, significant_digits, rounding)
        shifted = rounded.shift(_decimal_difference(self))
        return fr.to_significant(shifted, significant_digits, rounding, fmt)

    def to_fixed(
        self,
        decimal_places: Optional[int] = None,
        rounding: Rounding = Rounding.ROUND_DOWN,
        fmt: FormatOptions = DEFAULT_FORMAT,
    ) -> str:
        """
        Render the decimal-adjusted price with fixed decimal places.

        Args:
            decimal_places: Defaults to quote_currency.decimals.

        Raises:
            PrecisionError: If decimal_places exceeds quote_currency.decimals.
        """
        if decimal_places is None:
            decimal_places = self.quote_currency.decimals
        require_decimal_places(decimal_places)
        if decimal_places > self.quote_currency.decimals:
            logger.debug(
                "Rejected to_fixed(%d) on price quoted in %r (decimals=%d)",
                decimal_places, self.quote_currency, self.quote_currency.decimals,
            )
            raise PrecisionError(
                f"DECIMALS: {decimal_places} places exceeds quote currency decimals "
                f"{self.quote_currency.decimals}"
            )
        return fr.to_fixed(self.adjusted_for_decimals, decimal_places, rounding, fmt)

    def __repr__(self) -> str:
        base = self.base_currency.symbol or self.base_currency.address
        quote = self.quote_currency.symbol or self.quote_currency.address
        return f"Price({self.raw_price} {quote}/{base})"


def _scalar(base: Currency, quote: Currency) -> Fraction:
    # 10**base.decimals / 10**quote.decimals, exact in both directions
    return Fraction(1, 0).shift(base.decimals - quote.decimals)


def _decimal_difference(price: Price) -> int:
    return price.base_currency.decimals - price.quote_currency.decimals


def _exact_product(a: Fraction, b: Fraction) -> Fraction:
    return fr.multiply(a, b, a.decimals + b.decimals)

"""
amount.py - Currency-bound exact quantities

This module provides CurrencyAmount, a Fraction tied to a Currency:
1. from_raw_amount() / from_fractional_amount() - the two construction paths
2. add() / subtract() - same-currency arithmetic
3. multiply() / divide() - scaling by a bare literal
4. equal_to() / less_than() / ... - same-currency comparisons
5. to_significant() / to_fixed() / to_exact() - formatting
6. wrapped - relabel a native amount as its wrapped token

Every instance, including every arithmetic result, passes through the same
constructor, which stores the raw amount at the currency's decimal scale and
enforces the MAX_UINT256 ceiling on it.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Optional

from ..core import (
    DEFAULT_FORMAT, DEFAULT_SIGNIFICANT_DIGITS, MAX_UINT256,
    AmountOverflowError, CurrencyMismatchError, FormatOptions, Numberish,
    PrecisionError, Rounding, require_decimal_places,
)
from ..currency import Currency
from ..fraction import Fraction
from .. import fraction as fr

logger = logging.getLogger(__name__)


def _check_currency(a: Currency, b: Currency) -> None:
    if not a.equals(b):
        raise CurrencyMismatchError(f"Currency mismatch: {a!r} vs {b!r}")


@dataclass(frozen=True, slots=True, eq=False)
class CurrencyAmount:
    """
    An exact amount of a currency.

    Attributes:
        currency: The currency the amount is denominated in.
        raw_amount: The amount as a Fraction at exactly currency.decimals.

    Use from_raw_amount() or from_fractional_amount(); the constructor is
    validated but expects raw_amount to already be at the currency's scale.
    """
    currency: Currency
    raw_amount: Fraction

    def __post_init__(self):
        if not isinstance(self.raw_amount, Fraction):
            raise ValueError(f"raw_amount must be a Fraction, got {type(self.raw_amount).__name__}")
        if self.raw_amount.decimals != self.currency.decimals:
            raise ValueError(
                f"raw_amount decimals {self.raw_amount.decimals} "
                f"!= currency decimals {self.currency.decimals}"
            )
        if self.raw_amount.value > MAX_UINT256:
            logger.debug(
                "Rejected amount %s for %r: raw value exceeds MAX_UINT256",
                self.raw_amount.value, self.currency,
            )
            raise AmountOverflowError(
                f"AMOUNT: {self.raw_amount} {self.currency.symbol or ''} exceeds the uint256 range".rstrip()
            )

    @classmethod
    def from_raw_amount(cls, currency: Currency, raw_amount: Numberish) -> CurrencyAmount:
        """
        Create an amount from a literal in whole currency units.

        Args:
            currency: Denomination.
            raw_amount: Any Numberish; 100 means one hundred whole units.

        Digits beyond currency.decimals are truncated.

        Raises:
            ParseError: If raw_amount is malformed.
            AmountOverflowError: If the raw value at currency.decimals exceeds MAX_UINT256.
        """
        return cls(currency, fr.divide(raw_amount, 1, currency.decimals))

    @classmethod
    def from_fractional_amount(
        cls,
        currency: Currency,
        numerator: Numberish,
        denominator: Numberish,
    ) -> CurrencyAmount:
        """Create an amount equal to numerator / denominator, truncated at currency.decimals."""
        return cls(currency, fr.divide(numerator, denominator, currency.decimals))

    @property
    def decimal_scale(self) -> int:
        """10 ** currency.decimals."""
        return 10 ** self.currency.decimals

    @property
    def quotient(self) -> int:
        """Whole units, truncated toward zero."""
        return self.raw_amount.rescale(0).value

    @property
    def remainder(self) -> Fraction:
        """The part of the amount below one whole unit (same sign as the amount)."""
        return fr.subtract(self.raw_amount, self.quotient)

    # ------------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------------

    def add(self, other: CurrencyAmount) -> CurrencyAmount:
        _check_currency(self.currency, other.currency)
        return CurrencyAmount.from_raw_amount(self.currency, fr.add(self.raw_amount, other.raw_amount))

    def subtract(self, other: CurrencyAmount) -> CurrencyAmount:
        _check_currency(self.currency, other.currency)
        return CurrencyAmount.from_raw_amount(self.currency, fr.subtract(self.raw_amount, other.raw_amount))

    def multiply(self, other: Numberish) -> CurrencyAmount:
        """Scale by a literal factor. The product is exact up to currency.decimals."""
        other = Fraction.from_value(other)
        product = fr.multiply(self.raw_amount, other, self.raw_amount.decimals + other.decimals)
        return CurrencyAmount.from_raw_amount(self.currency, product)

    def divide(self, other: Numberish) -> CurrencyAmount:
        """Divide by a literal. The quotient is truncated at currency.decimals."""
        return CurrencyAmount.from_fractional_amount(self.currency, self.raw_amount, other)

    # ------------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------------

    def equal_to(self, other: CurrencyAmount) -> bool:
        _check_currency(self.currency, other.currency)
        return fr.equal(self.raw_amount, other.raw_amount)

    def less_than(self, other: CurrencyAmount) -> bool:
        _check_currency(self.currency, other.currency)
        return fr.less_than(self.raw_amount, other.raw_amount)

    def greater_than(self, other: CurrencyAmount) -> bool:
        _check_currency(self.currency, other.currency)
        return fr.greater_than(self.raw_amount, other.raw_amount)

    def less_than_or_equal(self, other: CurrencyAmount) -> bool:
        return self.less_than(other) or self.equal_to(other)

    def greater_than_or_equal(self, other: CurrencyAmount) -> bool:
        return self.greater_than(other) or self.equal_to(other)

    def __eq__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self.currency.equals(other.currency) and fr.equal(self.raw_amount, other.raw_amount)

    def __hash__(self):
        return hash((self.currency.kind, self.currency.chain_id, self.raw_amount))

    def __lt__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self.greater_than_or_equal(other)

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
        Render to a number of significant digits (default 6, rounding down).

        significant_digits may exceed currency.decimals; precision is counted
        from the leading digit, not the decimal point.
        """
        return fr.to_significant(self.raw_amount, significant_digits, rounding, fmt)

    def to_fixed(
        self,
        decimal_places: Optional[int] = None,
        rounding: Rounding = Rounding.ROUND_DOWN,
        fmt: FormatOptions = DEFAULT_FORMAT,
    ) -> str:
        """
        Render with exactly decimal_places fractional digits.

        Args:
            decimal_places: Defaults to currency.decimals.
            rounding: Rounding mode (default ROUND_DOWN).
            fmt: Grouping and separator options.

        Raises:
            PrecisionError: If decimal_places exceeds currency.decimals.
        """
        if decimal_places is None:
            decimal_places = self.currency.decimals
        require_decimal_places(decimal_places)
        if decimal_places > self.currency.decimals:
            logger.debug(
                "Rejected to_fixed(%d) on %r (decimals=%d)",
                decimal_places, self.currency, self.currency.decimals,
            )
            raise PrecisionError(
                f"DECIMALS: {decimal_places} places exceeds currency decimals {self.currency.decimals}"
            )
        return fr.to_fixed(self.raw_amount, decimal_places, rounding, fmt)

    def to_exact(self, fmt: FormatOptions = DEFAULT_FORMAT) -> str:
        """
        Render at the currency's full native scale.

        No rounding mode applies and trailing zeros are kept: an 18-decimal
        token amount always renders with 18 fractional digits.
        """
        return fr.to_exact(self.raw_amount, fmt)

    # ------------------------------------------------------------------------
    # Wrapping
    # ------------------------------------------------------------------------

    @property
    def wrapped(self) -> CurrencyAmount:
        """The same amount expressed in the currency's token form."""
        if self.currency.is_token:
            return self
        return CurrencyAmount.from_raw_amount(self.currency.wrapped, self.raw_amount)

    def __repr__(self) -> str:
        return f"CurrencyAmount({self.raw_amount} {self.currency.symbol or self.currency.address})"

"""
Overflow Conformance Tests

INVARIANT: No CurrencyAmount ever holds a raw value above the uint256 maximum.

    ∀ amount: amount.raw_amount.value <= 2**256 - 1

The check runs on every construction path, including every arithmetic
result, and the boundary itself is inclusive. Negative amounts carry no
lower bound.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tokenmath import (
    CurrencyAmount, Fraction, Percentage, Price, MAX_UINT256, AmountOverflowError,
)
from tests.currencies import ADDRESS_ONE, ADDRESS_TWO, make_token


token_decimals = st.integers(min_value=0, max_value=60)


class TestOverflowBoundary:
    """The ceiling is exactly MAX_UINT256 at the currency's scale."""

    @given(token_decimals)
    def test_max_is_accepted(self, decimals):
        """PROPERTY: a raw value of exactly MAX_UINT256 is valid at any scale."""
        currency = make_token(decimals)
        amount = CurrencyAmount.from_raw_amount(currency, Fraction(MAX_UINT256, decimals))
        assert amount.raw_amount.value == MAX_UINT256

    @given(token_decimals)
    def test_one_above_max_is_rejected(self, decimals):
        """PROPERTY: one unit in the last place above the ceiling fails."""
        currency = make_token(decimals)
        with pytest.raises(AmountOverflowError):
            CurrencyAmount.from_raw_amount(currency, Fraction(MAX_UINT256 + 1, decimals))

    def test_eighteen_decimal_boundary(self):
        currency = make_token(18)
        CurrencyAmount.from_raw_amount(currency, Fraction(MAX_UINT256, 18))
        with pytest.raises(AmountOverflowError):
            CurrencyAmount.from_raw_amount(currency, Fraction(MAX_UINT256 + 1, 18))


class TestOverflowThroughArithmetic:
    """Arithmetic results are re-validated."""

    @given(st.integers(min_value=1, max_value=MAX_UINT256))
    @settings(max_examples=100)
    def test_add_past_ceiling_fails(self, raw):
        """PROPERTY: a + b fails exactly when the sum leaves the range."""
        currency = make_token(0)
        top = CurrencyAmount(currency, Fraction(MAX_UINT256, 0))
        other = CurrencyAmount(currency, Fraction(raw, 0))
        with pytest.raises(AmountOverflowError):
            top.add(other)

    @given(st.integers(min_value=0, max_value=MAX_UINT256))
    @settings(max_examples=100)
    def test_scaling_by_one_preserves_value(self, raw):
        """PROPERTY: multiply(1) and divide(1) never overflow a valid amount."""
        currency = make_token(6)
        amount = CurrencyAmount(currency, Fraction(raw, 6))
        assert amount.multiply(1).raw_amount.value == raw
        assert amount.divide(1).raw_amount.value == raw

    def test_quote_past_ceiling_fails(self):
        base = make_token(0, ADDRESS_ONE)
        quote = make_token(0, ADDRESS_TWO)
        price = Price(base, quote, 2)
        amount = CurrencyAmount.from_raw_amount(base, MAX_UINT256 // 2 + 1)
        with pytest.raises(AmountOverflowError):
            price.quote(amount)

    def test_percentages_are_not_bounded(self):
        # Only amounts carry the ceiling
        huge = Percentage(MAX_UINT256 * 10)
        assert huge.raw_amount.value == MAX_UINT256 * 10 * 10 ** 18

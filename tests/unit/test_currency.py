"""
test_currency.py - Unit tests for currencies and literal parsing

Tests:
- token() / native_currency(): creation and validation
- equals(): identity rules for both variants
- wrapped: token form of each variant
- parse_raw_amount(): literal normalisation
"""

import pytest
from decimal import Decimal

from tokenmath import (
    Currency, CurrencyKind, ParseError,
    token, native_currency, parse_raw_amount,
)
from tests.currencies import ADDRESS_ONE, ADDRESS_TWO, WETH_ADDRESS


class TestTokenCreation:
    """Tests for the token() factory."""

    def test_create_token(self):
        t = token(1, ADDRESS_ONE, 18, "TKN", "Token")
        assert t.kind is CurrencyKind.TOKEN
        assert t.is_token and not t.is_native
        assert t.decimals == 18
        assert t.symbol == "TKN"
        assert t.wrapped is t

    def test_empty_address_raises(self):
        with pytest.raises(ValueError, match="address cannot be empty"):
            token(1, "  ", 18)

    @pytest.mark.parametrize("decimals", [-1, 255, 1000])
    def test_decimals_out_of_range_raises(self, decimals):
        with pytest.raises(ValueError, match="decimals must be in"):
            token(1, ADDRESS_ONE, decimals)

    def test_non_integer_decimals_raises(self):
        with pytest.raises(ValueError, match="must be int"):
            token(1, ADDRESS_ONE, 6.0)

    def test_invalid_chain_raises(self):
        with pytest.raises(ValueError, match="chain_id"):
            token(0, ADDRESS_ONE, 6)


class TestNativeCurrency:
    """Tests for native_currency() and wrapping."""

    def test_create_native(self, ether):
        assert ether.kind is CurrencyKind.NATIVE
        assert ether.is_native and not ether.is_token
        assert ether.decimals == 18

    def test_wrapped_token_matches_native(self, ether):
        wrapped = ether.wrapped
        assert wrapped.is_token
        assert wrapped.address == WETH_ADDRESS
        assert wrapped.decimals == ether.decimals
        assert wrapped.chain_id == ether.chain_id

    def test_native_requires_wrapped_token(self):
        with pytest.raises(ValueError, match="requires a wrapped token"):
            Currency(kind=CurrencyKind.NATIVE, chain_id=1, decimals=18)

    def test_wrapped_decimals_must_match(self):
        with pytest.raises(ValueError, match="Wrapped token decimals"):
            Currency(
                kind=CurrencyKind.NATIVE, chain_id=1, decimals=18,
                wrapped_token=token(1, WETH_ADDRESS, 6),
            )


class TestCurrencyEquals:
    """Tests for the identity test every guard relies on."""

    def test_same_token(self):
        assert token(1, ADDRESS_ONE, 18).equals(token(1, ADDRESS_ONE, 18))

    def test_address_case_insensitive(self):
        assert token(1, WETH_ADDRESS, 18).equals(token(1, WETH_ADDRESS.lower(), 18))

    def test_different_address(self):
        assert not token(1, ADDRESS_ONE, 18).equals(token(1, ADDRESS_TWO, 18))

    def test_different_chain(self):
        assert not token(1, ADDRESS_ONE, 18).equals(token(5, ADDRESS_ONE, 18))

    def test_native_equals_native_on_same_chain(self, ether):
        assert ether.equals(native_currency(1, 18, "ETH", "Ether", WETH_ADDRESS))
        assert not ether.equals(native_currency(10, 18, "ETH", "Ether", WETH_ADDRESS))

    def test_native_not_equal_to_its_wrapped_token(self, ether):
        assert not ether.equals(ether.wrapped)
        assert not ether.wrapped.equals(ether)

    def test_operator_agrees_with_equals(self):
        checksummed = token(1, WETH_ADDRESS, 18, "WETH", "Wrapped Ether")
        lowered = token(1, WETH_ADDRESS.lower(), 18, "weth")
        assert checksummed.equals(lowered)
        assert checksummed == lowered
        assert hash(checksummed) == hash(lowered)
        assert len({checksummed, lowered}) == 1

    def test_operator_distinguishes_currencies(self, ether):
        assert token(1, ADDRESS_ONE, 18) != token(1, ADDRESS_TWO, 18)
        assert ether != ether.wrapped
        assert ether == native_currency(1, 18, "ETH", "Ether", ADDRESS_ONE)
        assert token(1, ADDRESS_ONE, 18) != ADDRESS_ONE

    def test_currency_is_frozen(self, token18):
        with pytest.raises(AttributeError):
            token18.decimals = 6


class TestParseRawAmount:
    """Tests for literal normalisation."""

    def test_empty_string(self):
        assert parse_raw_amount("") == Decimal("0")

    def test_trailing_point(self):
        assert parse_raw_amount("5.") == Decimal("5")

    def test_whitespace(self):
        assert parse_raw_amount(" 1.25 ") == Decimal("1.25")

    def test_float(self):
        assert parse_raw_amount(0.1) == Decimal("0.1")

    def test_int(self):
        assert parse_raw_amount(2 ** 256) == Decimal(2 ** 256)

    def test_lone_point_raises(self):
        # "." strips to "" only after the empty check, so it stays malformed
        with pytest.raises(ParseError):
            parse_raw_amount(".")

    def test_garbage_raises(self):
        with pytest.raises(ParseError, match="not a valid number"):
            parse_raw_amount("12abc")

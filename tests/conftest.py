"""
conftest.py - Shared pytest fixtures for tokenmath tests

Provides the currencies used across unit and conformance tests:
- Tokens at 0, 6 and 18 decimals on chain 1
- A native currency (ETH) with its wrapped token
- A second 18-decimal token for mismatch checks
"""

import pytest

from tokenmath import native_currency

from tests.currencies import (
    ADDRESS_ONE, ADDRESS_TWO, ADDRESS_THREE, WETH_ADDRESS, make_token,
)


# =============================================================================
# CURRENCY FIXTURES
# =============================================================================

@pytest.fixture
def token0():
    """Token with no fractional digits."""
    return make_token(0, ADDRESS_ONE, "T0")


@pytest.fixture
def token6():
    """USDC-like token."""
    return make_token(6, ADDRESS_TWO, "T6")


@pytest.fixture
def token18():
    """ERC-20 style token with 18 decimals."""
    return make_token(18, ADDRESS_ONE, "T18")


@pytest.fixture
def other_token18():
    """A second 18-decimal token at a different address."""
    return make_token(18, ADDRESS_THREE, "O18")


@pytest.fixture
def ether():
    """Native ETH wrapping into WETH."""
    return native_currency(1, 18, "ETH", "Ether", WETH_ADDRESS)

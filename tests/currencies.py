"""
currencies.py - Currency constants and builders shared by the test suite
"""

from tokenmath import Currency, token


ADDRESS_ONE = "0x0000000000000000000000000000000000000001"
ADDRESS_TWO = "0x0000000000000000000000000000000000000002"
ADDRESS_THREE = "0x0000000000000000000000000000000000000003"
WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


def make_token(decimals: int, address: str = ADDRESS_ONE, symbol: str = None, chain_id: int = 1) -> Currency:
    """Create a token on chain 1 unless told otherwise."""
    return token(chain_id, address, decimals, symbol)

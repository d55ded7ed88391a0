"""
currency.py - Currency capability consumed by amounts and prices

Amounts and prices only need three things from a currency: its decimal scale, an
identity test, and (for amounts) the token a native currency wraps into. This
module models that as a single immutable Currency tagged NATIVE or TOKEN, plus
the two factories that build each variant.

Address checksumming and chain metadata are deliberately not handled here;
addresses are compared case-insensitively and otherwise taken as given.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .core import MAX_CURRENCY_DECIMALS


class CurrencyKind(Enum):
    """
    Variant tag of a Currency.

    NATIVE: The chain's own currency (e.g. ETH on mainnet). Wraps into a token.
    TOKEN: A contract-addressed token. Wraps into itself.
    """
    NATIVE = "native"
    TOKEN = "token"


@dataclass(frozen=True, slots=True, eq=False)
class Currency:
    """
    A currency identity as seen by amounts and prices.

    Attributes:
        kind: NATIVE or TOKEN.
        chain_id: Chain the currency lives on.
        decimals: Native decimal scale (0 <= decimals < 255).
        symbol: Optional ticker.
        name: Optional display name.
        address: Contract address (tokens only).
        wrapped_token: Paired token for a native currency; None for tokens.

    Build instances with token() or native_currency() rather than directly.
    == and hash() follow equals(), so symbol, name and address case are ignored.
    """
    kind: CurrencyKind
    chain_id: int
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    wrapped_token: Optional[Currency] = None

    def __post_init__(self):
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ValueError(f"Currency decimals must be int, got {type(self.decimals).__name__}")
        if not 0 <= self.decimals < MAX_CURRENCY_DECIMALS:
            raise ValueError(f"Currency decimals must be in [0, {MAX_CURRENCY_DECIMALS}), got {self.decimals}")
        if not isinstance(self.chain_id, int) or self.chain_id <= 0:
            raise ValueError(f"Currency chain_id must be a positive integer, got {self.chain_id!r}")
        if self.kind is CurrencyKind.TOKEN:
            if not self.address or not self.address.strip():
                raise ValueError("Token address cannot be empty")
            if self.wrapped_token is not None:
                raise ValueError("A token cannot carry a wrapped_token")
        else:
            if self.wrapped_token is None or self.wrapped_token.kind is not CurrencyKind.TOKEN:
                raise ValueError("A native currency requires a wrapped token")
            if self.wrapped_token.decimals != self.decimals:
                raise ValueError(
                    f"Wrapped token decimals {self.wrapped_token.decimals} "
                    f"!= native decimals {self.decimals}"
                )

    @property
    def is_native(self) -> bool:
        return self.kind is CurrencyKind.NATIVE

    @property
    def is_token(self) -> bool:
        return self.kind is CurrencyKind.TOKEN

    @property
    def wrapped(self) -> Currency:
        """The token form of this currency: itself for tokens, the paired token for natives."""
        return self if self.is_token else self.wrapped_token

    def equals(self, other: Currency) -> bool:
        """
        Identity test used by every currency guard.

        Natives are equal when both are native on the same chain. Tokens are
        equal when both are tokens on the same chain at the same address.
        """
        if not isinstance(other, Currency) or other.kind is not self.kind:
            return False
        if other.chain_id != self.chain_id:
            return False
        if self.is_native:
            return True
        return other.address.lower() == self.address.lower()

    def __eq__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        address = self.address.lower() if self.is_token else None
        return hash((self.kind, self.chain_id, address))

    def __repr__(self) -> str:
        label = self.symbol or self.address or "?"
        return f"Currency({self.kind.value}:{label}, chain={self.chain_id}, decimals={self.decimals})"


# ============================================================================
# FACTORIES
# ============================================================================

def token(
    chain_id: int,
    address: str,
    decimals: int,
    symbol: Optional[str] = None,
    name: Optional[str] = None,
) -> Currency:
    """
    Create a token currency.

    Args:
        chain_id: Chain the token is deployed on.
        address: Contract address (compared case-insensitively).
        decimals: Token decimal scale.
        symbol: Optional ticker.
        name: Optional display name.

    Example:
        usdc = token(1, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6, "USDC", "USD Coin")
    """
    return Currency(
        kind=CurrencyKind.TOKEN,
        chain_id=chain_id,
        decimals=decimals,
        symbol=symbol,
        name=name,
        address=address,
    )


def native_currency(
    chain_id: int,
    decimals: int,
    symbol: str,
    name: str,
    wrapped_address: str,
) -> Currency:
    """
    Create a chain's native currency together with its wrapped token.

    The wrapped token shares the native currency's chain, decimals, symbol
    and name, so wrapping an amount is a relabelling rather than a conversion.

    Example:
        eth = native_currency(1, 18, "ETH", "Ether", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2")
        eth.wrapped.address  # "0xC02a..."
    """
    wrapped = token(chain_id, wrapped_address, decimals, symbol, name)
    return Currency(
        kind=CurrencyKind.NATIVE,
        chain_id=chain_id,
        decimals=decimals,
        symbol=symbol,
        name=name,
        wrapped_token=wrapped,
    )

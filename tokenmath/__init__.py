"""
tokenmath - Exact token amounts, prices and percentages

Decimal fraction arithmetic for ledger computations where floating-point error
is unacceptable and amounts must fit in an unsigned 256-bit integer.

Usage:
    from tokenmath import CurrencyAmount, Percentage, Price, Rounding, token

    usdc = token(1, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6, "USDC")
    weth = token(1, "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 18, "WETH")

    amount = CurrencyAmount.from_raw_amount(usdc, "1250.5")
    amount.to_fixed(2)                      # "1250.50"

    price = Price.from_ratio(weth, usdc, "3120.25")
    price.quote(CurrencyAmount.from_raw_amount(weth, 2)).to_exact()   # "6240.500000"

    Percentage(154, 10_000).to_fixed(2)     # "1.54"
"""

# Core types
from .core import (
    MAX_UINT256,
    MAX_LITERAL_EXPONENT,
    PERCENTAGE_DECIMALS,
    DEFAULT_FORMAT,
    FormatOptions,
    Numberish,
    Rounding,
    TokenMathError,
    ParseError,
    AmountOverflowError,
    CurrencyMismatchError,
    CurrencyChainError,
    PrecisionError,
    InvalidArgumentError,
)

# Parsing
from .parse import parse_raw_amount

# Fraction engine
from .fraction import (
    Fraction,
    add,
    subtract,
    multiply,
    divide,
    compare,
    equal,
    less_than,
    greater_than,
    less_than_or_equal,
    greater_than_or_equal,
    round_significant,
    round_fixed,
    to_fixed,
    to_significant,
    to_exact,
)

# Currencies
from .currency import Currency, CurrencyKind, token, native_currency

# Entities
from .entities import CurrencyAmount, Percentage, Price

__all__ = [
    # Core
    "MAX_UINT256",
    "MAX_LITERAL_EXPONENT",
    "PERCENTAGE_DECIMALS",
    "DEFAULT_FORMAT",
    "FormatOptions",
    "Numberish",
    "Rounding",
    "TokenMathError",
    "ParseError",
    "AmountOverflowError",
    "CurrencyMismatchError",
    "CurrencyChainError",
    "PrecisionError",
    "InvalidArgumentError",
    # Parsing
    "parse_raw_amount",
    # Fraction engine
    "Fraction",
    "add",
    "subtract",
    "multiply",
    "divide",
    "compare",
    "equal",
    "less_than",
    "greater_than",
    "less_than_or_equal",
    "greater_than_or_equal",
    "round_significant",
    "round_fixed",
    "to_fixed",
    "to_significant",
    "to_exact",
    # Currencies
    "Currency",
    "CurrencyKind",
    "token",
    "native_currency",
    # Entities
    "CurrencyAmount",
    "Percentage",
    "Price",
]

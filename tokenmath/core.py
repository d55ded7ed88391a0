"""
Core types and constants for the tokenmath system.

This module provides the foundational pieces shared by every value type:
1. Constants: the 256-bit amount ceiling, default precisions and display defaults
2. Enums: Rounding, the three supported rounding modes
3. Formatting options: FormatOptions, passed explicitly into every formatting call
4. Exceptions: TokenMathError and the domain-specific error types
5. Type aliases: Numberish

Rounding configuration is never stored as process-wide state. Every formatting
entry point takes a Rounding and a FormatOptions argument and builds a private
decimal.Context from them for the duration of that call.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP, ROUND_UP
from enum import Enum
from typing import Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .fraction import Fraction


# ============================================================================
# CONSTANTS
# ============================================================================

# Largest raw amount an Amount may hold at its currency's decimal scale.
MAX_UINT256 = 2 ** 256 - 1

# Fixed internal precision of a Percentage (fraction of 1, not of 100).
PERCENTAGE_DECIMALS = 18

# Currencies must declare fewer decimals than this.
MAX_CURRENCY_DECIMALS = 255

# Literals whose decimal exponent reaches further than this either way are
# rejected by the parser before any digits are expanded. Comfortably above the
# 78 digits of MAX_UINT256 plus MAX_CURRENCY_DECIMALS.
MAX_LITERAL_EXPONENT = 1024

# Display defaults.
DEFAULT_SIGNIFICANT_DIGITS = 6
DEFAULT_PERCENTAGE_SIGNIFICANT_DIGITS = 5
DEFAULT_PERCENTAGE_PLACES = 2


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Anything the engine accepts as a literal operand.
Numberish = Union[int, float, str, Decimal, "Fraction"]


# ============================================================================
# ENUMS
# ============================================================================

class Rounding(Enum):
    """
    Rounding modes available to formatting and rounding calls.

    ROUND_DOWN: Truncate toward zero.
    ROUND_HALF_UP: Round to nearest, ties away from zero.
    ROUND_UP: Round away from zero on any non-zero remainder.

    Values are the matching decimal module constants so a member can be handed
    straight to decimal.Context(rounding=...).
    """
    ROUND_DOWN = ROUND_DOWN
    ROUND_HALF_UP = ROUND_HALF_UP
    ROUND_UP = ROUND_UP


# ============================================================================
# FORMATTING OPTIONS
# ============================================================================

@dataclass(frozen=True, slots=True)
class FormatOptions:
    """
    Rendering options for fixed and significant-digit output.

    Attributes:
        group_separator: Inserted between digit groups of the integer part.
            Empty string disables grouping.
        group_size: Number of digits per group (counted from the decimal point).
        decimal_separator: Character placed between integer and fractional parts.
    """
    group_separator: str = ""
    group_size: int = 3
    decimal_separator: str = "."

    def __post_init__(self):
        if not isinstance(self.group_size, int) or self.group_size <= 0:
            raise ValueError(f"group_size must be a positive integer, got {self.group_size!r}")
        if not self.decimal_separator:
            raise ValueError("decimal_separator cannot be empty")
        if self.group_separator and self.group_separator == self.decimal_separator:
            raise ValueError("group_separator and decimal_separator must be different")


DEFAULT_FORMAT = FormatOptions()


# ============================================================================
# EXCEPTIONS
# ============================================================================

class TokenMathError(Exception):
    """Base exception for all tokenmath errors."""
    pass


class ParseError(TokenMathError, ValueError):
    """Raised when a literal cannot be interpreted as a decimal fraction."""
    pass


class AmountOverflowError(TokenMathError, OverflowError):
    """Raised when an amount's raw value at its currency scale exceeds MAX_UINT256."""
    pass


class CurrencyMismatchError(TokenMathError, ValueError):
    """Raised when an operation requires identical currencies and receives different ones."""
    pass


class CurrencyChainError(TokenMathError, ValueError):
    """Raised when composing prices whose quote and base currencies do not line up."""
    pass


class PrecisionError(TokenMathError, ValueError):
    """Raised when formatting asks for more fractional digits than the currency carries."""
    pass


class InvalidArgumentError(TokenMathError, ValueError):
    """Raised when a digit or decimal-place count is not a valid integer."""
    pass


# ============================================================================
# ARGUMENT VALIDATION
# ============================================================================

def require_significant_digits(digits: int) -> int:
    """
    Validate a significant-digit count.

    Raises:
        InvalidArgumentError: If digits is not an integer or is not positive.
    """
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidArgumentError(f"{digits!r} is not an integer.")
    if digits <= 0:
        raise InvalidArgumentError(f"{digits} is not positive.")
    return digits


def require_decimal_places(places: int) -> int:
    """
    Validate a fixed decimal-place count. Zero is allowed.

    Raises:
        InvalidArgumentError: If places is not an integer or is negative.
    """
    if isinstance(places, bool) or not isinstance(places, int):
        raise InvalidArgumentError(f"{places!r} is not an integer.")
    if places < 0:
        raise InvalidArgumentError(f"{places} is negative.")
    return places

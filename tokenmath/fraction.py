"""
fraction.py - Decimal fraction engine

Exact rational arithmetic over values of the form value / 10**decimals, and the
rounding and rendering primitives every formatter in the system is built on.

This module provides:
1. Fraction - immutable (value, decimals) pair with value semantics
2. Pure arithmetic: add(), subtract(), multiply(), divide()
3. Comparisons: equal(), less_than(), greater_than() and the or-equal variants
4. Rounding: round_significant(), round_fixed()
5. Rendering: to_fixed(), to_significant(), to_exact()

Precision is only ever lost in two places, both truncating toward zero:
divide() past its target decimals, and multiply()/rescale() when asked to keep
fewer decimals than the exact result has. Rounding with any other mode happens
explicitly, through round_significant()/round_fixed(), with the mode passed in
per call. No function here reads or writes the global decimal context.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import (
    Context, Decimal, DivisionByZero, InvalidOperation, Overflow,
    MAX_EMAX, MIN_EMIN,
)
from typing import Optional, Tuple

from .core import (
    DEFAULT_FORMAT, FormatOptions, Numberish, ParseError, Rounding,
    require_decimal_places, require_significant_digits,
)
from .parse import parse_raw_amount


# ============================================================================
# FRACTION
# ============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class Fraction:
    """
    An exact decimal fraction: value / 10**decimals.

    Attributes:
        value: Arbitrary-precision signed integer numerator (the mantissa).
        decimals: Number of fractional digits the mantissa carries (>= 0).

    Two fractions with different decimals can denote the same number;
    Fraction(150, 2) == Fraction(15, 1) == Fraction("1.5"). Equality, ordering
    and hashing compare the numbers, not the representation. Use the value and
    decimals attributes directly when the representation matters.

    This class is immutable (frozen=True). Every operation returns a new Fraction.
    """
    value: int
    decimals: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Fraction value must be int, got {type(self.value).__name__}")
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ValueError(f"Fraction decimals must be int, got {type(self.decimals).__name__}")
        if self.decimals < 0:
            raise ValueError(f"Fraction decimals cannot be negative, got {self.decimals}")

    # ------------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------------

    @classmethod
    def from_value(cls, value: Numberish, decimals: Optional[int] = None) -> Fraction:
        """
        Build a Fraction from any supported literal.

        Args:
            value: int, decimal string, float, Decimal or Fraction. The empty
                string is zero; a trailing bare decimal point is ignored.
            decimals: If given, rescale the result to exactly this many
                fractional digits (truncating toward zero when shrinking).

        Raises:
            ParseError: If the literal cannot be interpreted.
        """
        if isinstance(value, Fraction):
            result = value
        elif isinstance(value, int) and not isinstance(value, bool):
            result = cls(value, 0)
        else:
            result = cls.from_decimal(parse_raw_amount(value))
        if decimals is not None:
            result = result.rescale(decimals)
        return result

    @classmethod
    def from_decimal(cls, d: Decimal) -> Fraction:
        """Exact conversion from a finite Decimal."""
        if not d.is_finite():
            raise ParseError(f"{d} is not a finite number.")
        sign, digits, exponent = d.as_tuple()
        coefficient = int("".join(map(str, digits))) if digits else 0
        if sign:
            coefficient = -coefficient
        if exponent >= 0:
            return cls(coefficient * 10 ** exponent, 0)
        return cls(coefficient, -exponent)

    # ------------------------------------------------------------------------
    # Representation helpers
    # ------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    def rescale(self, decimals: int) -> Fraction:
        """
        Re-express at the given number of fractional digits.

        Growing is exact. Shrinking truncates toward zero.
        """
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ValueError(f"decimals must be a non-negative integer, got {decimals!r}")
        if decimals >= self.decimals:
            return Fraction(self.value * 10 ** (decimals - self.decimals), decimals)
        return Fraction(_div_toward_zero(self.value, 10 ** (self.decimals - decimals)), decimals)

    def shift(self, places: int) -> Fraction:
        """
        Multiply by 10**places exactly. Negative places divide.

        The mantissa is kept; only the decimal count moves (and the mantissa
        grows when decimals would go below zero).
        """
        decimals = self.decimals - places
        if decimals >= 0:
            return Fraction(self.value, decimals)
        return Fraction(self.value * 10 ** (-decimals), 0)

    def normalized(self) -> Fraction:
        """Strip trailing fractional zeros: Fraction(1500, 3) -> Fraction(15, 1)."""
        value, decimals = self.value, self.decimals
        while decimals > 0 and value % 10 == 0:
            value //= 10
            decimals -= 1
        return Fraction(value, decimals)

    def to_decimal(self) -> Decimal:
        """Exact Decimal equivalent (no context rounding is applied)."""
        digits = tuple(int(c) for c in str(abs(self.value)))
        return Decimal((1 if self.value < 0 else 0, digits, -self.decimals))

    # ------------------------------------------------------------------------
    # Arithmetic and comparison entry points
    # ------------------------------------------------------------------------

    def add(self, other: Numberish) -> Fraction:
        return add(self, other)

    def subtract(self, other: Numberish) -> Fraction:
        return subtract(self, other)

    def multiply(self, other: Numberish, decimals: Optional[int] = None) -> Fraction:
        return multiply(self, other, decimals)

    def divide(self, other: Numberish = 1, decimals: Optional[int] = None) -> Fraction:
        return divide(self, other, decimals)

    def equal(self, other: Numberish) -> bool:
        return equal(self, other)

    def less_than(self, other: Numberish) -> bool:
        return less_than(self, other)

    def greater_than(self, other: Numberish) -> bool:
        return greater_than(self, other)

    def less_than_or_equal(self, other: Numberish) -> bool:
        return less_than_or_equal(self, other)

    def greater_than_or_equal(self, other: Numberish) -> bool:
        return greater_than_or_equal(self, other)

    # ------------------------------------------------------------------------
    # Python operators (exact operands only: int, Decimal, Fraction)
    # ------------------------------------------------------------------------

    def __eq__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self):
        # Decimal hashing already agrees with int hashing and ignores trailing zeros
        return hash(self.to_decimal())

    def __add__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        if not _is_exact_operand(other):
            return NotImplemented
        return divide(other, self)

    def __neg__(self):
        return Fraction(-self.value, self.decimals)

    def __abs__(self):
        return Fraction(abs(self.value), self.decimals)

    def __bool__(self):
        return self.value != 0

    def __str__(self) -> str:
        return to_exact(self)


ZERO = Fraction(0, 0)
ONE = Fraction(1, 0)


# ============================================================================
# INTERNAL HELPERS
# ============================================================================

def _is_exact_operand(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Fraction, int, Decimal))


def _as_fraction(value: Numberish) -> Fraction:
    return value if isinstance(value, Fraction) else Fraction.from_value(value)


def _div_toward_zero(numerator: int, denominator: int) -> int:
    # Python's // floors; the engine truncates
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _equalize(a: Fraction, b: Fraction) -> Tuple[int, int, int]:
    """Return both mantissas at the common (larger) decimals, plus that decimals."""
    decimals = max(a.decimals, b.decimals)
    return (
        a.value * 10 ** (decimals - a.decimals),
        b.value * 10 ** (decimals - b.decimals),
        decimals,
    )


def _decimal_context(rounding: Rounding, precision: int) -> Context:
    """
    Build a private decimal context for a single rounding call.

    The context is created fresh each time and never installed as the
    thread's current context.
    """
    if not isinstance(rounding, Rounding):
        raise ValueError(f"rounding must be a Rounding member, got {rounding!r}")
    return Context(
        prec=max(precision, 1),
        rounding=rounding.value,
        Emin=MIN_EMIN,
        Emax=MAX_EMAX,
        traps=[InvalidOperation, DivisionByZero, Overflow],
        flags=[],
    )


# ============================================================================
# ARITHMETIC
# ============================================================================

def add(a: Numberish, b: Numberish) -> Fraction:
    """Sum at max(a.decimals, b.decimals). Exact."""
    va, vb, decimals = _equalize(_as_fraction(a), _as_fraction(b))
    return Fraction(va + vb, decimals)


def subtract(a: Numberish, b: Numberish) -> Fraction:
    """Difference at max(a.decimals, b.decimals). Exact."""
    va, vb, decimals = _equalize(_as_fraction(a), _as_fraction(b))
    return Fraction(va - vb, decimals)


def multiply(a: Numberish, b: Numberish, decimals: Optional[int] = None) -> Fraction:
    """
    Product of two fractions.

    Args:
        a, b: Operands.
        decimals: Fractional digits of the result. Defaults to
            max(a.decimals, b.decimals). Pass a.decimals + b.decimals (or more)
            to keep the product exact.

    Digits beyond the requested decimals are truncated toward zero.
    """
    a, b = _as_fraction(a), _as_fraction(b)
    if decimals is None:
        decimals = max(a.decimals, b.decimals)
    return Fraction(a.value * b.value, a.decimals + b.decimals).rescale(decimals)


def divide(
    numerator: Numberish,
    denominator: Numberish = 1,
    decimals: Optional[int] = None,
) -> Fraction:
    """
    Quotient numerator / denominator at a fixed number of fractional digits.

    Args:
        numerator: Dividend.
        denominator: Divisor (default 1).
        decimals: Fractional digits of the result. Defaults to
            max(numerator.decimals, denominator.decimals).

    Returns:
        The quotient, truncated toward zero past the requested decimals. This
        is the only arithmetic step that drops information on its own; callers
        wanting another rounding must round the operands' exact ratio themselves.

    Raises:
        ZeroDivisionError: If the denominator is zero.
    """
    n, d = _as_fraction(numerator), _as_fraction(denominator)
    if d.value == 0:
        raise ZeroDivisionError(f"Cannot divide {n} by zero")
    if decimals is None:
        decimals = max(n.decimals, d.decimals)
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise ValueError(f"decimals must be a non-negative integer, got {decimals!r}")
    # n.value / 10**n.decimals / (d.value / 10**d.decimals), scaled by 10**decimals
    scaled = n.value * 10 ** (d.decimals + decimals)
    divisor = d.value * 10 ** n.decimals
    return Fraction(_div_toward_zero(scaled, divisor), decimals)


# ============================================================================
# COMPARISON
# ============================================================================

def compare(a: Numberish, b: Numberish) -> int:
    """Return -1, 0 or 1 as a is less than, equal to, or greater than b."""
    va, vb, _ = _equalize(_as_fraction(a), _as_fraction(b))
    return (va > vb) - (va < vb)


def equal(a: Numberish, b: Numberish) -> bool:
    return compare(a, b) == 0


def less_than(a: Numberish, b: Numberish) -> bool:
    return compare(a, b) < 0


def greater_than(a: Numberish, b: Numberish) -> bool:
    return compare(a, b) > 0


def less_than_or_equal(a: Numberish, b: Numberish) -> bool:
    return compare(a, b) <= 0


def greater_than_or_equal(a: Numberish, b: Numberish) -> bool:
    return compare(a, b) >= 0


# ============================================================================
# ROUNDING
# ============================================================================

def round_significant(
    value: Numberish,
    significant_digits: int,
    rounding: Rounding = Rounding.ROUND_DOWN,
) -> Fraction:
    """
    Round to a number of significant digits.

    Counting starts at the leading non-zero digit; the rounding mode is applied
    to whatever follows the last kept digit. Magnitude is preserved, so 123456
    rounded to 4 digits is 123400, not 1234.

    Raises:
        InvalidArgumentError: If significant_digits is not a positive integer.
    """
    require_significant_digits(significant_digits)
    f = _as_fraction(value)
    if f.value == 0:
        return ZERO
    context = _decimal_context(rounding, significant_digits)
    return Fraction.from_decimal(context.plus(f.to_decimal()))


def round_fixed(
    value: Numberish,
    decimal_places: int,
    rounding: Rounding = Rounding.ROUND_DOWN,
) -> Fraction:
    """
    Round to a fixed number of fractional digits.

    The result always carries exactly decimal_places decimals. Values too small
    to show at that precision round to zero (or to one unit in the last place
    under ROUND_UP); this is never an error.

    Raises:
        InvalidArgumentError: If decimal_places is not a non-negative integer.
    """
    require_decimal_places(decimal_places)
    f = _as_fraction(value)
    if decimal_places >= f.decimals:
        return f.rescale(decimal_places)
    # Room for every integer digit, the kept fraction, and a carry
    precision = len(str(abs(f.value))) + decimal_places + 1
    context = _decimal_context(rounding, precision)
    quantum = Decimal((0, (1,), -decimal_places))
    rounded = f.to_decimal().quantize(quantum, context=context)
    return Fraction.from_decimal(rounded).rescale(decimal_places)


# ============================================================================
# RENDERING
# ============================================================================

def _group(digits: str, fmt: FormatOptions) -> str:
    if not fmt.group_separator or len(digits) <= fmt.group_size:
        return digits
    head = len(digits) % fmt.group_size or fmt.group_size
    groups = [digits[:head]]
    for i in range(head, len(digits), fmt.group_size):
        groups.append(digits[i:i + fmt.group_size])
    return fmt.group_separator.join(groups)


def _render(f: Fraction, fmt: FormatOptions) -> str:
    """Render every digit of f in positional notation."""
    digits = str(abs(f.value))
    if f.decimals:
        digits = digits.rjust(f.decimals + 1, "0")
        integer_part = digits[:-f.decimals]
        text = f"{_group(integer_part, fmt)}{fmt.decimal_separator}{digits[-f.decimals:]}"
    else:
        text = _group(digits, fmt)
    return f"-{text}" if f.value < 0 else text


def to_fixed(
    value: Numberish,
    decimal_places: int,
    rounding: Rounding = Rounding.ROUND_DOWN,
    fmt: FormatOptions = DEFAULT_FORMAT,
) -> str:
    """
    Render with exactly decimal_places fractional digits.

    The value is rounded first, then zero-padded. With decimal_places == 0 no
    decimal separator is emitted. A minus sign appears only if the rounded
    value is non-zero.

    Example:
        to_fixed(Fraction(1000000000000000, 18), 9)  ->  "0.001000000"
        to_fixed("1234567.891", 2, fmt=FormatOptions(group_separator=","))
            ->  "1,234,567.89"
    """
    return _render(round_fixed(value, decimal_places, rounding), fmt)


def to_significant(
    value: Numberish,
    significant_digits: int,
    rounding: Rounding = Rounding.ROUND_DOWN,
    fmt: FormatOptions = DEFAULT_FORMAT,
) -> str:
    """
    Render rounded to significant_digits significant digits.

    Integer zeros introduced by rounding stay ("123400"); trailing fractional
    zeros are dropped ("0.001", not "0.001000").
    """
    return _render(round_significant(value, significant_digits, rounding).normalized(), fmt)


def to_exact(value: Numberish, fmt: FormatOptions = DEFAULT_FORMAT) -> str:
    """Render every stored digit, trailing zeros included."""
    return _render(_as_fraction(value), fmt)

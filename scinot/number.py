"""
Approximate large-magnitude numbers in scaled-mantissa form.

`SciNot` stores a value as mantissa * 10^exponent with the mantissa normalized
to [1, 10) (or zero). Arithmetic defers to native float math for human-scale
operands and to mantissa/exponent math for astronomic ones, so values far
beyond the float range stay cheap to add, multiply and compare.

The representation is approximate by nature; it is not an arbitrary precision
number, and NaN/inf are rejected rather than represented.
"""

# ## Precision policy
#
# Operands whose exponents are both within [-EXACT_RADIUS, EXACT_RADIUS] are
# combined as native floats and reconstructed via SciNot.from_float(), which
# keeps full float precision for small numbers.
#
# Outside that band, +/- align the smaller mantissa onto the larger exponent,
# or drop the smaller operand altogether once the exponent gap exceeds
# IGNORE_GAP. Multiplication and division never need alignment.
#
# ## Equality
#
# Equality tolerates an absolute mantissa difference of EQUALITY_TOL at equal
# exponents. It is not transitive: a == b and b == c do not imply a == c.

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
import operator
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum, unique
from fractions import Fraction
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .numeric import std_numeric
from .sentinels import UNSET, UnsetType, ifunset

logger = logging.getLogger(__name__)


# @formatter:off

class SciNotConf:
    """
    Default configuration constants for SciNot normalization and arithmetic.

    Arithmetic functions accept per-call overrides of EXACT_RADIUS and
    IGNORE_GAP via keyword arguments; the operators always use these defaults.

    Attributes:
        EXACT_RADIUS: Operands with exponent in [-EXACT_RADIUS, EXACT_RADIUS]
            are combined with native float arithmetic.
        IGNORE_GAP: In addition/subtraction, an operand more than IGNORE_GAP
            orders of magnitude smaller than the other is discarded.
        NORMALIZE_EPS: Tolerance around 1.0 and 10.0 deciding when a digit shift
            happens, which prevents flapping at the band edges.
        ZERO_FLOOR: Mantissas below this magnitude after scaling snap to zero.
        EQUALITY_TOL: Absolute mantissa tolerance for equality at equal exponents.
        FLOAT_MAX_EXPONENT: Largest exponent converted to float without overflow signal.
        FLOAT_MIN_EXPONENT: Smallest exponent converted to float without underflow signal.
        DEBUG_DECIMALS: Mantissa decimals in str(SciNot).
    """
    EXACT_RADIUS = 12
    IGNORE_GAP = 15

    NORMALIZE_EPS = 1e-12
    ZERO_FLOOR = 1e-18
    EQUALITY_TOL = 1e-15

    FLOAT_MAX_EXPONENT = 308
    FLOAT_MIN_EXPONENT = -324

    DEBUG_DECIMALS = 3

# @formatter:on


# Largest single power-of-ten jump applied while normalizing
_MAX_JUMP = 300


@unique
class ConversionStatus(StrEnum):
    """Outcome of a strict SciNot to float conversion."""
    OK = "ok"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"


@dataclass(frozen=True)
class FloatConversion:
    """
    Result of SciNot.try_float().

    Attributes:
        value: float approximation; ±inf on overflow, 0.0 on underflow.
        status: conversion outcome.
    """
    value: float
    status: ConversionStatus = ConversionStatus.OK

    @property
    def ok(self) -> bool:
        """True if value is a faithful float approximation."""
        return self.status == ConversionStatus.OK


# Normalizer -----------------------------------------------------------------------------------------------------------

def normalize(mantissa: int | float, exponent: int) -> tuple[float, int]:
    """
    Bring a raw (mantissa, exponent) pair into canonical form.

    Zero becomes (0.0, 0). Otherwise the mantissa is shifted down while
    |mantissa| >= 10 - eps and up while |mantissa| < 1 - eps, adjusting the
    exponent to compensate; a mantissa that ends below SciNotConf.ZERO_FLOOR
    collapses to zero. The function is pure and idempotent.

    This is also the entry point for editing surfaces that change raw fields:
    normalize the edited pair, then build a new SciNot from it.

    Args:
        mantissa: Raw finite mantissa, int or float.
        exponent: Raw integer exponent.

    Returns:
        Canonical (mantissa, exponent) pair.

    Raises:
        TypeError: If mantissa is not int | float or exponent is not an integer.
        ValueError: If mantissa is NaN or infinite.

    Examples:
        >>> normalize(1234.0, 0)
        (1.234, 3)
        >>> normalize(0.05, 2)
        (5.0, 0)
        >>> normalize(-0.0, 17)
        (0.0, 0)
    """
    mantissa = _std_mantissa(mantissa)
    exponent = _std_exponent(exponent)

    if mantissa == 0.0:
        return 0.0, 0

    upper = 10.0 - SciNotConf.NORMALIZE_EPS
    lower = 1.0 - SciNotConf.NORMALIZE_EPS

    # One power-of-ten jump first, so that large shifts cost a single rounding
    magnitude = abs(mantissa)
    if magnitude >= upper or magnitude < lower:
        shift = max(-_MAX_JUMP, min(_MAX_JUMP, math.floor(math.log10(magnitude))))
        if shift:
            mantissa = _scale10(mantissa, -shift)
            exponent += shift

    while abs(mantissa) >= upper:
        mantissa /= 10.0
        exponent += 1

    while 0.0 < abs(mantissa) < lower:
        mantissa *= 10.0
        exponent -= 1

    if abs(mantissa) < SciNotConf.ZERO_FLOOR:
        return 0.0, 0

    return mantissa, exponent


# Value Type -----------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class SciNot:
    """
    Immutable approximate number mantissa * 10^exponent.

    Construction always normalizes, so SciNot(1234, 0) is stored as
    (1.234, 3). Use SciNot.from_float() or SciNot.from_number() to convert
    native numbers; arithmetic and comparison with raw int/float operands is
    not supported, to keep precision loss visible at call sites.

    Attributes:
        mantissa: Normalized mantissa, 1 <= |mantissa| < 10, or 0.0.
        exponent: Power of ten; 0 for zero.

    Examples:
        >>> a = SciNot.from_float(1500)
        >>> b = SciNot(2.5, 300)
        >>> str(a * b)
        '3.750e303'
        >>> a + b == b
        True
        >>> SciNot(5, 0) / SciNot.zero()
        Traceback (most recent call last):
            ...
        ZeroDivisionError: SciNot divide by zero: 5.000e0 / 0

    Raises:
        TypeError: If mantissa is not int | float or exponent is not an integer.
        ValueError: If mantissa is NaN or infinite.
    """
    mantissa: float = 0.0
    exponent: int = 0

    def __post_init__(self):
        """Normalize raw fields"""
        mantissa, exponent = normalize(self.mantissa, self.exponent)
        object.__setattr__(self, 'mantissa', mantissa)
        object.__setattr__(self, 'exponent', exponent)

    # Factories --------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Self:
        """Canonical zero (0.0, 0)."""
        return ZERO

    @classmethod
    def one(cls) -> Self:
        """Canonical one (1.0, 0)."""
        return ONE

    @classmethod
    def from_float(cls, value: int | float) -> Self:
        """
        Create SciNot from a native int or float.

        Python ints beyond the float range are converted exactly to their
        leading digits instead of overflowing.

        Raises:
            TypeError: If value is not int | float (bool included).
            ValueError: If value is NaN or infinite.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"value must be int | float, but got {fmt_type(value)}")

        if isinstance(value, int):
            return cls._from_int(value)

        if not math.isfinite(value):
            raise ValueError(f"NaN/Infinity not supported by SciNot, got {fmt_value(value)}")

        if value == 0:
            return ZERO

        exponent = math.floor(math.log10(abs(value)))
        if abs(exponent) > _MAX_JUMP:
            # Subnormals and values near float max: left to normalize()
            return cls(value, 0)
        return cls(_scale10(value, -exponent), exponent)

    @classmethod
    def from_number(cls, value) -> Self:
        """
        Create SciNot from any supported numeric type.

        Accepts Python int/float, Decimal, Fraction, NumPy scalars and other
        types standardized by std_numeric(). Decimal and Fraction keep their
        decimal exponent, so finite values far outside the float range are
        converted without overflow or underflow.

        Examples:
            >>> from decimal import Decimal
            >>> SciNot.from_number(Decimal("4.2e500"))
            SciNot(mantissa=4.2, exponent=500)
            >>> SciNot.from_number(Decimal("1.5e-400"))
            SciNot(mantissa=1.5, exponent=-400)

        Raises:
            TypeError: If value is not a supported numeric type.
            ValueError: If value is NaN or infinite.
        """
        if isinstance(value, Fraction):
            value = Decimal(value.numerator) / Decimal(value.denominator)
        if isinstance(value, Decimal):
            return cls._from_decimal(value)
        return cls.from_float(std_numeric(value))

    @classmethod
    def _from_int(cls, value: int) -> Self:
        try:
            return cls.from_float(float(value))
        except OverflowError:
            logger.debug("int beyond float range converted via Decimal")
        return cls._from_decimal(Decimal(value))

    @classmethod
    def _from_decimal(cls, value: Decimal) -> Self:
        """Leading digits as mantissa, adjusted() as exponent."""
        if not value.is_finite():
            raise ValueError(f"NaN/Infinity not supported by SciNot, got {fmt_value(value)}")
        if value.is_zero():
            return ZERO
        exponent = value.adjusted()
        return cls(float(value.scaleb(-exponent)), exponent)

    def merge(self,
              mantissa: int | float | UnsetType = UNSET,
              exponent: int | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new SciNot with raw fields replaced and normalized again.

        Parameters not provided (UNSET) are inherited from the current instance.

        Examples:
            >>> SciNot(1.5, 3).merge(mantissa=25)
            SciNot(mantissa=2.5, exponent=4)
        """
        mantissa = ifunset(mantissa, default=self.mantissa)
        exponent = ifunset(exponent, default=self.exponent)
        return SciNot(mantissa, exponent)

    # Conversion -------------------------------------------------------------------------

    def try_float(self) -> FloatConversion:
        """
        Strict conversion to float.

        Returns:
            FloatConversion with status OK and the float value, or status
            OVERFLOW with ±inf, or UNDERFLOW with 0.0, when the value lies
            outside the float range.
        """
        if self.is_zero:
            return FloatConversion(0.0)

        if self.exponent > SciNotConf.FLOAT_MAX_EXPONENT:
            return FloatConversion(math.copysign(math.inf, self.mantissa), ConversionStatus.OVERFLOW)
        if self.exponent < SciNotConf.FLOAT_MIN_EXPONENT:
            return FloatConversion(0.0, ConversionStatus.UNDERFLOW)

        value = _scale10(self.mantissa, self.exponent)
        if math.isinf(value):
            return FloatConversion(value, ConversionStatus.OVERFLOW)
        if value == 0.0:
            return FloatConversion(0.0, ConversionStatus.UNDERFLOW)
        return FloatConversion(value)

    def to_float(self) -> float:
        """
        Best-effort float value, saturating to ±inf or 0.0 out of float range.

        Never raises; use try_float() where the saturation must be detected.
        """
        result = self.try_float()
        if not result.ok:
            logger.debug("%s saturated to %r (%s)", self, result.value, result.status)
        return result.value

    def __float__(self) -> float:
        return self.to_float()

    # Queries ----------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        """True for canonical zero."""
        return self.mantissa == 0.0

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        if self.mantissa > 0:
            return 1
        if self.mantissa < 0:
            return -1
        return 0

    def in_exact_range(self, radius: int | None = None) -> bool:
        """True if exponent lies in [-radius, radius], radius defaults to SciNotConf.EXACT_RADIUS."""
        radius = SciNotConf.EXACT_RADIUS if radius is None else radius
        return -radius <= self.exponent <= radius

    def __bool__(self) -> bool:
        return not self.is_zero

    # Arithmetic -------------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return multiply(self, other)

    def __truediv__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return divide(self, other)

    def __neg__(self) -> Self:
        return SciNot(-self.mantissa, self.exponent)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return absolute(self)

    # Comparison -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return _is_equal(self, other)

    def __ne__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return not _is_equal(self, other)

    def __hash__(self):
        # Equal values always share the exponent, tolerant equality forbids hashing the mantissa
        return hash(self.exponent)

    def __lt__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, SciNot):
            return NotImplemented
        return compare(self, other) >= 0

    # Representation ---------------------------------------------------------------------

    def __str__(self):
        """Debug string, e.g. '1.234e56'. See scinot.display for UI formatting."""
        if self.is_zero:
            return "0"
        return f"{self.mantissa:.{SciNotConf.DEBUG_DECIMALS}f}e{self.exponent}"


# Arithmetic -----------------------------------------------------------------------------------------------------------

def add(a: SciNot, b: SciNot, *,
        exact_radius: int | None = None,
        ignore_gap: int | None = None) -> SciNot:
    """
    Sum of two SciNot values.

    Both operands within the exact range are summed as floats. Otherwise
    equal exponents add mantissas directly, an exponent gap beyond ignore_gap
    returns the larger operand unchanged, and any other gap aligns the
    smaller mantissa onto the larger exponent.

    Args:
        a, b: Operands.
        exact_radius: Override for SciNotConf.EXACT_RADIUS.
        ignore_gap: Override for SciNotConf.IGNORE_GAP.

    Examples:
        >>> add(SciNot(1, 100), SciNot(1, 99))
        SciNot(mantissa=1.1, exponent=100)
        >>> add(SciNot(1, 100), SciNot(9, 80))
        SciNot(mantissa=1.0, exponent=100)
    """
    _check_operands(a, b)
    radius, gap_limit = _resolve_policy(exact_radius, ignore_gap)

    if a.is_zero:
        return b
    if b.is_zero:
        return a

    if a.in_exact_range(radius) and b.in_exact_range(radius):
        return SciNot.from_float(a.to_float() + b.to_float())

    if a.exponent == b.exponent:
        return SciNot(a.mantissa + b.mantissa, a.exponent)

    big, small = (a, b) if a.exponent > b.exponent else (b, a)
    gap = big.exponent - small.exponent
    if gap > gap_limit:
        return big

    return SciNot(big.mantissa + _scale10(small.mantissa, -gap), big.exponent)


def subtract(a: SciNot, b: SciNot, *,
             exact_radius: int | None = None,
             ignore_gap: int | None = None) -> SciNot:
    """Difference a - b, computed as a + (-b) with the same precision policy as add()."""
    _check_operands(a, b)
    return add(a, -b, exact_radius=exact_radius, ignore_gap=ignore_gap)


def multiply(a: SciNot, b: SciNot, *, exact_radius: int | None = None) -> SciNot:
    """
    Product of two SciNot values.

    Float multiplication within the exact range, mantissa product with summed
    exponents outside it.
    """
    _check_operands(a, b)
    radius, _ = _resolve_policy(exact_radius, None)

    if a.is_zero or b.is_zero:
        return ZERO

    if a.in_exact_range(radius) and b.in_exact_range(radius):
        return SciNot.from_float(a.to_float() * b.to_float())

    return SciNot(a.mantissa * b.mantissa, a.exponent + b.exponent)


def divide(a: SciNot, b: SciNot, *, exact_radius: int | None = None) -> SciNot:
    """
    Quotient a / b.

    Raises:
        ZeroDivisionError: If b is zero.
    """
    _check_operands(a, b)
    radius, _ = _resolve_policy(exact_radius, None)

    if b.is_zero:
        raise ZeroDivisionError(f"SciNot divide by zero: {a} / {b}")
    if a.is_zero:
        return ZERO

    if a.in_exact_range(radius) and b.in_exact_range(radius):
        return SciNot.from_float(a.to_float() / b.to_float())

    return SciNot(a.mantissa / b.mantissa, a.exponent - b.exponent)


def absolute(value: SciNot) -> SciNot:
    """Magnitude of value, exponent unchanged."""
    _check_operands(value)
    if value.mantissa >= 0:
        return value
    return SciNot(-value.mantissa, value.exponent)


# Comparison -----------------------------------------------------------------------------------------------------------

def compare(a: SciNot, b: SciNot) -> int:
    """
    Three-way comparison: -1 if a < b, 0 if a == b, 1 if a > b.

    Zero against nonzero is decided by the sign of the nonzero operand,
    then mantissa signs, then exponents (sign-adjusted), then mantissa
    magnitudes. Returns 0 exactly when a == b under tolerant equality.
    """
    _check_operands(a, b)

    if a.is_zero and b.is_zero:
        return 0
    if a.is_zero:
        return -b.sign
    if b.is_zero:
        return a.sign

    if a.sign != b.sign:
        return a.sign

    if _is_equal(a, b):
        return 0

    sign = a.sign
    if a.exponent != b.exponent:
        return sign if a.exponent > b.exponent else -sign
    return sign if abs(a.mantissa) > abs(b.mantissa) else -sign


def minimum(a: SciNot, b: SciNot) -> SciNot:
    """Smaller of a and b; a when they compare equal."""
    return a if a <= b else b


def maximum(a: SciNot, b: SciNot) -> SciNot:
    """Larger of a and b; a when they compare equal."""
    return a if a >= b else b


def exponent_gap_at_least(a: SciNot, b: SciNot, k: int) -> bool:
    """
    True if a.exponent - b.exponent >= k.

    A cheap dominance test: for positive a and b it implies a >= b * 10^(k-1)
    regardless of mantissas, without any float conversion.
    """
    _check_operands(a, b)
    return a.exponent - b.exponent >= k


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_equal(a: SciNot, b: SciNot) -> bool:
    if a.is_zero and b.is_zero:
        return True
    return a.exponent == b.exponent and abs(a.mantissa - b.mantissa) <= SciNotConf.EQUALITY_TOL


def _check_operands(*values) -> None:
    for value in values:
        if not isinstance(value, SciNot):
            raise TypeError(f"SciNot operand expected, but got {fmt_type(value)}")


def _resolve_policy(exact_radius: int | None, ignore_gap: int | None) -> tuple[int, int]:
    """Validate per-call overrides and fill in SciNotConf defaults."""
    radius = SciNotConf.EXACT_RADIUS if exact_radius is None else exact_radius
    gap_limit = SciNotConf.IGNORE_GAP if ignore_gap is None else ignore_gap

    for name, value in (("exact_radius", radius), ("ignore_gap", gap_limit)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be int, but got {fmt_type(value)}")

    # Products of two in-range operands must stay below float max
    max_radius = SciNotConf.FLOAT_MAX_EXPONENT // 2 - 1
    if not 0 <= radius <= max_radius:
        raise ValueError(f"exact_radius must be in [0, {max_radius}], "
                         f"but got {fmt_value(radius)}")
    if not 0 <= gap_limit <= SciNotConf.FLOAT_MAX_EXPONENT:
        raise ValueError(f"ignore_gap must be in [0, {SciNotConf.FLOAT_MAX_EXPONENT}], "
                         f"but got {fmt_value(gap_limit)}")
    return radius, gap_limit


def _scale10(value: float, power: int) -> float:
    """
    Return value * 10^power for power in [-632, 308].

    Negative powers divide by an exact power of ten where possible,
    which rounds better than multiplying by an inexact 10^-n.
    """
    if power >= 0:
        return value * 10.0 ** power
    if power >= -SciNotConf.FLOAT_MAX_EXPONENT:
        return value / 10.0 ** -power
    return value / 1e308 / 10.0 ** (-power - 308)


def _std_mantissa(mantissa) -> float:
    if isinstance(mantissa, bool) or not isinstance(mantissa, (int, float)):
        raise TypeError(f"mantissa must be int | float, but got {fmt_type(mantissa)}")
    try:
        mantissa = float(mantissa)
    except OverflowError as exc:
        raise ValueError("int mantissa exceeds the float range, use SciNot.from_number()") from exc
    if not math.isfinite(mantissa):
        raise ValueError(f"mantissa must be finite, but got {fmt_value(mantissa)}")
    return mantissa


def _std_exponent(exponent) -> int:
    if isinstance(exponent, bool):
        raise TypeError(f"exponent must be int, but got {fmt_type(exponent)}")
    try:
        return operator.index(exponent)
    except TypeError as exc:
        raise TypeError(f"exponent must be int, but got {fmt_type(exponent)}") from exc


# Constants ------------------------------------------------------------------------------------------------------------

ZERO = SciNot(0.0, 0)
ONE = SciNot(1.0, 0)

"""
Short human-readable formatting of SciNot values for UI, HUDs and logs.

Renders "1.23K", "45.60M" or "7.89e63"; str(SciNot) stays the debug form.
"""

# ## Scope
#
# `DisplayValue` is designed for **one-way formatting** (SciNot → human-readable string).
# It is NOT designed for parsing strings back to values. Store the SciNot itself
# (mantissa and exponent), not the formatted string.

# ## Tiers
#
# A tier groups three exponent steps under one short-scale suffix: tier 1 is "K"
# (10³), tier 2 is "M" (10⁶), and so on. Values with exponent in (-3, 3) are shown
# as plain decimals, values past the last suffix (or below 10⁻³) fall back to
# e-notation on the mantissa.

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Iterable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .number import SciNot
from .sentinels import UNSET, UnsetType, ifunset


# @formatter:off

class DisplayConf:
    """
    Default configuration constants for DisplayValue formatting.

    Attributes:
        SUFFIXES: Short-scale suffixes indexed by tier, tier N meaning 10^(3N).
            The empty suffix at tier 0 covers values below one thousand.

        DECIMAL_PLACES: Default decimals in FIXED mode.

        COMPACT_DECIMALS: Default decimals in COMPACT mode; e-notation in
            COMPACT mode gets one more.

        PLAIN_EXPONENT_LIMIT: Values with |exponent| below this limit are shown
            as plain decimals without suffix.

        TIER_STEP: Exponent steps per tier.

    Examples:
        >>> # Custom table, e-notation from 10^9 on
        >>> str(DisplayValue(SciNot(5, 9), suffixes=("", "k", "m")))
        '5.00e9'
    """

    SUFFIXES = (
        "",     # 10⁰
        "K",    # thousand      10³
        "M",    # million       10⁶
        "B",    # billion       10⁹
        "T",    # trillion      10¹²
        "Qa",   # quadrillion   10¹⁵
        "Qi",   # quintillion   10¹⁸
        "Sx",   # sextillion    10²¹
        "Sp",   # septillion    10²⁴
        "Oc",   # octillion     10²⁷
        "No",   # nonillion     10³⁰
        "Dc",   # decillion     10³³
        "Ud",   # undecillion   10³⁶
        "Dd",   # duodecillion  10³⁹
        "Td",   # tredecillion  10⁴²
        "Qad",  # quattuordecillion 10⁴⁵
        "Qid",  # quindecillion 10⁴⁸
        "Sxd",  # sexdecillion  10⁵¹
        "Spd",  # septendecillion 10⁵⁴
        "Ocd",  # octodecillion 10⁵⁷
        "Nod",  # novemdecillion 10⁶⁰
    )

    DECIMAL_PLACES = 2
    COMPACT_DECIMALS = 1

    PLAIN_EXPONENT_LIMIT = 3
    TIER_STEP = 3

# @formatter:on


@unique
class DisplayMode(StrEnum):
    """
    Display rendering modes.

    - FIXED: fixed number of decimals, trailing zeros kept ("1.50K").
    - COMPACT: fewer decimals, trailing zeros suppressed ("1.5K"), for tight spaces.
    """
    FIXED = "fixed"
    COMPACT = "compact"


@dataclass(frozen=True)
class DisplayValue:
    """
    A SciNot value with tiered suffix formatting for display.

    Non-SciNot numerics (int, float, Decimal...) are converted with
    SciNot.from_number(), so NaN and inf are rejected like anywhere else.

    Attributes:
        value: The value to display.
        decimal_places: Decimals after the point; None selects
            DisplayConf.DECIMAL_PLACES (FIXED) or DisplayConf.COMPACT_DECIMALS (COMPACT).
        mode: FIXED or COMPACT rendering.
        suffixes: Suffix table indexed by tier; None selects DisplayConf.SUFFIXES.

    Examples:
        >>> str(DisplayValue(SciNot.from_float(1234)))
        '1.23K'
        >>> str(DisplayValue.compact(SciNot.from_float(1_500_000)))
        '1.5M'
        >>> str(DisplayValue(SciNot(4.2, 70)))
        '4.20e70'

    Raises:
        TypeError: If value is not numeric, decimal_places is not int, or suffixes are not strings.
        ValueError: If decimal_places is negative, mode is unknown, or suffixes are empty.
    """
    value: SciNot
    decimal_places: int | None = None
    mode: DisplayMode = DisplayMode.FIXED
    suffixes: tuple[str, ...] | None = None

    def __post_init__(self):
        """
        Validate and set fields
        """
        # value
        if not isinstance(self.value, SciNot):
            object.__setattr__(self, 'value', SciNot.from_number(self.value))

        # mode
        try:
            mode = DisplayMode(self.mode)
        except ValueError as exc:
            raise ValueError(f"mode must be one of 'fixed', 'compact', but got {fmt_value(self.mode)}") from exc
        object.__setattr__(self, 'mode', mode)

        # decimal_places
        if self.decimal_places is None:
            default = DisplayConf.DECIMAL_PLACES if self.mode == DisplayMode.FIXED else DisplayConf.COMPACT_DECIMALS
            object.__setattr__(self, 'decimal_places', default)
        if isinstance(self.decimal_places, bool) or not isinstance(self.decimal_places, int):
            raise TypeError(f"decimal_places must be int | None, but got {fmt_type(self.decimal_places)}")
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places must be >= 0, but got {fmt_value(self.decimal_places)}")

        # suffixes
        suffixes = DisplayConf.SUFFIXES if self.suffixes is None else self.suffixes
        if isinstance(suffixes, str) or not isinstance(suffixes, abc.Iterable):
            raise TypeError(f"suffixes must be a sequence of str, but got {fmt_type(suffixes)}")
        suffixes = tuple(suffixes)
        if not suffixes:
            raise ValueError("suffixes must contain at least the tier 0 suffix")
        for suffix in suffixes:
            if not isinstance(suffix, str):
                raise TypeError(f"suffixes must contain str only, but found {fmt_type(suffix)}")
        object.__setattr__(self, 'suffixes', suffixes)

    @classmethod
    def fixed(cls, value: SciNot, decimal_places: int | None = None, *,
              suffixes: Iterable[str] | None = None) -> Self:
        """Fixed decimals display, e.g. '1.23K', '1.00M'."""
        return cls(value, decimal_places=decimal_places, mode=DisplayMode.FIXED, suffixes=suffixes)

    @classmethod
    def compact(cls, value: SciNot, decimal_places: int | None = None, *,
                suffixes: Iterable[str] | None = None) -> Self:
        """Compact display for tight spaces, e.g. '1.2K', '1M', '7.89e63'."""
        return cls(value, decimal_places=decimal_places, mode=DisplayMode.COMPACT, suffixes=suffixes)

    def merge(self,
              decimal_places: int | None | UnsetType = UNSET,
              mode: DisplayMode | str | UnsetType = UNSET,
              suffixes: Iterable[str] | None | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new DisplayValue for the same value with merged formatting options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return DisplayValue(self.value,
                            decimal_places=ifunset(decimal_places, default=self.decimal_places),
                            mode=ifunset(mode, default=self.mode),
                            suffixes=ifunset(suffixes, default=self.suffixes))

    def __str__(self):
        return self.number

    @property
    def is_plain(self) -> bool:
        """True if the value renders as a plain decimal without suffix."""
        if self.value.is_zero:
            return False
        return -DisplayConf.PLAIN_EXPONENT_LIMIT < self.value.exponent < DisplayConf.PLAIN_EXPONENT_LIMIT

    @property
    def is_e_notation(self) -> bool:
        """True if the value is beyond the suffix table and renders as mantissa-e-exponent."""
        if self.value.is_zero or self.is_plain:
            return False
        raw_tier = self.value.exponent // DisplayConf.TIER_STEP
        return raw_tier < 0 or raw_tier >= len(self.suffixes)

    @property
    def tier(self) -> int | None:
        """
        Suffix tier used for display, or None for zero, plain and e-notation values.

        A scaled value that rounds up to the next power of one thousand moves to
        the next tier when the table has one, so 999_999 shows as '1.00M'.
        """
        if self.value.is_zero or self.is_plain or self.is_e_notation:
            return None
        return self._tier_parts()[1]

    @property
    def suffix(self) -> str:
        """Tier suffix, '' when no suffix applies."""
        tier = self.tier
        return "" if tier is None else self.suffixes[tier]

    @property
    def number(self) -> str:
        """
        Fully formatted number including suffix or exponent.
        """
        value = self.value

        if value.is_zero:
            return "0"

        if self.is_plain:
            return self._plain_str()

        if self.is_e_notation:
            if self.mode == DisplayMode.COMPACT:
                mantissa, exponent = self._e_parts(self.decimal_places + 1)
                return f"{_trimmed(mantissa, self.decimal_places + 1)}e{exponent}"
            mantissa, exponent = self._e_parts(self.decimal_places)
            return f"{mantissa:.{self.decimal_places}f}e{exponent}"

        scaled, tier = self._tier_parts()
        if self.mode == DisplayMode.COMPACT:
            return f"{_trimmed(scaled, self.decimal_places)}{self.suffixes[tier]}"
        return f"{scaled:.{self.decimal_places}f}{self.suffixes[tier]}"

    def _plain_str(self) -> str:
        number = self.value.to_float()
        if self.mode == DisplayMode.COMPACT:
            # Values below one keep a significant digit per leading zero
            decimals = self.decimal_places + max(0, -self.value.exponent)
            return _trimmed(number, decimals)
        return f"{number:.{self.decimal_places}f}"

    def _e_parts(self, decimals: int) -> tuple[float, int]:
        """Mantissa and exponent, with rollover when the mantissa rounds to 10."""
        mantissa, exponent = self.value.mantissa, self.value.exponent
        if abs(round(mantissa, decimals)) >= 10:
            mantissa /= 10
            exponent += 1
        return mantissa, exponent

    def _tier_parts(self) -> tuple[float, int]:
        """Scaled mantissa and tier, with rollover to the next tier on rounding."""
        step = DisplayConf.TIER_STEP
        tier = self.value.exponent // step
        scaled = self.value.mantissa * 10 ** (self.value.exponent - tier * step)

        if abs(round(scaled, self.decimal_places)) >= 10 ** step and tier + 1 < len(self.suffixes):
            tier += 1
            scaled /= 10 ** step
        return scaled, tier


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_number(value: SciNot, decimal_places: int | None = None, *,
               suffixes: Iterable[str] | None = None) -> str:
    """
    Format a value with a tier suffix and fixed decimals.

    Args:
        value: SciNot (or a native numeric, converted with SciNot.from_number()).
        decimal_places: Decimals after the point, default DisplayConf.DECIMAL_PLACES.
        suffixes: Custom suffix table, default DisplayConf.SUFFIXES.

    Returns:
        "0" for zero, a plain decimal for exponents in (-3, 3), "{scaled}{suffix}"
        within the suffix table and "{mantissa}e{exponent}" beyond it.

    Examples:
        >>> fmt_number(SciNot.from_float(1234))
        '1.23K'
        >>> fmt_number(SciNot.from_float(123.0))
        '123.00'
        >>> fmt_number(SciNot(1, 63))
        '1.00e63'
    """
    return str(DisplayValue.fixed(value, decimal_places, suffixes=suffixes))


def fmt_compact(value: SciNot, *, suffixes: Iterable[str] | None = None) -> str:
    """
    Format a value for constrained display space: fewer decimals, no trailing zeros.

    Examples:
        >>> fmt_compact(SciNot.from_float(1_000_000))
        '1M'
        >>> fmt_compact(SciNot.from_float(1234))
        '1.2K'
        >>> fmt_compact(SciNot(7.891, 63))
        '7.89e63'
    """
    return str(DisplayValue.compact(value, suffixes=suffixes))


def _trimmed(number: float, decimals: int) -> str:
    """Fixed-point string with trailing zeros and a dangling point removed."""
    s = f"{number:.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s

"""
Standardize numeric types from Python stdlib and third-party libraries.

Used by `SciNot.from_number()` to accept NumPy scalars and other duck-typed
numerics without an import of any of those libraries. Decimal and Fraction
are converted exactly by `SciNot.from_number()` before reaching this module.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_numeric(value) -> int | float:
    """
    Convert numeric types to standard Python int or float.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float and third-party
        types via __index__, .item(), or __float__.

    Returns
    -------
    int
        For Python int (arbitrary precision) and types implementing
        __index__ (NumPy integers).

    float
        For everything else. Special IEEE 754 values (inf, nan) and
        overflow/underflow results are passed through; rejecting them is up
        to the caller.

    Raises
    ------
    TypeError
        When value is None, a bool, or an unsupported type (str, list...).
        Booleans are rejected since bool is a subclass of int in Python
        and a bool amount is almost always a bug.

    Detection Priority
    ------------------
    1. int/float fast path
    2. __index__() → int (NumPy integers)
    3. .item() → int or float (array scalars)
    4. __float__() → float

    Examples
    --------
    >>> std_numeric(42)
    42
    >>> from decimal import Decimal
    >>> std_numeric(Decimal('3.25'))
    3.25
    >>> std_numeric("1")
    Traceback (most recent call last):
        ...
    TypeError: unsupported numeric type: <str>...
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    # Python int has arbitrary precision, never overflows
    if isinstance(value, (int, float)):
        return value

    if value is None or isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"unsupported numeric type: {fmt_type(value)}")

    # NumPy integer types implement __index__
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Array/tensor scalars
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            raise TypeError(f"boolean values not supported, got {fmt_type(value)} holding {result}")
        if isinstance(result, (int, float)):
            return result

    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, __float__ or .item() "
        f"(e.g., numpy scalars, Decimal, Fraction)"
    )

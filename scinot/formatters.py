"""
Robust formatting utilities for exception messages.

Type-aware formatters that render offending arguments in error messages.
They handle broken __repr__ and very long representations gracefully
with consistent styling across ASCII/Unicode output.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

PRIMITIVE_TYPES = (
    type(None),
    bool,  # Comes before int (is subclass of int)
    int,
    float,
    complex,
    str,
    bytes,
)

# Classes --------------------------------------------------------------------------------------------------------------

Style = Literal["ascii", "colon", "equal", "paren", "unicode-angle"]


# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(
    obj: Any,
    *,
    style: Style = "ascii",
    max_repr: int = 120,
    fully_qualified: bool = False,
) -> str:
    """Format type information for exception messages.

    Args:
        obj: Any Python object or type to extract type information from.
        style: Display style - "ascii", "equal", "colon", "paren" or "unicode-angle".
        max_repr: Maximum length before truncation (applies to full type name).
        fully_qualified: Whether to include module name for non-builtin types.

    Returns:
        Formatted type string like "<int>" or "⟨SciNot⟩".

    Examples:
        >>> fmt_type(42)
        '<int>'

        >>> fmt_type(float)
        '<float>'

        >>> fmt_type(ValueError("test"), style="unicode-angle")
        '⟨ValueError⟩'
    """
    type_name = class_name(obj, fully_qualified=fully_qualified)
    truncated_name = _fmt_truncate(type_name, max_repr, ellipsis=_fmt_ellipsis(style))
    return _fmt_type_value(truncated_name, style=style)


def fmt_value(
    obj: Any,
    *,
    style: Style = "ascii",
    max_repr: int = 120,
    label_primitives: bool = False,
) -> str:
    """
    Format a single value as a type–value pair for exception messages.

    Primitives (int, float, str...) are shown bare unless label_primitives is set,
    so that `fmt_value(nan)` reads as 'nan' and `fmt_value(SciNot.one())` as
    '<SciNot: SciNot(mantissa=1.0, exponent=0)>'.

    Args:
        obj: Any Python object to format.
        style: Display style - "ascii", "equal", "colon", "paren" or "unicode-angle".
        max_repr: Maximum length of the value's repr before truncation.
        label_primitives: Show the type label for primitives too.

    Returns:
        Formatted string like "<int: 42>" (ASCII, labeled) or "42" (unlabeled primitive).
    """
    if not label_primitives and type(obj) in {str, bytes}:
        repr_ = str(obj)
    else:
        repr_ = _safe_repr(obj)

    if style == "ascii":
        repr_ = repr_.replace(">", "\\>")

    r = _fmt_truncate(repr_, max_repr, ellipsis=_fmt_ellipsis(style))

    if _is_primitive(obj) and not label_primitives:
        return r

    return _fmt_type_value(type(obj).__name__, r, style=style)


# Private Methods ------------------------------------------------------------------------------------------------------


def _fmt_ellipsis(style: Style) -> str:
    return "..." if style == "ascii" else "…"


def _fmt_truncate(repr_: str, max_len: int, ellipsis: str = "…") -> str:
    """
    Truncate repr_ to at most max_len visible characters before appending the ellipsis.

    The ellipsis is appended in full and is not counted against max_len.
    """
    if max_len <= 0:
        return ""
    if len(repr_) <= max_len:
        return repr_
    return repr_[:max(1, max_len)] + ellipsis


def _fmt_type_value(type_name: str, value_repr: str | None = None, *, style: Style = "ascii") -> str:
    """Combine a type name and a repr into a single display token according to style."""
    if style == "ascii":
        return f"<{type_name}>" if value_repr is None else f"<{type_name}: {value_repr}>"
    if style == "colon":
        return f"{type_name}" if value_repr is None else f"{type_name}: {value_repr}"
    if style == "paren":
        return f"{type_name}" if value_repr is None else f"{type_name}({value_repr})"
    if style == "unicode-angle":
        return f"⟨{type_name}⟩" if value_repr is None else f"⟨{type_name}: {value_repr}⟩"
    # 'equal' and unknown styles
    return f"{type_name}" if value_repr is None else f"{type_name}={value_repr}"


def _safe_repr(obj) -> str:
    """
    Defensive repr() call - handle broken __repr__ methods gracefully
    """
    try:
        repr_ = repr(obj)
    except Exception as e:
        exc_type = type(e).__name__
        repr_ = f"<{type(obj).__name__} object (repr failed: {exc_type})>"
    return repr_


def _is_primitive(obj) -> bool:
    """Check if object should be displayed without type label."""
    # type(), not isinstance(): subclasses get labeled
    return type(obj) in PRIMITIVE_TYPES

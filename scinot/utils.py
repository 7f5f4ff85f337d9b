"""
Scinot utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself,
    so both `class_name(1.5)` and `class_name(float)` return 'float'.
    Builtins are never module-qualified.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the module-qualified name for user objects or classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> from scinot.number import SciNot
        >>> class_name(SciNot, fully_qualified=True)
        'scinot.number.SciNot'
    """
    cls = obj if isinstance(obj, type) else obj.__class__

    if fully_qualified and cls.__module__ != "builtins":
        return cls.__module__ + "." + cls.__name__
    return cls.__name__

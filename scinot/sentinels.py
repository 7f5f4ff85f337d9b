"""
Sentinel object for distinguishing an unprovided argument from None.

UNSET is used by copy-with-changes methods such as `SciNot.merge()` and
`DisplayValue.merge()`, where None may itself be a meaningful value.
All sentinel checks use identity (`is`), not equality.

Example:
    >>> def merge(self, exponent: int | UnsetType = UNSET):
    ...     exponent = ifunset(exponent, default=self.exponent)
"""

from typing import Any

__all__ = [
    'UNSET',
    'UnsetType',
    'ifunset',
]


# Sentinel Type --------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, identity-compared and pickle-safe.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


UNSET = UnsetType()


# Helpers --------------------------------------------------------------------------------------------------------------

def ifunset(value: Any, *, default: Any) -> Any:
    """Return default if value is UNSET, otherwise return value."""
    return default if value is UNSET else value

"""Sort order enumeration for ordered report queries."""

from enum import Enum


class SortOrder(str, Enum):
    """Sort direction for report queries."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_param(cls, value: str | None) -> "SortOrder":
        """Parse a path/query parameter, falling back to DESC.

        Any value other than ``asc`` (case-insensitive) is treated as
        descending.
        """
        if value is not None and value.strip().lower() == cls.ASC.value:
            return cls.ASC
        return cls.DESC

    @property
    def direction(self) -> int:
        """MongoDB sort direction (1 ascending, -1 descending)."""
        return 1 if self is SortOrder.ASC else -1

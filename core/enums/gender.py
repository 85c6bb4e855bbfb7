"""Gender enumeration for users."""

from enum import Enum


class Gender(str, Enum):
    """Gender values accepted on user documents."""

    MALE = "M"
    FEMALE = "F"

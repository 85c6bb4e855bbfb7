"""Enumerations for the core app."""

from core.enums.gender import Gender
from core.enums.health_status import HealthStatus
from core.enums.sort_order import SortOrder

__all__ = ["Gender", "HealthStatus", "SortOrder"]

"""Concrete repository implementations."""

from .static_growth_profile_repository import StaticGrowthProfileRepository

__all__ = [
    "StaticGrowthProfileRepository",
]

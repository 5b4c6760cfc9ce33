"""Repository interfaces."""

from .growth_profile_repository import GrowthProfileRepository

__all__ = [
    "GrowthProfileRepository",
]

"""Use cases - core business operations."""

from .collect_growth_profile import CollectGrowthProfileUseCase
from .resolve_growth_stage import ResolveGrowthStageUseCase, compute_progress_percent
from .build_stage_calendar import BuildStageCalendarUseCase

__all__ = [
    "CollectGrowthProfileUseCase",
    "ResolveGrowthStageUseCase",
    "compute_progress_percent",
    "BuildStageCalendarUseCase",
]

"""Domain entities."""

from .stage_definition import StageDefinition
from .growth_profile import GrowthProfile
from .resolution_status import ResolutionStatus
from .stage_resolution import StageResolutionResult, CYCLE_COMPLETE_LABEL
from .growth_report import GrowthReport

__all__ = [
    "StageDefinition",
    "GrowthProfile",
    "ResolutionStatus",
    "StageResolutionResult",
    "CYCLE_COMPLETE_LABEL",
    "GrowthReport",
]

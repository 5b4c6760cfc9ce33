"""Use case for resolving the active growth stage of a crop."""

from ..entities.growth_profile import GrowthProfile
from ..entities.resolution_status import ResolutionStatus
from ..entities.stage_resolution import StageResolutionResult
from ..exceptions import InvalidProfile


def compute_progress_percent(elapsed_days: int, total_duration: int) -> int:
    """
    Percentage of the growth cycle elapsed, truncated and capped at 100.

    Args:
        elapsed_days: Whole days since sowing (not negative)
        total_duration: Length of the full cycle in days

    Returns:
        Integer percentage in [0, 100]
    """
    if total_duration <= 0:
        return 100
    return max(0, min(100, (100 * elapsed_days) // total_duration))


class ResolveGrowthStageUseCase:
    """Use case to map an elapsed day count onto a crop's growth stages."""

    def execute(self, profile: GrowthProfile, elapsed_days: int) -> StageResolutionResult:
        """
        Execute stage resolution.

        Stage i covers days [cumulative, cumulative + duration - 1] counted from
        sowing, so the day right after a stage ends belongs to the next one.

        Args:
            profile: Growth profile of the crop
            elapsed_days: Whole days since sowing, negative if sowing is ahead

        Returns:
            StageResolutionResult with status IN_PROGRESS, CYCLE_COMPLETE or FUTURE_SOWING

        Raises:
            InvalidProfile: If the profile has no stages
        """
        if elapsed_days < 0:
            return StageResolutionResult.future_sowing(elapsed_days)

        if profile is None or not getattr(profile, "stages", None):
            crop = getattr(profile, "crop", None)
            raise InvalidProfile(f"Growth profile for '{crop}' has no stages")

        total_duration = profile.total_duration
        progress = compute_progress_percent(elapsed_days, total_duration)

        cumulative = 0
        for index, stage in enumerate(profile.stages):
            if elapsed_days < cumulative + stage.duration_days:
                return StageResolutionResult(
                    status=ResolutionStatus.IN_PROGRESS,
                    elapsed_days=elapsed_days,
                    stage_index=index,
                    stage_name=stage.name,
                    stage_start_day=cumulative,
                    stage_end_day=cumulative + stage.duration_days - 1,
                    progress_percent=progress,
                )
            cumulative += stage.duration_days

        return StageResolutionResult.cycle_complete(elapsed_days)

"""FastAPI main application."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ...application.services.crop_growth_tracker_service import CropGrowthTrackerService
from ...domain.exceptions import InvalidDateFormat, InvalidProfile, UnknownCrop
from ...infrastructure.repositories.static_growth_profile_repository import (
    StaticGrowthProfileRepository,
)
from config.settings import API_SETTINGS, CROP_GROWTH_PROFILES

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize repository and service
profile_repo = StaticGrowthProfileRepository(CROP_GROWTH_PROFILES)
service = CropGrowthTrackerService(profile_repo=profile_repo)


# Request/Response models
class TrackRequest(BaseModel):
    """Request model for growth tracking."""

    crop: str = Field(..., description="Crop name (e.g., 'Paddy (Boro)')")
    sowing_date: str = Field(..., description="Sowing date as YYYY-MM-DD")
    today: Optional[str] = Field(
        None, description="Reference date as YYYY-MM-DD (defaults to current date)"
    )


class TrackResponse(BaseModel):
    """Response model for growth tracking."""

    crop: str
    sowing_date: str
    reference_date: str
    days_since_sowing: int
    total_duration: int
    status: str
    stage_index: Optional[int] = None
    stage: Optional[str] = None
    stage_start_day: Optional[int] = None
    stage_end_day: Optional[int] = None
    stage_start_date: Optional[str] = None
    stage_end_date: Optional[str] = None
    stage_date_range: Optional[str] = None
    days_remaining_in_stage: Optional[int] = None
    progress_percent: Optional[int] = None


class CalendarEntry(BaseModel):
    """One stage row of a stage calendar."""

    stage_index: int
    stage: str
    duration_days: int
    start_day: int
    end_day: int
    start_date: str
    end_date: str
    status: str


class CalendarResponse(BaseModel):
    """Response model for stage calendar."""

    crop: str
    sowing_date: str
    stages: List[CalendarEntry]


def _raise_http_error(e: Exception) -> None:
    if isinstance(e, UnknownCrop):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, InvalidDateFormat):
        raise HTTPException(status_code=400, detail=str(e))
    logger.error(f"Growth profile configuration error: {e}", exc_info=True)
    raise HTTPException(status_code=500, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Crop Growth Tracker API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "crops": "/crops",
            "track": "/track",
            "calendar": "/calendar",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/crops")
async def crops() -> Dict[str, Any]:
    """List crops in menu order with their cycle length."""
    return {
        "crops": [
            {
                "choice": i,
                "crop": crop,
                "total_duration": profile_repo.get_profile(crop).total_duration,
            }
            for i, crop in enumerate(service.list_crops(), start=1)
        ]
    }


@app.post("/track", response_model=TrackResponse)
async def track(request: TrackRequest) -> TrackResponse:
    """
    Report the current growth stage of a crop.

    Args:
        request: Track request with crop, sowing date and optional reference date

    Returns:
        Track response with stage, stage dates and progress
    """
    try:
        report = service.track(
            crop=request.crop,
            sowing_date=request.sowing_date,
            today=request.today,
        )
    except (UnknownCrop, InvalidDateFormat, InvalidProfile) as e:
        _raise_http_error(e)

    return TrackResponse(**report.to_dict())


@app.post("/calendar", response_model=CalendarResponse)
async def calendar(request: TrackRequest) -> CalendarResponse:
    """
    Lay out every growth stage of a crop on the calendar.

    Args:
        request: Track request with crop, sowing date and optional reference date

    Returns:
        Calendar response with one entry per stage
    """
    try:
        df = service.stage_calendar(
            crop=request.crop,
            sowing_date=request.sowing_date,
            today=request.today,
        )
    except (UnknownCrop, InvalidDateFormat, InvalidProfile) as e:
        _raise_http_error(e)

    stages = [
        CalendarEntry(
            stage_index=int(row["stage_index"]),
            stage=row["stage"],
            duration_days=int(row["duration_days"]),
            start_day=int(row["start_day"]),
            end_day=int(row["end_day"]),
            start_date=row["start_date"].isoformat(),
            end_date=row["end_date"].isoformat(),
            status=row["status"],
        )
        for _, row in df.iterrows()
    ]
    return CalendarResponse(
        crop=request.crop,
        sowing_date=stages[0].start_date,
        stages=stages,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

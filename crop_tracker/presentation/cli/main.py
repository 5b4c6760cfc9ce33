"""CLI interface for crop growth tracking."""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from ...application.services.crop_growth_tracker_service import CropGrowthTrackerService
from ...domain.dates import format_date
from ...domain.entities.growth_report import GrowthReport
from ...domain.exceptions import InvalidDateFormat, InvalidProfile, UnknownCrop
from ...infrastructure.repositories.static_growth_profile_repository import (
    StaticGrowthProfileRepository,
)

from config.settings import (
    CROP_GROWTH_PROFILES,
    DATE_SETTINGS,
    EXPORT_DIR,
    LOG_SETTINGS,
    PROGRESS_BAR_SETTINGS,
)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    level = LOG_SETTINGS["verbose_level"] if verbose else LOG_SETTINGS["level"]
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_SETTINGS["format"],
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def render_progress_bar(
    percent: int,
    width: int = PROGRESS_BAR_SETTINGS["width"],
    fill: str = PROGRESS_BAR_SETTINGS["fill"],
    empty: str = PROGRESS_BAR_SETTINGS["empty"],
) -> str:
    """Render e.g. '[#####-----]'; one fill character per 2% on the default width."""
    filled = max(0, min(width, percent * width // 100))
    return "[" + fill * filled + empty * (width - filled) + "]"


def render_menu(crops: List[str]) -> str:
    return "\n".join(f"{i}. {crop}" for i, crop in enumerate(crops, start=1))


def render_report(report: GrowthReport) -> str:
    """Format a growth report the way the terminal shows it."""
    resolution = report.resolution
    if resolution.is_future_sowing:
        return "Information: The sowing date is in the future. Cannot track growth yet."

    lines = [
        "--- Current Status ---",
        f"'{report.crop}' was sown {report.days_since_sowing} days ago.",
        f"Current Stage: {resolution.stage_name}",
    ]
    if resolution.is_in_progress:
        lines.append(f"(From {report.stage_date_range})")
    lines.extend(
        [
            "",
            f"Overall Progress: {resolution.progress_percent}%",
            render_progress_bar(resolution.progress_percent),
        ]
    )
    return "\n".join(lines)


def _slug(crop: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", crop.lower()).strip("_")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crop Growth Tracker")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show INFO logs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === crops: numbered crop menu ===
    subparsers.add_parser("crops", help="List available crops with their menu numbers")

    def add_crop_arguments(sub: argparse.ArgumentParser) -> None:
        selection = sub.add_mutually_exclusive_group(required=True)
        selection.add_argument("--crop", type=str, help="Crop name, e.g. 'Wheat'")
        selection.add_argument("--choice", type=int, help="Crop menu number (see 'crops')")
        sub.add_argument(
            "--sowing-date",
            type=str,
            required=True,
            help=f"Sowing date ({DATE_SETTINGS['input_format']})",
        )
        sub.add_argument(
            "--today",
            type=str,
            default=None,
            help=f"Reference date ({DATE_SETTINGS['input_format']}, default: current date)",
        )

    # === track: current stage and progress ===
    track_parser = subparsers.add_parser("track", help="Show the current growth stage")
    add_crop_arguments(track_parser)

    # === calendar: full stage timetable ===
    calendar_parser = subparsers.add_parser("calendar", help="Show all stages on the calendar")
    add_crop_arguments(calendar_parser)
    calendar_parser.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        help=f"Write the calendar to CSV (default location: {EXPORT_DIR})",
    )

    # === interactive: prompt for crop and sowing date ===
    subparsers.add_parser("interactive", help="Choose crop and sowing date from prompts")

    return parser


def _selected_crop(service: CropGrowthTrackerService, args: argparse.Namespace) -> str:
    if args.crop is not None:
        return args.crop
    return service.collect_profile_uc.execute_by_choice(args.choice).crop


def run_track(service: CropGrowthTrackerService, args: argparse.Namespace) -> int:
    if args.choice is not None:
        report = service.track_choice(args.choice, args.sowing_date, args.today)
    else:
        report = service.track(args.crop, args.sowing_date, args.today)
    print(render_report(report))
    return 0


def run_calendar(service: CropGrowthTrackerService, args: argparse.Namespace) -> int:
    crop = _selected_crop(service, args)
    calendar = service.stage_calendar(crop, args.sowing_date, args.today)

    display = calendar.copy()
    display["start_date"] = display["start_date"].map(format_date)
    display["end_date"] = display["end_date"].map(format_date)
    print(f"--- Stage Calendar: {crop} ---")
    print(display.drop(columns=["stage_index"]).to_string(index=False))

    if args.export is not None:
        if args.export:
            export_path = Path(args.export)
        else:
            export_path = EXPORT_DIR / f"{_slug(crop)}_calendar.csv"
        export_path.parent.mkdir(parents=True, exist_ok=True)
        calendar.to_csv(export_path, index=False)
        logger.info(f"Stage calendar exported to {export_path}")
        print(f"\nCalendar saved to: {export_path}")
    return 0


def run_interactive(service: CropGrowthTrackerService) -> int:
    crops = service.list_crops()
    print("--- Crop Growth Tracker ---")
    print("Select a crop:")
    print(render_menu(crops))

    try:
        raw_choice = input(f"\nEnter your choice (1-{len(crops)}): ").strip()
    except EOFError:
        raise UnknownCrop("") from None
    try:
        choice = int(raw_choice)
    except ValueError:
        raise UnknownCrop(raw_choice) from None

    profile = service.collect_profile_uc.execute_by_choice(choice)
    try:
        sowing_date = input(f"Enter sowing date ({DATE_SETTINGS['input_format']}): ").strip()
    except EOFError:
        raise InvalidDateFormat("", "no sowing date entered") from None
    report = service.build_report(profile, sowing_date)
    print()
    print(render_report(report))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        service = CropGrowthTrackerService(
            profile_repo=StaticGrowthProfileRepository(CROP_GROWTH_PROFILES)
        )

        if args.command == "crops":
            print(render_menu(service.list_crops()))
            return 0
        if args.command == "track":
            return run_track(service, args)
        if args.command == "calendar":
            return run_calendar(service, args)
        if args.command == "interactive":
            return run_interactive(service)
    except UnknownCrop as e:
        print(f"Error: Invalid choice. {e}", file=sys.stderr)
        return 1
    except InvalidDateFormat as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except InvalidProfile as e:
        logger.error(f"Growth profile configuration error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())

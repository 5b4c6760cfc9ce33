"""Application settings and configuration."""

from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Stage calendar exports
EXPORT_DIR = BASE_DIR / "data" / "exports"

# Crop growth profiles: crop -> ordered (stage, duration in days).
# Insertion order is the crop menu order (1..N), kept alphabetical.
CROP_GROWTH_PROFILES = {
    "Jute": [
        ("Seedling Establishment", 20),
        ("Rapid Vegetative Growth", 60),
        ("Flowering & Pod Formation", 20),
        ("Maturity", 20),
    ],
    "Mustard": [
        ("Germination & Seedling", 15),
        ("Vegetative Growth (Rosette)", 30),
        ("Flowering Stage", 25),
        ("Pod Formation & Ripening", 25),
    ],
    "Paddy (Boro)": [
        ("Seedling Stage", 25),
        ("Tillering Stage", 30),
        ("Panicle Initiation", 30),
        ("Flowering Stage", 15),
        ("Maturity & Ripening", 30),
    ],
    "Potato": [
        ("Sprouting", 15),
        ("Vegetative Growth", 25),
        ("Tuber Initiation", 20),
        ("Tuber Bulking & Maturity", 30),
    ],
    "Wheat": [
        ("Germination & Seedling", 15),
        ("Tillering Stage", 25),
        ("Stem Extension (Jointing)", 25),
        ("Heading & Flowering", 20),
        ("Grain Filling & Maturity", 30),
    ],
}

# Progress bar rendering
PROGRESS_BAR_SETTINGS = {
    "width": 50,
    "fill": "#",
    "empty": "-",
}

# Date formats
DATE_SETTINGS = {
    "input_format": "YYYY-MM-DD",
    "display_format": "Mon DD",
}

# API settings
API_SETTINGS = {
    "title": "Crop Growth Tracker API",
    "description": "API for tracking crop growth stages from a sowing date",
    "version": "1.0.0",
}

# Logging settings
LOG_SETTINGS = {
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "level": "WARNING",
    "verbose_level": "INFO",
}

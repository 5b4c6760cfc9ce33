"""Domain exceptions."""


class CropTrackerError(Exception):
    """Base class for all crop tracker errors."""


class InvalidDateFormat(CropTrackerError, ValueError):
    """Raised when a date string is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, text: str, reason: str = ""):
        self.text = text
        self.reason = reason
        message = f"Invalid date format: {text!r}. Please use YYYY-MM-DD."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidProfile(CropTrackerError, ValueError):
    """Raised when a growth profile is empty or has malformed stages."""


class UnknownCrop(CropTrackerError, LookupError):
    """Raised when a crop name or menu choice is not in the profile table."""

    def __init__(self, crop):
        self.crop = crop
        super().__init__(f"Unknown crop: {crop!r}")

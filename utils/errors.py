"""Error types raised by the appointment book."""


class WorkshopError(Exception):
    """Base class for appointment book errors."""


class ValidationError(WorkshopError):
    """Required booking or catalog input is missing or malformed."""


class FormatError(WorkshopError):
    """A backup file cannot be read or lacks an appointments list."""

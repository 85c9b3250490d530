"""Parcel tracker error types."""

from tracker.parcel import ParcelStatus


class TrackerError(Exception):
    """Base class for all tracker errors."""

    pass


class ParcelNotFoundError(TrackerError):
    """No parcel exists with the requested number."""

    def __init__(self, number: int) -> None:
        super().__init__(f"Parcel not found: {number}")
        self.number = number


class ParcelStateError(TrackerError):
    """Operation is not allowed in the parcel's current status."""

    def __init__(self, message: str, number: int, status: ParcelStatus) -> None:
        super().__init__(message)
        self.number = number
        self.status = status

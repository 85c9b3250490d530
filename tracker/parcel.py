"""Parcel dataclass and status lifecycle."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class ParcelStatus(Enum):
    """Parcel lifecycle states."""

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    @property
    def is_initial(self) -> bool:
        """Check if the parcel has not been sent yet."""
        return self is ParcelStatus.REGISTERED


# Forward progression; DELIVERED is terminal
NEXT_STATUS: dict[ParcelStatus, ParcelStatus] = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}


def utc_timestamp(moment: datetime | None = None) -> str:
    """Format a moment (default: now) as an RFC3339 UTC timestamp."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime(RFC3339_FORMAT)


@dataclass
class Parcel:
    """A tracked shipment record."""

    client: int
    address: str
    status: ParcelStatus = ParcelStatus.REGISTERED
    created_at: str = field(default_factory=utc_timestamp)
    number: int | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Parcel":
        """Build a parcel from a parcel table row."""
        return cls(
            number=row["number"],
            client=row["client"],
            status=ParcelStatus(row["status"]),
            address=row["address"],
            created_at=row["created_at"],
        )

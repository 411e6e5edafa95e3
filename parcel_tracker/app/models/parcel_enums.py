"""
Parcel Status Enumeration.
"""

import enum
from typing import Optional


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.

    Values are stored as bare text, so they must never change.

    Status flow:
        REGISTERED → SENT → DELIVERED
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    def next(self) -> Optional["ParcelStatus"]:
        """Return the following status in the flow, or None for the final one."""
        return _NEXT_STATUS.get(self)


_NEXT_STATUS = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}

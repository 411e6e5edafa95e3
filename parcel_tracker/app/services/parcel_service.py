"""
Parcel service.

Drives the parcel lifecycle on top of ParcelStore: registration, status
progression, address changes and removal.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from parcel_tracker.app.core.config import settings
from parcel_tracker.app.core.exceptions import NotFound, ParcelNotFoundError
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import Parcel
from parcel_tracker.app.services.parcel_store import ParcelStore

logger = logging.getLogger(f"{settings.logger_name}.service")


def utc_now_rfc3339() -> str:
    """Current UTC time as RFC 3339 with second precision, e.g. 2024-01-31T12:00:00Z."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelService:
    """Parcel lifecycle operations for one store."""

    def __init__(self, store: ParcelStore) -> None:
        self.store = store

    def register(self, client: int, address: str) -> Parcel:
        """
        Register a new parcel for a client.

        Args:
            client: Owning client
            address: Delivery address

        Returns:
            The stored parcel, with its assigned number
        """
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_now_rfc3339(),
        )
        parcel.number = self.store.add(parcel)

        logger.info(
            "Parcel Registered",
            extra={"number": parcel.number, "client": client, "created_at": parcel.created_at}
        )
        return parcel

    def client_parcels(self, client: int) -> List[Parcel]:
        """List every parcel of a client."""
        return self.store.get_by_client(client)

    def next_status(self, number: int) -> Optional[ParcelStatus]:
        """
        Move a parcel one step along registered → sent → delivered.

        Returns:
            The new status, or None if the parcel was already delivered

        Raises:
            ParcelNotFoundError: If no parcel has this number
        """
        try:
            parcel = self.store.get(number)
        except NotFound:
            raise ParcelNotFoundError(number)

        next_status = parcel.status.next()
        if next_status is None:
            logger.info(
                "Parcel Already Final",
                extra={"number": number, "status": parcel.status.value}
            )
            return None

        self.store.set_status(number, next_status)
        logger.info(
            "Parcel Status Changed",
            extra={"number": number, "from_status": parcel.status.value, "to_status": next_status.value}
        )
        return next_status

    def change_address(self, number: int, address: str) -> None:
        """Change the address; has no effect unless the parcel is still registered."""
        self.store.set_address(number, address)

    def delete(self, number: int) -> None:
        """Delete the parcel; has no effect unless it is still registered."""
        self.store.delete(number)

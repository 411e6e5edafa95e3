"""
Parcel store.

Sole mediator between Parcel values and rows of the `parcel` table.
Every operation runs exactly one statement on a connection taken from
the injected engine; the engine's single-statement atomicity is the
only concurrency guarantee relied upon.

Guarded mutations (address change, delete) carry the
`status = 'registered'` condition inside the statement itself. They
report success even when nothing matched: callers cannot tell a missing
row from a failed guard without reading the row back.
"""

from typing import List, Union

from sqlalchemy import select, insert, update, delete
from sqlalchemy.engine import Engine

from parcel_tracker.app.core.exceptions import StorageError
from parcel_tracker.app.core.observability import observed
from parcel_tracker.app.models.parcel import ParcelRecord
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import Parcel


_PARCEL_COLUMNS = (
    ParcelRecord.number,
    ParcelRecord.client,
    ParcelRecord.status,
    ParcelRecord.address,
    ParcelRecord.created_at,
)


class ParcelStore:
    """
    Repository over the `parcel` table.

    The engine is owned by the caller that created it; the store only
    borrows connections from it.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @observed("parcel.add")
    def add(self, parcel: Parcel) -> int:
        """
        Insert a parcel and return the number assigned by storage.

        Any number already set on `parcel` is ignored.

        Raises:
            StorageError: If the insert fails or no key comes back
        """
        stmt = insert(ParcelRecord).values(
            client=parcel.client,
            status=parcel.status.value,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        with self.engine.begin() as conn:
            result = conn.execute(stmt)
            primary_key = result.inserted_primary_key

        if not primary_key or primary_key[0] is None:
            raise StorageError("Insert did not return a parcel number")
        return int(primary_key[0])

    @observed("parcel.get")
    def get(self, number: int) -> Parcel:
        """
        Fetch one parcel by number.

        Raises:
            NotFound: If no row has this number
            StorageError: On any other read failure
            ValidationError: If the stored status is not a known ParcelStatus
        """
        stmt = select(*_PARCEL_COLUMNS).where(ParcelRecord.number == number)
        with self.engine.connect() as conn:
            row = conn.execute(stmt).one()
        return Parcel(**row._mapping)

    @observed("parcel.get_by_client")
    def get_by_client(self, client: int) -> List[Parcel]:
        """
        Fetch every parcel owned by `client`.

        Returns an empty list when the client has none. Row order follows
        the engine's scan order.

        Raises:
            StorageError: On read failure
            ValidationError: If any row holds an unknown status; no parcels
                are returned in that case
        """
        stmt = select(*_PARCEL_COLUMNS).where(ParcelRecord.client == client)
        with self.engine.connect() as conn:
            rows = conn.execute(stmt).all()
        return [Parcel(**row._mapping) for row in rows]

    @observed("parcel.set_status")
    def set_status(self, number: int, status: Union[ParcelStatus, str]) -> None:
        """Overwrite the status of a parcel, whatever it was before."""
        stmt = (
            update(ParcelRecord)
            .where(ParcelRecord.number == number)
            .values(status=ParcelStatus(status).value)
        )
        with self.engine.begin() as conn:
            conn.execute(stmt)

    @observed("parcel.set_address")
    def set_address(self, number: int, address: str) -> None:
        """Change the address of a parcel that is still registered."""
        stmt = (
            update(ParcelRecord)
            .where(
                ParcelRecord.number == number,
                ParcelRecord.status == ParcelStatus.REGISTERED.value
            )
            .values(address=address)
        )
        with self.engine.begin() as conn:
            conn.execute(stmt)

    @observed("parcel.delete")
    def delete(self, number: int) -> None:
        """Remove a parcel that is still registered."""
        stmt = delete(ParcelRecord).where(
            ParcelRecord.number == number,
            ParcelRecord.status == ParcelStatus.REGISTERED.value
        )
        with self.engine.begin() as conn:
            conn.execute(stmt)

"""
Parcel database model.

One row per tracked parcel. Status is kept as bare text so existing
rows stay readable.
"""

from sqlalchemy import Column, Integer, Text
from parcel_tracker.app.db.session import Base


class ParcelRecord(Base):
    """
    Row model for the `parcel` table.

    `number` is assigned by the engine and never reused
    (AUTOINCREMENT on SQLite).
    """
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}

    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, nullable=False)
    status = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)

    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')>"

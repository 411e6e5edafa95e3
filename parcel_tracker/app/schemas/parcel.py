"""
Parcel Pydantic schema.

The in-memory Parcel value exchanged with the store.
"""

from pydantic import BaseModel, Field
from typing import Optional
from parcel_tracker.app.models.parcel_enums import ParcelStatus


class Parcel(BaseModel):
    """Schema for a parcel, stored or about to be stored."""
    number: Optional[int] = Field(None, description="Assigned by storage on creation")
    client: int = Field(..., description="Owning client identifier")
    status: ParcelStatus = Field(..., description="Lifecycle status")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(..., description="Creation time, RFC 3339")

    class Config:
        from_attributes = True

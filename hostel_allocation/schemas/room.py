"""
Room schemas with validation of the capacity rules.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, computed_field

from hostel_allocation.schemas.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    TimestampMixin,
)

__all__ = [
    "RoomCreate",
    "RoomResponse",
]


class RoomCreate(BaseCreateSchema):
    """
    Room creation request.

    Occupancy is not accepted here; new rooms always start empty.
    """

    room_number: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Room number/identifier (e.g., '101', 'A-201')",
        examples=["101", "A-201"],
    )
    floor: Optional[int] = Field(
        default=None,
        description="Floor number (0 for ground floor, negative below ground)",
    )
    capacity: int = Field(
        ...,
        ge=1,
        description="Total bed capacity in the room",
    )


class RoomResponse(BaseResponseSchema, TimestampMixin):
    """Room as returned by the API."""

    room_number: str
    floor: Optional[int] = None
    capacity: int
    occupancy: int

    @computed_field
    @property
    def available_beds(self) -> int:
        return self.capacity - self.occupancy

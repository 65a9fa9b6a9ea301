"""
Allocation schemas: request, ledger row, joined view and confirmation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from hostel_allocation.schemas.base import BaseCreateSchema, BaseResponseSchema, BaseSchema
from hostel_allocation.schemas.room import RoomResponse
from hostel_allocation.schemas.student import StudentResponse

__all__ = [
    "AllocationRequest",
    "AllocationResponse",
    "AllocationDetail",
    "AllocationConfirmation",
    "StudentAllocationView",
]


class AllocationRequest(BaseCreateSchema):
    """Request to place a student in a room."""

    student_id: int = Field(..., gt=0, description="Student to allocate")
    room_id: int = Field(..., gt=0, description="Target room")


class AllocationResponse(BaseResponseSchema):
    """Ledger row."""

    student_id: int
    room_id: int
    created_at: datetime


class AllocationDetail(AllocationResponse):
    """Ledger row joined with its student and room."""

    student: StudentResponse
    room: RoomResponse


class AllocationConfirmation(BaseSchema):
    """Response of a successful allocation."""

    message: str = "Room allocated successfully"
    allocation: AllocationDetail


class StudentAllocationView(BaseSchema):
    """A student together with the room they occupy, if any."""

    student: StudentResponse
    status: Literal["allocated", "unallocated"]
    allocation_id: Optional[int] = None
    allocated_at: Optional[datetime] = None
    room: Optional[RoomResponse] = None

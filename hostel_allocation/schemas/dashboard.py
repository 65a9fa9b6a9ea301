"""Read-only dashboard projections."""

from __future__ import annotations

from pydantic import Field

from hostel_allocation.schemas.base import BaseSchema

__all__ = ["DashboardStats"]


class DashboardStats(BaseSchema):
    total_students: int = Field(..., ge=0)
    total_rooms: int = Field(..., ge=0)
    allocated_count: int = Field(..., ge=0, description="Number of allocation rows")
    available_rooms: int = Field(..., ge=0, description="Rooms with at least one free bed")
    total_capacity: int = Field(..., ge=0)
    total_occupancy: int = Field(..., ge=0)
    occupancy_percent: int = Field(..., ge=0)

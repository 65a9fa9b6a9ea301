from hostel_allocation.schemas.allocation import (
    AllocationConfirmation,
    AllocationDetail,
    AllocationRequest,
    AllocationResponse,
    StudentAllocationView,
)
from hostel_allocation.schemas.dashboard import DashboardStats
from hostel_allocation.schemas.room import RoomCreate, RoomResponse
from hostel_allocation.schemas.student import StudentCreate, StudentResponse

__all__ = [
    "AllocationConfirmation",
    "AllocationDetail",
    "AllocationRequest",
    "AllocationResponse",
    "DashboardStats",
    "RoomCreate",
    "RoomResponse",
    "StudentAllocationView",
    "StudentCreate",
    "StudentResponse",
]

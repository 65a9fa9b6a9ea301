from hostel_allocation.services.allocation_service import AllocationService
from hostel_allocation.services.base_service import BaseService
from hostel_allocation.services.reporting_service import ReportingService, compute_occupancy_percent
from hostel_allocation.services.room_service import RoomService
from hostel_allocation.services.student_service import StudentService

__all__ = [
    "AllocationService",
    "BaseService",
    "ReportingService",
    "RoomService",
    "StudentService",
    "compute_occupancy_percent",
]

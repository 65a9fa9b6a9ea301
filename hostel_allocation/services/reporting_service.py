"""
Read-only projections over students, rooms and allocations used by
the dashboards.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from sqlalchemy.orm import Session

from hostel_allocation.core.exceptions import StudentNotFoundError
from hostel_allocation.models.room import Room
from hostel_allocation.repositories.allocation_repository import AllocationRepository
from hostel_allocation.repositories.room_repository import RoomRepository
from hostel_allocation.repositories.student_repository import StudentRepository
from hostel_allocation.schemas.allocation import StudentAllocationView
from hostel_allocation.schemas.dashboard import DashboardStats
from hostel_allocation.schemas.room import RoomResponse
from hostel_allocation.schemas.student import StudentResponse
from hostel_allocation.services.base_service import BaseService


def compute_occupancy_percent(allocated_count: int, total_rooms: int) -> int:
    """
    Allocations per room as a whole percentage, rounded half up.

    Zero rooms yields 0.
    """
    if total_rooms <= 0:
        return 0
    ratio = Decimal(allocated_count * 100) / Decimal(total_rooms)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ReportingService(BaseService):
    """Dashboard queries. Never writes."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.students = StudentRepository(db_session)
        self.rooms = RoomRepository(db_session)
        self.allocations = AllocationRepository(db_session)

    def available_rooms(self) -> List[Room]:
        return self.rooms.list_available()

    def student_with_allocation(self, student_id: int) -> StudentAllocationView:
        student = self.students.get_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)

        allocation = self.allocations.get_for_student(student_id)
        if allocation is None:
            return StudentAllocationView(
                student=StudentResponse.model_validate(student),
                status="unallocated",
            )

        return StudentAllocationView(
            student=StudentResponse.model_validate(student),
            status="allocated",
            allocation_id=allocation.id,
            allocated_at=allocation.created_at,
            room=RoomResponse.model_validate(allocation.room),
        )

    def occupancy_percent(self) -> int:
        return compute_occupancy_percent(self.allocations.count(), self.rooms.count())

    def dashboard_stats(self) -> DashboardStats:
        total_rooms = self.rooms.count()
        allocated_count = self.allocations.count()
        total_capacity, total_occupancy = self.rooms.capacity_totals()

        return DashboardStats(
            total_students=self.students.count(),
            total_rooms=total_rooms,
            allocated_count=allocated_count,
            available_rooms=self.rooms.count_available(),
            total_capacity=total_capacity,
            total_occupancy=total_occupancy,
            occupancy_percent=compute_occupancy_percent(allocated_count, total_rooms),
        )

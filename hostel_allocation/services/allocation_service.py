"""
Allocation service: validates and commits room allocations.

An allocation touches two tables: a new ledger row and the room's
occupancy counter. Both writes happen in one transaction, and the
counter is bumped with a conditional UPDATE that only succeeds while
``occupancy < capacity``. A request that loses a race for the last bed
sees zero updated rows and is rejected; nothing is written.
"""

from typing import List

from sqlalchemy.orm import Session

from hostel_allocation.core.exceptions import (
    AllocationNotFoundError,
    CapacityExceededError,
    DuplicateEntryError,
    RoomNotFoundError,
    StudentAlreadyAllocatedError,
    StudentNotFoundError,
)
from hostel_allocation.models.allocation import Allocation
from hostel_allocation.repositories.allocation_repository import AllocationRepository
from hostel_allocation.repositories.room_repository import RoomRepository
from hostel_allocation.repositories.student_repository import StudentRepository
from hostel_allocation.services.base_service import BaseService


class AllocationService(BaseService):
    """Places students into rooms and reads the allocation ledger."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.students = StudentRepository(db_session)
        self.rooms = RoomRepository(db_session)
        self.allocations = AllocationRepository(db_session)

    def allocate(self, student_id: int, room_id: int) -> Allocation:
        """
        Allocate a bed in ``room_id`` to ``student_id``.

        Returns:
            The new allocation with student and room loaded

        Raises:
            StudentNotFoundError: unknown student
            RoomNotFoundError: unknown room
            StudentAlreadyAllocatedError: the student already has a room
            CapacityExceededError: the room is full
        """
        with self.transaction():
            student = self.students.get_by_id(student_id)
            if student is None:
                raise StudentNotFoundError(student_id)

            room = self.rooms.get_by_id(room_id, for_update=True)
            if room is None:
                raise RoomNotFoundError(room_id)

            existing = self.allocations.get_for_student(student_id)
            if existing is not None:
                raise StudentAlreadyAllocatedError(student_id, existing.room_id)

            if room.is_full:
                raise CapacityExceededError(room.id, room.capacity, room.occupancy)

            if not self.rooms.increment_occupancy(room.id):
                # Another request took the last bed after our read.
                raise CapacityExceededError(room.id, room.capacity, room.capacity)

            try:
                allocation = self.allocations.create(
                    Allocation(student_id=student.id, room_id=room.id),
                    commit=False,
                )
            except DuplicateEntryError as e:
                raise StudentAlreadyAllocatedError(student_id) from e

            allocation_id = allocation.id

        self._log_operation(
            "allocate room",
            allocation_id,
            {"student_id": student_id, "room_id": room_id},
        )
        return self.get_allocation(allocation_id)

    def list_allocations(self) -> List[Allocation]:
        return self.allocations.list_with_details()

    def get_allocation(self, allocation_id: int) -> Allocation:
        allocation = self.allocations.get_with_details(allocation_id)
        if allocation is None:
            raise AllocationNotFoundError(allocation_id)
        return allocation

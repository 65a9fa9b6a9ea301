from hostel_allocation.repositories.allocation_repository import AllocationRepository
from hostel_allocation.repositories.base_repository import BaseRepository
from hostel_allocation.repositories.room_repository import RoomRepository
from hostel_allocation.repositories.student_repository import StudentRepository

__all__ = [
    "AllocationRepository",
    "BaseRepository",
    "RoomRepository",
    "StudentRepository",
]

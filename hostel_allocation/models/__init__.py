from hostel_allocation.models.allocation import Allocation
from hostel_allocation.models.base import BaseModel, TimestampMixin
from hostel_allocation.models.room import Room
from hostel_allocation.models.student import Student

__all__ = [
    "Allocation",
    "BaseModel",
    "Room",
    "Student",
    "TimestampMixin",
]

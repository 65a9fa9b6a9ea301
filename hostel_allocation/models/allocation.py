"""
Allocation model: the ledger row linking one student to one room.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from hostel_allocation.models.base import BaseModel

if TYPE_CHECKING:
    from hostel_allocation.models.room import Room
    from hostel_allocation.models.student import Student


class Allocation(BaseModel):
    """Room assignment of a student. One per student."""

    __tablename__ = "allocations"

    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id", ondelete="RESTRICT"),
        nullable=False,
        unique=True,
        index=True,
    )
    room_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("rooms.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    student: Mapped["Student"] = relationship("Student", back_populates="allocation")
    room: Mapped["Room"] = relationship("Room", back_populates="allocations")

    def __repr__(self) -> str:
        return f"<Allocation id={self.id} student={self.student_id} room={self.room_id}>"

"""
Room model.

Occupancy is a denormalised counter of the allocations pointing at the
room; the CHECK constraints keep it inside [0, capacity].
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_allocation.models.base import BaseModel, TimestampMixin

if TYPE_CHECKING:
    from hostel_allocation.models.allocation import Allocation


class Room(BaseModel, TimestampMixin):
    """Hostel room with a bed capacity."""

    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_rooms_capacity_positive"),
        CheckConstraint("occupancy >= 0", name="ck_rooms_occupancy_non_negative"),
        CheckConstraint("occupancy <= capacity", name="ck_rooms_occupancy_within_capacity"),
    )

    room_number: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
    )
    floor: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    capacity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
    )
    occupancy: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    allocations: Mapped[List["Allocation"]] = relationship(
        "Allocation",
        back_populates="room",
    )

    @property
    def is_full(self) -> bool:
        return self.occupancy >= self.capacity

    def __repr__(self) -> str:
        return f"<Room id={self.id} number={self.room_number} {self.occupancy}/{self.capacity}>"

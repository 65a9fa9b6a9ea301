"""
Room repository: lookups, availability queries and the guarded
occupancy counter.
"""

from typing import List, Optional, Tuple

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from hostel_allocation.models.room import Room
from hostel_allocation.repositories.base_repository import BaseRepository


class RoomRepository(BaseRepository[Room]):
    """
    Repository for Room entity.

    Handles:
    - Room number lookups
    - Availability queries
    - Occupancy increments guarded by capacity
    """

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def get_by_room_number(self, room_number: str) -> Optional[Room]:
        return self.find_one_by(room_number=room_number)

    def list_available(self) -> List[Room]:
        """Rooms with at least one free bed."""
        stmt = (
            select(Room)
            .where(Room.occupancy < Room.capacity)
            .order_by(Room.id)
        )
        with self._translate_errors("list_available"):
            return list(self.db.execute(stmt).scalars().all())

    def count_available(self) -> int:
        stmt = select(func.count()).select_from(Room).where(Room.occupancy < Room.capacity)
        with self._translate_errors("count_available"):
            return self.db.execute(stmt).scalar_one()

    def capacity_totals(self) -> Tuple[int, int]:
        """Return (total capacity, total occupancy) across all rooms."""
        stmt = select(
            func.coalesce(func.sum(Room.capacity), 0),
            func.coalesce(func.sum(Room.occupancy), 0),
        )
        with self._translate_errors("capacity_totals"):
            capacity, occupancy = self.db.execute(stmt).one()
        return int(capacity), int(occupancy)

    def increment_occupancy(self, room_id: int) -> bool:
        """
        Take one bed in the room if one is free.

        The capacity comparison and the increment run as one UPDATE
        statement, so two callers can never both take the last bed.
        Does not commit.

        Returns:
            True if a bed was taken, False if the room was already full
        """
        stmt = (
            update(Room)
            .where(Room.id == room_id, Room.occupancy < Room.capacity)
            .values(occupancy=Room.occupancy + 1)
            .execution_options(synchronize_session=False)
        )
        with self._translate_errors("increment_occupancy"):
            result = self.db.execute(stmt)
        return result.rowcount == 1

"""
Room directory: administrator-facing room creation and lookups.
"""

from typing import Any, List, Mapping, Union

from sqlalchemy.orm import Session

from hostel_allocation.core.exceptions import DuplicateEntryError, RoomNotFoundError
from hostel_allocation.models.room import Room
from hostel_allocation.repositories.room_repository import RoomRepository
from hostel_allocation.schemas.room import RoomCreate
from hostel_allocation.services.base_service import BaseService


class RoomService(BaseService):
    """Create, list and fetch rooms."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.rooms = RoomRepository(db_session)

    def create(self, payload: Union[RoomCreate, Mapping[str, Any]]) -> Room:
        """
        Create an empty room.

        Raises:
            ValidationError: roomNumber or capacity missing or invalid
            DuplicateEntryError: room number already exists
        """
        data = self._validate(RoomCreate, payload)

        if self.rooms.get_by_room_number(data.room_number) is not None:
            raise DuplicateEntryError(
                f"Room {data.room_number} already exists",
                field="roomNumber",
                value=data.room_number,
                table=self.rooms.table_name,
            )

        room = Room(
            room_number=data.room_number,
            floor=data.floor,
            capacity=data.capacity,
            occupancy=0,
        )
        with self.transaction():
            self.rooms.create(room, commit=False)
        self.db.refresh(room)

        self._log_operation("create room", room.id, {"room_number": room.room_number, "capacity": room.capacity})
        return room

    def list_rooms(self) -> List[Room]:
        return self.rooms.get_all()

    def get_room(self, room_id: int) -> Room:
        room = self.rooms.get_by_id(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

"""
Room directory tests
"""
import pytest

from hostel_allocation.core.exceptions import (
    DuplicateEntryError,
    ErrorCode,
    RoomNotFoundError,
    ValidationError,
)
from hostel_allocation.services import RoomService


class TestRoomCreate:
    """Room creation rules"""

    def test_create_room_starts_empty(self, db_session):
        room = RoomService(db_session).create({'roomNumber': '101', 'floor': 1, 'capacity': 2})

        assert room.id is not None
        assert room.room_number == '101'
        assert room.floor == 1
        assert room.capacity == 2
        assert room.occupancy == 0
        assert room.created_at is not None

    def test_floor_is_optional(self, db_session):
        room = RoomService(db_session).create({'room_number': 'A-1', 'capacity': 1})

        assert room.floor is None

    def test_basement_floor_is_accepted(self, db_session):
        room = RoomService(db_session).create({'room_number': 'B-1', 'floor': -1, 'capacity': 2})

        assert room.floor == -1

    def test_room_number_is_trimmed(self, db_session):
        room = RoomService(db_session).create({'room_number': '  202 ', 'capacity': 3})

        assert room.room_number == '202'

    @pytest.mark.parametrize('payload', [
        {'capacity': 2},
        {'room_number': '101'},
        {'room_number': '', 'capacity': 2},
        {'room_number': '   ', 'capacity': 2},
        {'room_number': '101', 'capacity': 0},
        {'room_number': '101', 'capacity': -3},
        {'room_number': '101', 'capacity': 2, 'floor': 'first'},
    ])
    def test_invalid_payload_is_rejected(self, db_session, payload):
        service = RoomService(db_session)

        with pytest.raises(ValidationError) as exc_info:
            service.create(payload)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details['field_errors']
        assert service.list_rooms() == []

    def test_duplicate_room_number_conflicts(self, db_session, make_room):
        make_room(room_number='101')
        service = RoomService(db_session)

        with pytest.raises(DuplicateEntryError) as exc_info:
            service.create({'room_number': '101', 'capacity': 4})

        assert exc_info.value.error_code == ErrorCode.DUPLICATE_ENTRY
        assert exc_info.value.status_code == 400
        assert len(service.list_rooms()) == 1


class TestRoomLookup:
    """Room listing and retrieval"""

    def test_list_rooms_in_creation_order(self, db_session, make_room):
        created = [make_room(room_number=number) for number in ('301', '101', '201')]

        listed = RoomService(db_session).list_rooms()

        assert [room.id for room in listed] == [room.id for room in created]

    def test_listed_rooms_can_be_fetched_by_id(self, db_session, make_room):
        make_room(room_number='101', capacity=2, floor=1)
        make_room(room_number='102', capacity=3)
        service = RoomService(db_session)

        for listed in service.list_rooms():
            fetched = service.get_room(listed.id)
            assert fetched.to_dict() == listed.to_dict()

    def test_unknown_room_is_not_found(self, db_session):
        with pytest.raises(RoomNotFoundError) as exc_info:
            RoomService(db_session).get_room(999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.error_code == ErrorCode.ROOM_NOT_FOUND

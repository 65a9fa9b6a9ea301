"""
Administrator endpoints: room management, assignments and dashboard totals.
"""

from typing import List

from fastapi import APIRouter, Depends

from hostel_allocation.api import deps
from hostel_allocation.schemas import (
    AllocationConfirmation,
    AllocationDetail,
    AllocationRequest,
    DashboardStats,
    RoomCreate,
    RoomResponse,
)
from hostel_allocation.services import AllocationService, ReportingService, RoomService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/rooms", response_model=RoomResponse)
def create_room(
    payload: RoomCreate,
    service: RoomService = Depends(deps.get_room_service),
):
    return service.create(payload)


@router.get("/rooms", response_model=List[RoomResponse])
def list_rooms(service: RoomService = Depends(deps.get_room_service)):
    return service.list_rooms()


@router.get("/rooms/available", response_model=List[RoomResponse])
def list_available_rooms(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.available_rooms()


@router.get("/rooms/{room_id}", response_model=RoomResponse)
def get_room(
    room_id: int,
    service: RoomService = Depends(deps.get_room_service),
):
    return service.get_room(room_id)


@router.post("/allocate", response_model=AllocationConfirmation)
def assign_student(
    payload: AllocationRequest,
    service: AllocationService = Depends(deps.get_allocation_service),
):
    allocation = service.allocate(payload.student_id, payload.room_id)
    return AllocationConfirmation(
        message="Student assigned successfully",
        allocation=AllocationDetail.model_validate(allocation),
    )


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(service: ReportingService = Depends(deps.get_reporting_service)):
    return service.dashboard_stats()

"""
FastAPI dependencies: one session per request, services built on it.

Example usage in a router:
    @router.get("/rooms")
    def list_rooms(service: RoomService = Depends(deps.get_room_service)):
        return service.list_rooms()
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from hostel_allocation.core.monitoring import PerformanceTracker
from hostel_allocation.db.session import get_db
from hostel_allocation.services import (
    AllocationService,
    ReportingService,
    RoomService,
    StudentService,
)

__all__ = [
    "get_db",
    "get_room_service",
    "get_student_service",
    "get_allocation_service",
    "get_reporting_service",
    "get_metrics",
]


def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    return RoomService(db)


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(db)


def get_allocation_service(db: Session = Depends(get_db)) -> AllocationService:
    return AllocationService(db)


def get_reporting_service(db: Session = Depends(get_db)) -> ReportingService:
    return ReportingService(db)


def get_metrics(request: Request) -> PerformanceTracker:
    return request.app.state.metrics

"""
Student-facing endpoints: registration, listing and room requests.
"""

from typing import List

from fastapi import APIRouter, Depends

from hostel_allocation.api import deps
from hostel_allocation.schemas import (
    AllocationConfirmation,
    AllocationDetail,
    AllocationRequest,
    StudentAllocationView,
    StudentCreate,
    StudentResponse,
)
from hostel_allocation.services import (
    AllocationService,
    ReportingService,
    StudentService,
)

router = APIRouter(prefix="/student", tags=["Students"])


@router.post("", response_model=StudentResponse)
def register_student(
    payload: StudentCreate,
    service: StudentService = Depends(deps.get_student_service),
):
    return service.register(payload)


@router.get("/list", response_model=List[StudentResponse])
def list_students(service: StudentService = Depends(deps.get_student_service)):
    return service.list_students()


@router.post("/allocate", response_model=AllocationConfirmation)
def allocate_room(
    payload: AllocationRequest,
    service: AllocationService = Depends(deps.get_allocation_service),
):
    allocation = service.allocate(payload.student_id, payload.room_id)
    return AllocationConfirmation(
        message="Room allocated successfully",
        allocation=AllocationDetail.model_validate(allocation),
    )


@router.get("/allocations", response_model=List[AllocationDetail])
def list_allocations(service: AllocationService = Depends(deps.get_allocation_service)):
    return service.list_allocations()


@router.get("/allocations/{allocation_id}", response_model=AllocationDetail)
def get_allocation(
    allocation_id: int,
    service: AllocationService = Depends(deps.get_allocation_service),
):
    return service.get_allocation(allocation_id)


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(
    student_id: int,
    service: StudentService = Depends(deps.get_student_service),
):
    return service.get_student(student_id)


@router.get("/{student_id}/allocation", response_model=StudentAllocationView)
def get_student_allocation(
    student_id: int,
    service: ReportingService = Depends(deps.get_reporting_service),
):
    return service.student_with_allocation(student_id)

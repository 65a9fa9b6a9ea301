from fastapi import APIRouter

from hostel_allocation.api.routes import admin, students, system

router = APIRouter()

router.include_router(system.router)
router.include_router(students.router)
router.include_router(admin.router)

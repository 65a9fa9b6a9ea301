"""
Allocation ledger repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from hostel_allocation.models.allocation import Allocation
from hostel_allocation.repositories.base_repository import BaseRepository


class AllocationRepository(BaseRepository[Allocation]):
    """
    Repository for the allocation ledger.

    Joined reads eager-load the student and room so list responses
    are built without per-row queries.
    """

    def __init__(self, db: Session):
        super().__init__(Allocation, db)

    def _joined(self):
        return select(Allocation).options(
            joinedload(Allocation.student),
            joinedload(Allocation.room),
        )

    def list_with_details(self) -> List[Allocation]:
        stmt = self._joined().order_by(Allocation.id)
        with self._translate_errors("list_with_details"):
            return list(self.db.execute(stmt).scalars().unique().all())

    def get_with_details(self, allocation_id: int) -> Optional[Allocation]:
        stmt = self._joined().where(Allocation.id == allocation_id)
        with self._translate_errors("get_with_details"):
            return self.db.execute(stmt).unique().scalar_one_or_none()

    def get_for_student(self, student_id: int) -> Optional[Allocation]:
        stmt = self._joined().where(Allocation.student_id == student_id)
        with self._translate_errors("get_for_student"):
            return self.db.execute(stmt).unique().scalar_one_or_none()

"""
Student repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostel_allocation.models.student import Student
from hostel_allocation.repositories.base_repository import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Repository for Student entity."""

    def __init__(self, db: Session):
        super().__init__(Student, db)

    def get_by_email(self, email: str) -> Optional[Student]:
        return self.find_one_by(email=email.lower())

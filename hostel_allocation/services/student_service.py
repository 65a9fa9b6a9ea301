"""
Student directory: registration and lookups.
"""

from typing import Any, List, Mapping, Union

from sqlalchemy.orm import Session

from hostel_allocation.core.exceptions import DuplicateEntryError, StudentNotFoundError
from hostel_allocation.models.student import Student
from hostel_allocation.repositories.student_repository import StudentRepository
from hostel_allocation.schemas.student import StudentCreate
from hostel_allocation.services.base_service import BaseService


class StudentService(BaseService):
    """Register, list and fetch students."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.students = StudentRepository(db_session)

    def register(self, payload: Union[StudentCreate, Mapping[str, Any]]) -> Student:
        """
        Register a new student.

        Raises:
            ValidationError: name or email missing, or email malformed
            DuplicateEntryError: email already registered
        """
        data = self._validate(StudentCreate, payload)

        if self.students.get_by_email(data.email) is not None:
            raise DuplicateEntryError(
                "Email already registered",
                field="email",
                value=data.email,
                table=self.students.table_name,
            )

        student = Student(name=data.name, email=data.email, phone=data.phone)
        with self.transaction():
            self.students.create(student, commit=False)
        self.db.refresh(student)

        self._log_operation("register student", student.id)
        return student

    def list_students(self) -> List[Student]:
        return self.students.get_all()

    def get_student(self, student_id: int) -> Student:
        student = self.students.get_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

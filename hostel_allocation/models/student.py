"""
Student model.

A student registers once and may hold at most one room allocation.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_allocation.models.base import BaseModel, TimestampMixin

if TYPE_CHECKING:
    from hostel_allocation.models.allocation import Allocation


class Student(BaseModel, TimestampMixin):
    """Registered student."""

    __tablename__ = "students"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Stored lower-cased",
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
    )

    allocation: Mapped[Optional["Allocation"]] = relationship(
        "Allocation",
        back_populates="student",
        uselist=False,
    )

    def __repr__(self) -> str:
        return f"<Student id={self.id} email={self.email}>"

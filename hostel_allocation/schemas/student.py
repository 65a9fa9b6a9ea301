"""
Student schemas: registration payload and response shape.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from hostel_allocation.schemas.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    TimestampMixin,
)

__all__ = [
    "StudentCreate",
    "StudentResponse",
]


class StudentCreate(BaseCreateSchema):
    """Registration request."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Full name",
        examples=["John Doe"],
    )
    email: EmailStr = Field(
        ...,
        description="Unique contact email",
        examples=["john@example.com"],
    )
    phone: Optional[str] = Field(
        default=None,
        max_length=32,
        description="Optional phone number",
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("phone")
    @classmethod
    def blank_phone_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class StudentResponse(BaseResponseSchema, TimestampMixin):
    """Student as returned by the API."""

    name: str
    email: str
    phone: Optional[str] = None

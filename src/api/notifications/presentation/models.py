"""Request and response models for notification routes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, EmailStr, Field


class SendWelcomeEmailRequest(BaseModel):
    """Public form submitted by a prospective student."""

    email: EmailStr = Field(..., description="Recipient address")
    name: str = Field(..., min_length=2, max_length=255, description="Recipient name")
    course_title: str | None = Field(
        default=None, max_length=255, description="Course of interest"
    )
    course_id: str | int | None = Field(default=None, description="Course identifier")


class SendWelcomeEmailResponse(BaseModel):
    """Outcome of a welcome email request."""

    success: bool
    message: str
    data: list[dict[str, Any] | None] = Field(default_factory=list)

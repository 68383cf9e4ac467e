"""Request and response models for IAM routes."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field

from iam.application.value_objects import IssuedToken
from iam.domain.aggregates import User


class UserProfileResponse(BaseModel):
    """The authenticated user's profile."""

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str | None = Field(None, description="Email address")
    status: str | None = Field(None, description="Account status")

    @classmethod
    def from_domain(cls, user: User) -> UserProfileResponse:
        """Convert domain User aggregate to API response."""
        return cls(
            id=user.id.value,
            name=user.name,
            email=user.email,
            status=user.status,
        )


class LoginRequest(BaseModel):
    """Credentials exchanged for a personal access token."""

    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Account password")
    device_name: str = Field(
        default="api",
        min_length=1,
        max_length=255,
        description="Name stored on the issued token",
    )


class LoginResponse(BaseModel):
    """A freshly issued personal access token.

    The token is shown only once and cannot be retrieved again.
    """

    token: str = Field(..., description="Bearer token in '<id>|<secret>' form")
    token_type: str = Field(default="Bearer")
    user: UserProfileResponse

    @classmethod
    def from_issued(cls, issued: IssuedToken) -> LoginResponse:
        """Build the response from the issued token."""
        return cls(
            token=issued.plaintext,
            user=UserProfileResponse.from_domain(issued.user),
        )


class ForgotPasswordRequest(BaseModel):
    """Request for a password reset link."""

    email: EmailStr = Field(..., description="Account email")


class ForgotPasswordResponse(BaseModel):
    """Outcome of a reset link request.

    The message is the same whether or not the account exists.
    """

    status: int = Field(..., description="HTTP status mirrored in the body")
    message: str

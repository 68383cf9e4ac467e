"""SQLAlchemy ORM models for IAM bounded context."""

from iam.infrastructure.models.password_reset_token import PasswordResetTokenModel
from iam.infrastructure.models.personal_access_token import (
    USER_TOKENABLE_TYPE,
    PersonalAccessTokenModel,
)
from iam.infrastructure.models.user import UserModel

__all__ = [
    "PasswordResetTokenModel",
    "PersonalAccessTokenModel",
    "USER_TOKENABLE_TYPE",
    "UserModel",
]

"""Application services for IAM bounded context."""

from iam.application.services.authentication_service import AuthenticationService
from iam.application.services.login_service import LoginService
from iam.application.services.password_reset_service import PasswordResetService
from iam.application.services.session_guard import ActiveSessionGuard

__all__ = [
    "ActiveSessionGuard",
    "AuthenticationService",
    "LoginService",
    "PasswordResetService",
]

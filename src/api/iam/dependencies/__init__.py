"""FastAPI dependencies for IAM bounded context."""

from iam.dependencies.authentication import (
    bearer_scheme,
    get_access_token_repository,
    get_authenticated_principal,
    get_authentication_service,
    get_login_service,
    get_user_repository,
)
from iam.dependencies.password_reset import (
    get_password_reset_notifier,
    get_password_reset_service,
    get_password_reset_token_repository,
)
from iam.dependencies.session_guard import (
    get_active_session_guard,
    require_active_principal,
    require_active_user,
)

__all__ = [
    "bearer_scheme",
    "get_access_token_repository",
    "get_active_session_guard",
    "get_authenticated_principal",
    "get_authentication_service",
    "get_login_service",
    "get_password_reset_notifier",
    "get_password_reset_service",
    "get_password_reset_token_repository",
    "get_user_repository",
    "require_active_principal",
    "require_active_user",
]

"""Domain probes for IAM application services."""

from iam.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.observability.password_reset_probe import (
    DefaultPasswordResetProbe,
    PasswordResetProbe,
)
from iam.application.observability.session_guard_probe import (
    DefaultSessionGuardProbe,
    SessionGuardProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "DefaultPasswordResetProbe",
    "DefaultSessionGuardProbe",
    "PasswordResetProbe",
    "SessionGuardProbe",
]

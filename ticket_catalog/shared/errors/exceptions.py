"""
Web-boundary errors that do not belong to the catalog domain.

Authentication and authorization failures are raised by the security
dependencies; UnsupportedMediaTypeError by the JSON body guard.
Each maps to a fixed problem type in the error handlers.
"""

from typing import Sequence


class AuthenticationError(Exception):
    """Generic authentication failure. The message is shown to the caller."""

    def __init__(self, message: str = "Authentication is required") -> None:
        self.message = message
        super().__init__(message)


class BadCredentialsError(AuthenticationError):
    """The presented credentials are not valid."""


class DisabledAccountError(AuthenticationError):
    """The credentials belong to a disabled account."""


class LockedAccountError(AuthenticationError):
    """The account is locked after repeated failures."""


class AccessDeniedError(Exception):
    """The caller is authenticated but lacks a required permission.

    ``permission`` is for logs only and never rendered to the caller.
    """

    def __init__(self, permission: str | None = None) -> None:
        self.permission = permission
        super().__init__(f"Access denied (requires {permission or 'unspecified'})")


class UnsupportedMediaTypeError(Exception):
    """The request body content type is not one the endpoint accepts."""

    def __init__(self, content_type: str, supported: Sequence[str]) -> None:
        self.content_type = content_type
        self.supported = list(supported)
        super().__init__(f"Unsupported content type: {content_type}")

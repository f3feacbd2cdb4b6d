"""
API key authentication for write endpoints.

Keys are configured through ``Settings.api_keys`` (key -> user id).
When no key is configured every endpoint is open and requests are
attributed to the anonymous user.
"""

import secrets
from typing import Optional

from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from ticket_catalog.core.config import settings as default_settings
from ticket_catalog.shared.context import set_user_id
from ticket_catalog.shared.errors.exceptions import (
    AuthenticationError,
    BadCredentialsError,
)

API_KEY_HEADER = "X-API-Key"
MISSING_CREDENTIALS_MESSAGE = (
    "Authentication is required to access this resource. "
    "Please provide valid credentials."
)

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def _lookup_user(api_keys: dict[str, str], presented: str) -> Optional[str]:
    for key, user_id in api_keys.items():
        if secrets.compare_digest(key.encode(), presented.encode()):
            return user_id
    return None


async def require_api_key(
    request: Request,
    api_key: Optional[str] = Security(api_key_header),
) -> Optional[str]:
    """Authenticate the caller by ``X-API-Key``.

    Returns:
        The authenticated user id, or None when authentication is off.

    Raises:
        AuthenticationError: If no key was presented.
        BadCredentialsError: If the key is not a configured one.
    """
    api_keys = getattr(request.app.state, "settings", default_settings).api_keys
    if not api_keys:
        return None
    if not api_key:
        raise AuthenticationError(MISSING_CREDENTIALS_MESSAGE)

    user_id = _lookup_user(api_keys, api_key)
    if user_id is None:
        raise BadCredentialsError("Invalid API key")

    set_user_id(user_id)
    return user_id

"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every route.
Protects against denial-of-service and resource abuse.
Rejections are rendered as ``rate-limit-exceeded`` problem details
by the centralized error handlers.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ticket_catalog.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Each application gets its own in-memory counters, so test apps and
    the served app never share quota.

    Args:
        settings: Application settings carrying the limit string.

    Returns:
        A slowapi Limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )

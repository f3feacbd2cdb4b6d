"""
Shared module package.

Cross-cutting concerns used by every layer above the domain:
- Problem-details error handling
- Request-scoped context (trace and user identifiers)
- Security middleware, API keys and rate limiting
- Logging configuration
"""

"""
Shared error handling package.

Centralizes exception-to-HTTP mapping so that every failure reaching
the web boundary is rendered as an RFC 7807 problem details body.
"""

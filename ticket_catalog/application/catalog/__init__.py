"""Catalog use cases and command DTOs."""

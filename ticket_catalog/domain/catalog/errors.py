"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to problem details responses at the interface layer.
No framework imports allowed.
"""

from typing import Optional


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ResourceNotFoundError(CatalogDomainError):
    """Raised when a catalog resource does not exist."""

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} not found with id: {identifier}")
        self.resource = resource
        self.identifier = identifier


class VenueNotFoundError(ResourceNotFoundError):
    """Raised when a venue cannot be found."""

    def __init__(self, venue_id: int) -> None:
        super().__init__("Venue", venue_id)
        self.venue_id = venue_id


class EventNotFoundError(ResourceNotFoundError):
    """Raised when an event cannot be found."""

    def __init__(self, event_id: int) -> None:
        super().__init__("Event", event_id)
        self.event_id = event_id


class ConflictError(CatalogDomainError):
    """Raised when a request conflicts with the current state.

    Duplicate resources and concurrent modifications are the usual causes.
    """

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.resource_type = resource_type
        self.conflict_field = conflict_field


class BusinessRuleViolationError(CatalogDomainError):
    """Raised when a business rule is violated.

    ``rule_code`` identifies the rule and ends up in the problem type URI.
    """

    def __init__(self, message: str, rule_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.rule_code = rule_code

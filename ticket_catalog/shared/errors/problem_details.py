"""RFC 7807 Problem Details for HTTP APIs.

Pydantic models for the error body returned by every non-2xx response,
and the closed set of problem types the service can emit.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    PROBLEM_JSON_MEDIA_TYPE: Content type of every error response
    ProblemType: (status, slug, title) of each error category
    FieldViolation: One failing field of a validation error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ProblemType(Enum):
    """Error categories with their HTTP status, type slug and title."""

    VALIDATION_ERROR = (400, "validation-error", "Validation Error")
    CONSTRAINT_VIOLATION = (400, "constraint-violation", "Constraint Violation")
    MALFORMED_REQUEST = (400, "malformed-request", "Malformed Request")
    MISSING_PARAMETER = (400, "missing-parameter", "Missing Parameter")
    TYPE_MISMATCH = (400, "type-mismatch", "Type Mismatch")
    AUTHENTICATION_FAILED = (401, "authentication-failed", "Authentication Failed")
    ACCOUNT_DISABLED = (401, "account-disabled", "Account Disabled")
    ACCOUNT_LOCKED = (401, "account-locked", "Account Locked")
    AUTHENTICATION_REQUIRED = (
        401,
        "authentication-required",
        "Authentication Required",
    )
    ACCESS_DENIED = (403, "access-denied", "Access Denied")
    RESOURCE_NOT_FOUND = (404, "resource-not-found", "Resource Not Found")
    ENDPOINT_NOT_FOUND = (404, "endpoint-not-found", "Endpoint Not Found")
    METHOD_NOT_ALLOWED = (405, "method-not-allowed", "Method Not Allowed")
    CONFLICT = (409, "conflict", "Conflict")
    INVALID_ARGUMENT = (409, "invalid-argument", "Invalid Argument")
    DATA_INTEGRITY_VIOLATION = (
        409,
        "data-integrity-violation",
        "Data Integrity Violation",
    )
    UNSUPPORTED_MEDIA_TYPE = (415, "unsupported-media-type", "Unsupported Media Type")
    BUSINESS_RULE_VIOLATION = (
        422,
        "business-rule-violation",
        "Business Rule Violation",
    )
    RATE_LIMIT_EXCEEDED = (429, "rate-limit-exceeded", "Too Many Requests")
    INTERNAL_ERROR = (500, "internal-error", "Internal Server Error")

    def __init__(self, status: int, slug: str, title: str) -> None:
        self.status = status
        self.slug = slug
        self.title = title


class FieldViolation(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field (or parameter) that failed
        rejected_value: The value that was sent, None when it was absent
        message: Human-readable error message
        code: Machine-readable violation code
    """

    field: str = Field(..., description="Field name")
    rejected_value: Any = Field(None, description="Value that failed validation")
    message: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable violation code")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Path of the request that failed
        trace_id: Request trace ID, also present in the server logs
        timestamp: When the problem was produced
        errors: Field-level errors, only for validation failures

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://api.ticketcatalog.dev/errors/resource-not-found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Venue not found with id: 7",
        ...     instance="/api/venues/7",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="Path of the failing request")
    trace_id: str | None = Field(None, description="Request trace ID")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    errors: list[FieldViolation] | None = Field(
        None, description="List of field-specific errors"
    )

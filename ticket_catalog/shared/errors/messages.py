"""
Detail-message refinement for problem details.

Parsers and database drivers only report failures as free text. These
pure functions turn that text into a caller-facing sentence using
ordered (substring, phrase) rules: matching is case-insensitive, the
first rule that matches wins, and a generic fallback is used otherwise.
Swap the rule tables to support another parser or database.
"""

from typing import Optional, Sequence

MessageRules = Sequence[tuple[str, str]]

UNREADABLE_BODY_FALLBACK = (
    "The request body is malformed or contains invalid JSON. "
    "Please verify the request format."
)
UNREADABLE_BODY_RULES: MessageRules = (
    ("request body is missing", "Request body is required but was not provided."),
    (
        "valid dictionary",
        "Invalid value type in request body. Please check data types.",
    ),
    ("json decode error", "Invalid JSON format. Please verify the JSON syntax."),
)

INTEGRITY_FALLBACK = (
    "A data integrity constraint was violated. Please verify your request data."
)
INTEGRITY_RULES: MessageRules = (
    ("unique constraint", "A resource with the same unique identifier already exists."),
    ("unique index", "A resource with the same unique identifier already exists."),
    (
        "foreign key constraint",
        "The operation references a resource that does not exist.",
    ),
    ("fk_", "The operation references a resource that does not exist."),
    ("not-null constraint", "A required field is missing or null."),
    ("not null constraint", "A required field is missing or null."),
    ("null not allowed", "A required field is missing or null."),
    (
        "event_date",
        "Event date is required and must have a valid format "
        "(e.g., 2025-12-15T20:00:00).",
    ),
    ("venue_id", "Venue ID is required and must reference an existing venue."),
)


def match_message(
    message: Optional[str], rules: MessageRules, fallback: str
) -> str:
    """Return the phrase of the first rule whose substring occurs in ``message``."""
    if not message:
        return fallback
    lowered = message.lower()
    for needle, phrase in rules:
        if needle in lowered:
            return phrase
    return fallback


def describe_unreadable_body(message: Optional[str]) -> str:
    """Caller-facing detail for a request body that could not be read."""
    return match_message(message, UNREADABLE_BODY_RULES, UNREADABLE_BODY_FALLBACK)


def describe_integrity_violation(message: Optional[str]) -> str:
    """Caller-facing detail for a database integrity failure.

    The raw driver message may name tables and columns; it is never
    returned as is.
    """
    return match_message(message, INTEGRITY_RULES, INTEGRITY_FALLBACK)


def extract_field_name(property_path: str) -> str:
    """Return the last segment of a dotted property path.

    ``"create.venue.name"`` gives ``"name"``; a path without a separator
    is returned unchanged.
    """
    last_dot = property_path.rfind(".")
    return property_path[last_dot + 1:] if last_dot > 0 else property_path

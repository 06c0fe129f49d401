"""Utility functions for knowledge graph operations."""

from datetime import datetime, timezone

from .constants import RELATIONSHIP_TYPES
from .exceptions import KGError
from .types import RelationshipType


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """Format a datetime as millisecond-precision UTC ISO-8601 ('...Z')."""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def normalize_tags(text: str) -> list[str]:
    """Split comma-separated tag text into trimmed, non-empty tags."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def validate_relationship_type(value: str) -> RelationshipType:
    """Coerce value to a RelationshipType. Raises KGError if invalid."""
    try:
        return RelationshipType(value)
    except ValueError:
        raise KGError(f"Invalid relationship type '{value}', must be one of {RELATIONSHIP_TYPES}") from None

"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class Units(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"


class LookupOutcome(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    REJECTED = "rejected"
    SUPERSEDED = "superseded"


def utc_now() -> datetime:
    return datetime.now(UTC)

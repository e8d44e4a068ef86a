# common.py
# Reusable constrained types for request schemas.

from datetime import datetime, timezone
from typing import Annotated, Optional
from pydantic import StringConstraints

# Names are trimmed before the length check, so "   " is rejected as blank
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=140)]

# Optional free text fields keep their content as sent
DescriptionStr = Annotated[str, StringConstraints(max_length=400)]
PositionStr = Annotated[str, StringConstraints(max_length=80)]
PhoneStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=30)]


def name_or_none(related) -> Optional[str]:
    """Returns related.name, or None when the relationship is unset."""
    return related.name if related is not None else None


def as_utc(value: datetime) -> datetime:
    """Kickoff instants are kept in UTC. A value without a zone is taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

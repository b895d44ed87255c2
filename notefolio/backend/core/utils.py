"""
Core Utilities.

Shared helpers for timestamps and identifiers.
"""

from datetime import datetime, timezone
from uuid import uuid4


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application are timezone-naive and
    assumed to be UTC, matching what the database columns store.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    """Generate a new string UUID for primary keys and request ids."""
    return str(uuid4())

"""
Utility helpers shared across services.
"""

from datetime import datetime, timezone
import uuid


def new_id(prefix: str) -> str:
    """Random record id, e.g. ``shop_6f1c...``."""
    return f"{prefix}_{uuid.uuid4()}"


def utc_now_iso() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix
    (``2024-05-01T12:00:00.000Z``).
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

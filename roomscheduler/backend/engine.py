"""Time normalization and interval-conflict helpers for the scheduling store."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from .errors import MalformedInputError
from .models import Appointment


def parse_instant(value: str, field: str = "time") -> datetime:
    """Parse ISO-8601 text into an aware UTC instant truncated to milliseconds.

    A trailing ``Z`` is accepted and values without an offset are read as UTC.
    """
    text = value.strip() if isinstance(value, str) else ""
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        return normalize_instant(datetime.fromisoformat(text))
    except (ValueError, OverflowError) as exc:
        raise MalformedInputError(field=field, value=str(value)) from exc


def normalize_instant(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(microsecond=(moment.microsecond // 1000) * 1000)


def format_instant(moment: datetime) -> str:
    """Render the canonical form, e.g. ``2024-05-01T09:00:00.000Z``."""
    normalized = normalize_instant(moment)
    return normalized.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def intervals_overlap(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    # Half-open: [start, end). Touching boundaries do not overlap.
    return start_a < end_b and end_a > start_b


def find_conflict(
    appointments: Iterable[Appointment],
    room_id: str,
    start: datetime,
    end: datetime,
) -> Appointment | None:
    """Return the first appointment on ``room_id`` overlapping ``[start, end)``."""
    for appointment in appointments:
        if appointment.room_id != room_id:
            continue
        existing_start = parse_instant(appointment.start_time)
        existing_end = parse_instant(appointment.end_time)
        if intervals_overlap(start, end, existing_start, existing_end):
            return appointment
    return None

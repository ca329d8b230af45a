from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def normalize_date(value: str | date) -> str:
    """Normalize a calendar date to ISO ``YYYY-MM-DD``.

    The check-in flow writes ``DD-MM-YYYY`` while the planner and overview
    screens send ISO dates; both are accepted here so storage and queries only
    ever see one format.
    """

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    v = (value or "").strip()
    if not v:
        raise ValidationError("Date is required")

    # Full ISO timestamps (e.g. from toISOString()) carry the date in front.
    if "T" in v:
        v = v.split("T", 1)[0]

    for fmt in ("%Y-%m-%d", "%d-%m-%Y", "%d/%m/%Y"):
        try:
            return datetime.strptime(v, fmt).date().isoformat()
        except ValueError:
            continue
    raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD or DD-MM-YYYY)")


def today_iso() -> str:
    return date.today().isoformat()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()

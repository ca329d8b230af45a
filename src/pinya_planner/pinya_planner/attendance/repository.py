from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_date(self, day: str) -> Sequence[AttendanceRecord]:
        """Check-ins for an ISO date, in check-in order."""

        raise NotImplementedError

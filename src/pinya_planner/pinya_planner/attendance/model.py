from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): một lượt check-in của thành viên.

    ``date`` luôn ở dạng ISO ``YYYY-MM-DD`` sau khi đọc từ kho dữ liệu.
    """

    date: str
    nickname: str
    timestamp: str

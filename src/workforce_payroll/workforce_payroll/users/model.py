from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Worker:
    """Thực thể miền (domain): Nhân viên được tính lương."""

    salary: Optional[float]
    name: str = ""
    rfid: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None

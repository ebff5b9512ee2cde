from __future__ import annotations

from typing import Any, Mapping

from .model import Worker


def worker_from_record(doc: Mapping[str, Any]) -> Worker:
    """Map a worker document; a missing salary is kept as None for the engine to flag."""
    department = doc.get("department")
    if isinstance(department, Mapping):
        department = department.get("name")
    return Worker(
        salary=doc.get("salary"),
        name=str(doc.get("name") or ""),
        rfid=doc.get("rfid"),
        department=department,
        email=doc.get("email"),
    )

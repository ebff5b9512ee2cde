from __future__ import annotations

import math
from typing import Any, Optional


def optional_amount(value: Any) -> Optional[float]:
    """Money amount or None when missing/unparsable/negative."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number

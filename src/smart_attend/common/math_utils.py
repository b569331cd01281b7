from __future__ import annotations

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    # round() would use banker's rounding: 78.5 must give 79
    return int(math.floor(value + 0.5))


def rounded_mean(values: Iterable[float]) -> int:
    """Integer-rounded arithmetic mean; an empty input gives 0."""
    items = list(values)
    if not items:
        return 0
    return round_half_up(sum(items) / len(items))

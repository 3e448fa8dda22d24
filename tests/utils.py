from __future__ import annotations

import itertools
from typing import Callable


def sequential_ids(prefix: str = "m") -> Callable[[], str]:
    """Return an id factory yielding ``prefix-1``, ``prefix-2``, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


def ticking_clock(start: int = 1_000) -> Callable[[], int]:
    """Return a clock that advances by one millisecond on every call."""
    counter = itertools.count(start)
    return lambda: next(counter)

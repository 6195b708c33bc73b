"""Common utilities for upload modules."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def split_into_batches(items: Sequence[T], batch_size: int) -> list[list[T]]:
    """Split items into consecutive batches of the given size.

    Args:
        items: Sequence to split, in submission order.
        batch_size: Maximum items per batch.

    Returns:
        List of batches; the last one may be smaller.
    """
    if not items:
        return []

    if batch_size <= 0:
        return [list(items)]

    return [list(items[i : i + batch_size]) for i in range(0, len(items), batch_size)]


def percent_complete(completed: int, total: int) -> int:
    """Percentage of completed items, rounded half up."""
    if total <= 0:
        return 100
    return math.floor(completed * 100 / total + 0.5)

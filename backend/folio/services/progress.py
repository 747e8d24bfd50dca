"""
Progress Model

Pure functions mapping a reading position to a percentage. The persistence
layer records the result; nothing here touches storage.
"""

import math


def progress_percentage(current: int, total: int) -> int:
    """
    Percentage of the book read, rounded half up to the nearest integer.

    The caller is expected to clamp ``current`` into ``[1, total]`` first
    (see ``clamp_position``); this function does not clamp.

    Returns:
        int: ``current / total * 100`` rounded half up, or 0 when ``total`` is not positive
    """
    if total > 0:
        return math.floor((current / total) * 100 + 0.5)
    return 0


def clamp_position(position: int, total: int) -> int:
    """Clamp a 1-based position into ``[1, total]`` (0 when there is nothing to read)"""
    if total <= 0:
        return 0
    return max(1, min(position, total))

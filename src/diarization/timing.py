"""Timestamp formatting for synthetic transcript offsets."""

from __future__ import annotations

import math


def format_timestamp(seconds: float) -> str:
    """Format an offset in seconds as ``MM:SS``.

    Both fields are floored and zero-padded to two digits. Minutes are not
    wrapped into hours, so very long offsets render as e.g. ``"125:07"``.
    """
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"

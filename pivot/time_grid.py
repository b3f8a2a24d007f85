"""
Synthetic per-minute time axis shared by every block of every file.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List

from pivot.constants import DATA_ROW_COUNT

# Any midnight works; only the time of day ends up in the labels.
_NOMINAL_MIDNIGHT = datetime(2000, 1, 1)
_STEP = timedelta(minutes=1)


def generate_time_slots(count: int = DATA_ROW_COUNT) -> List[str]:
    """
    Return *count* labels ``"HH:MM - HH:MM"``, one minute each, from 00:00.

    ``generate_time_slots()[1439] == "23:59 - 00:00"``.
    """
    slots: List[str] = []
    start = _NOMINAL_MIDNIGHT
    for _ in range(count):
        end = start + _STEP
        slots.append(f"{start:%H:%M} - {end:%H:%M}")
        start = end
    return slots

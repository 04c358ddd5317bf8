from __future__ import annotations

from typing import Dict, Optional

BASE = 20

# G..Y count 1..19, g..z count 20..400 in steps of 20.
RUN_WEIGHTS: Dict[str, int] = {
    **{chr(ord("G") + i): i + 1 for i in range(19)},
    **{chr(ord("g") + i): (i + 1) * 20 for i in range(20)},
}


def is_run_char(character: str) -> bool:
    """Return True if the character is part of a run-length code."""
    return character in RUN_WEIGHTS


def count_for_code(code: str, limit: Optional[int] = None) -> int:
    """Return the repeat count of a run-length code, most significant first.

    With a limit, counts at or above it are returned as the limit.
    """
    value = 0
    for character in code:
        value = value * BASE + RUN_WEIGHTS[character]
        if limit is not None and value >= limit:
            return limit
    return value

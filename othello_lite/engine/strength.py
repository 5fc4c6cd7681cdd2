from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class StrengthProfile:
    level: int
    depth: int


# Difficulty 1-5 is the lookahead in plies. Depth 2 is a fair challenge.
PROFILES = {level: StrengthProfile(level, level) for level in range(1, 6)}
DEFAULT_LEVEL = 2
HINT_DEPTH = 0


def parse_difficulty(text: str) -> Optional[int]:
    # Only the first character counts, the rest of the line is ignored
    first = text.strip()[:1]
    if first.isdigit() and int(first) in PROFILES:
        return int(first)
    return None


def depth_for_level(level: int) -> int:
    if level not in PROFILES:
        raise ValueError(f"difficulty must be 1-5, got {level}")
    return PROFILES[level].depth

"""
Scoring Utilities

Small helpers shared by the division calculator, the fit scorers and the
feedback generator.
"""

import math
from typing import Iterable, Optional

from .constants import Tiers, MIN_SCORE, MAX_SCORE


def position_matches(position: str, keywords: Iterable[str]) -> bool:
    """True if any keyword occurs in the position label (case-sensitive)."""
    return any(keyword in position for keyword in keywords)


def bonus_at_most(value: Optional[float], tiers: Tiers) -> int:
    """Bonus for lower-is-better metrics such as sprint times."""
    if value is None:
        return 0
    for threshold, bonus in tiers:
        if value <= threshold:
            return bonus
    return 0


def bonus_at_least(value: Optional[float], tiers: Tiers) -> int:
    """Bonus for higher-is-better metrics such as jumps, lifts and GPA."""
    if value is None:
        return 0
    for threshold, bonus in tiers:
        if value >= threshold:
            return bonus
    return 0


def round_half_up(value: float) -> int:
    # 2.5 -> 3, unlike the builtin round()
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round and clamp to the 0-100 integer range."""
    return min(max(round_half_up(value), MIN_SCORE), MAX_SCORE)


def format_number(value: float) -> str:
    """Render a metric for display without a trailing .0 (5.0 -> "5")."""
    return f"{value:g}"

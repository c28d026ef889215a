"""
Athlete Strength Profile

Division-independent summary of how strong an athlete is academically and
athletically, plus a coarse prospect ranking label.
"""

from .contracts import AthleteProfile, CombineMetricSnapshot, AthleteStrengthProfile
from .constants import (
    BASE_SCORE,
    STRENGTH_GPA_TIERS,
    STRENGTH_ACT_TIERS,
    STRENGTH_QB_FORTY_TIERS,
    POSITION_RANKING_LABELS,
    DEFAULT_POSITION_RANKING,
)
from .dimension_scorers import position_bonus
from .scoring_utils import bonus_at_least, clamp_score


def calculate_academic_strength(athlete: AthleteProfile) -> int:
    """GPA and ACT tiers on top of the base score. SAT is not counted."""
    score = BASE_SCORE
    score += bonus_at_least(athlete.gpa, STRENGTH_GPA_TIERS)
    score += bonus_at_least(athlete.act_score, STRENGTH_ACT_TIERS)
    return clamp_score(score)


def calculate_athletic_strength(athlete: AthleteProfile, metrics: CombineMetricSnapshot) -> int:
    score = BASE_SCORE + position_bonus(athlete, metrics, STRENGTH_QB_FORTY_TIERS)
    return clamp_score(score)


def position_ranking(athletic_strength: int) -> str:
    for threshold, label in POSITION_RANKING_LABELS:
        if athletic_strength >= threshold:
            return label
    return DEFAULT_POSITION_RANKING


def build_athlete_profile(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot
) -> AthleteStrengthProfile:
    athletic_strength = calculate_athletic_strength(athlete, metrics)

    return AthleteStrengthProfile(
        academic_strength=calculate_academic_strength(athlete),
        athletic_strength=athletic_strength,
        position_ranking=position_ranking(athletic_strength),
    )

"""
Division Recommendation Calculator

Converts an athlete profile and their latest combine metrics into a single
aggregate score and a recommended division tier.
"""

from .contracts import AthleteProfile, CombineMetricSnapshot, DivisionRecommendation
from .constants import (
    BASE_SCORE,
    QUARTERBACK_KEYWORDS,
    DIVISION_SPEED_KEYWORDS,
    LINE_KEYWORDS,
    DIVISION_QB_HEIGHT_TIERS,
    DIVISION_QB_FORTY_TIERS,
    DIVISION_SPEED_FORTY_TIERS,
    DIVISION_SPEED_VERTICAL_TIERS,
    DIVISION_LINE_WEIGHT_TIERS,
    DIVISION_LINE_BENCH_TIERS,
    DIVISION_GPA_TIERS,
    DIVISION_ACT_TIERS,
    DIVISION_TIER_THRESHOLDS,
    DEFAULT_DIVISION_TIER,
)
from .scoring_utils import position_matches, bonus_at_least, bonus_at_most, clamp_score


def division_score(athlete: AthleteProfile, metrics: CombineMetricSnapshot) -> int:
    """
    Unclamped division score.

    Position blocks are independent: a label matching several keyword
    groups collects bonuses from each of them.
    """
    score = BASE_SCORE
    position = athlete.position

    if position_matches(position, QUARTERBACK_KEYWORDS):
        score += bonus_at_least(athlete.height_inches(), DIVISION_QB_HEIGHT_TIERS)
        score += bonus_at_most(metrics.forty_yard, DIVISION_QB_FORTY_TIERS)

    if position_matches(position, DIVISION_SPEED_KEYWORDS):
        score += bonus_at_most(metrics.forty_yard, DIVISION_SPEED_FORTY_TIERS)
        score += bonus_at_least(metrics.vertical_jump, DIVISION_SPEED_VERTICAL_TIERS)

    if position_matches(position, LINE_KEYWORDS):
        score += bonus_at_least(athlete.weight, DIVISION_LINE_WEIGHT_TIERS)
        score += bonus_at_least(metrics.bench_press, DIVISION_LINE_BENCH_TIERS)

    # Academics count for every position
    score += bonus_at_least(athlete.gpa, DIVISION_GPA_TIERS)
    score += bonus_at_least(athlete.act_score, DIVISION_ACT_TIERS)

    return score


def division_for_score(score: float) -> str:
    """Map an unclamped division score to its tier label."""
    for threshold, tier in DIVISION_TIER_THRESHOLDS:
        if score >= threshold:
            return tier.value
    return DEFAULT_DIVISION_TIER.value


def calculate_division_recommendation(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot
) -> DivisionRecommendation:
    """
    Recommend a division tier for an athlete.

    The tier is chosen from the raw score; only the returned match_score
    is clamped to 0-100.
    """
    score = division_score(athlete, metrics)

    return DivisionRecommendation(
        division_recommendation=division_for_score(score),
        match_score=clamp_score(score),
    )

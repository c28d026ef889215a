"""
Dimension Scorers

Academic and athletic fit scorers. Each produces an unrounded score where
50 is neutral; the aggregator rounds and clamps to 0-100.
All logic is deterministic - no AI/ML components.
"""

from .contracts import AthleteProfile, CombineMetricSnapshot, School
from .constants import (
    Tiers,
    Division,
    BASE_SCORE,
    ACADEMIC_GPA_THRESHOLDS,
    ACADEMIC_MEETS_BASE,
    ACADEMIC_MEETS_SLOPE,
    ACADEMIC_MEETS_MAX_BONUS,
    ACADEMIC_JUCO_SCORE,
    ACADEMIC_BELOW_FLOOR,
    ACADEMIC_BELOW_MULTIPLIER,
    ACADEMIC_NO_GPA_SCORE,
    DIFFICULTY_FACTORS,
    DEFAULT_DIFFICULTY_FACTOR,
    QUARTERBACK_KEYWORDS,
    SPEED_KEYWORDS,
    LINE_KEYWORDS,
    LINEBACKER_KEYWORDS,
    OFFENSIVE_KEYWORDS,
    ATHLETIC_QB_FORTY_TIERS,
    ATHLETIC_QB_HEIGHT_TIERS,
    ATHLETIC_SPEED_FORTY_TIERS,
    ATHLETIC_SPEED_SHUTTLE_TIERS,
    ATHLETIC_SPEED_VERTICAL_TIERS,
    ATHLETIC_LINE_BENCH_TIERS,
    ATHLETIC_OFFENSIVE_LINE_WEIGHT_TIERS,
    ATHLETIC_DEFENSIVE_LINE_WEIGHT_TIERS,
    ATHLETIC_LINEBACKER_FORTY_TIERS,
    ATHLETIC_LINEBACKER_BENCH_TIERS,
)
from .scoring_utils import position_matches, bonus_at_least, bonus_at_most


def score_academic_fit(athlete: AthleteProfile, school: School) -> float:
    """
    Score GPA against the school's division standard.

    Meeting the standard starts at 80 and climbs 50 points per GPA point
    above it, capped at +20. JUCO is a flat 80. Falling short scores
    gpa * 25 with a floor of 40. No GPA on file scores 50.
    """
    gpa = athlete.gpa
    if gpa is None:
        return float(ACADEMIC_NO_GPA_SCORE)

    threshold = ACADEMIC_GPA_THRESHOLDS.get(school.division)
    if threshold is not None and gpa >= threshold:
        return ACADEMIC_MEETS_BASE + min(
            (gpa - threshold) * ACADEMIC_MEETS_SLOPE, ACADEMIC_MEETS_MAX_BONUS
        )

    if school.division == Division.JUCO.value:
        return float(ACADEMIC_JUCO_SCORE)

    return max(ACADEMIC_BELOW_FLOOR, gpa * ACADEMIC_BELOW_MULTIPLIER)


def difficulty_factor(division: str) -> float:
    return DIFFICULTY_FACTORS.get(division, DEFAULT_DIFFICULTY_FACTOR)


def position_bonus(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    qb_forty_tiers: Tiers = ATHLETIC_QB_FORTY_TIERS
) -> int:
    """
    Sum of athletic bonuses for the athlete's position group.

    Groups are checked in order and only the first match scores. Any label
    containing "Linebacker" also contains "Line", so it is scored as a lineman.
    """
    position = athlete.position
    bonus = 0

    if position_matches(position, QUARTERBACK_KEYWORDS):
        bonus += bonus_at_most(metrics.forty_yard, qb_forty_tiers)
        bonus += bonus_at_least(athlete.height_inches(), ATHLETIC_QB_HEIGHT_TIERS)

    elif position_matches(position, SPEED_KEYWORDS):
        bonus += bonus_at_most(metrics.forty_yard, ATHLETIC_SPEED_FORTY_TIERS)
        bonus += bonus_at_most(metrics.shuttle, ATHLETIC_SPEED_SHUTTLE_TIERS)
        bonus += bonus_at_least(metrics.vertical_jump, ATHLETIC_SPEED_VERTICAL_TIERS)

    elif position_matches(position, LINE_KEYWORDS):
        bonus += bonus_at_least(metrics.bench_press, ATHLETIC_LINE_BENCH_TIERS)
        if position_matches(position, OFFENSIVE_KEYWORDS):
            bonus += bonus_at_least(athlete.weight, ATHLETIC_OFFENSIVE_LINE_WEIGHT_TIERS)
        else:
            bonus += bonus_at_least(athlete.weight, ATHLETIC_DEFENSIVE_LINE_WEIGHT_TIERS)

    elif position_matches(position, LINEBACKER_KEYWORDS):
        bonus += bonus_at_most(metrics.forty_yard, ATHLETIC_LINEBACKER_FORTY_TIERS)
        bonus += bonus_at_least(metrics.bench_press, ATHLETIC_LINEBACKER_BENCH_TIERS)

    return bonus


def score_athletic_fit(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    school: School
) -> float:
    """
    Score combine metrics for the athlete's position, scaled by the
    school's difficulty factor.

    Lower divisions compress the spread toward 50; D1 keeps most of it.
    """
    raw_score = BASE_SCORE + position_bonus(athlete, metrics)
    return BASE_SCORE + (raw_score - BASE_SCORE) * difficulty_factor(school.division)

"""
Feedback Generator

Rule-based improvement guidance. Rules run in a fixed order: division,
academics, position metrics, test scores, recruiting preferences.
"""

from typing import List, Optional

from .contracts import AthleteProfile, CombineMetricSnapshot, RecruitingPreferences
from .constants import (
    DIVISION_FEEDBACK,
    DivisionTier,
    QUARTERBACK_KEYWORDS,
    SPEED_KEYWORDS,
    LINE_KEYWORDS,
    FEEDBACK_MIN_GPA,
    FEEDBACK_COMPETITIVE_GPA,
    FEEDBACK_COMPETITIVE_TIERS,
    FEEDBACK_QB_MAX_FORTY,
    FEEDBACK_SPEED_MAX_FORTY,
    FEEDBACK_SPEED_MIN_VERTICAL,
    FEEDBACK_LINE_MIN_BENCH,
    MISSING_GPA_FEEDBACK,
    LOW_GPA_FEEDBACK,
    COMPETITIVE_GPA_FEEDBACK,
    MISSING_TEST_SCORE_FEEDBACK,
    HIGHLIGHT_FILM_FEEDBACK,
    MISSING_PREFERENCES_FEEDBACK,
)
from .scoring_utils import position_matches, format_number


def _division_feedback(division: str) -> str:
    return DIVISION_FEEDBACK.get(division, DIVISION_FEEDBACK[DivisionTier.JUCO.value])


def _academic_feedback(athlete: AthleteProfile, division: str) -> List[str]:
    gpa = athlete.gpa
    if gpa is None:
        return [MISSING_GPA_FEEDBACK]
    if gpa < FEEDBACK_MIN_GPA:
        return [LOW_GPA_FEEDBACK]
    if gpa < FEEDBACK_COMPETITIVE_GPA and division in FEEDBACK_COMPETITIVE_TIERS:
        return [COMPETITIVE_GPA_FEEDBACK]
    return []


def _position_feedback(athlete: AthleteProfile, metrics: CombineMetricSnapshot) -> List[str]:
    position = athlete.position
    feedback: List[str] = []

    if position_matches(position, QUARTERBACK_KEYWORDS):
        if metrics.forty_yard is not None and metrics.forty_yard > FEEDBACK_QB_MAX_FORTY:
            feedback.append(
                f"Improving your speed from {format_number(metrics.forty_yard)}s to under "
                f"5.0s in the 40-yard dash would increase your options."
            )

    elif position_matches(position, SPEED_KEYWORDS):
        if metrics.forty_yard is not None and metrics.forty_yard > FEEDBACK_SPEED_MAX_FORTY:
            feedback.append(
                f"Speed is critical for your position. Work on improving your 40-yard "
                f"time from {format_number(metrics.forty_yard)}s to under 4.7s."
            )
        if metrics.vertical_jump is not None and metrics.vertical_jump < FEEDBACK_SPEED_MIN_VERTICAL:
            feedback.append(
                f"A vertical jump of 32+ inches would strengthen your profile "
                f"(currently {format_number(metrics.vertical_jump)}\")."
            )

    elif position_matches(position, LINE_KEYWORDS):
        if metrics.bench_press is not None and metrics.bench_press < FEEDBACK_LINE_MIN_BENCH:
            feedback.append(
                f"Strength is key for linemen. Aim to increase your bench press from "
                f"{format_number(metrics.bench_press)} to 275+ lbs."
            )

    return feedback


def _test_score_feedback(athlete: AthleteProfile) -> List[str]:
    if athlete.act_score is None and athlete.sat_score is None:
        return [MISSING_TEST_SCORE_FEEDBACK]
    return []


def _preferences_feedback(preferences: Optional[RecruitingPreferences]) -> List[str]:
    if preferences is None:
        return [MISSING_PREFERENCES_FEEDBACK]
    if not preferences.has_highlight_film:
        return [HIGHLIGHT_FILM_FEEDBACK]
    return []


def generate_feedback(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    division: str,
    preferences: Optional[RecruitingPreferences] = None
) -> List[str]:
    """
    Build the ordered feedback list for an athlete.

    Args:
        athlete: Athlete profile
        metrics: Latest combine snapshot
        division: Recommended division tier
        preferences: Recruiting preferences, if any are on file

    Returns:
        Feedback strings, division sentence first
    """
    feedback = [_division_feedback(division)]
    feedback.extend(_academic_feedback(athlete, division))
    feedback.extend(_position_feedback(athlete, metrics))
    feedback.extend(_test_score_feedback(athlete))
    feedback.extend(_preferences_feedback(preferences))
    return feedback

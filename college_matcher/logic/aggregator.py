"""
Score Aggregator

Scores each catalog school, applies preference/filter adjustments, and
combines academic and athletic fit into an overall score.
"""

from typing import List, Optional, Sequence

from .contracts import (
    AthleteProfile,
    CombineMetricSnapshot,
    RecruitingPreferences,
    MatchOptions,
    School,
    ScoredSchool,
    MatchedSchool,
)
from .dimension_scorers import score_academic_fit, score_athletic_fit
from .adjuster import adjust_scores
from .constants import ACADEMIC_WEIGHT, ATHLETIC_WEIGHT
from .scoring_utils import clamp_score, round_half_up


def score_school(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    school: School
) -> ScoredSchool:
    """Compute the unadjusted academic and athletic fit for one school."""
    return ScoredSchool(
        school=school,
        academic_match=score_academic_fit(athlete, school),
        athletic_match=score_athletic_fit(athlete, metrics, school),
    )


def finalize_scores(scored: ScoredSchool) -> MatchedSchool:
    """
    Build the output record for a scored school.

    The overall score is weighted from the unrounded fit scores; all three
    are then rounded and clamped independently. The school's fields are
    copied, so the catalog entry is never shared with the result.
    """
    overall = round_half_up(
        scored.academic_match * ACADEMIC_WEIGHT + scored.athletic_match * ATHLETIC_WEIGHT
    )

    return MatchedSchool(
        **scored.school.model_dump(),
        academic_match=clamp_score(scored.academic_match),
        athletic_match=clamp_score(scored.athletic_match),
        overall_match=clamp_score(overall),
    )


def aggregate_scores(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    school: School,
    preferences: Optional[RecruitingPreferences] = None,
    options: Optional[MatchOptions] = None
) -> MatchedSchool:
    """Score, adjust and finalize a single school."""
    scored = score_school(athlete, metrics, school)
    scored = adjust_scores(scored, preferences, options)
    return finalize_scores(scored)


def batch_aggregate(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    catalog: Sequence[School],
    preferences: Optional[RecruitingPreferences] = None,
    options: Optional[MatchOptions] = None
) -> List[MatchedSchool]:
    """
    Score every school in catalog order.

    Returns fresh records; the catalog itself is not touched.
    """
    return [
        aggregate_scores(athlete, metrics, school, preferences, options)
        for school in catalog
    ]

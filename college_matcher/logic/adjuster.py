"""
Preference & Filter Adjuster

Boosts scores for declared recruiting interests, then penalizes schools
that miss the caller's region or major filter. Boosts are additive and
applied first, so a boosted school is still subject to the penalties.
"""

from typing import List, Optional

from .contracts import ScoredSchool, RecruitingPreferences, MatchOptions
from .constants import (
    DESIRED_DIVISION_BOOST,
    SCHOOL_OF_INTEREST_BOOST,
    REGION_MISMATCH_MULTIPLIER,
    MAJOR_MISMATCH_MULTIPLIER,
)


def apply_preferences(
    scored: ScoredSchool,
    preferences: Optional[RecruitingPreferences]
) -> ScoredSchool:
    """Additive boosts for the desired division and schools of interest."""
    if preferences is None:
        return scored

    school = scored.school

    if preferences.desired_division and preferences.desired_division == school.division:
        scored.academic_match += DESIRED_DIVISION_BOOST
        scored.athletic_match += DESIRED_DIVISION_BOOST

    if preferences.schools_of_interest and school.name in preferences.schools_of_interest:
        scored.academic_match += SCHOOL_OF_INTEREST_BOOST
        scored.athletic_match += SCHOOL_OF_INTEREST_BOOST

    return scored


def offers_major(programs: List[str], major: str) -> bool:
    """Case-insensitive substring match of the major against each program."""
    major = major.lower()
    return any(major in program.lower() for program in programs)


def apply_filters(
    scored: ScoredSchool,
    options: Optional[MatchOptions]
) -> ScoredSchool:
    """
    Multiplicative penalties for region and major mismatches.
    The major filter only affects academic fit.
    """
    if options is None:
        return scored

    school = scored.school

    if options.region and school.region != options.region:
        scored.academic_match *= REGION_MISMATCH_MULTIPLIER
        scored.athletic_match *= REGION_MISMATCH_MULTIPLIER

    if options.preferred_major and not offers_major(school.programs, options.preferred_major):
        scored.academic_match *= MAJOR_MISMATCH_MULTIPLIER

    return scored


def adjust_scores(
    scored: ScoredSchool,
    preferences: Optional[RecruitingPreferences],
    options: Optional[MatchOptions]
) -> ScoredSchool:
    """Apply preference boosts, then filter penalties."""
    scored = apply_preferences(scored, preferences)
    return apply_filters(scored, options)

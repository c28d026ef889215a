"""
College Matching Logic Module

Provides the deterministic engine that recommends a division, ranks schools
by academic and athletic fit, and generates improvement feedback.
"""

from .contracts import (
    AthleteProfile,
    AthleteStore,
    CombineMetricSnapshot,
    RecruitingPreferences,
    MatchOptions,
    School,
    MatchedSchool,
    CollegeMatchResult,
    DivisionRecommendation,
    AthleteStrengthProfile,
)
from .engine import generate_college_matches, build_match_result, match_schools
from .division import calculate_division_recommendation
from .feedback import generate_feedback
from .athlete_profile import build_athlete_profile
from .catalog import COLLEGES, get_college_by_id, get_colleges_by_division, search_colleges
from .constants import Division, DivisionTier
from .errors import MatcherError, AthleteNotFound, MetricsNotFound

__all__ = [
    # Main engine
    "generate_college_matches",
    "build_match_result",
    "match_schools",
    "calculate_division_recommendation",
    "generate_feedback",
    "build_athlete_profile",

    # Catalog
    "COLLEGES",
    "get_college_by_id",
    "get_colleges_by_division",
    "search_colleges",

    # Contracts
    "AthleteProfile",
    "AthleteStore",
    "CombineMetricSnapshot",
    "RecruitingPreferences",
    "MatchOptions",
    "School",
    "MatchedSchool",
    "CollegeMatchResult",
    "DivisionRecommendation",
    "AthleteStrengthProfile",

    # Enums
    "Division",
    "DivisionTier",

    # Errors
    "MatcherError",
    "AthleteNotFound",
    "MetricsNotFound",
]

"""
Data Contracts for the College Matching Engine

Defines Pydantic models for the athlete inputs, the static school catalog,
and the CollegeMatchResult output.
These contracts are the API boundary for the matching engine.
"""

import re
from datetime import datetime
from typing import List, Optional, Protocol
from pydantic import BaseModel, Field

from .constants import Division


_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)")


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class AthleteProfile(BaseModel):
    """
    Biographical and academic profile of an athlete.
    Read-only to the engine.
    """
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    # Free-text label such as "Quarterback (QB)", matched by substring
    position: str = ""

    # Physical
    height: Optional[str] = None  # inches, e.g. "74"
    weight: Optional[int] = None  # lbs

    # Academic
    gpa: Optional[float] = None
    act_score: Optional[int] = None
    sat_score: Optional[int] = None

    class Config:
        from_attributes = True
        coerce_numbers_to_str = True

    def height_inches(self) -> Optional[float]:
        """Leading numeric part of the height text, or None if there is none."""
        if not self.height:
            return None
        match = _LEADING_NUMBER.match(self.height)
        if not match:
            return None
        return float(match.group(0))


class CombineMetricSnapshot(BaseModel):
    """
    One combine testing session. Any metric may be missing; None means
    no data and is never treated as zero.
    """
    id: Optional[int] = None
    athlete_id: Optional[int] = None

    # Speed & agility (seconds, lower is better)
    forty_yard: Optional[float] = None
    ten_yard_split: Optional[float] = None
    shuttle: Optional[float] = None
    three_cone: Optional[float] = None

    # Explosiveness (inches, higher is better)
    vertical_jump: Optional[float] = None
    broad_jump: Optional[float] = None

    # Strength
    bench_press: Optional[int] = None  # max weight, lbs
    bench_press_reps: Optional[int] = None  # reps at 225 lbs
    squat_max: Optional[int] = None
    power_clean: Optional[int] = None
    deadlift: Optional[int] = None
    pull_ups: Optional[int] = None

    date_recorded: Optional[datetime] = None

    class Config:
        from_attributes = True


class RecruitingPreferences(BaseModel):
    """Optional recruiting preferences declared by the athlete."""
    athlete_id: Optional[int] = None
    desired_division: Optional[str] = None
    schools_of_interest: Optional[List[str]] = None
    has_highlight_film: bool = False

    class Config:
        from_attributes = True


class MatchOptions(BaseModel):
    """
    Search filters for a matching run.
    max_distance, public_only and private_only are accepted for API
    compatibility but do not affect scoring.
    """
    region: Optional[str] = None
    preferred_major: Optional[str] = None
    max_distance: Optional[float] = None
    public_only: bool = False
    private_only: bool = False
    use_ai: bool = False


# =============================================================================
# CATALOG
# =============================================================================

class School(BaseModel):
    """Static catalog entry. Frozen so the shared catalog cannot be scored in place."""
    id: int
    name: str
    division: Division
    region: str
    programs: List[str] = Field(default_factory=list)
    location: Optional[str] = None

    class Config:
        frozen = True
        use_enum_values = True


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredSchool(BaseModel):
    """
    Per-run working record for one school.
    Holds unrounded scores between the scorers, the adjuster and the aggregator.
    """
    school: School
    academic_match: float = 0.0
    athletic_match: float = 0.0


class DivisionRecommendation(BaseModel):
    """Output of the division calculator."""
    division_recommendation: str
    match_score: int = Field(ge=0, le=100)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class MatchedSchool(BaseModel):
    """A catalog school with its final, clamped fit scores."""
    id: int
    name: str
    division: str
    region: str
    programs: List[str] = Field(default_factory=list)
    location: Optional[str] = None

    academic_match: int = Field(ge=0, le=100)
    athletic_match: int = Field(ge=0, le=100)
    overall_match: int = Field(ge=0, le=100)


class AthleteStrengthProfile(BaseModel):
    """Division-independent academic and athletic strength of the athlete."""
    academic_strength: int = Field(ge=0, le=100)
    athletic_strength: int = Field(ge=0, le=100)
    position_ranking: str  # e.g. "Strong prospect (Top 20%)"


class CollegeMatchResult(BaseModel):
    """
    Output contract for the matching engine.
    Built fresh per call and never persisted.
    """
    division_recommendation: str
    match_score: int = Field(ge=0, le=100)
    matched_schools: List[MatchedSchool] = Field(default_factory=list)
    feedback: List[str] = Field(default_factory=list)
    athlete_profile: AthleteStrengthProfile

    # Only populated when AI insights were requested
    insights: Optional[List[str]] = None


# =============================================================================
# STORAGE BOUNDARY
# =============================================================================

class AthleteStore(Protocol):
    """Upstream reads the engine depends on. Implemented in college_matcher.storage."""

    async def get_athlete(self, athlete_id: int) -> Optional[AthleteProfile]:
        ...

    async def get_latest_combine_metrics(self, athlete_id: int) -> Optional[CombineMetricSnapshot]:
        ...

    async def get_recruiting_preferences(self, athlete_id: int) -> Optional[RecruitingPreferences]:
        ...

"""
Matching Engine Constants

Defines divisions, position keywords, threshold tiers, weights, and feedback
copy used by the college matching engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, Tuple

# A tier table is an ordered sequence of (threshold, bonus) pairs, best first.
# Only the first tier the value reaches is awarded.
Tiers = Tuple[Tuple[float, int], ...]


# =============================================================================
# DIVISIONS
# =============================================================================

class Division(str, Enum):
    """Division a school competes in."""
    D1 = "D1"
    D2 = "D2"
    D3 = "D3"
    NAIA = "NAIA"
    JUCO = "JUCO"


class DivisionTier(str, Enum):
    """Division tier recommended for an athlete."""
    D1 = "D1"
    D2 = "D2"
    D3_NAIA = "D3/NAIA"
    JUCO = "JUCO"


# Minimum unclamped division score for each recommended tier, highest first
DIVISION_TIER_THRESHOLDS: Tuple[Tuple[int, DivisionTier], ...] = (
    (80, DivisionTier.D1),
    (60, DivisionTier.D2),
    (40, DivisionTier.D3_NAIA),
)
DEFAULT_DIVISION_TIER = DivisionTier.JUCO

# Higher divisions keep more of the athletic spread around the midpoint
DIFFICULTY_FACTORS: Dict[str, float] = {
    Division.D1.value: 0.9,
    Division.D2.value: 0.7,
    Division.D3.value: 0.5,
    Division.NAIA.value: 0.5,
    Division.JUCO.value: 0.3,
}
DEFAULT_DIFFICULTY_FACTOR = 0.3

# =============================================================================
# SCORE BASELINES
# =============================================================================

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

# =============================================================================
# POSITION KEYWORDS (case-sensitive substring match)
# =============================================================================

QUARTERBACK_KEYWORDS = ("Quarterback",)
LINE_KEYWORDS = ("Line",)
LINEBACKER_KEYWORDS = ("Linebacker",)
OFFENSIVE_KEYWORDS = ("Offensive",)

# Speed positions for the division calculator
DIVISION_SPEED_KEYWORDS = ("Receiver", "Back")

# Speed positions for athletic fit and feedback
SPEED_KEYWORDS = ("Back", "Receiver", "Safety", "Corner")

# =============================================================================
# DIVISION RECOMMENDATION TIERS
# =============================================================================

DIVISION_QB_HEIGHT_TIERS: Tiers = ((74, 15), (72, 10))
DIVISION_QB_FORTY_TIERS: Tiers = ((4.7, 10),)

DIVISION_SPEED_FORTY_TIERS: Tiers = ((4.5, 20), (4.7, 10))
DIVISION_SPEED_VERTICAL_TIERS: Tiers = ((34, 10),)

DIVISION_LINE_WEIGHT_TIERS: Tiers = ((280, 15), (250, 10))
DIVISION_LINE_BENCH_TIERS: Tiers = ((315, 15), (275, 10))

DIVISION_GPA_TIERS: Tiers = ((3.7, 15), (3.3, 10))
DIVISION_ACT_TIERS: Tiers = ((28, 10), (25, 5))

# =============================================================================
# ACADEMIC FIT
# =============================================================================

# Division -> minimum GPA for the "meets standard" curve
ACADEMIC_GPA_THRESHOLDS: Dict[str, float] = {
    Division.D1.value: 3.3,
    Division.D2.value: 2.8,
    Division.D3.value: 2.5,
    Division.NAIA.value: 2.5,
}

ACADEMIC_MEETS_BASE = 80
ACADEMIC_MEETS_SLOPE = 50
ACADEMIC_MEETS_MAX_BONUS = 20
ACADEMIC_JUCO_SCORE = 80
ACADEMIC_BELOW_FLOOR = 40
ACADEMIC_BELOW_MULTIPLIER = 25
ACADEMIC_NO_GPA_SCORE = 50

# =============================================================================
# ATHLETIC FIT TIERS
# =============================================================================

ATHLETIC_QB_FORTY_TIERS: Tiers = ((4.7, 15), (5.0, 10), (5.3, 5))
ATHLETIC_QB_HEIGHT_TIERS: Tiers = ((75, 20), (73, 15), (71, 10))

ATHLETIC_SPEED_FORTY_TIERS: Tiers = ((4.4, 25), (4.5, 20), (4.6, 15), (4.8, 10))
ATHLETIC_SPEED_SHUTTLE_TIERS: Tiers = ((4.0, 15), (4.2, 10), (4.4, 5))
ATHLETIC_SPEED_VERTICAL_TIERS: Tiers = ((38, 15), (35, 10), (32, 5))

ATHLETIC_LINE_BENCH_TIERS: Tiers = ((350, 20), (315, 15), (275, 10), (225, 5))
ATHLETIC_OFFENSIVE_LINE_WEIGHT_TIERS: Tiers = ((300, 15), (280, 10), (260, 5))
ATHLETIC_DEFENSIVE_LINE_WEIGHT_TIERS: Tiers = ((280, 15), (260, 10), (240, 5))

ATHLETIC_LINEBACKER_FORTY_TIERS: Tiers = ((4.6, 20), (4.8, 15), (5.0, 10))
ATHLETIC_LINEBACKER_BENCH_TIERS: Tiers = ((315, 15), (275, 10), (225, 5))

# =============================================================================
# ATHLETE STRENGTH PROFILE
# =============================================================================

STRENGTH_GPA_TIERS: Tiers = ((4.0, 40), (3.7, 35), (3.5, 30), (3.3, 25), (3.0, 20), (2.5, 10))
STRENGTH_ACT_TIERS: Tiers = ((32, 30), (28, 25), (24, 20), (20, 15), (18, 10))

# Strength uses the athletic fit tables, except quarterbacks get a faster forty curve
STRENGTH_QB_FORTY_TIERS: Tiers = ((4.6, 25), (4.8, 20), (5.0, 15), (5.2, 10))

# Minimum athletic strength for each ranking label, highest first
POSITION_RANKING_LABELS: Tuple[Tuple[int, str], ...] = (
    (90, "Elite prospect (Top 1%)"),
    (85, "Top-tier prospect (Top 5%)"),
    (80, "High-level prospect (Top 10%)"),
    (75, "Strong prospect (Top 20%)"),
    (70, "Solid prospect (Top 30%)"),
    (65, "Good prospect (Top 40%)"),
    (60, "Average prospect (Top 50%)"),
    (55, "Developing prospect (Top 60%)"),
)
DEFAULT_POSITION_RANKING = "Developing prospect"

# =============================================================================
# PREFERENCES & FILTERS
# =============================================================================

DESIRED_DIVISION_BOOST = 10
SCHOOL_OF_INTEREST_BOOST = 15
REGION_MISMATCH_MULTIPLIER = 0.7
MAJOR_MISMATCH_MULTIPLIER = 0.6

# =============================================================================
# AGGREGATION
# =============================================================================

ACADEMIC_WEIGHT = 0.4
ATHLETIC_WEIGHT = 0.6

# =============================================================================
# FEEDBACK
# =============================================================================

DIVISION_FEEDBACK: Dict[str, str] = {
    DivisionTier.D1.value: (
        "Your profile indicates D1 potential. Continue developing in all areas "
        "to maintain this trajectory."
    ),
    DivisionTier.D2.value: (
        "Your profile aligns well with D2 programs, which offer excellent "
        "competition and often substantial scholarships."
    ),
    DivisionTier.D3_NAIA.value: (
        "D3 and NAIA schools offer competitive football and strong academics, "
        "often with merit-based scholarships."
    ),
    DivisionTier.JUCO.value: (
        "JUCO can be an excellent path to develop and potentially transfer to "
        "a four-year program later."
    ),
}

FEEDBACK_MIN_GPA = 2.5
FEEDBACK_COMPETITIVE_GPA = 3.0
FEEDBACK_COMPETITIVE_TIERS = (DivisionTier.D1.value, DivisionTier.D2.value)

FEEDBACK_QB_MAX_FORTY = 5.0
FEEDBACK_SPEED_MAX_FORTY = 4.7
FEEDBACK_SPEED_MIN_VERTICAL = 32
FEEDBACK_LINE_MIN_BENCH = 275

MISSING_GPA_FEEDBACK = "Add your GPA to your profile to receive more accurate college matching."
LOW_GPA_FEEDBACK = "To improve your options, focus on raising your GPA to at least 2.5."
COMPETITIVE_GPA_FEEDBACK = "To strengthen your D1/D2 candidacy, aim to raise your GPA to 3.0+."
MISSING_TEST_SCORE_FEEDBACK = (
    "Taking the ACT or SAT can increase your academic profile for college recruitment."
)
HIGHLIGHT_FILM_FEEDBACK = (
    "Creating a highlight film is essential for college recruitment. Add one to your profile."
)
MISSING_PREFERENCES_FEEDBACK = (
    "Complete your recruiting preferences to receive more tailored college matches."
)

from typing import Dict, Any, List
import json

from ..logic.contracts import (
    AthleteProfile,
    CombineMetricSnapshot,
    CollegeMatchResult,
    MatchedSchool,
)
from .safety_rules import SAFETY_RULES, SYSTEM_ROLE_DEFINITION, JSON_OUTPUT_FORMAT_INSTRUCTION

# Metrics worth sending to the model; everything else is noise for the prompt
_PROMPT_METRICS = (
    "forty_yard",
    "shuttle",
    "three_cone",
    "vertical_jump",
    "broad_jump",
    "bench_press",
    "squat_max",
)


def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    rules_str = "\n".join([f"- {rule}" for rule in SAFETY_RULES])

    return f"""{SYSTEM_ROLE_DEFINITION}

SAFETY RULES (NON-NEGOTIABLE):
{rules_str}

OUTPUT FORMAT:
{JSON_OUTPUT_FORMAT_INSTRUCTION}
"""


def build_comparison_data(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    result: CollegeMatchResult,
    top_schools: List[MatchedSchool]
) -> Dict[str, Any]:
    """
    Structured comparison of the athlete against their top matches.
    Names and ids are left out; the model only needs the numbers.
    """
    return {
        "athlete": {
            "position": athlete.position,
            "height": athlete.height,
            "weight": athlete.weight,
            "gpa": athlete.gpa,
            "act_score": athlete.act_score,
            "sat_score": athlete.sat_score,
        },
        # Absent metrics are dropped rather than sent as null
        "metrics": {
            name: getattr(metrics, name)
            for name in _PROMPT_METRICS
            if getattr(metrics, name) is not None
        },
        "division_recommendation": result.division_recommendation,
        "match_score": result.match_score,
        "top_matches": _minimize_school_data(top_schools),
        "feedback": result.feedback,
        "athlete_profile": result.athlete_profile.model_dump(),
    }


def build_user_prompt(comparison: Dict[str, Any]) -> str:
    """Constructs the user prompt from the comparison data."""
    return f"""
ATHLETE PROFILE:
{json.dumps(comparison["athlete"], indent=2)}

LATEST COMBINE METRICS:
{json.dumps(comparison["metrics"], indent=2)}

ENGINE OUTPUT SUMMARY:
- Division Recommendation: {comparison["division_recommendation"]}
- Division Match Score: {comparison["match_score"]}
- Engine Feedback: {json.dumps(comparison["feedback"])}
- Athlete Profile: {json.dumps(comparison["athlete_profile"])}

TOP MATCHES (Ranked):
{json.dumps(comparison["top_matches"], indent=2)}

TASK:
Give this athlete recruiting insights based on these results. Adhere strictly to the safety rules.
"""


def _minimize_school_data(schools: List[MatchedSchool]) -> List[Dict[str, Any]]:
    """Helper to reduce school size for prompt."""
    minimized = []
    for s in schools:
        minimized.append({
            "school": s.name,
            "division": s.division,
            "region": s.region,
            "academic_match": s.academic_match,
            "athletic_match": s.athletic_match,
            "overall_match": s.overall_match,
        })
    return minimized

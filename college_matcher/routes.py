"""
College Matcher API Routes

Exposes the matching engine and the school catalog via REST API.
"""

import logging
from typing import Optional, Dict, Any
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from db import get_db
from .logic import (
    AthleteStore,
    MatchOptions,
    CollegeMatchResult,
    MatchedSchool,
    School,
    AthleteNotFound,
    MetricsNotFound,
    generate_college_matches,
    get_college_by_id,
    get_colleges_by_division,
    search_colleges,
)
from .storage import SqlAthleteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["college-matcher"])


def get_athlete_store():
    """Request-scoped store backed by a database session."""
    with get_db() as db:
        yield SqlAthleteStore(db)


# =============================================================================
# MATCHING
# =============================================================================

@router.get("/college-matcher/health", summary="College matcher health check")
def health_check():
    """Check if the matching engine is operational."""
    return {"status": "ok", "engine": "college-matcher", "version": "1.0.0"}


@router.get("/college-matcher/{athlete_id}", summary="Get college matches for an athlete")
async def get_college_matches(
    athlete_id: int,
    region: Optional[str] = None,
    preferred_major: Optional[str] = Query(None, alias="preferredMajor"),
    max_distance: Optional[float] = Query(None, alias="maxDistance"),
    public_only: bool = Query(False, alias="publicOnly"),
    private_only: bool = Query(False, alias="privateOnly"),
    use_ai: bool = Query(False, alias="useAI"),
    store: AthleteStore = Depends(get_athlete_store),
):
    """
    Recommend a division and rank schools for an athlete.

    **Query Parameters:**
    - `region`: Penalize schools outside this region
    - `preferredMajor`: Penalize schools without a matching program
    - `maxDistance`, `publicOnly`, `privateOnly`: Accepted, no scoring effect
    - `useAI`: Include AI-generated recruiting insights (default: False)

    **Response:**
    - Division recommendation and match score
    - Schools ranked by overall match, with academic and athletic fit
    - Ordered improvement feedback
    - Athlete strength profile and prospect ranking
    """
    options = MatchOptions(
        region=region,
        preferred_major=preferred_major,
        max_distance=max_distance,
        public_only=public_only,
        private_only=private_only,
        use_ai=use_ai,
    )

    try:
        result = await generate_college_matches(athlete_id, store, options)
        return _serialize_match_result(result)

    except AthleteNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MetricsNotFound as e:
        raise HTTPException(status_code=412, detail=str(e))
    except Exception as e:
        logger.exception(f"Error in college matcher for athlete {athlete_id}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or "Error generating college matches"}
        )


# =============================================================================
# CATALOG
# =============================================================================

@router.get("/colleges/division/{division}", summary="List colleges in a division")
def list_colleges_by_division(division: str):
    return [_serialize_college(s) for s in get_colleges_by_division(division)]


@router.get("/colleges/search", summary="Search colleges by name, region or location")
def search_college_catalog(q: str = ""):
    if len(q.strip()) < 2:
        raise HTTPException(
            status_code=400,
            detail="Search query must be at least 2 characters"
        )
    return [_serialize_college(s) for s in search_colleges(q.strip())]


@router.get("/colleges/{college_id}", summary="Get college details")
def get_college(college_id: int):
    college = get_college_by_id(college_id)
    if college is None:
        raise HTTPException(status_code=404, detail="College not found")
    return _serialize_college(college)


# =============================================================================
# SERIALIZATION
# =============================================================================

def _serialize_college(school: School) -> Dict[str, Any]:
    """Convert a catalog School to a JSON-serializable dict."""
    return {
        "id": school.id,
        "name": school.name,
        "division": school.division,
        "region": school.region,
        "programs": list(school.programs),
        "location": school.location,
    }


def _serialize_matched_school(school: MatchedSchool) -> Dict[str, Any]:
    """Convert MatchedSchool to a JSON-serializable dict."""
    return {
        "id": school.id,
        "name": school.name,
        "division": school.division,
        "region": school.region,
        "programs": list(school.programs),
        "location": school.location,
        "academicMatch": school.academic_match,
        "athleticMatch": school.athletic_match,
        "overallMatch": school.overall_match,
    }


def _serialize_match_result(result: CollegeMatchResult) -> Dict[str, Any]:
    """Convert CollegeMatchResult to the camelCase wire format."""
    response_data: Dict[str, Any] = {
        "divisionRecommendation": result.division_recommendation,
        "matchScore": result.match_score,
        "matchedSchools": [_serialize_matched_school(s) for s in result.matched_schools],
        "feedback": list(result.feedback),
        "athleteProfile": {
            "academicStrength": result.athlete_profile.academic_strength,
            "athleticStrength": result.athlete_profile.athletic_strength,
            "positionRanking": result.athlete_profile.position_ranking,
        },
    }
    if result.insights is not None:
        response_data["insights"] = list(result.insights)
    return response_data

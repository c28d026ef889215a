"""
College Matching Engine

Main entry point that loads an athlete's records and runs the matching
pipeline. Everything after the three upstream reads is pure computation.
"""

import asyncio
import logging
import time
from typing import List, Optional, Sequence

from .contracts import (
    AthleteProfile,
    AthleteStore,
    CombineMetricSnapshot,
    RecruitingPreferences,
    MatchOptions,
    School,
    MatchedSchool,
    CollegeMatchResult,
)
from .catalog import COLLEGES
from .division import calculate_division_recommendation
from .aggregator import batch_aggregate
from .ranker import rank_schools, top_matches
from .feedback import generate_feedback
from .athlete_profile import build_athlete_profile
from .errors import AthleteNotFound, MetricsNotFound

logger = logging.getLogger(__name__)


def match_schools(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    preferences: Optional[RecruitingPreferences] = None,
    options: Optional[MatchOptions] = None,
    catalog: Sequence[School] = COLLEGES
) -> List[MatchedSchool]:
    """
    Score and rank every school in the catalog.

    Each school is mapped to a new MatchedSchool, so the catalog is never
    written to and separate runs never see each other's scores.
    """
    matched = batch_aggregate(athlete, metrics, catalog, preferences, options)
    return rank_schools(matched)


def build_match_result(
    athlete: AthleteProfile,
    metrics: CombineMetricSnapshot,
    preferences: Optional[RecruitingPreferences] = None,
    options: Optional[MatchOptions] = None,
    catalog: Sequence[School] = COLLEGES
) -> CollegeMatchResult:
    """
    Run the full pipeline on already loaded records.

    Pipeline flow:
    1. Division Recommendation - Aggregate score and tier
    2. School Matching - Academic/athletic fit, adjustments, ranking
    3. Feedback - Ordered improvement guidance
    4. Athlete Profile - Division-independent strength summary
    """
    division = calculate_division_recommendation(athlete, metrics)
    matched = match_schools(athlete, metrics, preferences, options, catalog)
    feedback = generate_feedback(
        athlete, metrics, division.division_recommendation, preferences
    )

    return CollegeMatchResult(
        division_recommendation=division.division_recommendation,
        match_score=division.match_score,
        matched_schools=matched,
        feedback=feedback,
        athlete_profile=build_athlete_profile(athlete, metrics),
    )


async def load_athlete_records(store: AthleteStore, athlete_id: int):
    """
    Fetch the athlete, their latest combine metrics and their preferences.

    Raises:
        AthleteNotFound: no athlete with this id
        MetricsNotFound: the athlete has no combine metrics
    """
    athlete = await store.get_athlete(athlete_id)
    if athlete is None:
        raise AthleteNotFound(athlete_id)

    metrics = await store.get_latest_combine_metrics(athlete_id)
    if metrics is None:
        raise MetricsNotFound(athlete_id)

    # Missing preferences are not an error
    preferences = await store.get_recruiting_preferences(athlete_id)

    return athlete, metrics, preferences


async def generate_college_matches(
    athlete_id: int,
    store: AthleteStore,
    options: Optional[MatchOptions] = None,
    catalog: Sequence[School] = COLLEGES
) -> CollegeMatchResult:
    """
    Generate college matches for an athlete.

    Args:
        athlete_id: Athlete to match
        store: Source of athlete, metrics and preference records
        options: Optional region/major filters and AI flag
        catalog: Schools to rank (defaults to the static catalog)

    Returns:
        CollegeMatchResult with the division recommendation, ranked
        schools and feedback

    Raises:
        AthleteNotFound, MetricsNotFound: nothing is returned in that case
    """
    logger.info(f"🚀 Starting college matching for athlete: {athlete_id}")
    start_time = time.perf_counter()

    athlete, metrics, preferences = await load_athlete_records(store, athlete_id)
    if preferences is None:
        logger.info(f"No recruiting preferences on file for athlete {athlete_id}")

    result = build_match_result(athlete, metrics, preferences, options, catalog)
    logger.info(
        f"🎯 Division recommendation: {result.division_recommendation} "
        f"(score {result.match_score}), {len(result.matched_schools)} schools ranked"
    )

    if options is not None and options.use_ai:
        from ..ai.explainer import explainer

        result.insights = await asyncio.to_thread(
            explainer.get_insights,
            athlete,
            metrics,
            result,
            top_matches(result.matched_schools),
        )

    processing_time = (time.perf_counter() - start_time) * 1000
    logger.info(f"✨ College matching complete ({processing_time:.2f}ms)")

    return result

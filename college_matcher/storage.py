"""
Athlete Storage

Implementations of the AthleteStore reads the matching engine depends on:
- InMemoryAthleteStore: dict-backed, for development and tests
- SqlAthleteStore: SQLAlchemy session over the athlete tables
"""

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from .logic.contracts import AthleteProfile, CombineMetricSnapshot, RecruitingPreferences
from .models import Athlete, CombineMetric, RecruitingPreference

logger = logging.getLogger(__name__)


def _recency_key(pair: Tuple[int, CombineMetricSnapshot]):
    # Undated snapshots sort before dated ones
    index, snapshot = pair
    recorded = snapshot.date_recorded
    return (recorded is not None, recorded, index)


class InMemoryAthleteStore:
    """Keeps athletes, combine snapshots and preferences in plain dicts."""

    def __init__(self):
        self._athletes: Dict[int, AthleteProfile] = {}
        self._metrics: Dict[int, List[CombineMetricSnapshot]] = {}
        self._preferences: Dict[int, RecruitingPreferences] = {}

    def add_athlete(self, athlete: AthleteProfile) -> AthleteProfile:
        self._athletes[athlete.id] = athlete
        return athlete

    def add_combine_metrics(self, athlete_id: int, metrics: CombineMetricSnapshot) -> CombineMetricSnapshot:
        metrics = metrics.model_copy(update={"athlete_id": athlete_id})
        self._metrics.setdefault(athlete_id, []).append(metrics)
        return metrics

    def set_recruiting_preferences(self, athlete_id: int, preferences: RecruitingPreferences) -> RecruitingPreferences:
        preferences = preferences.model_copy(update={"athlete_id": athlete_id})
        self._preferences[athlete_id] = preferences
        return preferences

    async def get_athlete(self, athlete_id: int) -> Optional[AthleteProfile]:
        athlete = self._athletes.get(athlete_id)
        return athlete.model_copy(deep=True) if athlete else None

    async def get_latest_combine_metrics(self, athlete_id: int) -> Optional[CombineMetricSnapshot]:
        """Most recent snapshot by date_recorded; later insertions win ties."""
        snapshots = self._metrics.get(athlete_id)
        if not snapshots:
            return None
        _, latest = max(enumerate(snapshots), key=_recency_key)
        return latest.model_copy(deep=True)

    async def get_recruiting_preferences(self, athlete_id: int) -> Optional[RecruitingPreferences]:
        preferences = self._preferences.get(athlete_id)
        return preferences.model_copy(deep=True) if preferences else None


class SqlAthleteStore:
    """
    Reads athlete records through a SQLAlchemy session.

    Queries are blocking, so each read runs in a worker thread to keep the
    event loop free. Reads are awaited one at a time, so the session is
    never used from two threads at once.
    """

    def __init__(self, db: Session):
        self.db = db

    async def get_athlete(self, athlete_id: int) -> Optional[AthleteProfile]:
        return await asyncio.to_thread(self._get_athlete, athlete_id)

    async def get_latest_combine_metrics(self, athlete_id: int) -> Optional[CombineMetricSnapshot]:
        return await asyncio.to_thread(self._get_latest_combine_metrics, athlete_id)

    async def get_recruiting_preferences(self, athlete_id: int) -> Optional[RecruitingPreferences]:
        return await asyncio.to_thread(self._get_recruiting_preferences, athlete_id)

    def _get_athlete(self, athlete_id: int) -> Optional[AthleteProfile]:
        row = self.db.get(Athlete, athlete_id)
        if row is None:
            logger.warning(f"⚠️ Athlete {athlete_id} not found")
            return None
        return AthleteProfile.model_validate(row)

    def _get_latest_combine_metrics(self, athlete_id: int) -> Optional[CombineMetricSnapshot]:
        row = self.db.execute(
            select(CombineMetric)
            .where(CombineMetric.athlete_id == athlete_id)
            .order_by(CombineMetric.date_recorded.desc(), CombineMetric.id.desc())
            .limit(1)
        ).scalar_one_or_none()
        if row is None:
            logger.warning(f"⚠️ No combine metrics for athlete {athlete_id}")
            return None
        return CombineMetricSnapshot.model_validate(row)

    def _get_recruiting_preferences(self, athlete_id: int) -> Optional[RecruitingPreferences]:
        row = self.db.execute(
            select(RecruitingPreference).where(RecruitingPreference.athlete_id == athlete_id)
        ).scalar_one_or_none()
        if row is None:
            return None
        return RecruitingPreferences.model_validate(row)

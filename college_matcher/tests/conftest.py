"""
Shared fixtures for the college matcher tests.
"""

import pytest

from college_matcher.logic import (
    AthleteProfile,
    CombineMetricSnapshot,
    RecruitingPreferences,
)
from college_matcher.storage import InMemoryAthleteStore


@pytest.fixture
def receiver():
    """Fast, academically strong wide receiver."""
    return AthleteProfile(
        id=1,
        first_name="Jalen",
        last_name="Carter",
        position="Wide Receiver (WR)",
        height="72",
        weight=185,
        gpa=3.8,
        act_score=29,
    )


@pytest.fixture
def receiver_metrics():
    return CombineMetricSnapshot(forty_yard=4.4, vertical_jump=36)


@pytest.fixture
def bare_quarterback():
    """Quarterback with nothing on file beyond the position."""
    return AthleteProfile(id=2, first_name="Sam", last_name="Ortiz", position="Quarterback (QB)")


@pytest.fixture
def empty_metrics():
    return CombineMetricSnapshot()


@pytest.fixture
def store(receiver, receiver_metrics, bare_quarterback, empty_metrics):
    """
    In-memory store with:
    - athlete 1: receiver with metrics and preferences
    - athlete 2: bare quarterback with an empty snapshot, no preferences
    - athlete 3: profile without any combine metrics
    """
    store = InMemoryAthleteStore()

    store.add_athlete(receiver)
    store.add_combine_metrics(receiver.id, receiver_metrics)
    store.set_recruiting_preferences(
        receiver.id,
        RecruitingPreferences(
            desired_division="D1",
            schools_of_interest=["Stanford University"],
            has_highlight_film=True,
        ),
    )

    store.add_athlete(bare_quarterback)
    store.add_combine_metrics(bare_quarterback.id, empty_metrics)

    store.add_athlete(AthleteProfile(id=3, position="Offensive Line (OL)", weight=290))

    return store

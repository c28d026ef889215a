"""
Tests for the athlete strength profile.
"""

import pytest

from college_matcher.logic import AthleteProfile, CombineMetricSnapshot, build_athlete_profile
from college_matcher.logic.athlete_profile import (
    calculate_academic_strength,
    calculate_athletic_strength,
    position_ranking,
)
from college_matcher.logic.dimension_scorers import position_bonus


@pytest.mark.parametrize("gpa,expected", [
    (4.0, 90),
    (3.99, 85),
    (3.7, 85),
    (3.5, 80),
    (3.3, 75),
    (3.0, 70),
    (2.5, 60),
    (2.49, 50),
    (None, 50),
])
def test_gpa_tiers(gpa, expected):
    assert calculate_academic_strength(AthleteProfile(id=1, gpa=gpa)) == expected


@pytest.mark.parametrize("act,expected", [
    (32, 80),
    (31, 75),
    (28, 75),
    (24, 70),
    (20, 65),
    (18, 60),
    (17, 50),
])
def test_act_tiers(act, expected):
    assert calculate_academic_strength(AthleteProfile(id=1, act_score=act)) == expected


def test_sat_does_not_count():
    assert calculate_academic_strength(AthleteProfile(id=1, sat_score=1500)) == 50


def test_academic_strength_is_clamped(receiver):
    # 50 + 35 (gpa 3.8) + 25 (act 29)
    assert calculate_academic_strength(receiver) == 100


@pytest.mark.parametrize("forty,expected", [
    (4.6, 75),
    (4.61, 70),
    (4.8, 70),
    (5.0, 65),
    (5.2, 60),
    (5.21, 50),
])
def test_quarterback_forty_curve(forty, expected):
    athlete = AthleteProfile(id=1, position="Quarterback (QB)")
    metrics = CombineMetricSnapshot(forty_yard=forty)

    assert calculate_athletic_strength(athlete, metrics) == expected


def test_quarterback_curve_does_not_touch_athletic_fit():
    athlete = AthleteProfile(id=1, position="Quarterback (QB)")
    metrics = CombineMetricSnapshot(forty_yard=4.6)

    assert position_bonus(athlete, metrics) == 15
    assert calculate_athletic_strength(athlete, metrics) == 75


def test_athletic_strength_is_clamped():
    athlete = AthleteProfile(id=1, position="Wide Receiver (WR)")
    metrics = CombineMetricSnapshot(forty_yard=4.3, shuttle=3.9, vertical_jump=40)

    assert calculate_athletic_strength(athlete, metrics) == 100


@pytest.mark.parametrize("strength,label", [
    (100, "Elite prospect (Top 1%)"),
    (90, "Elite prospect (Top 1%)"),
    (89, "Top-tier prospect (Top 5%)"),
    (85, "Top-tier prospect (Top 5%)"),
    (80, "High-level prospect (Top 10%)"),
    (75, "Strong prospect (Top 20%)"),
    (70, "Solid prospect (Top 30%)"),
    (65, "Good prospect (Top 40%)"),
    (60, "Average prospect (Top 50%)"),
    (55, "Developing prospect (Top 60%)"),
    (54, "Developing prospect"),
    (50, "Developing prospect"),
])
def test_position_ranking_ladder(strength, label):
    assert position_ranking(strength) == label


def test_receiver_profile(receiver, receiver_metrics):
    profile = build_athlete_profile(receiver, receiver_metrics)

    assert profile.academic_strength == 100
    assert profile.athletic_strength == 85
    assert profile.position_ranking == "Top-tier prospect (Top 5%)"


def test_bare_profile(bare_quarterback, empty_metrics):
    profile = build_athlete_profile(bare_quarterback, empty_metrics)

    assert profile.academic_strength == 50
    assert profile.athletic_strength == 50
    assert profile.position_ranking == "Developing prospect"


def test_tall_fast_quarterback_is_elite():
    athlete = AthleteProfile(id=1, position="Quarterback (QB)", height="76")
    profile = build_athlete_profile(athlete, CombineMetricSnapshot(forty_yard=4.55))

    # 50 + 25 (forty) + 20 (height)
    assert profile.athletic_strength == 95
    assert profile.position_ranking == "Elite prospect (Top 1%)"

"""
Tests for the academic and athletic fit scorers.
"""

import pytest

from college_matcher.logic import AthleteProfile, CombineMetricSnapshot, School
from college_matcher.logic.dimension_scorers import (
    score_academic_fit,
    score_athletic_fit,
    position_bonus,
    difficulty_factor,
)


def _school(division):
    return School(id=99, name=f"Test {division}", division=division, region="Midwest")


# =============================================================================
# ACADEMIC FIT
# =============================================================================

@pytest.mark.parametrize("division,gpa,expected", [
    ("D1", 3.5, 90.0),     # 80 + (0.2 * 50)
    ("D1", 3.8, 100.0),    # bonus capped at +20
    ("D1", 3.3, 80.0),
    ("D1", 3.0, 75.0),     # below standard: 3.0 * 25
    ("D1", 1.2, 40.0),     # floor
    ("D2", 3.0, 90.0),
    ("D2", 2.6, 65.0),
    ("D3", 2.5, 80.0),
    ("D3", 2.4, 60.0),
    ("NAIA", 2.7, 90.0),
    ("JUCO", 1.0, 80.0),   # flat
    ("JUCO", 4.0, 80.0),
])
def test_academic_fit(division, gpa, expected):
    athlete = AthleteProfile(id=1, gpa=gpa)
    assert score_academic_fit(athlete, _school(division)) == pytest.approx(expected)


@pytest.mark.parametrize("division", ["D1", "D2", "D3", "NAIA", "JUCO"])
def test_academic_fit_without_gpa(division):
    assert score_academic_fit(AthleteProfile(id=1), _school(division)) == 50.0


# =============================================================================
# ATHLETIC FIT
# =============================================================================

@pytest.mark.parametrize("division,factor", [
    ("D1", 0.9),
    ("D2", 0.7),
    ("D3", 0.5),
    ("NAIA", 0.5),
    ("JUCO", 0.3),
    ("Club", 0.3),
])
def test_difficulty_factors(division, factor):
    assert difficulty_factor(division) == factor


def test_receiver_example(receiver, receiver_metrics):
    # forty 4.4 -> +25, vertical 36 meets the 35 tier -> +10
    assert position_bonus(receiver, receiver_metrics) == 35
    assert score_athletic_fit(receiver, receiver_metrics, _school("D1")) == pytest.approx(81.5)
    assert score_athletic_fit(receiver, receiver_metrics, _school("JUCO")) == pytest.approx(60.5)


def test_speed_positions_layer_three_metrics():
    athlete = AthleteProfile(id=1, position="Running Back (RB)")
    metrics = CombineMetricSnapshot(forty_yard=4.55, shuttle=4.1, vertical_jump=33)

    # 15 (forty) + 10 (shuttle) + 5 (vertical)
    assert position_bonus(athlete, metrics) == 30


def test_quarterback_uses_forty_and_height():
    athlete = AthleteProfile(id=1, position="Quarterback (QB)", height="75")
    metrics = CombineMetricSnapshot(forty_yard=4.6, vertical_jump=40)

    # vertical does not count for quarterbacks
    assert position_bonus(athlete, metrics) == 35
    assert score_athletic_fit(athlete, metrics, _school("D2")) == pytest.approx(74.5)


def test_offensive_line_weight_table():
    athlete = AthleteProfile(id=1, position="Offensive Line (OL)", weight=305)
    metrics = CombineMetricSnapshot(bench_press=355)

    assert position_bonus(athlete, metrics) == 35


def test_defensive_line_weight_table():
    athlete = AthleteProfile(id=1, position="Defensive Line (DL)", weight=285)
    metrics = CombineMetricSnapshot(bench_press=230)

    # 5 (bench) + 15 (weight on the defensive table)
    assert position_bonus(athlete, metrics) == 20
    assert score_athletic_fit(athlete, metrics, _school("D1")) == pytest.approx(68.0)


def test_linebacker_is_scored_as_lineman():
    athlete = AthleteProfile(id=1, position="Linebacker (LB)", weight=240)
    metrics = CombineMetricSnapshot(forty_yard=4.5, bench_press=320)

    # "Linebacker" contains "Line": 15 (bench) + 5 (defensive weight), forty ignored
    assert position_bonus(athlete, metrics) == 20


def test_first_matching_group_wins():
    athlete = AthleteProfile(id=1, position="Quarterback / Receiver", height="70")
    metrics = CombineMetricSnapshot(forty_yard=4.4, vertical_jump=40)

    # quarterback table only: 4.4 -> +15
    assert position_bonus(athlete, metrics) == 15


def test_unknown_position_is_neutral():
    athlete = AthleteProfile(id=1, position="Kicker (K)")
    metrics = CombineMetricSnapshot(forty_yard=4.3, bench_press=400)

    for division in ("D1", "D2", "D3", "NAIA", "JUCO"):
        assert score_athletic_fit(athlete, metrics, _school(division)) == 50.0


def test_missing_metrics_contribute_nothing():
    athlete = AthleteProfile(id=1, position="Free Safety (FS)")
    assert position_bonus(athlete, CombineMetricSnapshot()) == 0


def test_lower_divisions_compress_spread(receiver, receiver_metrics):
    scores = [
        score_athletic_fit(receiver, receiver_metrics, _school(d))
        for d in ("D1", "D2", "D3", "JUCO")
    ]

    assert scores == sorted(scores, reverse=True)
    assert all(score > 50 for score in scores)

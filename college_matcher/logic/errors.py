"""
Matching Engine Errors

Fatal conditions for a matching run. Every other missing input is handled
by the scorers' defaults.
"""


class MatcherError(Exception):
    """Base class for errors raised by the matching engine."""

    def __init__(self, athlete_id: int, message: str):
        super().__init__(message)
        self.athlete_id = athlete_id


class AthleteNotFound(MatcherError):
    """The athlete id does not resolve to a profile."""

    def __init__(self, athlete_id: int):
        super().__init__(athlete_id, f"Athlete {athlete_id} not found")


class MetricsNotFound(MatcherError):
    """The athlete has no combine metrics on file."""

    def __init__(self, athlete_id: int):
        super().__init__(athlete_id, f"No combine metrics found for athlete {athlete_id}")

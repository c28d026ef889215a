"""
Ranker

Orders matched schools best first.
"""

from typing import List

from .contracts import MatchedSchool


def rank_schools(matched: List[MatchedSchool]) -> List[MatchedSchool]:
    """
    Rank schools by overall match (descending).

    sorted() is stable, so schools with equal overall match keep their
    catalog order.
    """
    return sorted(
        matched,
        key=lambda x: x.overall_match,
        reverse=True
    )


def top_matches(ranked: List[MatchedSchool], limit: int = 5) -> List[MatchedSchool]:
    """First `limit` schools of an already ranked list."""
    return ranked[:limit]

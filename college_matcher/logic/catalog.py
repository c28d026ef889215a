"""
School Catalog

Static, read-only catalog of college football programs plus simple lookups.
Entries are frozen; matching runs build their own scored records from them.
"""

from typing import List, Optional, Sequence

from .contracts import School


COLLEGES: Sequence[School] = (
    School(
        id=1,
        name="Alabama University",
        division="D1",
        region="South",
        programs=["Business", "Engineering", "Communications"],
        location="Tuscaloosa, AL",
    ),
    School(
        id=2,
        name="Ohio State University",
        division="D1",
        region="Midwest",
        programs=["Psychology", "Business", "Computer Science"],
        location="Columbus, OH",
    ),
    School(
        id=3,
        name="Michigan State University",
        division="D1",
        region="Midwest",
        programs=["Agriculture", "Business", "Engineering"],
        location="East Lansing, MI",
    ),
    School(
        id=4,
        name="Florida State University",
        division="D1",
        region="South",
        programs=["Business", "Criminal Justice", "Communications"],
        location="Tallahassee, FL",
    ),
    School(
        id=5,
        name="Stanford University",
        division="D1",
        region="West",
        programs=["Computer Science", "Engineering", "Business"],
        location="Stanford, CA",
    ),
    School(
        id=6,
        name="Grand Valley State",
        division="D2",
        region="Midwest",
        programs=["Business", "Health Sciences", "Education"],
        location="Allendale, MI",
    ),
    School(
        id=7,
        name="Slippery Rock University",
        division="D2",
        region="Northeast",
        programs=["Physical Therapy", "Education", "Exercise Science"],
        location="Slippery Rock, PA",
    ),
    School(
        id=8,
        name="University of Mount Union",
        division="D3",
        region="Midwest",
        programs=["Engineering", "Business", "Health Sciences"],
        location="Alliance, OH",
    ),
    School(
        id=9,
        name="Wisconsin-Whitewater",
        division="D3",
        region="Midwest",
        programs=["Business", "Education", "Communications"],
        location="Whitewater, WI",
    ),
    School(
        id=10,
        name="Morningside University",
        division="NAIA",
        region="Midwest",
        programs=["Business", "Nursing", "Education"],
        location="Sioux City, IA",
    ),
    School(
        id=11,
        name="Iowa Western CC",
        division="JUCO",
        region="Midwest",
        programs=["Business", "General Studies", "Computer Science"],
        location="Council Bluffs, IA",
    ),
)


def get_college_by_id(college_id: int, catalog: Sequence[School] = COLLEGES) -> Optional[School]:
    return next((school for school in catalog if school.id == college_id), None)


def get_colleges_by_division(division: str, catalog: Sequence[School] = COLLEGES) -> List[School]:
    return [school for school in catalog if school.division == division]


def search_colleges(query: str, catalog: Sequence[School] = COLLEGES) -> List[School]:
    """Case-insensitive substring search over name, region and location."""
    query = query.lower()
    return [
        school for school in catalog
        if query in school.name.lower()
        or query in school.region.lower()
        or query in (school.location or "").lower()
    ]

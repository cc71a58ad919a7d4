"""Address-based crime grade lookup"""

from typing import Tuple

from loan_gateway.domain.models import RiskGrade, DEFAULT_RISK_GRADE

# Checked in order; the first bucket with a matching place name wins
GRADE_BUCKETS: Tuple[Tuple[RiskGrade, Tuple[str, ...]], ...] = (
    (RiskGrade.A, ("sunnyvale", "palo alto", "cupertino")),
    (RiskGrade.F, ("oakland", "richmond")),
    (RiskGrade.B, ("san francisco", "san jose")),
)


def grade_address(address: str) -> RiskGrade:
    """
    Map a free-text property address to a crime grade.

    Matching is case-insensitive substring containment. An address that
    names places from several buckets gets the grade of the first bucket
    listed, e.g. "Oakland Ave, Sunnyvale" -> A.

    Returns:
        RiskGrade.C when no known place name is found
    """
    lower_address = address.lower()

    for grade, places in GRADE_BUCKETS:
        if any(place in lower_address for place in places):
            return grade

    return DEFAULT_RISK_GRADE

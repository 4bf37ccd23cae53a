"""
Certification Comparator

Computes the directional diff between certifications:
- Level difference by rank
- Role and domain overlap (Jaccard similarity, in percent)
- Cost and study-duration deltas

Overlap convention: when both tag sets are empty there is no shared
signal, so the overlap is 0.0 rather than 100.0. Percentages are rounded
to one decimal place, half away from zero.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from itertools import combinations
from typing import Iterable, Optional, Sequence

from certpath.errors import InvalidInputError
from certpath.models.certification import CertificationRecord
from certpath.models.comparison import ComparisonSummary, MultiComparison, PairwiseComparison
from certpath.utils.text import normalize_tags

logger = logging.getLogger(__name__)

MIN_COMPARED = 2
MAX_COMPARED = 3

_ONE_DECIMAL = Decimal("0.1")


def overlap_percent(left: Optional[Iterable[str]], right: Optional[Iterable[str]]) -> float:
    """
    Jaccard similarity of two tag collections as a percentage.

    Tags are lower-cased, trimmed and de-duplicated; blanks are dropped.

    Args:
        left: Tags of the first record
        right: Tags of the second record

    Returns:
        ``|intersection| / |union| * 100`` rounded to one decimal place,
        or 0.0 when both sides are empty
    """
    left_set = normalize_tags(left)
    right_set = normalize_tags(right)
    union = left_set | right_set
    if not union:
        return 0.0
    shared = left_set & right_set
    percent = Decimal(100 * len(shared)) / Decimal(len(union))
    return float(percent.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def compare(left: CertificationRecord, right: CertificationRecord) -> ComparisonSummary:
    """
    Compare two certifications.

    The same record may be passed on both sides; all deltas are then
    zero and overlaps are 100.0 (or 0.0 for an empty tag set).

    Raises:
        InvalidInputError: If either record is missing
    """
    if left is None or right is None:
        raise InvalidInputError("Both certifications are required for a comparison")

    left_numbers = left.resolved_numbers()
    right_numbers = right.resolved_numbers()

    return ComparisonSummary(
        level_difference=left.level.rank - right.level.rank,
        role_overlap_percent=overlap_percent(left.role, right.role),
        domain_overlap_percent=overlap_percent(left.domains, right.domains),
        cost_delta=left_numbers.cost - right_numbers.cost,
        duration_delta=left_numbers.duration_hours - right_numbers.duration_hours,
    )


def compare_many(records: Sequence[CertificationRecord]) -> MultiComparison:
    """
    Compare two or three distinct certifications pairwise.

    Pairs follow input order: (0, 1), (0, 2), (1, 2).

    Raises:
        InvalidInputError: On a missing record, a duplicate id or an
            unsupported number of records
    """
    if not MIN_COMPARED <= len(records) <= MAX_COMPARED:
        raise InvalidInputError(
            f"Select between {MIN_COMPARED} and {MAX_COMPARED} certifications to compare "
            f"(got {len(records)})"
        )
    if any(record is None for record in records):
        raise InvalidInputError("Both certifications are required for a comparison")

    seen: set[str] = set()
    for record in records:
        key = record.id.lower()
        if key in seen:
            raise InvalidInputError(f"Certification selected more than once: {record.id}")
        seen.add(key)

    pairs = [
        PairwiseComparison(left_id=left.id, right_id=right.id, summary=compare(left, right))
        for left, right in combinations(records, 2)
    ]
    logger.debug("Compared %d certifications in %d pairs", len(records), len(pairs))
    return MultiComparison(certifications=list(records), pairs=pairs)

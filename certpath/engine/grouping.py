"""
Grouping & Filtering

Partitions a record set for display:
- Path explorer buckets by level (provider + exam-code filters)
- Provider groups for comparison selectors
- Per-provider counts and free-text catalog search

Every function preserves the relative order of the input records unless
stated otherwise; records are never alphabetised.
"""

from typing import Iterable, Optional

from certpath.models.certification import CertificationRecord
from certpath.models.enums import LEVEL_DISPLAY_ORDER, CloudProvider, Difficulty, Level
from certpath.utils.text import normalize_exam_code, normalize_tag


def filter_and_group(
    records: Iterable[CertificationRecord],
    provider_filter: Optional[Iterable[CloudProvider]] = None,
    code_query: Optional[str] = "",
) -> dict[Level, list[CertificationRecord]]:
    """
    Filter records and bucket the survivors by level.

    Args:
        records: The record set, in its original order
        provider_filter: Providers to keep; empty keeps all
        code_query: Exam-code fragment; empty keeps all

    Returns:
        Non-empty buckets only, iterating in display order
        (Fundamental, Associate, Professional, Expert, Specialty).
        Within a bucket the original record order is preserved.
    """
    providers = set(provider_filter or ())
    query = normalize_exam_code(code_query)

    buckets: dict[Level, list[CertificationRecord]] = {}
    for record in records:
        if providers and record.provider not in providers:
            continue
        if query and query not in normalize_exam_code(record.exam_code):
            continue
        buckets.setdefault(record.level, []).append(record)

    return {level: buckets[level] for level in LEVEL_DISPLAY_ORDER if level in buckets}


def group_by_provider(
    records: Iterable[CertificationRecord],
) -> dict[CloudProvider, list[CertificationRecord]]:
    """
    Group records by provider for comparison selectors.

    Providers appear in first-seen order. Within a provider, records are
    stable-sorted by difficulty (Beginner first); records without a
    difficulty sort last.
    """
    grouped: dict[CloudProvider, list[CertificationRecord]] = {}
    for record in records:
        grouped.setdefault(record.provider, []).append(record)

    for provider_records in grouped.values():
        provider_records.sort(key=_difficulty_key)
    return grouped


def count_by_provider(records: Iterable[CertificationRecord]) -> dict[CloudProvider, int]:
    """Number of records per provider; every provider is present."""
    counts = {provider: 0 for provider in CloudProvider}
    for record in records:
        counts[record.provider] += 1
    return counts


def search(
    records: Iterable[CertificationRecord],
    providers: Optional[Iterable[CloudProvider]] = None,
    levels: Optional[Iterable[Level]] = None,
    term: Optional[str] = "",
) -> list[CertificationRecord]:
    """
    Catalog search by provider, level and free text.

    The term matches case-insensitively against name, description,
    exam code and domains.
    """
    wanted_providers = set(providers or ())
    wanted_levels = set(levels or ())
    needle = normalize_tag(term)
    results = []
    for record in records:
        if wanted_providers and record.provider not in wanted_providers:
            continue
        if wanted_levels and record.level not in wanted_levels:
            continue
        if needle and not _matches_term(record, needle):
            continue
        results.append(record)
    return results


def _difficulty_key(record: CertificationRecord) -> int:
    if record.difficulty is None:
        return len(Difficulty) + 1
    return record.difficulty.order


def _matches_term(record: CertificationRecord, needle: str) -> bool:
    haystack = [record.name, record.description, record.exam_code, *record.domains]
    return any(needle in field.lower() for field in haystack)

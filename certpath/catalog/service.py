"""
Catalog Service

High-level certification operations over the loaded record set.
Combines the catalog repository with the comparison, relation and
grouping engine.

Ids are resolved case-insensitively. An id that cannot be resolved is
reported as NotFoundError; it is never compared as an empty record.
"""

import logging
from typing import Iterable, Optional, Sequence

from certpath.catalog.loader import CatalogRepository
from certpath.engine import comparator, grouping, relations
from certpath.errors import InvalidInputError, NotFoundError
from certpath.models import (
    CertificationRecord,
    CloudProvider,
    ComparisonResult,
    Highlight,
    LearningPath,
    Level,
    MultiComparison,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Certification catalog operations.

    Provides:
    - Record lookup and search
    - Pairwise and multi-way comparison
    - Learning paths and explorer highlights
    - Explorer grouping and provider statistics
    """

    def __init__(self, repository: Optional[CatalogRepository] = None):
        self._repository = repository or CatalogRepository()

    @property
    def repository(self) -> CatalogRepository:
        return self._repository

    def records(self) -> tuple[CertificationRecord, ...]:
        """The full immutable record set."""
        return self._repository.get_all()

    def get(self, cert_id: Optional[str]) -> CertificationRecord:
        """
        Look up a certification by id.

        Raises:
            InvalidInputError: If the id is blank
            NotFoundError: If no record has this id
        """
        if cert_id is None or not cert_id.strip():
            raise InvalidInputError("A certification id is required")
        record = self._repository.find_by_id(cert_id)
        if record is None:
            raise NotFoundError(cert_id.strip())
        return record

    # ----- Comparison -----

    def compare(self, left_id: Optional[str], right_id: Optional[str]) -> ComparisonResult:
        """
        Compare two certifications by id.

        Raises:
            InvalidInputError: If either id is blank or both name the same record
            NotFoundError: If either id is unknown
        """
        if not left_id or not left_id.strip() or not right_id or not right_id.strip():
            raise InvalidInputError("Query params required: left, right (e.g. left=az-900&right=az-104)")
        if left_id.strip().lower() == right_id.strip().lower():
            raise InvalidInputError(f"Cannot compare a certification with itself: {left_id.strip()}")

        left = self.get(left_id)
        right = self.get(right_id)
        summary = comparator.compare(left, right)
        logger.info("Compared %s with %s", left.id, right.id)
        return ComparisonResult(left=left, right=right, summary=summary)

    def compare_many(self, cert_ids: Sequence[str]) -> MultiComparison:
        """Compare two or three certifications by id, pairwise in input order."""
        cleaned = [cert_id for cert_id in cert_ids if cert_id and cert_id.strip()]
        if len(cleaned) != len(cert_ids):
            raise InvalidInputError("Certification ids must not be blank")
        if not comparator.MIN_COMPARED <= len(cleaned) <= comparator.MAX_COMPARED:
            raise InvalidInputError(
                f"Select between {comparator.MIN_COMPARED} and {comparator.MAX_COMPARED} "
                f"certifications to compare (got {len(cleaned)})"
            )
        records = [self.get(cert_id) for cert_id in cleaned]
        return comparator.compare_many(records)

    # ----- Relations -----

    def learning_path(self, cert_id: str) -> LearningPath:
        """Direct prerequisites and successors of a certification."""
        focus = self.get(cert_id)
        return relations.learning_path(focus, self.records())

    def highlights(self, cert_id: str) -> list[Highlight]:
        """Explorer highlight state of every record while ``cert_id`` is focused."""
        focus = self.get(cert_id)
        return relations.highlight_all(focus, self.records())

    # ----- Grouping -----

    def explore(
        self,
        providers: Optional[Iterable[CloudProvider]] = None,
        code_query: Optional[str] = "",
    ) -> dict[Level, list[CertificationRecord]]:
        """Level buckets for the path explorer."""
        return grouping.filter_and_group(self.records(), providers, code_query)

    def search(
        self,
        providers: Optional[Iterable[CloudProvider]] = None,
        levels: Optional[Iterable[Level]] = None,
        term: Optional[str] = "",
    ) -> list[CertificationRecord]:
        return grouping.search(self.records(), providers, levels, term)

    def provider_counts(self) -> dict[CloudProvider, int]:
        return grouping.count_by_provider(self.records())

    def provider_groups(self) -> dict[CloudProvider, list[CertificationRecord]]:
        """Difficulty-ordered records per provider (comparison selectors)."""
        return grouping.group_by_provider(self.records())

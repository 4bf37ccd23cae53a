"""
Relation Resolver

One-hop prerequisite / successor lookups used by the path explorer:
- Classifying a candidate relative to a focused certification
- Resolving referenced ids to records, tolerating dangling ids
- Explorer highlight state and learning-path neighbourhoods

Relations are plain lookups against the focus's two id sequences; they
are never followed transitively, so cyclic prerequisite data is legal.
Prerequisite and successor lists are not assumed to be symmetric.
"""

from typing import Iterable, Mapping, Union

from certpath.errors import InvalidInputError
from certpath.models.certification import CertificationRecord
from certpath.models.enums import RelationKind
from certpath.models.relations import Highlight, LearningPath, ResolvedRef

RecordSource = Union[Mapping[str, CertificationRecord], Iterable[CertificationRecord]]


def classify(focus: CertificationRecord, candidate: CertificationRecord) -> RelationKind:
    """
    Classify ``candidate`` relative to ``focus``.

    First match wins: self, prerequisite, successor, unrelated. An id
    listed both as prerequisite and successor classifies as prerequisite.
    """
    if focus is None or candidate is None:
        raise InvalidInputError("Both certifications are required to classify a relation")

    if candidate.id == focus.id:
        return RelationKind.SELF
    if candidate.id in focus.prerequisites:
        return RelationKind.PREREQUISITE
    if candidate.id in focus.leads_to:
        return RelationKind.SUCCESSOR
    return RelationKind.UNRELATED


def index_by_id(records: RecordSource) -> Mapping[str, CertificationRecord]:
    """Build an id -> record mapping (a mapping is returned unchanged)."""
    if isinstance(records, Mapping):
        return records
    return {record.id: record for record in records}


def resolve_refs(ids: Iterable[str], records: RecordSource) -> list[ResolvedRef]:
    """
    Map each referenced id to its record, or to None when dangling.

    Order is preserved and unresolvable ids never raise.
    """
    by_id = index_by_id(records)
    return [ResolvedRef(id=ref, certification=by_id.get(ref)) for ref in ids]


def highlight(focus: CertificationRecord, candidate: CertificationRecord) -> Highlight:
    """
    Explorer render state of ``candidate`` while ``focus`` is hovered.

    Path badges are only shown within the focus's provider. Cards from
    another provider, or unrelated cards, are dimmed.
    """
    kind = classify(focus, candidate)
    same_provider = focus.provider == candidate.provider
    return Highlight(
        id=candidate.id,
        kind=kind,
        is_prerequisite=same_provider and kind is RelationKind.PREREQUISITE,
        is_successor=same_provider and kind is RelationKind.SUCCESSOR,
        dimmed=not same_provider or kind is RelationKind.UNRELATED,
    )


def highlight_all(
    focus: CertificationRecord,
    records: Iterable[CertificationRecord],
) -> list[Highlight]:
    """Highlight state of every record against ``focus``, in input order."""
    return [highlight(focus, candidate) for candidate in records]


def learning_path(
    focus: CertificationRecord,
    records: RecordSource,
) -> LearningPath:
    """Direct prerequisites and successors of ``focus``, resolved."""
    if focus is None:
        raise InvalidInputError("A certification is required to build a learning path")
    lookup = index_by_id(records)
    return LearningPath(
        certification=focus,
        prerequisites=resolve_refs(focus.prerequisites, lookup),
        successors=resolve_refs(focus.leads_to, lookup),
    )

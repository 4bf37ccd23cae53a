"""
Data Models

Pydantic models for certification records and the results computed
over them. All modules import from here - no circular dependencies.
"""

from certpath.models.enums import (
    LEVEL_DISPLAY_ORDER,
    CloudProvider,
    Difficulty,
    Level,
    RelationKind,
    level_rank,
)
from certpath.models.certification import (
    CertificationRecord,
    ResolvedNumbers,
    Resources,
)
from certpath.models.comparison import (
    ComparisonResult,
    ComparisonSummary,
    MultiComparison,
    PairwiseComparison,
)
from certpath.models.relations import (
    Highlight,
    LearningPath,
    ResolvedRef,
)

__all__ = [
    # Enums
    "LEVEL_DISPLAY_ORDER",
    "CloudProvider",
    "Difficulty",
    "Level",
    "RelationKind",
    "level_rank",
    # Records
    "CertificationRecord",
    "ResolvedNumbers",
    "Resources",
    # Comparison
    "ComparisonResult",
    "ComparisonSummary",
    "MultiComparison",
    "PairwiseComparison",
    # Relations
    "Highlight",
    "LearningPath",
    "ResolvedRef",
]

"""Comparison result models."""

from pydantic import BaseModel, ConfigDict, Field

from certpath.models.certification import CertificationRecord


class ComparisonSummary(BaseModel):
    """
    Directional diff of two certifications (left relative to right).

    Positive deltas mean the left certification ranks higher, costs more
    or takes longer to prepare for.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level_difference: int = Field(..., alias="levelDifference")
    role_overlap_percent: float = Field(..., ge=0.0, le=100.0, alias="roleOverlapPercent")
    domain_overlap_percent: float = Field(..., ge=0.0, le=100.0, alias="domainOverlapPercent")
    cost_delta: int = Field(..., alias="costDelta")
    duration_delta: int = Field(..., alias="durationDelta")


class ComparisonResult(BaseModel):
    """Both compared records alongside their summary."""

    model_config = ConfigDict(frozen=True)

    left: CertificationRecord
    right: CertificationRecord
    summary: ComparisonSummary


class PairwiseComparison(BaseModel):
    """One pair within a multi-way comparison."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    left_id: str = Field(..., alias="leftId")
    right_id: str = Field(..., alias="rightId")
    summary: ComparisonSummary


class MultiComparison(BaseModel):
    """Side-by-side comparison of two or three certifications."""

    model_config = ConfigDict(frozen=True)

    certifications: list[CertificationRecord]
    pairs: list[PairwiseComparison]

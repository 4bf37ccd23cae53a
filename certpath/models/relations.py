"""Models describing prerequisite / successor relationships."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from certpath.models.certification import CertificationRecord
from certpath.models.enums import RelationKind


class ResolvedRef(BaseModel):
    """A referenced id and the record it resolves to (None when dangling)."""

    model_config = ConfigDict(frozen=True)

    id: str
    certification: Optional[CertificationRecord] = None

    @property
    def is_missing(self) -> bool:
        return self.certification is None


class Highlight(BaseModel):
    """How a candidate card renders while another card is focused."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: RelationKind
    is_prerequisite: bool = Field(default=False, alias="isPrerequisite")
    is_successor: bool = Field(default=False, alias="isSuccessor")
    dimmed: bool = False


class LearningPath(BaseModel):
    """One-hop neighbourhood of a certification."""

    model_config = ConfigDict(frozen=True)

    certification: CertificationRecord
    prerequisites: list[ResolvedRef] = Field(default_factory=list)
    successors: list[ResolvedRef] = Field(default_factory=list)

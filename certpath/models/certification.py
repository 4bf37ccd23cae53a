"""Certification record model - the unit entity of the catalog."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from certpath.models.enums import CloudProvider, Difficulty, Level


@dataclass(frozen=True)
class ResolvedNumbers:
    """Numeric attributes of a record with absent values resolved to 0."""
    cost: int
    duration_hours: int
    pass_score_percent: int
    validity_years: int


class Resources(BaseModel):
    """External study material links."""

    model_config = ConfigDict(frozen=True)

    udemy: tuple[str, ...] = ()
    coursera: tuple[str, ...] = ()
    youtube: tuple[str, ...] = ()


class CertificationRecord(BaseModel):
    """
    A single cloud certification.

    Records are created by the catalog loader and never mutated. Tag
    collections (role, domains) are kept as authored; normalisation
    happens where they are compared. Prerequisite and successor ids may
    reference certifications that are not in the loaded set.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "az-104",
                "name": "Microsoft Azure Administrator",
                "examCode": "AZ-104",
                "provider": "Azure",
                "level": "Associate",
                "role": ["Administrator"],
                "domains": ["Identity", "Storage", "Networking"],
                "prerequisites": ["az-900"],
                "leadsTo": ["az-305"],
                "cost": 165,
                "durationHours": 60,
            }
        },
    )

    id: str = Field(..., min_length=1, description="Opaque stable identifier")
    name: str = Field(default="", description="Display name")
    exam_code: str = Field(default="", alias="examCode", description="Exam code, e.g. AZ-104")
    provider: CloudProvider
    level: Level
    role: tuple[str, ...] = Field(default=(), description="Target job roles")
    domains: tuple[str, ...] = Field(
        default=(),
        description="Skill domains / focus areas covered by the exam",
    )
    prerequisites: tuple[str, ...] = Field(default=(), description="Ids of prerequisite certifications")
    leads_to: tuple[str, ...] = Field(default=(), alias="leadsTo", description="Ids of successor certifications")
    cost: Optional[int] = Field(default=None, ge=0, description="Exam cost in USD")
    duration_hours: Optional[int] = Field(default=None, ge=0, alias="durationHours")
    pass_score_percent: Optional[int] = Field(default=None, ge=0, le=100, alias="passScorePercent")
    validity_years: Optional[int] = Field(default=None, ge=0, alias="validityYears")
    difficulty: Optional[Difficulty] = None
    description: str = ""
    official_link: str = Field(default="", alias="officialLink")
    resources: Resources = Field(default_factory=Resources)

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        """Ids may not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("id must not be blank")
        return v

    @field_validator("role", "domains", mode="before")
    @classmethod
    def wrap_single_tag(cls, v):
        """Accept a bare string where a tag list is expected."""
        if isinstance(v, str):
            return (v,)
        return v

    def resolved_numbers(self) -> ResolvedNumbers:
        """Resolve absent numeric attributes to 0 for delta arithmetic."""
        return ResolvedNumbers(
            cost=self.cost if self.cost is not None else 0,
            duration_hours=self.duration_hours if self.duration_hours is not None else 0,
            pass_score_percent=self.pass_score_percent if self.pass_score_percent is not None else 0,
            validity_years=self.validity_years if self.validity_years is not None else 0,
        )


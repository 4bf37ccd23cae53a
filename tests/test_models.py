"""
Tests for the data models

Tests validate:
- Enum values and case-insensitive parsing
- Level ranking
- CertificationRecord aliases, validation and immutability
- Explicit numeric default resolution
"""

import pytest
from pydantic import ValidationError

from certpath.models import (
    LEVEL_DISPLAY_ORDER,
    CertificationRecord,
    CloudProvider,
    ComparisonSummary,
    Difficulty,
    Level,
    RelationKind,
    ResolvedNumbers,
    level_rank,
)


class TestEnums:
    """Test all enumeration types."""

    def test_provider_values(self):
        """Verify CloudProvider enum values."""
        assert CloudProvider.AWS.value == "AWS"
        assert CloudProvider.AZURE.value == "Azure"
        assert CloudProvider.GCP.value == "GCP"

    def test_provider_parsing_ignores_case(self):
        assert CloudProvider("azure") is CloudProvider.AZURE
        assert CloudProvider(" gcp ") is CloudProvider.GCP

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError):
            CloudProvider("Oracle")

    def test_level_display_order(self):
        """Levels display Fundamental -> Specialty."""
        assert LEVEL_DISPLAY_ORDER == (
            Level.FUNDAMENTAL,
            Level.ASSOCIATE,
            Level.PROFESSIONAL,
            Level.EXPERT,
            Level.SPECIALTY,
        )

    def test_level_ranks(self):
        """Expert ranks with Professional; Specialty is unranked."""
        assert Level.FUNDAMENTAL.rank == 1
        assert Level.ASSOCIATE.rank == 2
        assert Level.PROFESSIONAL.rank == 3
        assert Level.EXPERT.rank == 3
        assert Level.SPECIALTY.rank == 0

    def test_level_rank_of_unrecognised_value_is_zero(self):
        assert level_rank("professional") == 3
        assert level_rank("Master") == 0
        assert level_rank(None) == 0

    def test_difficulty_order(self):
        assert Difficulty.BEGINNER.order < Difficulty.INTERMEDIATE.order < Difficulty.ADVANCED.order

    def test_relation_kind_values(self):
        assert {kind.value for kind in RelationKind} == {"self", "prerequisite", "successor", "unrelated"}


class TestCertificationRecord:
    """Test CertificationRecord model."""

    def test_parse_camel_case_json(self):
        """JSON keys use camelCase aliases."""
        record = CertificationRecord.model_validate({
            "id": "az-104",
            "examCode": "AZ-104",
            "provider": "azure",
            "level": "associate",
            "leadsTo": ["az-305"],
            "durationHours": 60,
            "passScorePercent": 70,
            "validityYears": 1,
            "officialLink": "https://example.com",
        })
        assert record.exam_code == "AZ-104"
        assert record.provider is CloudProvider.AZURE
        assert record.level is Level.ASSOCIATE
        assert record.leads_to == ("az-305",)
        assert record.duration_hours == 60
        assert record.official_link == "https://example.com"

    def test_snake_case_names_accepted(self):
        record = CertificationRecord(id="x", provider="AWS", level="Associate", exam_code="X-1")
        assert record.exam_code == "X-1"

    def test_dump_by_alias(self):
        record = CertificationRecord(id="x", provider="AWS", level="Associate", leads_to=["y"])
        dumped = record.model_dump(by_alias=True, mode="json")
        assert dumped["leadsTo"] == ["y"]
        assert dumped["provider"] == "AWS"

    def test_optional_numbers_default_to_none(self):
        record = CertificationRecord(id="x", provider="AWS", level="Associate")
        assert record.cost is None
        assert record.duration_hours is None
        assert record.role == ()
        assert record.prerequisites == ()

    def test_resolved_numbers(self):
        """Absent numbers resolve to 0 only through the explicit step."""
        record = CertificationRecord(id="x", provider="AWS", level="Associate", cost=150)
        assert record.resolved_numbers() == ResolvedNumbers(
            cost=150, duration_hours=0, pass_score_percent=0, validity_years=0,
        )

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            CertificationRecord(id="x", provider="AWS", level="Associate", cost=-1)

    def test_pass_score_above_100_rejected(self):
        with pytest.raises(ValidationError):
            CertificationRecord(id="x", provider="AWS", level="Associate", pass_score_percent=101)

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            CertificationRecord(id="x", provider="AWS", level="Master")

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="blank"):
            CertificationRecord(id="   ", provider="AWS", level="Associate")

    def test_single_tag_string_wrapped(self):
        record = CertificationRecord(id="x", provider="AWS", level="Associate", role="Developer")
        assert record.role == ("Developer",)

    def test_record_is_frozen(self):
        record = CertificationRecord(id="x", provider="AWS", level="Associate")
        with pytest.raises(ValidationError):
            record.cost = 10


class TestComparisonSummary:
    """Test ComparisonSummary serialisation."""

    def test_serialises_with_camel_case_keys(self):
        summary = ComparisonSummary(
            level_difference=-1,
            role_overlap_percent=33.3,
            domain_overlap_percent=0.0,
            cost_delta=-75,
            duration_delta=-20,
        )
        assert summary.model_dump(by_alias=True) == {
            "levelDifference": -1,
            "roleOverlapPercent": 33.3,
            "domainOverlapPercent": 0.0,
            "costDelta": -75,
            "durationDelta": -20,
        }

"""Shared fixtures: a small mixed-provider record set."""

import pytest

from certpath.catalog import CatalogRepository, CatalogService
from certpath.models import CertificationRecord


def make_cert(cert_id: str, **overrides) -> CertificationRecord:
    """Build a record with sensible defaults for tests."""
    fields = {
        "id": cert_id,
        "name": cert_id.upper(),
        "examCode": cert_id.upper(),
        "provider": "AWS",
        "level": "Associate",
    }
    fields.update(overrides)
    return CertificationRecord.model_validate(fields)


@pytest.fixture
def sample_records() -> list[CertificationRecord]:
    """Mixed providers and levels, in a deliberate non-alphabetical order."""
    return [
        make_cert("az-900", provider="Azure", level="Fundamental", examCode="AZ-900",
                  leadsTo=["az-104"], role=["Administrator"], domains=["Cloud Concepts"]),
        make_cert("aws-saa", provider="AWS", level="Associate", examCode="SAA-C03",
                  prerequisites=["aws-ccp"], leadsTo=["aws-sap"], role=["Architect"],
                  cost=150, durationHours=60, difficulty="Intermediate"),
        make_cert("az-104", provider="Azure", level="Associate", examCode="AZ-104",
                  prerequisites=["az-900"], leadsTo=["az-305", "az-999"],
                  role=["Administrator", "Ops"], domains=["Storage", "Networking"],
                  cost=165, durationHours=60, difficulty="Intermediate"),
        make_cert("aws-ccp", provider="AWS", level="Fundamental", examCode="CLF-C02",
                  leadsTo=["aws-saa"], cost=100, durationHours=20, difficulty="Beginner"),
        make_cert("gcp-pca", provider="GCP", level="Professional", examCode="PCA",
                  description="Design solutions on Google Cloud", difficulty="Advanced"),
        make_cert("az-305", provider="Azure", level="Expert", examCode="AZ-305",
                  prerequisites=["az-104"], role=["Architect"], difficulty="Advanced"),
        make_cert("aws-sap", provider="AWS", level="Professional", examCode="SAP-C02",
                  prerequisites=["aws-saa"], difficulty="Advanced"),
        make_cert("aws-scs", provider="AWS", level="Specialty", examCode="SCS-C02",
                  prerequisites=["aws-saa"]),
    ]


@pytest.fixture
def catalog_service(sample_records) -> CatalogService:
    """Service over the in-memory sample set."""
    return CatalogService(CatalogRepository.from_records(sample_records))

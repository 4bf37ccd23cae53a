"""
API Routes

Implements the REST endpoints:
- Certification listing, search and detail
- Learning paths and explorer highlights
- Path explorer level buckets and provider statistics
- Pairwise and multi-way comparison

Error mapping: invalid input -> 400, unknown id -> 404, catalog
unavailable -> 503, anything else -> 500 without internal detail.
"""

import logging
from typing import Optional, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from certpath.catalog.service import CatalogService
from certpath.errors import CertPathError, DataUnavailableError, InvalidInputError, NotFoundError
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

router = APIRouter()

E = TypeVar("E", CloudProvider, Level)

# Global service instance (initialized lazily)
_catalog_service: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """Get or create the catalog service singleton."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService()
    return _catalog_service


# ===== Response Models =====

class LevelBucket(BaseModel):
    """One level section of the path explorer."""
    level: Level
    certifications: list[CertificationRecord]


class ProviderCount(BaseModel):
    """Number of certifications offered by a provider."""
    provider: CloudProvider
    count: int = Field(..., ge=0)


class ProviderGroup(BaseModel):
    """Difficulty-ordered certifications of one provider."""
    provider: CloudProvider
    certifications: list[CertificationRecord]


# ===== Helpers =====

def _http_error(exc: CertPathError) -> HTTPException:
    """Translate a domain error into an HTTP error."""
    if isinstance(exc, InvalidInputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Not found: {exc.cert_id}")
    if isinstance(exc, DataUnavailableError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Certification data is unavailable, please retry",
        )
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


def _internal_error(operation: str, exc: Exception) -> HTTPException:
    logger.error("%s failed: %s", operation, exc, exc_info=True)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


def _parse_enum(enum_cls: type[E], values: Optional[list[str]]) -> list[E]:
    """Parse repeated query values into enum members (case-insensitive)."""
    parsed = []
    for value in values or []:
        try:
            parsed.append(enum_cls(value))
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            raise InvalidInputError(f"Unknown {enum_cls.__name__} '{value}'. Allowed: {allowed}") from None
    return parsed


# ===== Certifications =====

@router.get("/certifications", response_model=list[CertificationRecord])
async def list_certifications(
    provider: Optional[list[str]] = Query(default=None),
    level: Optional[list[str]] = Query(default=None),
    q: str = Query(default="", description="Free-text search over name, description, code, domains"),
    service: CatalogService = Depends(get_catalog_service),
):
    """List certifications, optionally filtered by provider, level and text."""
    try:
        return service.search(
            providers=_parse_enum(CloudProvider, provider),
            levels=_parse_enum(Level, level),
            term=q,
        )
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("list_certifications", exc) from exc


@router.get("/certifications/{cert_id}", response_model=CertificationRecord)
async def get_certification(
    cert_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """Get a certification by id (case-insensitive)."""
    try:
        return service.get(cert_id)
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("get_certification", exc) from exc


@router.get("/certifications/{cert_id}/path", response_model=LearningPath)
async def get_learning_path(
    cert_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """Direct prerequisites and successors; dangling ids resolve to null."""
    try:
        return service.learning_path(cert_id)
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("get_learning_path", exc) from exc


# ===== Explorer =====

@router.get("/explorer", response_model=list[LevelBucket])
async def explore(
    provider: Optional[list[str]] = Query(default=None),
    code: str = Query(default="", description="Exam-code fragment, e.g. az104"),
    service: CatalogService = Depends(get_catalog_service),
):
    """Path explorer: filtered certifications bucketed by level, in display order."""
    try:
        buckets = service.explore(_parse_enum(CloudProvider, provider), code)
        return [LevelBucket(level=level, certifications=certs) for level, certs in buckets.items()]
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("explore", exc) from exc


@router.get("/explorer/{cert_id}/highlights", response_model=list[Highlight])
async def explorer_highlights(
    cert_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """Highlight state of every certification while ``cert_id`` is focused."""
    try:
        return service.highlights(cert_id)
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("explorer_highlights", exc) from exc


# ===== Providers =====

@router.get("/providers", response_model=list[ProviderCount])
async def provider_stats(service: CatalogService = Depends(get_catalog_service)):
    """Certification count per provider (zero for providers without any)."""
    try:
        counts = service.provider_counts()
        return [ProviderCount(provider=provider, count=count) for provider, count in counts.items()]
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("provider_stats", exc) from exc


@router.get("/providers/groups", response_model=list[ProviderGroup])
async def provider_groups(service: CatalogService = Depends(get_catalog_service)):
    """Certifications per provider ordered by difficulty, for comparison pickers."""
    try:
        groups = service.provider_groups()
        return [ProviderGroup(provider=provider, certifications=certs) for provider, certs in groups.items()]
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("provider_groups", exc) from exc


# ===== Comparison =====

@router.get("/compare", response_model=ComparisonResult)
async def compare(
    left: Optional[str] = Query(default=None),
    right: Optional[str] = Query(default=None),
    service: CatalogService = Depends(get_catalog_service),
):
    """Compare two certifications; the summary is left relative to right."""
    try:
        return service.compare(left, right)
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("compare", exc) from exc


@router.get("/compare/many", response_model=MultiComparison)
async def compare_many(
    ids: Optional[list[str]] = Query(default=None),
    service: CatalogService = Depends(get_catalog_service),
):
    """Compare two or three certifications pairwise."""
    try:
        return service.compare_many(ids or [])
    except CertPathError as exc:
        raise _http_error(exc) from exc
    except Exception as exc:
        raise _internal_error("compare_many", exc) from exc

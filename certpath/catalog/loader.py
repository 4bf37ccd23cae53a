"""
Certification catalog loader.

Provides:
- JSON file loading with pydantic validation
- In-process caching of the parsed record set
- Whole-set reload (the cached tuple is replaced, never mutated)
- Case-insensitive id lookup
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import TypeAdapter, ValidationError

from certpath.config import get_settings
from certpath.errors import DataUnavailableError
from certpath.models.certification import CertificationRecord

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[CertificationRecord])


def parse_records(raw: Any, source: str = "<memory>") -> tuple[CertificationRecord, ...]:
    """
    Validate raw JSON content into an immutable record set.

    Accepts either a top-level list or an object with a
    ``certifications`` list.

    Raises:
        DataUnavailableError: On schema errors or duplicate ids
    """
    if isinstance(raw, dict):
        raw = raw.get("certifications")
    if not isinstance(raw, list):
        raise DataUnavailableError(source, "expected a list of certifications")

    try:
        records = _RECORDS_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise DataUnavailableError(source, f"{exc.error_count()} invalid field(s)") from exc

    seen: dict[str, str] = {}
    for record in records:
        key = record.id.lower()
        if key in seen:
            raise DataUnavailableError(source, f"duplicate id {record.id!r} (also {seen[key]!r})")
        seen[key] = record.id
    return tuple(records)


class CatalogRepository:
    """
    Read-only certification source backed by a JSON file.

    The file is read once on first access and the parsed tuple is
    cached until ``reload()``.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_settings().catalog_path
        self._records: Optional[tuple[CertificationRecord, ...]] = None
        self._by_id: dict[str, CertificationRecord] = {}

    @classmethod
    def from_records(cls, records: Iterable[CertificationRecord]) -> "CatalogRepository":
        """Build a repository over an in-memory record set (no backing file)."""
        repo = cls(path=Path("<memory>"))
        repo._install(parse_records(list(records)))
        return repo

    def _install(self, records: tuple[CertificationRecord, ...]) -> None:
        self._records = records
        self._by_id = {record.id.lower(): record for record in records}

    def _load(self) -> tuple[CertificationRecord, ...]:
        source = str(self.path)
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8-sig"))
        except FileNotFoundError as exc:
            logger.error("Catalog file not found: %s", source)
            raise DataUnavailableError(source, "file not found") from exc
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Catalog file unreadable: %s (%s)", source, exc)
            raise DataUnavailableError(source, str(exc)) from exc

        records = parse_records(raw, source)
        logger.info("Loaded %d certifications from %s", len(records), source)
        return records

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    def get_all(self) -> tuple[CertificationRecord, ...]:
        """Return the cached record set, loading it on first use."""
        if self._records is None:
            self._install(self._load())
        return self._records  # type: ignore[return-value]

    def reload(self) -> tuple[CertificationRecord, ...]:
        """Re-read the source and replace the whole cached set."""
        self._install(self._load())
        return self._records  # type: ignore[return-value]

    def find_by_id(self, cert_id: str) -> Optional[CertificationRecord]:
        """Case-insensitive id lookup; None when absent."""
        self.get_all()
        return self._by_id.get(cert_id.strip().lower())

"""Exception types shared by the engine, the catalog and the API."""

from typing import Optional


class CertPathError(Exception):
    """Base class for all CertPath errors."""


class InvalidInputError(CertPathError):
    """Raised for missing records, blank or identical ids, bad arity."""


class NotFoundError(CertPathError):
    """Raised when an id is absent from the loaded record set."""

    def __init__(self, cert_id: str):
        self.cert_id = cert_id
        super().__init__(f"Certification not found: {cert_id}")


class DataUnavailableError(CertPathError):
    """Raised when the certification source cannot be loaded."""

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        self.reason = reason
        message = f"Certification data unavailable from {source}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

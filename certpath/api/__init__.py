"""API package for CertPath."""

from certpath.api.main import app
from certpath.api.routes import router

__all__ = ["app", "router"]

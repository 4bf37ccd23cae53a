"""CertPath - cloud certification catalog, comparison and learning paths."""

__version__ = "0.1.0"

"""
Tag & Exam-Code Normalisation Utilities

Provides:
- ``normalize_tags()`` used everywhere free-text tag collections
  (roles, domains) are compared as sets.
- ``normalize_exam_code()`` for loose exam-code search, so that
  ``"az104"``, ``"AZ-104"`` and ``" az-10 "`` all match ``AZ-104``.

All components that compare tags or codes should use these helpers
instead of ad-hoc ``lower()`` calls.
"""

from __future__ import annotations

from typing import Iterable, Optional


def normalize_tag(tag: Optional[str]) -> str:
    """Lower-case and trim a single tag. ``None`` becomes ``""``."""
    if tag is None:
        return ""
    return tag.strip().lower()


def normalize_tags(tags: Optional[Iterable[str]]) -> frozenset[str]:
    """Normalise a tag collection into a set, dropping blanks.

    Examples
    --------
    >>> sorted(normalize_tags(["Ops", " ops ", "", "Security"]))
    ['ops', 'security']
    """
    if not tags:
        return frozenset()
    normalized = (normalize_tag(tag) for tag in tags)
    return frozenset(tag for tag in normalized if tag)


def normalize_exam_code(code: Optional[str]) -> str:
    """Strip hyphens and surrounding whitespace, then lower-case.

    Examples
    --------
    >>> normalize_exam_code("AZ-104")
    'az104'
    >>> normalize_exam_code(" SAA-C03 ")
    'saac03'
    """
    if not code:
        return ""
    return code.replace("-", "").strip().lower()

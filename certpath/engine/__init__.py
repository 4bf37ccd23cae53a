"""Comparison, relation and grouping engine."""

from certpath.engine.comparator import compare, compare_many, overlap_percent
from certpath.engine.relations import (
    classify,
    highlight,
    highlight_all,
    index_by_id,
    learning_path,
    resolve_refs,
)
from certpath.engine.grouping import (
    count_by_provider,
    filter_and_group,
    group_by_provider,
    search,
)

__all__ = [
    "compare",
    "compare_many",
    "overlap_percent",
    "classify",
    "highlight",
    "highlight_all",
    "index_by_id",
    "learning_path",
    "resolve_refs",
    "count_by_provider",
    "filter_and_group",
    "group_by_provider",
    "search",
]

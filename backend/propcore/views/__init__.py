"""
propcore/views - read-side projections over a store

- filtering: equality + substring search (Filter/Search View)
- ordering: stable rank-table sort (Priority/Sort Order)
- aggregates: recomputed counts
"""
from propcore.views.filtering import (
    SENTINELS,
    is_sentinel,
    check_no_sentinel_collision,
    FilterCriteria,
    apply_filters,
)
from propcore.views.ordering import RankTable, rank_table, sort_by_rank, newest_first
from propcore.views.aggregates import count_by, count_where, ratio_summary, group_by

__all__ = [
    "SENTINELS",
    "is_sentinel",
    "check_no_sentinel_collision",
    "FilterCriteria",
    "apply_filters",
    "RankTable",
    "rank_table",
    "sort_by_rank",
    "newest_first",
    "count_by",
    "count_where",
    "ratio_summary",
    "group_by",
]

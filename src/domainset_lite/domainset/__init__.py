"""Deduplication, ordering and reconciliation of domain sets."""

from domainset_lite.domainset.deduper import dedupe
from domainset_lite.domainset.reconcile import (
    ReconcileOptions,
    ReconcileResult,
    apply_enforced_blacklist,
    fold_sources,
    reconcile,
)
from domainset_lite.domainset.sorter import domain_sort_key, sort_domains
from domainset_lite.domainset.stats import collect_stats, format_stats

__all__ = [
    "ReconcileOptions",
    "ReconcileResult",
    "apply_enforced_blacklist",
    "collect_stats",
    "dedupe",
    "domain_sort_key",
    "fold_sources",
    "format_stats",
    "reconcile",
    "sort_domains",
]

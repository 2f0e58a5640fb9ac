"""Per-site counts for the reject stats report."""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from domainset_lite.domain.types import RegistrableDomain
from domainset_lite.publicsuffix.oracle import SuffixOracle


def collect_stats(
    domains: Iterable[str],
    oracle: SuffixOracle,
    min_count: int = 10,
) -> list[tuple[RegistrableDomain, int]]:
    """Count entries per registrable domain.

    Only sites with more than `min_count` entries are kept. Rows are
    ordered by count (descending), then by name.
    """
    counts: Counter[str] = Counter()
    for domain in domains:
        site = oracle.registrable_suffix(domain.lstrip("."))
        if site:
            counts[site] += 1
    rows = [(site, n) for site, n in counts.items() if n > min_count]
    rows.sort(key=lambda row: (-row[1], row[0]))
    return rows


def format_stats(rows: Iterable[tuple[str, int]], width: int = 100) -> list[str]:
    """Render rows as fixed-width lines: name padded to `width`, then count."""
    return [f"{site:<{width}}{count}" for site, count in rows]

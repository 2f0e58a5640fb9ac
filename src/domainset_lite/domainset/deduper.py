"""Collapse entries already implied by a broader suffix in the same set.

Given ".b.com", both "a.b.com" and ".x.b.com" are redundant: every host
they match is matched by ".b.com" already. An exact "b.com" is also
redundant next to ".b.com", since the wildcard covers its own apex.

Removal is two-phase: the whole set is indexed first, then each entry
is checked against the finished trie. Nothing is deleted while the
index is being walked.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from domainset_lite.domain.entry import DomainEntry, MalformedEntryError
from domainset_lite.strings.trie import DomainTrie

log = logging.getLogger(__name__)


def _parse_all(entries: Iterable[str], strict: bool) -> list[tuple[str, DomainEntry]]:
    parsed: list[tuple[str, DomainEntry]] = []
    seen: set[str] = set()
    for text in entries:
        if text in seen:
            continue
        seen.add(text)
        try:
            parsed.append((text, DomainEntry.parse(text)))
        except MalformedEntryError as exc:
            if strict:
                raise
            log.warning("Skipping %s", exc)
    return parsed


def dedupe(entries: Iterable[str], strict: bool = True) -> list[str]:
    """Return the entries not covered by another, broader entry.

    Survivors keep the order of their first occurrence; duplicates are
    collapsed. The result depends only on the set of inputs, never on
    which duplicate came first.
    """
    parsed = _parse_all(entries, strict)
    trie = DomainTrie.build(entry for _, entry in parsed)

    result: list[str] = []
    for text, entry in parsed:
        covering = trie.find(entry, suffix_only=True)
        covering.discard(text)
        if not covering:
            result.append(text)

    log.debug("dedupe: %d -> %d entries", len(parsed), len(result))
    return result

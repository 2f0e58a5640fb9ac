"""Reconciliation pass: turn raw blacklist input into the final domainset.

Stages, in order:

    1. black suffixes  -- drop blacklist entries covered by an explicit
                          DOMAIN-SUFFIX rule (that rule already blocks them)
    2. whitelist       -- drop blacklist entries covered by a whitelist
                          entry (".g.msn.com" whitelisted removes "g.msn.com")
    3. black keywords  -- drop blacklist entries containing a DOMAIN-KEYWORD
    4. dedupe          -- collapse entries implied by broader ones
    5. sort            -- group by registrable domain

Stages 1-3 are independent predicates, so their relative order does not
change the result. Dedupe runs after them because removing a broad
entry can leave narrower ones that are no longer redundant, and the
reverse. Every filter collects its victims first and removes them
afterwards.

Every input collection is expected to be complete before reconcile()
is called; fold parallel producers with fold_sources() first.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from domainset_lite.domain.entry import DomainEntry, MalformedEntryError
from domainset_lite.domain.types import DomainText, Keyword
from domainset_lite.domainset.deduper import dedupe
from domainset_lite.domainset.sorter import sort_domains
from domainset_lite.domainset.trace import span
from domainset_lite.publicsuffix.oracle import SuffixOracle, default_oracle
from domainset_lite.strings.aho_corasick import KeywordAutomaton
from domainset_lite.strings.trie import DomainTrie

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconcileOptions:
    """Knobs for reconcile().

    strict: raise MalformedEntryError on a bad entry instead of logging
        and skipping it.
    guard_public_suffix_whitelist: opt in to ignoring whitelist wildcards
        whose domain is itself a public suffix (".com"). Off by default,
        since exclusion lists legitimately carry ".blogspot.com".
    enforced_blacklist: entries that must stay blocked; whitelist
        entries they cover are discarded before whitelisting.
    """
    strict: bool = True
    guard_public_suffix_whitelist: bool = False
    enforced_blacklist: frozenset[str] = frozenset()


@dataclass(slots=True)
class ReconcileResult:
    """Final domainset plus per-stage bookkeeping."""
    domains: list[str]
    input_count: int
    removed_by_suffix: int = 0
    removed_by_whitelist: int = 0
    removed_by_keyword: int = 0
    removed_by_dedupe: int = 0
    timings_ms: dict[str, float] = field(default_factory=dict)


def fold_sources(*collections: Iterable[str]) -> set[str]:
    """Union the outputs of independent producers into one set."""
    folded: set[str] = set()
    for collection in collections:
        folded.update(collection)
    return folded


def _normalize_suffix(text: str) -> str:
    return text if text.startswith(".") else "." + text


def _parse_or_skip(texts: Iterable[str], strict: bool) -> dict[str, DomainEntry]:
    parsed: dict[str, DomainEntry] = {}
    for text in texts:
        try:
            parsed[text] = DomainEntry.parse(text)
        except MalformedEntryError as exc:
            if strict:
                raise
            log.warning("Skipping %s", exc)
    return parsed


def apply_enforced_blacklist(
    whitelist: Iterable[DomainText],
    enforced: Iterable[DomainText],
    strict: bool = True,
) -> set[DomainText]:
    """Return `whitelist` minus every entry covered by an enforced entry."""
    whitelist = set(whitelist)
    enforced_trie = DomainTrie.build(enforced, strict=strict)
    if not len(enforced_trie):
        return whitelist

    parsed = _parse_or_skip(whitelist, strict)
    dropped = {text for text, entry in parsed.items() if enforced_trie.find(entry)}
    for text in dropped:
        log.info("Enforced blacklist overrides whitelist entry %s", text)
    return set(parsed) - dropped


def _guard_whitelist(
    whitelist: dict[str, DomainEntry],
    oracle: SuffixOracle,
) -> dict[str, DomainEntry]:
    kept: dict[str, DomainEntry] = {}
    for text, entry in whitelist.items():
        if (
            entry.is_suffix
            and oracle.registrable_suffix(entry.domain) is None
            and oracle.is_icann_or_private(entry.domain)
        ):
            log.warning("Ignoring whitelist entry %s: it is a public suffix", text)
            continue
        kept[text] = entry
    return kept


def reconcile(
    blacklist: Iterable[DomainText],
    whitelist: Iterable[DomainText],
    black_suffixes: Iterable[DomainText],
    black_keywords: Iterable[Keyword],
    oracle: SuffixOracle | None = None,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """Filter, dedupe and sort `blacklist` into the final domainset.

    `black_suffixes` may be written with or without the leading dot;
    both mean a suffix rule. The input collections are not modified.
    """
    if options is None:
        options = ReconcileOptions()
    if oracle is None:
        oracle = default_oracle()

    timings: dict[str, float] = {}
    entries = _parse_or_skip(set(blacklist), options.strict)
    result = ReconcileResult(domains=[], input_count=len(entries), timings_ms=timings)

    with span("* Dedupe from black suffixes", timings):
        suffix_trie = DomainTrie.build(
            (_normalize_suffix(s) for s in black_suffixes), strict=options.strict
        )
        victims = [t for t, e in entries.items() if suffix_trie.find(e, suffix_only=True)]
        for text in victims:
            del entries[text]
        result.removed_by_suffix = len(victims)

    with span("* Dedupe from whitelist", timings):
        white = set(whitelist)
        if options.enforced_blacklist:
            white = apply_enforced_blacklist(
                white, options.enforced_blacklist, strict=options.strict
            )
        white_entries = _parse_or_skip(white, options.strict)
        if options.guard_public_suffix_whitelist:
            white_entries = _guard_whitelist(white_entries, oracle)
        white_trie = DomainTrie.build(white_entries.values())
        victims = [t for t, e in entries.items() if white_trie.find(e)]
        for text in victims:
            del entries[text]
        result.removed_by_whitelist = len(victims)

    with span("* Dedupe from black keywords", timings):
        keywords = [k for k in black_keywords if k]
        kwfilter = KeywordAutomaton.from_keywords(keywords)
        victims = [t for t in entries if kwfilter.search(t)]
        for text in victims:
            del entries[text]
        result.removed_by_keyword = len(victims)

    log.info(
        "Removed %d by suffix, %d by whitelist, %d by keyword",
        result.removed_by_suffix,
        result.removed_by_whitelist,
        result.removed_by_keyword,
    )

    with span("* Dedupe from covered subdomain", timings):
        survivors = sorted(entries)
        deduped = dedupe(survivors)
        result.removed_by_dedupe = len(survivors) - len(deduped)
    log.info("Deduped %d rules", result.removed_by_dedupe)

    with span("* Sort domainset", timings):
        result.domains = sort_domains(deduped, oracle)

    return result

"""Public-suffix lookups for sorting, stats and source filtering.

Only the sorter, the stats collector, the loose-domain check in
sources and the whitelist guard in reconcile consult the oracle. The
trie and the deduper work purely on labels and never need it.

TldextractOracle is the production implementation. It reads the Public
Suffix List snapshot bundled with tldextract rather than fetching the
live list, so a build is reproducible and needs no network access.
StaticOracle answers from a precomputed mapping.
"""
from __future__ import annotations

import ipaddress
from collections.abc import Mapping
from functools import lru_cache
from typing import Protocol

import tldextract

from domainset_lite.domain.types import RegistrableDomain


class SuffixOracle(Protocol):
    def registrable_suffix(self, domain: str) -> RegistrableDomain | None: ...

    def is_icann_or_private(self, domain: str) -> bool: ...

    def is_ip_literal(self, domain: str) -> bool: ...


def _is_ip(domain: str) -> bool:
    try:
        ipaddress.ip_address(domain.strip("[]"))
    except ValueError:
        return False
    return True


class TldextractOracle:
    """SuffixOracle backed by tldextract.

    include_private controls whether PSL private-section suffixes
    (e.g. "github.io") count as public suffixes.
    """

    def __init__(
        self,
        extractor: tldextract.TLDExtract | None = None,
        include_private: bool = True,
    ) -> None:
        if extractor is None:
            extractor = tldextract.TLDExtract(
                suffix_list_urls=(),
                include_psl_private_domains=include_private,
            )
        self._extract = extractor

    def registrable_suffix(self, domain: str) -> RegistrableDomain | None:
        if _is_ip(domain):
            return None
        ext = self._extract(domain)
        if ext.domain and ext.suffix:
            return f"{ext.domain}.{ext.suffix}"
        return None

    def is_icann_or_private(self, domain: str) -> bool:
        if _is_ip(domain):
            return False
        return bool(self._extract(domain).suffix)

    def is_ip_literal(self, domain: str) -> bool:
        return _is_ip(domain)


class StaticOracle:
    """SuffixOracle answering from a precomputed mapping.

    `registrable` maps a domain to its registrable suffix. Lookups walk
    from the full domain towards the TLD, so {"foo.com": "foo.com"}
    answers "a.b.foo.com" too. `public_suffixes` lists the known public
    suffixes for is_icann_or_private().
    """

    def __init__(
        self,
        registrable: Mapping[str, RegistrableDomain],
        public_suffixes: frozenset[str] | set[str] = frozenset(),
    ) -> None:
        self._registrable = dict(registrable)
        self._public_suffixes = frozenset(public_suffixes)

    def registrable_suffix(self, domain: str) -> RegistrableDomain | None:
        if _is_ip(domain):
            return None
        labels = domain.split(".")
        for i in range(len(labels)):
            hit = self._registrable.get(".".join(labels[i:]))
            if hit is not None:
                return hit
        return None

    def is_icann_or_private(self, domain: str) -> bool:
        if _is_ip(domain):
            return False
        labels = domain.split(".")
        return any(
            ".".join(labels[i:]) in self._public_suffixes
            for i in range(len(labels))
        )

    def is_ip_literal(self, domain: str) -> bool:
        return _is_ip(domain)


@lru_cache(maxsize=1)
def default_oracle() -> TldextractOracle:
    """Shared TldextractOracle; loading the suffix list is not free."""
    return TldextractOracle()


@lru_cache(maxsize=1)
def icann_oracle() -> TldextractOracle:
    """Shared oracle ignoring PSL private suffixes.

    Stats use it so that "a.user.github.io" is counted under "github.io".
    """
    return TldextractOracle(include_private=False)

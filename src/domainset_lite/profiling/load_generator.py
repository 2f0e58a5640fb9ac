"""Synthesize realistic input sets for profiling.

Shape of the generated data:
  - num_domains blacklist entries over a pool of sites, with a Zipf-like
    skew so a few ad networks contribute most subdomains
  - ~5% of blacklist entries written as suffix wildcards
  - a whitelist of num_whitelist entries, half of them wildcards
  - num_suffixes DOMAIN-SUFFIX rules and num_keywords DOMAIN-KEYWORD rules

The generator also yields a StaticOracle for its own site pool so the
pipeline can be profiled without loading the Public Suffix List.
"""
from __future__ import annotations

import random
from dataclasses import dataclass

from domainset_lite.publicsuffix.oracle import StaticOracle

# Name pools
_TLD = ["com", "net", "org", "io", "cn", "ru"]
_SITES = [
    "doubleclick", "adnxs", "criteo", "taboola", "outbrain",
    "scorecardresearch", "moatads", "pubmatic", "rubiconproject", "openx",
    "appsflyer", "adjust", "branch", "mixpanel", "hotjar",
    "yandex", "umeng", "cnzz", "baidu", "msn",
]
_SUBDOMAINS = ["ads", "track", "pixel", "cdn", "static", "stats", "log", "sync", "api", "m"]
_KEYWORDS = ["adservice", "tracking", "analytics", "telemetry", "pagead", "beacon", "metric"]


@dataclass(slots=True)
class LoadSets:
    """One generated build input."""
    blacklist: list[str]
    whitelist: list[str]
    black_suffixes: list[str]
    black_keywords: list[str]


class LoadGenerator:
    """Generate seeded input sets for the reconcile pipeline."""

    __slots__ = (
        "_rng", "_sites", "_zipf_weights",
        "_num_domains", "_num_whitelist", "_num_suffixes", "_num_keywords",
    )

    def __init__(
        self,
        num_domains: int = 10_000,
        num_whitelist: int = 200,
        num_suffixes: int = 100,
        num_keywords: int = 5,
        num_sites: int = 500,
        seed: int = 42,
    ) -> None:
        self._rng = random.Random(seed)
        self._num_domains = num_domains
        self._num_whitelist = num_whitelist
        self._num_suffixes = num_suffixes
        self._num_keywords = num_keywords
        self._sites = self._generate_sites(num_sites)
        # Zipf weights: site i has weight 1/(i+1)
        self._zipf_weights = [1.0 / (i + 1) for i in range(len(self._sites))]

    def _generate_sites(self, n: int) -> list[str]:
        sites = set()
        while len(sites) < n:
            name = self._rng.choice(_SITES)
            sites.add(f"{name}{len(sites)}.{self._rng.choice(_TLD)}")
        return sorted(sites)

    def _pick_site(self) -> str:
        return self._rng.choices(self._sites, weights=self._zipf_weights, k=1)[0]

    def _host(self, site: str) -> str:
        depth = self._rng.randint(0, 2)
        labels = [f"{self._rng.choice(_SUBDOMAINS)}{self._rng.randint(0, 99)}" for _ in range(depth)]
        return ".".join([*labels, site])

    @property
    def sites(self) -> list[str]:
        return self._sites

    def oracle(self) -> StaticOracle:
        """Oracle that knows every generated site and TLD."""
        return StaticOracle(
            {site: site for site in self._sites},
            public_suffixes=set(_TLD),
        )

    def generate(self) -> LoadSets:
        blacklist = []
        for _ in range(self._num_domains):
            host = self._host(self._pick_site())
            if self._rng.random() < 0.05:
                host = "." + host
            blacklist.append(host)

        whitelist = []
        for _ in range(self._num_whitelist):
            host = self._host(self._pick_site())
            whitelist.append("." + host if self._rng.random() < 0.5 else host)

        black_suffixes = [self._pick_site() for _ in range(self._num_suffixes)]
        black_keywords = self._rng.sample(_KEYWORDS, min(self._num_keywords, len(_KEYWORDS)))

        return LoadSets(
            blacklist=blacklist,
            whitelist=whitelist,
            black_suffixes=black_suffixes,
            black_keywords=black_keywords,
        )

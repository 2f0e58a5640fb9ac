"""Shared fixtures for domainset-lite tests."""

from __future__ import annotations

import random

import pytest

from domainset_lite.publicsuffix.oracle import StaticOracle, default_oracle

SEED = 42

SITES = ["foo.com", "bar.com", "example.com", "msn.com", "b.com", "c.com"]


@pytest.fixture
def static_oracle() -> StaticOracle:
    """Oracle that knows a handful of sites and the "com" suffix."""
    return StaticOracle({s: s for s in SITES}, public_suffixes={"com"})


@pytest.fixture(scope="session")
def psl_oracle():
    """tldextract-backed oracle reading the bundled suffix list snapshot."""
    return default_oracle()


def random_entries(count: int, seed: int = SEED) -> list[str]:
    """Generate exact and suffix entries over a small label alphabet.

    The alphabet is tiny on purpose so that coverage relationships
    (and duplicates) are frequent.
    """
    rng = random.Random(seed)
    labels = ["a", "b", "c", "ads", "cdn"]
    tlds = ["com", "net"]
    entries = []
    for _ in range(count):
        depth = rng.randint(1, 3)
        name = ".".join([*(rng.choice(labels) for _ in range(depth)), rng.choice(tlds)])
        entries.append("." + name if rng.random() < 0.3 else name)
    return entries

"""Tests for the DomainTrie."""

import logging

import pytest

from domainset_lite.domain import DomainEntry, MalformedEntryError
from domainset_lite.strings.trie import DomainTrie

from tests.conftest import random_entries


class TestTrieBasics:
    """Basic trie operations."""

    def test_empty_trie(self):
        t = DomainTrie()
        assert len(t) == 0
        assert t.find("anything.com") == set()
        assert not t.contains("anything.com")
        assert not t.has("anything.com")

    def test_suffix_covers_subdomain(self):
        t = DomainTrie.build([".ads.example.com"])
        assert t.find("sub.ads.example.com") == {".ads.example.com"}
        assert t.find("example.com") == set()

    def test_suffix_covers_its_apex(self):
        t = DomainTrie.build([".ads.example.com"])
        assert t.find("ads.example.com") == {".ads.example.com"}

    def test_collects_every_covering_suffix(self):
        t = DomainTrie.build([".com", ".example.com", ".ads.example.com"])
        assert t.find("x.ads.example.com") == {
            ".com", ".example.com", ".ads.example.com",
        }

    def test_exact_matches_only_itself(self):
        t = DomainTrie.build(["example.com"])
        assert t.find("example.com") == {"example.com"}
        assert t.find("a.example.com") == set()

    def test_exact_does_not_cover_suffix_query(self):
        t = DomainTrie.build(["example.com"])
        assert t.find(".example.com") == set()

    def test_suffix_only_ignores_exact(self):
        t = DomainTrie.build(["example.com", ".example.com"])
        assert t.find("example.com") == {"example.com", ".example.com"}
        assert t.find("example.com", suffix_only=True) == {".example.com"}

    def test_suffix_query_self_match(self):
        t = DomainTrie.build([".b.com"])
        assert t.find(".b.com", suffix_only=True) == {".b.com"}
        assert t.find(".a.b.com", suffix_only=True) == {".b.com"}

    def test_accepts_parsed_entries(self):
        t = DomainTrie.build([DomainEntry.parse(".b.com")])
        assert t.find(DomainEntry.parse("a.b.com")) == {".b.com"}

    def test_lookalike_label_not_covered(self):
        t = DomainTrie.build([".b.com"])
        assert t.find("ab.com") == set()
        assert not t.contains("ab.com")


class TestContainsAndHas:
    """contains() is wildcard coverage, has() is verbatim membership."""

    def test_contains(self):
        t = DomainTrie.build([".g.msn.com", "exact.org"])
        assert t.contains("g.msn.com")
        assert t.contains("x.g.msn.com")
        assert t.contains(".x.g.msn.com")
        assert not t.contains("msn.com")
        assert not t.contains("exact.org")

    def test_has(self):
        t = DomainTrie.build([".g.msn.com", "exact.org"])
        assert t.has(".g.msn.com")
        assert not t.has("g.msn.com")
        assert t.has("exact.org")
        assert not t.has(".exact.org")
        assert not t.has("x.g.msn.com")


class TestTrieStructure:
    """Node sharing, counts and idempotent insertion."""

    def test_node_count(self):
        t = DomainTrie.build(["api.example.com"])
        # root -> com -> example -> api = 4 nodes
        assert t.node_count() == 4

    def test_shared_suffix(self):
        t = DomainTrie.build(["api.example.com", "cdn.example.com"])
        # root -> com -> example -> api, cdn = 5 nodes
        assert t.node_count() == 5

    def test_duplicate_insertion_is_noop(self):
        t = DomainTrie.build(["a.com", "a.com", ".a.com", ".a.com"])
        assert len(t) == 2
        assert t.node_count() == 3

    def test_exact_and_suffix_share_node(self):
        t = DomainTrie.build(["a.com", ".a.com"])
        assert t.has("a.com")
        assert t.has(".a.com")
        assert t.node_count() == 3


class TestMalformedEntries:
    """Malformed input must never create nodes."""

    @pytest.mark.parametrize("bad", ["", ".", "a..com"])
    def test_strict_build_raises(self, bad):
        with pytest.raises(MalformedEntryError):
            DomainTrie.build(["ok.com", bad])

    def test_lenient_build_skips(self, caplog):
        with caplog.at_level(logging.WARNING):
            t = DomainTrie.build(["ok.com", "", "."], strict=False)
        assert len(t) == 1
        assert t.node_count() == 3
        assert "Skipping" in caplog.text

    def test_malformed_query_raises(self):
        t = DomainTrie.build(["ok.com"])
        with pytest.raises(MalformedEntryError):
            t.find("")


class TestCoverageProperty:
    """find(d) includes .X iff d == X or d ends with ".X"."""

    def test_against_naive(self):
        suffixes = sorted({e for e in random_entries(300, seed=1) if e.startswith(".")})
        t = DomainTrie.build(suffixes)
        queries = {e.lstrip(".") for e in random_entries(300, seed=2)}
        for d in queries:
            expected = {
                s for s in suffixes
                if d == s[1:] or d.endswith(s)
            }
            assert t.find(d) == expected

    @pytest.mark.parametrize("seed", [3, 4, 5])
    def test_find_iff_covers(self, seed):
        """Every inserted entry is reported exactly when it covers the query."""
        inserted = sorted(set(random_entries(200, seed=seed)))
        parsed = [DomainEntry.parse(e) for e in inserted]
        t = DomainTrie.build(inserted)

        for q in set(random_entries(300, seed=seed + 50)):
            query = DomainEntry.parse(q)
            found = t.find(q)
            found_suffix_only = t.find(q, suffix_only=True)
            for text, entry in zip(inserted, parsed):
                covers = entry.covers(query)
                assert (text in found) == covers, (text, q)
                assert (text in found_suffix_only) == (covers and entry.is_suffix), (text, q)
            assert t.contains(q) == any(e.is_suffix and e.covers(query) for e in parsed)
            assert t.has(q) == (q in inserted)

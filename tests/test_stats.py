"""Tests for per-site stats."""

from domainset_lite.domainset.stats import collect_stats, format_stats


class TestCollectStats:

    def test_counts_above_threshold(self, static_oracle):
        domains = [f"h{i}.foo.com" for i in range(5)] + [f"h{i}.bar.com" for i in range(3)]
        assert collect_stats(domains, static_oracle, min_count=2) == [
            ("foo.com", 5),
            ("bar.com", 3),
        ]

    def test_threshold_is_exclusive(self, static_oracle):
        domains = [f"h{i}.foo.com" for i in range(10)]
        assert collect_stats(domains, static_oracle) == []
        assert collect_stats(domains + ["x.foo.com"], static_oracle) == [("foo.com", 11)]

    def test_ties_ordered_by_name(self, static_oracle):
        domains = ["a.foo.com", "b.foo.com", "a.bar.com", "b.bar.com"]
        assert collect_stats(domains, static_oracle, min_count=0) == [
            ("bar.com", 2),
            ("foo.com", 2),
        ]

    def test_suffix_entries_and_unknowns(self, static_oracle):
        domains = [".a.foo.com", "foo.com", "1.2.3.4", "x.zz"]
        assert collect_stats(domains, static_oracle, min_count=0) == [("foo.com", 2)]


def test_format_stats():
    lines = format_stats([("foo.com", 12)], width=10)
    assert lines == ["foo.com   12"]


def test_private_suffix_entries_grouped_under_icann_site():
    from domainset_lite.publicsuffix.oracle import icann_oracle

    domains = ["a.alice.github.io", "b.bob.github.io", "c.github.io"]
    assert collect_stats(domains, icann_oracle(), min_count=0) == [("github.io", 3)]

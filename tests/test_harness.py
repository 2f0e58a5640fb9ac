"""Tests for the load generator and profiling harness."""

import pytest

from domainset_lite.profiling.harness import run_pipeline
from domainset_lite.profiling.load_generator import LoadGenerator
from domainset_lite.profiling.report import format_report


class TestLoadGenerator:

    def test_sizes(self):
        sets = LoadGenerator(num_domains=300, num_whitelist=20, num_suffixes=7, num_keywords=3).generate()
        assert len(sets.blacklist) == 300
        assert len(sets.whitelist) == 20
        assert len(sets.black_suffixes) == 7
        assert len(sets.black_keywords) == 3

    def test_seed_reproducible(self):
        a = LoadGenerator(num_domains=200, seed=5).generate()
        b = LoadGenerator(num_domains=200, seed=5).generate()
        assert a == b

    def test_oracle_knows_sites(self):
        gen = LoadGenerator(num_sites=20)
        oracle = gen.oracle()
        for site in gen.sites:
            assert oracle.registrable_suffix(f"ads.{site}") == site


class TestHarness:

    def test_run_pipeline(self):
        result = run_pipeline(num_domains=2_000, num_whitelist=50, num_suffixes=10)
        assert result.output_domains <= result.input_domains
        removed = (
            result.removed_by_suffix + result.removed_by_whitelist
            + result.removed_by_keyword + result.removed_by_dedupe
        )
        assert result.input_domains - removed == result.output_domains
        assert result.cprofile_stats is None

    def test_profile_attaches_stats(self):
        result = run_pipeline(num_domains=300, num_whitelist=10, num_suffixes=3, profile=True)
        assert "cumulative" in result.cprofile_stats

    def test_report(self):
        report = format_report(run_pipeline(num_domains=300, num_whitelist=10, num_suffixes=3))
        assert "=== Pipeline ===" in report
        assert "* Sort domainset" in report


@pytest.mark.benchmark
def test_large_build_finishes():
    result = run_pipeline(num_domains=100_000, num_whitelist=1_000, num_suffixes=200)
    assert result.input_domains > 50_000
    assert result.output_domains > 0

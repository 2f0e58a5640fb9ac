"""Profiling harness for the reconcile pipeline.

Generates a synthetic build input, runs it through reconcile() and
reports where the time goes. With profile=True the run is wrapped in
cProfile and the top functions by cumulative time are attached.
"""
from __future__ import annotations

import cProfile
import io
import pstats
import time
from dataclasses import dataclass, field

from domainset_lite.domainset.reconcile import ReconcileResult, reconcile
from domainset_lite.profiling.load_generator import LoadGenerator
from domainset_lite.publicsuffix.oracle import SuffixOracle


@dataclass(slots=True)
class PipelineResult:
    """Timing results from a single pipeline run."""
    input_domains: int
    output_domains: int
    removed_by_suffix: int
    removed_by_whitelist: int
    removed_by_keyword: int
    removed_by_dedupe: int
    total_time_ms: float
    domains_per_sec: float
    stage_times_ms: dict[str, float] = field(default_factory=dict)
    cprofile_stats: str | None = None


def run_pipeline(
    num_domains: int = 10_000,
    num_whitelist: int = 200,
    num_suffixes: int = 100,
    num_keywords: int = 5,
    seed: int = 42,
    oracle: SuffixOracle | None = None,
    profile: bool = False,
) -> PipelineResult:
    """Run reconcile() on generated input and return timing data.

    oracle defaults to the generator's own StaticOracle so that suffix
    list loading does not show up in the numbers.
    """
    gen = LoadGenerator(
        num_domains=num_domains,
        num_whitelist=num_whitelist,
        num_suffixes=num_suffixes,
        num_keywords=num_keywords,
        seed=seed,
    )
    sets = gen.generate()
    if oracle is None:
        oracle = gen.oracle()

    def _run() -> ReconcileResult:
        return reconcile(
            sets.blacklist,
            sets.whitelist,
            sets.black_suffixes,
            sets.black_keywords,
            oracle=oracle,
        )

    cprofile_text = None
    t0 = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        result = _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        result = _run()
    total_ms = (time.perf_counter() - t0) * 1000

    dps = result.input_count / (total_ms / 1000) if total_ms > 0 else 0

    return PipelineResult(
        input_domains=result.input_count,
        output_domains=len(result.domains),
        removed_by_suffix=result.removed_by_suffix,
        removed_by_whitelist=result.removed_by_whitelist,
        removed_by_keyword=result.removed_by_keyword,
        removed_by_dedupe=result.removed_by_dedupe,
        total_time_ms=total_ms,
        domains_per_sec=dps,
        stage_times_ms=dict(result.timings_ms),
        cprofile_stats=cprofile_text,
    )

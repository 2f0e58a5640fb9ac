"""Report generation for profiling and build results."""
from __future__ import annotations

from domainset_lite.domainset.reconcile import ReconcileResult
from domainset_lite.profiling.harness import PipelineResult


def _pct(part: float, total: float) -> str:
    if total <= 0:
        return "n/a"
    return f"{part / total * 100:.1f}%"


def format_report(result: PipelineResult, label: str = "Pipeline") -> str:
    """Format a PipelineResult as a readable report string."""
    lines = [
        f"=== {label} ===",
        f"Input domains:     {result.input_domains:,}",
        f"Output domains:    {result.output_domains:,}",
        f"Total time:        {result.total_time_ms:.1f} ms",
        f"Throughput:        {result.domains_per_sec:,.0f} domains/sec",
        "",
        "Removed:",
        f"  By suffix:       {result.removed_by_suffix:,}",
        f"  By whitelist:    {result.removed_by_whitelist:,}",
        f"  By keyword:      {result.removed_by_keyword:,}",
        f"  By dedupe:       {result.removed_by_dedupe:,}",
        "",
        "Breakdown:",
    ]
    for stage, ms in result.stage_times_ms.items():
        lines.append(
            f"  {stage:<34} {ms:>9.1f} ms ({_pct(ms, result.total_time_ms)})"
        )
    return "\n".join(lines)


def format_build_summary(result: ReconcileResult) -> str:
    """One-paragraph summary of a real build, for the CLI."""
    return (
        f"Import {result.input_count:,} rules, "
        f"removed {result.removed_by_suffix:,} by suffix, "
        f"{result.removed_by_whitelist:,} by whitelist, "
        f"{result.removed_by_keyword:,} by keyword, "
        f"{result.removed_by_dedupe:,} by dedupe; "
        f"{len(result.domains):,} rules written"
    )

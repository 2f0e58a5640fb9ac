"""Profiling harness and load generation for domainset-lite."""

from domainset_lite.profiling.harness import PipelineResult, run_pipeline
from domainset_lite.profiling.load_generator import LoadGenerator, LoadSets
from domainset_lite.profiling.report import format_build_summary, format_report

__all__ = [
    "LoadGenerator",
    "LoadSets",
    "PipelineResult",
    "format_build_summary",
    "format_report",
    "run_pipeline",
]

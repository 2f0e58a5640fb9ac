"""domainset-lite CLI entry point.

Usage: domainset-lite [-v] build|profile ...
"""
import argparse
import logging
import sys


def _add_build_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "build",
        help="Reconcile local rule files into a deduplicated, sorted domainset.",
    )
    p.add_argument(
        "--blacklist", action="append", default=[], metavar="FILE",
        help="Blacklist domain file; repeat to union several sources.",
    )
    p.add_argument(
        "--whitelist", action="append", default=[], metavar="FILE",
        help="Whitelist domain file; repeatable.",
    )
    p.add_argument(
        "--suffixes", action="append", default=[], metavar="FILE",
        help="DOMAIN-SUFFIX blacklist file, one domain per line; repeatable.",
    )
    p.add_argument(
        "--keywords", action="append", default=[], metavar="FILE",
        help="DOMAIN-KEYWORD blacklist file, one keyword per line; repeatable.",
    )
    p.add_argument(
        "--ruleset", action="append", default=[], metavar="FILE",
        help="Rule file with DOMAIN-KEYWORD,x and DOMAIN-SUFFIX,x lines; repeatable.",
    )
    p.add_argument(
        "--dnsmasq", action="append", default=[], metavar="FILE",
        help="dnsmasq config with server=/<domain>/114.114.114.114 lines, "
             "read as blacklist domains; repeatable.",
    )
    p.add_argument(
        "--enforced", action="append", default=[], metavar="FILE",
        help="Entries that stay blocked even if whitelisted; repeatable.",
    )
    p.add_argument(
        "--output", "-o", required=True,
        help="Where to write the final domainset.",
    )
    p.add_argument(
        "--stats", default=None,
        help="Optionally write per-site entry counts to this file.",
    )
    p.add_argument(
        "--stats-min-count", type=int, default=10,
        help="Only list sites with more entries than this (default: 10)",
    )
    p.add_argument(
        "--lenient", action="store_true",
        help="Skip malformed entries with a warning instead of failing.",
    )
    p.add_argument(
        "--guard-public-suffix-whitelist", action="store_true",
        help="Ignore whitelist wildcards that are public suffixes, such as '.com'.",
    )


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Run the profiling harness on synthetic input.",
    )
    p.add_argument(
        "--domains", type=int, default=100_000,
        help="Blacklist entries to generate (default: 100000)",
    )
    p.add_argument(
        "--whitelist", type=int, default=1_000,
        help="Whitelist entries to generate (default: 1000)",
    )
    p.add_argument(
        "--suffixes", type=int, default=200,
        help="DOMAIN-SUFFIX rules to generate (default: 200)",
    )
    p.add_argument(
        "--keywords", type=int, default=5,
        help="DOMAIN-KEYWORD rules to generate (default: 5)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _read_all(paths: list[str]) -> set[str]:
    from domainset_lite.domainset.reconcile import fold_sources
    from domainset_lite.sources.lines import read_domains

    return fold_sources(*(read_domains(path) for path in paths))


def _run_build(args: argparse.Namespace) -> None:
    from domainset_lite.domainset.reconcile import ReconcileOptions, fold_sources, reconcile
    from domainset_lite.domainset.stats import collect_stats, format_stats
    from domainset_lite.profiling.report import format_build_summary
    from domainset_lite.publicsuffix.oracle import default_oracle, icann_oracle
    from domainset_lite.sources.lines import read_dnsmasq, read_ruleset, write_if_changed

    oracle = default_oracle()
    blacklist = fold_sources(
        _read_all(args.blacklist),
        *(read_dnsmasq(path, oracle) for path in args.dnsmasq),
    )
    keywords = _read_all(args.keywords)
    suffixes = _read_all(args.suffixes)
    for path in args.ruleset:
        rule_keywords, rule_suffixes = read_ruleset(path)
        keywords |= rule_keywords
        suffixes |= rule_suffixes

    options = ReconcileOptions(
        strict=not args.lenient,
        guard_public_suffix_whitelist=args.guard_public_suffix_whitelist,
        enforced_blacklist=frozenset(_read_all(args.enforced)),
    )
    result = reconcile(
        blacklist,
        _read_all(args.whitelist),
        suffixes,
        keywords,
        oracle=oracle,
        options=options,
    )
    write_if_changed(args.output, result.domains)
    if args.stats:
        rows = collect_stats(result.domains, icann_oracle(), min_count=args.stats_min_count)
        write_if_changed(args.stats, format_stats(rows))
    print(format_build_summary(result))


def _run_profile(args: argparse.Namespace) -> None:
    from domainset_lite.profiling.harness import run_pipeline
    from domainset_lite.profiling.report import format_report

    result = run_pipeline(
        num_domains=args.domains,
        num_whitelist=args.whitelist,
        num_suffixes=args.suffixes,
        num_keywords=args.keywords,
        seed=args.seed,
        profile=args.cprofile,
    )
    print(format_report(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="domainset-lite",
        description="Domain list deduplication for rule-based traffic routing.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log stage timings and per-entry diagnostics.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_build_parser(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "build":
        if not args.blacklist and not args.dnsmasq:
            parser.error("build needs at least one --blacklist or --dnsmasq source")
        _run_build(args)
    elif args.command == "profile":
        _run_profile(args)

"""Line-level readers and writers for rule files.

These sit at the boundary of the package: they turn text files into
plain collections of entry strings and write the finished domainset
back out. No routing syntax is interpreted here.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from domainset_lite.publicsuffix.oracle import SuffixOracle

log = logging.getLogger(__name__)

_DNSMASQ_PREFIX = "server=/"
_DNSMASQ_UPSTREAM = "/114.114.114.114"


def process_line(line: str) -> str | None:
    """Return the trimmed content of a line, or None for blanks and comments."""
    stripped = line.strip()
    if not stripped:
        return None
    if stripped[0] in "#!" or stripped.startswith("//"):
        return None
    return stripped


def extract_dnsmasq_domain(line: str, upstream: str = _DNSMASQ_UPSTREAM) -> str | None:
    """Pull the domain out of a "server=/<domain>/<upstream>" line."""
    if line.startswith(_DNSMASQ_PREFIX) and line.endswith(upstream):
        domain = line[len(_DNSMASQ_PREFIX) : -len(upstream)]
        return domain or None
    return None


def is_domain_loose(domain: str, oracle: SuffixOracle) -> bool:
    """True for names under a listed public suffix that are not IP literals."""
    return not oracle.is_ip_literal(domain) and oracle.is_icann_or_private(domain)


def parse_dnsmasq(lines: Iterable[str], oracle: SuffixOracle) -> list[str]:
    results: list[str] = []
    for line in lines:
        domain = extract_dnsmasq_domain(line.strip())
        if domain and is_domain_loose(domain, oracle):
            results.append(domain)
    return results


def read_domains(path: str | Path) -> Iterator[str]:
    """Yield the processed, non-comment lines of a UTF-8 text file."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            processed = process_line(line)
            if processed is not None:
                yield processed


def write_if_changed(path: str | Path, lines: Iterable[str]) -> bool:
    """Write `lines` to `path` unless the file already holds exactly that.

    Returns True if the file was written.
    """
    path = Path(path)
    content = "".join(f"{line}\n" for line in lines)
    if path.exists() and path.read_text(encoding="utf-8") == content:
        log.info("Same content, skip writing %s", path)
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    log.info("Wrote %s", path)
    return True


def split_ruleset(lines: Iterable[str]) -> tuple[set[str], set[str]]:
    """Split Surge-style rule lines into (keywords, suffixes).

    "DOMAIN-KEYWORD,ads" contributes "ads" to keywords and
    "DOMAIN-SUFFIX,example.com" contributes "example.com" to suffixes.
    Trailing options ("DOMAIN-SUFFIX,x.com,no-resolve") are ignored, as
    are comments and every other rule type.
    """
    keywords: set[str] = set()
    suffixes: set[str] = set()
    for line in lines:
        processed = process_line(line)
        if processed is None:
            continue
        parts = processed.split(",")
        if len(parts) < 2:
            continue
        kind, value = parts[0].strip(), parts[1].strip()
        if not value:
            continue
        if kind == "DOMAIN-KEYWORD":
            keywords.add(value)
        elif kind == "DOMAIN-SUFFIX":
            suffixes.add(value)
    return keywords, suffixes


def read_ruleset(path: str | Path) -> tuple[set[str], set[str]]:
    """Read a rule file and split it with split_ruleset()."""
    with open(path, encoding="utf-8") as f:
        keywords, suffixes = split_ruleset(f)
    log.info(
        "Import %d black keywords and %d black suffixes from %s",
        len(keywords), len(suffixes), path,
    )
    return keywords, suffixes


def read_dnsmasq(path: str | Path, oracle: SuffixOracle) -> list[str]:
    """Read the domains of a dnsmasq "server=/<domain>/..." config file."""
    with open(path, encoding="utf-8") as f:
        domains = parse_dnsmasq(f, oracle)
    log.info("Import %d domains from dnsmasq config %s", len(domains), path)
    return domains

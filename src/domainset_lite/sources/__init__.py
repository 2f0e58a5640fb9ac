"""Reading rule files into entry collections and writing results."""

from domainset_lite.sources.lines import (
    extract_dnsmasq_domain,
    is_domain_loose,
    parse_dnsmasq,
    process_line,
    read_dnsmasq,
    read_domains,
    read_ruleset,
    split_ruleset,
    write_if_changed,
)

__all__ = [
    "extract_dnsmasq_domain",
    "is_domain_loose",
    "parse_dnsmasq",
    "process_line",
    "read_dnsmasq",
    "read_domains",
    "read_ruleset",
    "split_ruleset",
    "write_if_changed",
]

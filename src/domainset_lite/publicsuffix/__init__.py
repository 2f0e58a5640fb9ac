"""Public Suffix List oracle."""

from domainset_lite.publicsuffix.oracle import (
    StaticOracle,
    SuffixOracle,
    TldextractOracle,
    default_oracle,
    icann_oracle,
)

__all__ = [
    "StaticOracle",
    "SuffixOracle",
    "TldextractOracle",
    "default_oracle",
    "icann_oracle",
]

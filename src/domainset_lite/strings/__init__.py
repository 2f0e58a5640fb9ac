"""Domain indexing and keyword matching."""

from domainset_lite.strings.aho_corasick import KeywordAutomaton
from domainset_lite.strings.trie import DomainTrie

__all__ = [
    "DomainTrie",
    "KeywordAutomaton",
]

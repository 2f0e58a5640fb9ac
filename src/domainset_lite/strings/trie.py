"""Label-level trie for reversed domain matching.

Domain names are split on "." and reversed before insertion so that
the TLD comes first: "ads.example.com" becomes ["com", "example", "ads"].
Hundreds of thousands of blocklist entries share a handful of TLDs and
a much smaller set of registrable domains, so the common suffix is
stored once and the trie only branches where entries diverge.

Each node carries two flags instead of a pattern list:

    suffix_terminal -- ".<path>" was inserted (wildcard, covers subtree)
    exact_terminal  -- "<path>" was inserted (matches that host only)

Both can be set on the same node. The original entry strings are not
stored; find() rebuilds them from the path, which is exact because
DomainEntry.parse() never normalizes its input.

A single-label suffix such as ".com" is accepted and covers every
domain ending in "com". Deciding whether that is acceptable is up to
the caller (see domainset.reconcile); the index enforces no policy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from domainset_lite.domain.entry import DomainEntry, EntryKind, MalformedEntryError

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TrieNode:
    """A node in the domain trie.

    children maps a label to the next node (labels are unique per node).
    """
    children: dict[str, TrieNode] = field(default_factory=dict)
    suffix_terminal: bool = False
    exact_terminal: bool = False


def _as_entry(domain: str | DomainEntry) -> DomainEntry:
    if isinstance(domain, DomainEntry):
        return domain
    return DomainEntry.parse(domain)


class DomainTrie:
    """Trie over reversed domain labels for coverage queries.

    Usage:
        trie = DomainTrie.build([".ads.example.com", "cdn.example.net"])
        trie.find("sub.ads.example.com")   # {".ads.example.com"}
        trie.contains("x.ads.example.com") # True
        trie.has("cdn.example.net")        # True

    The trie is read-only once queries begin; concurrent readers need
    no locking.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._entry_count = 0

    @classmethod
    def build(
        cls,
        entries: Iterable[str | DomainEntry],
        strict: bool = True,
    ) -> DomainTrie:
        """Build a trie from an iterable of entries.

        With strict=True a malformed entry raises MalformedEntryError.
        With strict=False it is logged and skipped; no node is created
        for it either way.
        """
        trie = cls()
        for entry in entries:
            try:
                trie.insert(entry)
            except MalformedEntryError as exc:
                if strict:
                    raise
                log.warning("Skipping %s", exc)
        return trie

    def __len__(self) -> int:
        """Number of distinct entries inserted."""
        return self._entry_count

    def insert(self, entry: str | DomainEntry) -> DomainEntry:
        """Insert an entry. Re-inserting an existing entry is a no-op."""
        parsed = _as_entry(entry)
        node = self._root
        for label in parsed.reversed_labels:
            child = node.children.get(label)
            if child is None:
                child = TrieNode()
                node.children[label] = child
            node = child

        if parsed.kind is EntryKind.SUFFIX:
            if not node.suffix_terminal:
                node.suffix_terminal = True
                self._entry_count += 1
        elif not node.exact_terminal:
            node.exact_terminal = True
            self._entry_count += 1
        return parsed

    def find(self, domain: str | DomainEntry, suffix_only: bool = False) -> set[str]:
        """Return the inserted entries that cover `domain`.

        Walks `domain`'s reversed labels from the root. Every node on the
        way that is suffix-terminal denotes an inserted ".X" where X is a
        suffix of `domain` (or `domain` itself), so ".X" covers it.

        An exact-terminal node only covers an exact query that ends on
        that very node, and is ignored when suffix_only is True.
        """
        query = _as_entry(domain)
        labels = query.reversed_labels
        last = len(labels) - 1
        found: set[str] = set()

        node = self._root
        for depth, label in enumerate(labels):
            child = node.children.get(label)
            if child is None:
                break
            node = child
            if node.suffix_terminal:
                found.add("." + ".".join(reversed(labels[: depth + 1])))
            if (
                depth == last
                and not suffix_only
                and node.exact_terminal
                and query.kind is EntryKind.EXACT
            ):
                found.add(query.domain)
        return found

    def contains(self, domain: str | DomainEntry) -> bool:
        """True if some inserted suffix wildcard covers `domain`."""
        node = self._root
        for label in _as_entry(domain).reversed_labels:
            child = node.children.get(label)
            if child is None:
                return False
            node = child
            if node.suffix_terminal:
                return True
        return False

    def has(self, domain: str | DomainEntry) -> bool:
        """True if `domain` was inserted verbatim (leading dot included)."""
        query = _as_entry(domain)
        node = self._root
        for label in query.reversed_labels:
            child = node.children.get(label)
            if child is None:
                return False
            node = child
        if query.kind is EntryKind.SUFFIX:
            return node.suffix_terminal
        return node.exact_terminal

    def node_count(self) -> int:
        """Count total nodes in the trie, root included."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

"""Domain entries: exact hosts and suffix wildcards.

The textual convention used by every list we ingest is that a leading
"." marks a suffix wildcard: ".example.com" matches example.com and
every subdomain of it, while "example.com" matches only that host.

Internally an entry is a tagged value (kind + labels) so that the trie,
deduper and reconciliation code never re-parse the marker. Conversion
happens once, in DomainEntry.parse(), and str() turns the entry back
into its textual form for output.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from domainset_lite.domain.types import DomainText


class MalformedEntryError(ValueError):
    """Raised when a string cannot be interpreted as a domain entry."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed domain entry {text!r}: {reason}")


class EntryKind(Enum):
    EXACT = auto()
    SUFFIX = auto()


@dataclass(frozen=True, slots=True)
class DomainEntry:
    """One blacklist/whitelist entry.

    labels are stored left to right ("a.b.com" -> ("a", "b", "com")).
    """
    kind: EntryKind
    labels: tuple[str, ...]

    @classmethod
    def parse(cls, text: DomainText) -> DomainEntry:
        if not text:
            raise MalformedEntryError(text, "empty string")
        if text[0] == ".":
            kind = EntryKind.SUFFIX
            body = text[1:]
        else:
            kind = EntryKind.EXACT
            body = text
        if not body:
            raise MalformedEntryError(text, "no labels")
        labels = tuple(body.split("."))
        if "" in labels:
            raise MalformedEntryError(text, "empty label")
        return cls(kind, labels)

    @property
    def is_suffix(self) -> bool:
        return self.kind is EntryKind.SUFFIX

    @property
    def domain(self) -> str:
        """The host name without the suffix marker."""
        return ".".join(self.labels)

    @property
    def reversed_labels(self) -> tuple[str, ...]:
        return self.labels[::-1]

    def covers(self, other: DomainEntry) -> bool:
        """True if every host matched by `other` is also matched by self.

        An exact entry covers only an identical exact entry. A suffix
        entry covers anything whose labels end with its own labels.
        """
        if self.kind is EntryKind.EXACT:
            return other.kind is EntryKind.EXACT and other.labels == self.labels
        n = len(self.labels)
        return len(other.labels) >= n and other.labels[-n:] == self.labels

    def __str__(self) -> str:
        if self.kind is EntryKind.SUFFIX:
            return "." + self.domain
        return self.domain

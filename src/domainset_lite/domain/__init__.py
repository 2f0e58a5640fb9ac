"""Domain entry model for domainset-lite.

Re-exports the public types:
    from domainset_lite.domain import DomainEntry, EntryKind, MalformedEntryError
"""
from domainset_lite.domain.entry import DomainEntry, EntryKind, MalformedEntryError
from domainset_lite.domain.types import DomainText, Keyword, RegistrableDomain

__all__ = [
    "DomainEntry",
    "DomainText",
    "EntryKind",
    "Keyword",
    "MalformedEntryError",
    "RegistrableDomain",
]

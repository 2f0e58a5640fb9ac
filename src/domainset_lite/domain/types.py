"""Shared type aliases used across the package."""
from __future__ import annotations

from typing import TypeAlias

DomainText: TypeAlias = str  # textual entry, leading "." marks a suffix
Keyword: TypeAlias = str
RegistrableDomain: TypeAlias = str  # eTLD+1, e.g. "example.com"

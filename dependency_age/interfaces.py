"""
Interfaces for dependency listers and registry clients.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Protocol

from .models import DependencyRecord, LookupResult


class DependencyLister(Protocol):
    """Enumerate the dependencies of a build."""

    def list_dependencies(self) -> List[DependencyRecord]:
        ...


class RegistryClient(Protocol):
    """Resolve publication dates from a package registry."""

    def fetch_publication_date(self, group: str, artifact: str, version: str) -> datetime:
        ...

    def lookup(self, record: DependencyRecord) -> LookupResult:
        ...

"""
Core data models for dependency age analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class DependencyRecord:
    """A dependency as reported by the build tool."""

    group: str
    artifact: str
    version: str
    scope: str
    packaging: str

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}"


class LookupStatus(Enum):
    """Outcome of a registry lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class LookupResult:
    """Publication date lookup for a single dependency."""

    record: DependencyRecord
    status: LookupStatus
    published_at: Optional[datetime] = None
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


@dataclass(frozen=True)
class DependencyAge:
    """Computed age of a dated dependency."""

    record: DependencyRecord
    published_at: datetime
    age_days: int

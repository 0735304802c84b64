from datetime import datetime, timedelta, timezone
from typing import Dict, List

import pytest

from dependency_age.models import DependencyRecord, LookupResult, LookupStatus


FIXED_NOW = datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)


def make_record(artifact: str, version: str = "1.0.0", scope: str = "compile") -> DependencyRecord:
    return DependencyRecord(
        group="org.example",
        artifact=artifact,
        version=version,
        scope=scope,
        packaging="jar",
    )


class FakeLister:
    def __init__(self, records: List[DependencyRecord]) -> None:
        self.records = records

    def list_dependencies(self) -> List[DependencyRecord]:
        return list(self.records)


class FakeRegistry:
    """Registry answering from a map of artifact -> age in days (None = not found)."""

    def __init__(self, ages: Dict[str, object], now: datetime = FIXED_NOW) -> None:
        self.ages = ages
        self.now = now
        self.calls = []

    def fetch_publication_date(self, group, artifact, version):
        raise NotImplementedError

    def lookup(self, record: DependencyRecord) -> LookupResult:
        self.calls.append(record)
        value = self.ages[record.artifact]
        if value is None:
            return LookupResult(record=record, status=LookupStatus.NOT_FOUND)
        if isinstance(value, Exception):
            return LookupResult(record=record, status=LookupStatus.ERROR, error=value)
        published_at = self.now - timedelta(days=value, hours=1)
        return LookupResult(record=record, status=LookupStatus.FOUND, published_at=published_at)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW

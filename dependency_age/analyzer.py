"""
Core dependency age analyzer.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from tqdm import tqdm

from .interfaces import DependencyLister, RegistryClient
from .maven import MavenDependencyLister
from .models import DependencyAge, DependencyRecord, LookupStatus
from .registry import ArtifactNotFoundError, MavenCentralClient
from .reporting import ages_to_frame
from .time_utils import age_in_days, system_clock


logger = logging.getLogger(__name__)

ON_MISSING_POLICIES = ("skip", "abort")


def average_age_days(days: Iterable[float]) -> Optional[float]:
    """Arithmetic mean of day counts, or None with a warning when empty."""
    values = list(days)
    if not values:
        logger.warning("No dependency ages to average")
        return None
    return sum(values) / len(values)


class DependencyAgeAnalyzer:
    """Compute the average age of a build's dependencies."""

    def __init__(
        self,
        project_dir: Path = Path("."),
        lister: Optional[DependencyLister] = None,
        registry: Optional[RegistryClient] = None,
        clock: Callable[[], datetime] = system_clock,
        on_missing: str = "skip",
        show_progress: bool = True,
    ):
        """Initialize dependency age analyzer.

        Args:
            project_dir: Directory of the Maven project
            lister: Dependency lister (defaults to ``mvn dependency:list``)
            registry: Registry client (defaults to Maven Central search)
            clock: Callable returning the current time
            on_missing: What to do with dependencies unknown to the registry
                ("skip" or "abort")
            show_progress: Show a progress bar while looking up dates
        """
        if on_missing not in ON_MISSING_POLICIES:
            raise ValueError(f"Unsupported on_missing policy: {on_missing}")

        self.project_dir = Path(project_dir)
        self.lister = lister if lister is not None else MavenDependencyLister(self.project_dir)
        self.registry = registry if registry is not None else MavenCentralClient()
        self.clock = clock
        self.on_missing = on_missing
        self.show_progress = show_progress

    def collect_ages(
        self, records: List[DependencyRecord]
    ) -> Tuple[List[DependencyAge], List[DependencyRecord]]:
        """Look up every record and compute its age.

        Args:
            records: Dependencies to date

        Returns:
            Tuple of (dated dependency ages, records unknown to the registry)
        """
        ages = []
        missing = []

        for record in tqdm(
            records, desc="Looking up publication dates", disable=not self.show_progress
        ):
            result = self.registry.lookup(record)

            if result.status is LookupStatus.ERROR:
                logger.error("Lookup failed for %s: %s", record.coordinate, result.error)
                raise result.error

            if result.status is LookupStatus.NOT_FOUND:
                if self.on_missing == "abort":
                    raise ArtifactNotFoundError(record.group, record.artifact, record.version)
                logger.warning("Skipping %s: not found in registry", record.coordinate)
                missing.append(record)
                continue

            age = age_in_days(result.published_at, self.clock)
            logger.debug("%s published %s (%d days)", record.coordinate, result.published_at, age)
            ages.append(DependencyAge(record=record, published_at=result.published_at, age_days=age))

        return ages, missing

    def analyze(self) -> Dict[str, Any]:
        """Run complete analysis.

        Returns:
            Dictionary with analysis results
        """
        records = self.lister.list_dependencies()
        ages, missing = self.collect_ages(records)

        return {
            'project_dir': str(self.project_dir),
            'average_age_days': average_age_days(age.age_days for age in ages),
            'num_dependencies': len(records),
            'num_dated': len(ages),
            'num_missing': len(missing),
            'missing': [record.coordinate for record in missing],
            'dependency_data': ages_to_frame(ages),
        }

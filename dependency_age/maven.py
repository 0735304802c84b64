"""
Enumerate dependencies through Maven's dependency:list goal.
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from .interfaces import DependencyLister
from .models import DependencyRecord


logger = logging.getLogger(__name__)

# [INFO]    group:artifact:packaging:version:scope[ -- module name [auto]]
DEPENDENCY_LINE_PATTERN = re.compile(
    r"^\[INFO\]\s+"
    r"(?P<group>[^:\s]+):(?P<artifact>[^:\s]+):(?P<packaging>[^:\s]+):"
    r"(?P<version>[^:\s]+):(?P<scope>[^:\s]+)"
    r"(?:\s+--\s+module\s.*)?\s*$"
)


def parse_dependency_line(line: str) -> Optional[DependencyRecord]:
    """Parse one line of the dependency report, or None if it is not a dependency."""
    match = DEPENDENCY_LINE_PATTERN.match(line)
    if match is None:
        return None
    return DependencyRecord(
        group=match.group("group"),
        artifact=match.group("artifact"),
        version=match.group("version"),
        scope=match.group("scope"),
        packaging=match.group("packaging"),
    )


def parse_dependency_report(text: str) -> List[DependencyRecord]:
    """Parse every dependency line of a report, keeping order and duplicates."""
    records = []
    for line in text.splitlines():
        record = parse_dependency_line(line)
        if record is not None:
            records.append(record)
    return records


class MavenDependencyLister(DependencyLister):
    """Run ``mvn dependency:list`` and parse its output."""

    def __init__(
        self,
        project_dir: Path = Path("."),
        mvn_executable: str = "mvn",
        extra_args: Sequence[str] = (),
    ) -> None:
        self.project_dir = Path(project_dir)
        self.mvn_executable = mvn_executable
        self.extra_args = tuple(extra_args)

    @property
    def command(self) -> List[str]:
        return [self.mvn_executable, "-B", "dependency:list", *self.extra_args]

    def run_report(self) -> str:
        """Run the listing command and return its stdout ("" on failure)."""
        cmd = self.command
        logger.info("Running %s in %s", " ".join(cmd), self.project_dir)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=self.project_dir,
            )
        except OSError as e:
            logger.warning("Could not run %s: %s", self.mvn_executable, e)
            return ""

        if result.returncode != 0:
            logger.warning(
                "%s exited with status %s: %s",
                " ".join(cmd),
                result.returncode,
                result.stderr.strip() or result.stdout.strip()[-500:],
            )
            return ""
        return result.stdout

    def list_dependencies(self) -> List[DependencyRecord]:
        records = parse_dependency_report(self.run_report())
        if not records:
            logger.info("No dependencies found in %s", self.project_dir)
        else:
            logger.info("Found %d dependencies", len(records))
        return records

"""
Reporting and export utilities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

import pandas as pd

from .models import DependencyAge


logger = logging.getLogger(__name__)

DEPENDENCY_COLUMNS = [
    "group",
    "artifact",
    "version",
    "scope",
    "packaging",
    "published_at",
    "age_days",
]


def ages_to_frame(ages: Iterable[DependencyAge]) -> pd.DataFrame:
    rows = [
        {
            "group": age.record.group,
            "artifact": age.record.artifact,
            "version": age.record.version,
            "scope": age.record.scope,
            "packaging": age.record.packaging,
            "published_at": age.published_at,
            "age_days": age.age_days,
        }
        for age in ages
    ]
    return pd.DataFrame(rows, columns=DEPENDENCY_COLUMNS)


def format_dependency_table(df: pd.DataFrame) -> str:
    if df.empty:
        return "No dependencies."
    return df.to_string(index=False)


def format_average(value: float) -> str:
    return f"{value:.2f}"


def print_summary(results: Dict) -> None:
    logger.info("=" * 60)
    logger.info("DEPENDENCY AGE")
    logger.info("=" * 60)
    logger.info("Project: %s", results["project_dir"])
    logger.info("Dependencies listed: %s", results["num_dependencies"])
    logger.info("Dependencies dated: %s", results["num_dated"])
    if results["num_missing"]:
        logger.info("Not found in registry: %s", ", ".join(results["missing"]))
    average = results["average_age_days"]
    if average is not None:
        logger.info("Average age: %.2f days", average)
    logger.info("=" * 60)


def save_results_json(results: Dict, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / "dependency_age_results.json"
    summary = {key: value for key, value in results.items() if key != "dependency_data"}
    with open(results_file, 'w') as f:
        json.dump(summary, f, indent=2, default=str)
    return results_file


def export_dependency_csv(results: Dict, output_dir: Path) -> Optional[Path]:
    if 'dependency_data' not in results:
        return None
    output_dir.mkdir(parents=True, exist_ok=True)
    deps_file = output_dir / "dependency_age_dependencies.csv"
    df = results['dependency_data'].copy()
    if not df.empty:
        df["published_at"] = pd.to_datetime(df["published_at"], utc=True).dt.tz_localize(None)
    df.to_csv(deps_file, index=False)
    return deps_file

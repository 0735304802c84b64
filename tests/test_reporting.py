import json
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from dependency_age.models import DependencyAge
from dependency_age.reporting import (
    DEPENDENCY_COLUMNS,
    ages_to_frame,
    export_dependency_csv,
    format_average,
    format_dependency_table,
    save_results_json,
)

from conftest import make_record


def sample_results():
    ages = [
        DependencyAge(make_record("lib"), datetime(2024, 1, 1, tzinfo=timezone.utc), 30),
        DependencyAge(make_record("util", scope="test"), datetime(2023, 12, 22, tzinfo=timezone.utc), 40),
    ]
    return {
        "project_dir": "demo",
        "average_age_days": 35.0,
        "num_dependencies": 3,
        "num_dated": 2,
        "num_missing": 1,
        "missing": ["org.example:ghost:1.0.0"],
        "dependency_data": ages_to_frame(ages),
    }


def test_ages_to_frame_columns():
    df = sample_results()["dependency_data"]

    assert list(df.columns) == DEPENDENCY_COLUMNS
    assert list(df["artifact"]) == ["lib", "util"]
    assert list(df["scope"]) == ["compile", "test"]


def test_empty_frame_keeps_columns():
    df = ages_to_frame([])

    assert df.empty
    assert list(df.columns) == DEPENDENCY_COLUMNS
    assert format_dependency_table(df) == "No dependencies."


def test_format_dependency_table_lists_every_row():
    table = format_dependency_table(sample_results()["dependency_data"])

    assert "lib" in table
    assert "util" in table
    assert len(table.splitlines()) == 3


def test_format_average():
    assert format_average(20.0) == "20.00"
    assert format_average(1 / 3) == "0.33"


def test_reporting_exports(tmp_path: Path):
    output_dir = tmp_path / "out"
    results = sample_results()

    results_file = save_results_json(results, output_dir)
    deps_file = export_dependency_csv(results, output_dir)

    saved = json.loads(results_file.read_text())
    assert saved["average_age_days"] == 35.0
    assert "dependency_data" not in saved

    assert deps_file is not None and deps_file.exists()
    df = pd.read_csv(deps_file)
    assert list(df["age_days"]) == [30, 40]
    assert df["published_at"].iloc[0].startswith("2024-01-01")

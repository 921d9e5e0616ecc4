"""
Export Command - Write a standalone JSON snapshot of a report.

The snapshot holds everything a viewer needs without the original stats
file: the sorted assets, build problems and load notices.
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import click
from pydantic import BaseModel, ConfigDict, Field

from ...analysis.queries import get_config, list_assets
from ...config import DEFAULT_EXPORT_FILENAME
from ...core.exceptions import NormalizationError, StatsLoadError
from ..utils import echo_error, echo_success, open_stats


class ExportSnapshot(BaseModel):
    stats_file_path: str = Field(alias="statsFilePath")
    assets: List[Dict[str, Any]]
    warnings: List[Any] = Field(default_factory=list)
    errors: List[Any] = Field(default_factory=list)
    notices: List[str] = Field(default_factory=list)
    generation_time: str = Field(alias="generationTime")

    model_config = ConfigDict(populate_by_name=True)


def build_snapshot(stats_file: str) -> ExportSnapshot:
    stats = open_stats(stats_file)
    problems = get_config(stats.report)
    return ExportSnapshot(
        stats_file_path=str(stats.path),
        assets=[a.model_dump(mode="json", by_alias=True) for a in list_assets(stats.report)],
        warnings=problems["warnings"],
        errors=problems["errors"],
        notices=stats.notices,
        generation_time=datetime.now(timezone.utc).isoformat(),
    )


@click.command()
@click.argument("stats_file", type=click.Path())
@click.option("-o", "--output", default=DEFAULT_EXPORT_FILENAME, type=click.Path(),
              help="Output JSON file path")
def export(stats_file: str, output: str) -> None:
    """
    Generate a standalone JSON report from STATS_FILE.
    """
    output_path = Path(output).resolve()
    click.echo(f"Exporting analysis for: {stats_file}")

    try:
        snapshot = build_snapshot(stats_file)
    except (StatsLoadError, NormalizationError) as e:
        echo_error(f"Error during export: {e}")
        sys.exit(1)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(snapshot.model_dump(mode="json", by_alias=True), indent=2))
    except OSError as e:
        echo_error(f"Error during export: {e}")
        sys.exit(1)

    echo_success(f"Report successfully generated: {output_path}")

"""
Summary Command - Overview of a stats report.
"""

import sys
from typing import Any, List

import click
from pydantic import BaseModel, Field
from rich.console import Console

from ...analysis.queries import get_config, list_assets
from ...core.exceptions import ConfigError, NormalizationError, StatsLoadError
from ..formatting import assets_table, format_bytes
from ..renderers import JsonRenderer
from ..utils import _null_context, echo_error, echo_warning, open_stats, viewer_config


# --- API Models ---
class ApiAsset(BaseModel):
    name: str
    size: float | None = None


class SummaryResponse(BaseModel):
    stats_file: str
    shape: str
    asset_count: int
    chunk_count: int
    module_count: int
    total_size: float
    errors_count: int
    warnings_count: int
    top_assets: List[ApiAsset] = Field(default_factory=list)
    errors: List[Any] = Field(default_factory=list)
    warnings: List[Any] = Field(default_factory=list)
    notices: List[str] = Field(default_factory=list)


def _problem_text(problem: Any) -> str:
    if isinstance(problem, dict):
        return str(problem.get("message") or problem)
    return str(problem)


@click.command()
@click.argument("stats_file", type=click.Path())
@click.option("--top", type=click.IntRange(min=1), default=None, help="Number of largest assets to show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def summary(ctx: click.Context, stats_file: str, top: int | None, as_json: bool) -> None:
    """
    Summarize a stats file: sizes, counts and build problems.
    """
    renderer = JsonRenderer("summary")
    context_manager = renderer.capture() if as_json else _null_context()

    error_to_report = None
    response = None
    decimals = None

    with context_manager:
        try:
            config = viewer_config(ctx)
            decimals = config.decimals
            stats = open_stats(stats_file)
            report = stats.report
            problems = get_config(report)
            limit = config.top if top is None else top

            response = SummaryResponse(
                stats_file=str(stats.path),
                shape=stats.shape.value,
                asset_count=len(report.assets),
                chunk_count=len(report.chunks),
                module_count=len(stats.index),
                total_size=report.total_size,
                errors_count=report.errors_count,
                warnings_count=report.warnings_count,
                top_assets=[ApiAsset(name=a.name, size=a.size) for a in list_assets(report)[:limit]],
                errors=problems["errors"],
                warnings=problems["warnings"],
                notices=stats.notices,
            )
        except (StatsLoadError, NormalizationError, ConfigError) as e:
            error_to_report = e

    if error_to_report:
        if as_json:
            renderer.render_error(error_to_report)
        else:
            echo_error(str(error_to_report))
        sys.exit(1)

    if as_json:
        renderer.render_success(response)
        return

    click.echo()
    click.echo(f"📦 {click.style('Bundle Summary', bold=True)}")
    click.echo("═" * 60)
    click.echo(f"Stats:    {response.stats_file}")
    click.echo(f"Shape:    {response.shape}")
    click.echo(f"Assets:   {response.asset_count} ({format_bytes(response.total_size, decimals)})")
    click.echo(f"Chunks:   {response.chunk_count}")
    click.echo(f"Modules:  {response.module_count}")
    click.echo(f"Errors:   {response.errors_count}")
    click.echo(f"Warnings: {response.warnings_count}")

    for notice in response.notices:
        echo_warning(notice)

    if response.top_assets:
        click.echo()
        Console(highlight=False).print(
            assets_table(response.top_assets, decimals, title="Largest assets")
        )

    for label, problems in (("Error", response.errors), ("Warning", response.warnings)):
        for problem in problems[:5]:
            click.echo(click.style(f"{label}: ", fg="red" if label == "Error" else "yellow")
                       + (_problem_text(problem).splitlines() or [""])[0])

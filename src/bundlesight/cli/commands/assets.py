"""
Assets Command - List emitted assets with their share of the bundle.
"""

import sys

import click
from rich.console import Console

from ...analysis.filters import AssetBreakdown, breakdown, parse_exclude_patterns
from ...analysis.queries import list_assets
from ...core.exceptions import ConfigError, NormalizationError, StatsLoadError
from ..formatting import assets_table, format_bytes
from ..renderers import JsonRenderer
from ..utils import _null_context, echo_error, echo_info, open_stats, viewer_config


@click.command()
@click.argument("stats_file", type=click.Path())
@click.option("--min-size-kb", type=float, default=None,
              help="Hide assets smaller than this many KB")
@click.option("-x", "--exclude", "exclude", default=None,
              help="Comma separated substrings or /regex/ patterns to hide")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def assets(
    ctx: click.Context,
    stats_file: str,
    min_size_kb: float | None,
    exclude: str | None,
    as_json: bool,
) -> None:
    """
    List assets, largest first, with their percentage of the total.
    """
    renderer = JsonRenderer("assets")
    context_manager = renderer.capture() if as_json else _null_context()

    error_to_report = None
    response: AssetBreakdown | None = None
    decimals = None

    with context_manager:
        try:
            config = viewer_config(ctx)
            decimals = config.decimals
            min_kb = config.min_size_kb if min_size_kb is None else min_size_kb
            patterns = parse_exclude_patterns(config.exclude_string if exclude is None else exclude)

            stats = open_stats(stats_file)
            response = breakdown(list_assets(stats.report), min_kb * 1024, patterns)
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

    if not response.assets:
        click.echo(click.style("No assets match the current filters", fg="yellow"))
    else:
        Console(highlight=False).print(assets_table(response.assets, decimals))
    click.echo(f"Total: {format_bytes(response.total_size, decimals)} across {len(response.assets)} asset(s)")
    if response.hidden_count:
        echo_info(f"{response.hidden_count} asset(s) hidden by filters")

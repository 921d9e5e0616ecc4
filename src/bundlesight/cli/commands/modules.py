"""
Modules Command - Which modules make up an asset.
"""

import sys
from typing import Any, Dict, List

import click
from pydantic import BaseModel, Field

from ...analysis.queries import module_payload, resolve_asset_modules
from ...core.exceptions import ConfigError, NormalizationError, StatsLoadError
from ...core.types import size_for_ordering
from ..formatting import format_bytes, format_module_list
from ..renderers import JsonRenderer
from ..utils import _null_context, echo_error, echo_info, open_stats, viewer_config


# --- API Models ---
class AssetModulesResponse(BaseModel):
    asset: str
    found: bool
    count: int
    total_size: float
    modules: List[Dict[str, Any]] = Field(default_factory=list)


@click.command()
@click.argument("stats_file", type=click.Path())
@click.argument("asset")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def modules(ctx: click.Context, stats_file: str, asset: str, as_json: bool) -> None:
    """
    Show the modules bundled into ASSET, largest first.
    """
    renderer = JsonRenderer("modules")
    context_manager = renderer.capture() if as_json else _null_context()

    error_to_report = None
    response = None
    resolved = []
    decimals = None

    with context_manager:
        try:
            decimals = viewer_config(ctx).decimals
            stats = open_stats(stats_file)
            resolved = resolve_asset_modules(stats.report, stats.index, asset)
            response = AssetModulesResponse(
                asset=asset,
                found=stats.report.get_asset(asset) is not None,
                count=len(resolved),
                total_size=sum(size_for_ordering(m.size) for m in resolved),
                modules=[module_payload(m) for m in resolved],
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

    if not response.found:
        echo_error(f"Asset not found: {asset}")
        return

    click.echo(format_module_list(
        f"Modules in {asset}",
        resolved,
        decimals,
        empty_message="No module detail recorded for this asset",
    ))
    if resolved:
        echo_info(f"Combined module size: {format_bytes(response.total_size, decimals)}")

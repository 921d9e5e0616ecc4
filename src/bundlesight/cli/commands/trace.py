"""
Trace Command - Follow issuers from a module back to its entry point.

Answers "why is this module in my bundle?" by walking the chain of modules
that imported it.
"""

import sys
from typing import Any, Dict, List

import click
from pydantic import BaseModel, Field

from ...analysis.dependents import DependentsResolver
from ...analysis.queries import module_payload
from ...core.exceptions import ConfigError, ModuleNotFoundInReport, NormalizationError, StatsLoadError
from ...core.graph import IssuerGraph
from ...core.types import size_for_ordering
from ..formatting import format_bytes, format_chain
from ..renderers import JsonRenderer
from ..utils import _null_context, echo_error, echo_info, open_stats, viewer_config


# --- API Models ---
class TraceResponse(BaseModel):
    module_ref: str
    chain: List[Dict[str, Any]] = Field(default_factory=list)
    depth: int
    transitive_dependents: int
    transitive_size: float


@click.command()
@click.argument("stats_file", type=click.Path())
@click.argument("module_ref")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def trace(ctx: click.Context, stats_file: str, module_ref: str, as_json: bool) -> None:
    """
    Show the import chain that pulled MODULE_REF into the build.
    """
    renderer = JsonRenderer("trace")
    context_manager = renderer.capture() if as_json else _null_context()

    error_to_report = None
    response = None
    chain = []
    decimals = None

    with context_manager:
        try:
            decimals = viewer_config(ctx).decimals
            stats = open_stats(stats_file)
            target = DependentsResolver(stats.report, stats.index).find_target(module_ref)
            if target is None:
                raise ModuleNotFoundInReport(module_ref)

            graph = IssuerGraph.from_index(stats.index)
            chain = graph.issuer_chain(target)
            downstream = graph.transitive_dependents(target)

            response = TraceResponse(
                module_ref=module_ref,
                chain=[module_payload(m) for m in chain],
                depth=max(len(chain) - 1, 0),
                transitive_dependents=len(downstream),
                transitive_size=sum(size_for_ordering(m.size) for m in downstream),
            )
        except (StatsLoadError, NormalizationError, ConfigError, ModuleNotFoundInReport) as e:
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
    click.echo(f"🔗 {click.style('Import Chain', bold=True)}")
    click.echo("═" * 60)
    click.echo(format_chain(chain, decimals))
    click.echo()
    if response.depth == 0:
        echo_info("No issuer recorded: this is an entry module")
    else:
        echo_info(f"{response.depth} import(s) from the entry module")
    if response.transitive_dependents:
        echo_info(
            f"Pulls in {response.transitive_dependents} module(s) "
            f"({format_bytes(response.transitive_size, decimals)}) through its imports"
        )

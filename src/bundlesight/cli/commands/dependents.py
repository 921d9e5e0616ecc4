"""
Dependents Command - Modules pulled in by a given module.
"""

import sys
from typing import Any, Dict, List

import click
from pydantic import BaseModel, Field

from ...analysis.dependents import DependentsResolver
from ...analysis.queries import module_payload
from ...core.exceptions import ConfigError, NormalizationError, StatsLoadError
from ..formatting import format_module_list
from ..renderers import JsonRenderer
from ..utils import _null_context, echo_error, open_stats, viewer_config


# --- API Models ---
class DependentsResponse(BaseModel):
    module_ref: str
    target: Dict[str, Any] | None = None
    via: str | None = None
    count: int
    dependents: List[Dict[str, Any]] = Field(default_factory=list)


@click.command()
@click.argument("stats_file", type=click.Path())
@click.argument("module_ref")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def dependents(ctx: click.Context, stats_file: str, module_ref: str, as_json: bool) -> None:
    """
    Show the modules directly pulled in by MODULE_REF.

    MODULE_REF may be a module id, its full identifier, or its path-like name.
    """
    renderer = JsonRenderer("dependents")
    context_manager = renderer.capture() if as_json else _null_context()

    error_to_report = None
    response = None
    target = None
    found = []
    decimals = None

    with context_manager:
        try:
            decimals = viewer_config(ctx).decimals
            stats = open_stats(stats_file)
            resolver = DependentsResolver(stats.report, stats.index)
            target = resolver.find_target(module_ref)
            found = resolver.dependents_of(target) if target is not None else []

            via = None
            if target is not None:
                via = "concatenation" if target.is_concatenated else "issuer"

            response = DependentsResponse(
                module_ref=module_ref,
                target=module_payload(target) if target is not None else None,
                via=via,
                count=len(found),
                dependents=[module_payload(m) for m in found],
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

    if target is None:
        echo_error(f"Module not found: {module_ref}")
        return

    title = (
        f"Concatenated into {target.display_name}"
        if response.via == "concatenation"
        else f"Imported by {target.display_name}"
    )
    click.echo(format_module_list(title, found, decimals, empty_message="No dependents recorded"))

"""
bundlesight CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
import sys

import click

from ..config import load_config
from ..core.exceptions import ConfigError
from .commands import assets, dependents, export, modules, summary, trace
from .utils import echo_error


@click.group()
@click.version_option(package_name="bundlesight")
@click.option("-c", "--config", "config_path", type=click.Path(), default=None,
              help="Path to a bundlesight YAML config file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool):
    """bundlesight: Explain what is inside your bundle.

    Reads a bundler stats JSON file and answers why an asset is as large
    as it is and which module pulled a dependency in.

    \b
    Quick Start:
      bundlesight summary stats.json
      bundlesight modules stats.json main.js
      bundlesight dependents stats.json ./src/index.js
      bundlesight trace stats.json ./node_modules/lodash/lodash.js
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_config(config_path)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


# Register commands
main.add_command(summary.summary)
main.add_command(assets.assets)
main.add_command(modules.modules)
main.add_command(dependents.dependents)
main.add_command(trace.trace)
main.add_command(export.export)

if __name__ == "__main__":
    main()

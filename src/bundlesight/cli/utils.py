"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, stats loading and config lookup.
"""

from pathlib import Path

import click

from ..config import ViewerConfig, load_config
from ..core.loader import LoadedStats, load_stats


class _null_context:
    """Helper for non-capture mode."""
    def __enter__(self): pass
    def __exit__(self, *args): pass


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def open_stats(stats_file: str) -> LoadedStats:
    """
    Load, normalize and index a stats file.

    Raises:
        StatsLoadError: The file is missing or is not valid JSON.
        NormalizationError: The JSON is not a usable stats document.
    """
    result = load_stats(Path(stats_file))
    if result.is_err():
        raise result.unwrap_err()
    return result.unwrap()


def viewer_config(ctx: click.Context | None = None) -> ViewerConfig:
    """
    Config attached by the command group, or the one found in the cwd.

    Raises:
        ConfigError: A config file exists but is invalid.
    """
    if ctx is not None:
        config = ctx.find_object(ViewerConfig)
        if config is not None:
            return config
    return load_config()

"""
Text formatting for CLI output.

``format_bytes`` is the single place byte counts become human-readable.
"""

import math
from typing import Any, Iterable, List, Optional

import click
from rich.table import Table

from ..config import DEFAULT_DECIMALS
from ..core.types import Module, id_key

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def format_bytes(num_bytes: Any, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Convert a byte count to a human-readable string.

    >>> format_bytes(1536)
    '1.5 KB'
    """
    if isinstance(num_bytes, bool) or not isinstance(num_bytes, (int, float)):
        return "N/A"
    if not math.isfinite(num_bytes) or num_bytes < 0:
        return "N/A"
    if num_bytes == 0:
        return "0 Bytes"

    k = 1024
    places = max(decimals, 0)
    exponent = math.floor(math.log(num_bytes) / math.log(k))
    unit = max(0, min(exponent, len(SIZE_UNITS) - 1))

    text = f"{num_bytes / k ** unit:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[unit]}"


def module_label(module: Module) -> str:
    label = module.display_name
    if module.is_concatenated:
        label += f" (+{len(module.modules)} concatenated)"
    return label


def format_module_list(
    title: str,
    modules: List[Module],
    decimals: int = DEFAULT_DECIMALS,
    empty_message: str = "No modules found",
) -> str:
    """Render a heading followed by one size-aligned line per module."""
    lines = ["", click.style(title, bold=True), "═" * 60]
    if not modules:
        lines.append(click.style(empty_message, fg="yellow"))
        return "\n".join(lines)

    for module in modules:
        size = format_bytes(module.size, decimals)
        lines.append(f"  {size:>12}  {module_label(module)}")

    lines.append("")
    lines.append(f"{len(modules)} module(s)")
    return "\n".join(lines)


def format_chain(chain: List[Module], decimals: int = DEFAULT_DECIMALS) -> str:
    """Render an issuer chain, entry module first."""
    lines = []
    for depth, module in enumerate(chain):
        connector = "└─" if depth == len(chain) - 1 else "├─"
        indent = "   " * depth
        color = "green" if depth == 0 else ("cyan" if depth == len(chain) - 1 else "white")
        name = click.style(module.display_name, fg=color)
        lines.append(f"  {indent}{connector} {name} ({format_bytes(module.size, decimals)})")
    return "\n".join(lines)


def assets_table(rows: Iterable[Any], decimals: int = DEFAULT_DECIMALS, title: Optional[str] = None) -> Table:
    """Rich table for objects exposing ``name``, ``size`` and optionally ``percentage``."""
    table = Table(title=title, show_lines=False)
    table.add_column("Asset", overflow="fold")
    table.add_column("Size", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Chunks", justify="right")

    for row in rows:
        percentage = getattr(row, "percentage", None)
        share = f"{percentage:.1f}%" if percentage is not None else "-"
        chunks = ", ".join(id_key(c) or "" for c in getattr(row, "chunks", []))
        table.add_row(row.name, format_bytes(row.size, decimals), share, chunks or "-")
    return table

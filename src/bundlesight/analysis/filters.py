"""
Asset filtering and size shares.

Mirrors what the report viewer does client-side: hide assets under a
minimum size or matching exclusion patterns, then express each remaining
asset as a share of the total.
"""

import logging
import re
from typing import List, Sequence, Union

from pydantic import BaseModel, Field

from ..core.types import Asset, size_for_ordering

logger = logging.getLogger(__name__)

ExcludePattern = Union[str, re.Pattern]


class AssetShare(BaseModel):
    """An asset with its percentage of the filtered total."""
    name: str
    size: float
    percentage: float
    chunks: List[Union[int, str]] = Field(default_factory=list)


class AssetBreakdown(BaseModel):
    assets: List[AssetShare]
    total_size: float
    hidden_count: int = 0


def parse_exclude_patterns(patterns: str | None) -> List[ExcludePattern]:
    """
    Parse a comma separated list of exclusions.

    Entries wrapped in slashes (``/\\.map$/``) are regular expressions;
    everything else is a plain substring. Invalid regexes are dropped.
    """
    if not patterns:
        return []

    parsed: List[ExcludePattern] = []
    for raw in patterns.split(","):
        entry = raw.strip()
        if not entry:
            continue
        if entry.startswith("/") and entry.endswith("/"):
            try:
                parsed.append(re.compile(entry[1:-1]))
            except re.error as e:
                logger.warning(f"Invalid regex pattern ignored: {entry} ({e})")
            continue
        parsed.append(entry)
    return parsed


def is_excluded(name: str, patterns: Sequence[ExcludePattern]) -> bool:
    for pattern in patterns:
        if isinstance(pattern, str):
            if pattern in name:
                return True
        elif pattern.search(name):
            return True
    return False


def filter_assets(
    assets: Sequence[Asset],
    min_size_bytes: float = 0,
    patterns: Sequence[ExcludePattern] = (),
) -> List[Asset]:
    """Assets at least ``min_size_bytes`` large that match no exclusion."""
    return [
        asset for asset in assets
        if size_for_ordering(asset.size) >= min_size_bytes
        and not is_excluded(asset.name, patterns)
    ]


def with_percentages(assets: Sequence[Asset]) -> AssetBreakdown:
    """Attach each asset's share of the combined size (one decimal, 0-100)."""
    total = sum(size_for_ordering(asset.size) for asset in assets)
    shares = []
    for asset in assets:
        size = size_for_ordering(asset.size)
        percentage = 0.0
        if total > 0 and size > 0:
            percentage = max(0.0, min(100.0, size / total * 100))
        shares.append(AssetShare(
            name=asset.name,
            size=size,
            percentage=round(percentage, 1),
            chunks=list(asset.chunks),
        ))
    return AssetBreakdown(assets=shares, total_size=total)


def breakdown(
    assets: Sequence[Asset],
    min_size_bytes: float = 0,
    patterns: Sequence[ExcludePattern] = (),
) -> AssetBreakdown:
    """Filter, then compute shares of what is left."""
    visible = filter_assets(assets, min_size_bytes, patterns)
    result = with_percentages(visible)
    return result.model_copy(update={"hidden_count": len(assets) - len(visible)})

"""
Stats file loading.

Reads a stats JSON file from disk, normalizes it and builds the Module
Index. Reading happens once per process; everything downstream works on
the immutable Report.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from .exceptions import NormalizationError, StatsLoadError
from .index import ModuleIndex
from .normalizer import ReportShape, normalize_stats
from .result import Err, Ok, Result
from .types import Report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedStats:
    """A normalized report together with its index and origin."""
    path: Path
    report: Report
    index: ModuleIndex
    shape: ReportShape
    notices: List[str] = field(default_factory=list)


def read_stats_file(path: Path) -> Result[Any, StatsLoadError]:
    """Read and parse a stats JSON file without interpreting it."""
    if not path.exists():
        return Err(StatsLoadError(str(path), "Stats file not found"))
    if not path.is_file():
        return Err(StatsLoadError(str(path), "Stats path is not a file"))

    logger.info(f"Reading stats file: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return Ok(json.load(f))
    except json.JSONDecodeError as e:
        return Err(StatsLoadError(str(path), f"Error parsing JSON: {e}"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(StatsLoadError(str(path), f"Could not read file: {e}"))


def load_stats(path: Path | str) -> Result[LoadedStats, StatsLoadError | NormalizationError]:
    """
    Load, normalize and index a stats file.

    Returns:
        Ok(LoadedStats), or Err with either a StatsLoadError (I/O, JSON)
        or a NormalizationError (unusable document).
    """
    stats_path = Path(path).resolve()

    raw = read_stats_file(stats_path)
    if raw.is_err():
        return raw

    normalized = normalize_stats(raw.unwrap())
    if normalized.is_err():
        return normalized

    stats = normalized.unwrap()
    return Ok(LoadedStats(
        path=stats_path,
        report=stats.report,
        index=ModuleIndex(stats.report),
        shape=stats.shape,
        notices=stats.notices,
    ))

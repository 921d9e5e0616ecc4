"""
Stats Normalizer.

Bundler stats come in several shapes depending on the tool version and the
flags used to produce them. This module detects the shape of a parsed JSON
document and builds one canonical ``Report`` from it.

Detection is an ordered list of shape detectors. Each detector either
declines (returns ``None``) or claims the document, producing the selected
sub-document or a typed failure. The first detector that claims wins:

    1. single build with module detail   (non-empty ``modules``)
    2. multi-build                       (non-empty ``children``)
    3. single build without module detail (``assets`` only)

The raw input is never mutated; the Report is a new immutable value.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from .exceptions import NormalizationError, NormalizationErrorKind
from .result import Err, Ok, Result
from .types import Report, size_for_ordering

logger = logging.getLogger(__name__)


class ReportShape(StrEnum):
    """Which detector selected the report document."""
    SINGLE_BUILD = "single_build"
    MULTI_BUILD_CHILD = "multi_build_child"
    MULTI_BUILD_TOP_LEVEL = "multi_build_top_level"
    ASSETS_ONLY = "assets_only"


@dataclass(frozen=True)
class ShapeMatch:
    shape: ReportShape
    document: Dict[str, Any]
    notices: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class NormalizedStats:
    """
    A normalized Report plus how it was found.

    Attributes:
        report: The canonical Report.
        shape: The detected document shape.
        notices: Non-fatal observations made during detection.
    """
    report: Report
    shape: ReportShape
    notices: List[str] = field(default_factory=list)


ShapeDetector = Callable[[Dict[str, Any]], Optional[Result[ShapeMatch, NormalizationError]]]


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def _has_assets(document: Any) -> bool:
    return isinstance(document, dict) and isinstance(document.get("assets"), list)


def detect_single_build(document: Dict[str, Any]) -> Optional[Result[ShapeMatch, NormalizationError]]:
    if not _non_empty_list(document.get("modules")):
        return None
    if not _has_assets(document):
        return Err(NormalizationError(
            NormalizationErrorKind.MISSING_ASSETS_ARRAY,
            "Stats document has module detail but no 'assets' array",
        ))
    return Ok(ShapeMatch(ReportShape.SINGLE_BUILD, document))


def detect_multi_build(document: Dict[str, Any]) -> Optional[Result[ShapeMatch, NormalizationError]]:
    children = document.get("children")
    if not _non_empty_list(children):
        return None

    for position, child in enumerate(children):
        if _has_assets(child):
            logger.debug(f"Using child build #{position} of {len(children)}")
            return Ok(ShapeMatch(ReportShape.MULTI_BUILD_CHILD, child))

    if _has_assets(document):
        notice = (
            "No child build has an 'assets' array; using top-level assets "
            "(module detail will be unavailable)"
        )
        logger.warning(notice)
        return Ok(ShapeMatch(ReportShape.MULTI_BUILD_TOP_LEVEL, document, [notice]))

    return Err(NormalizationError(
        NormalizationErrorKind.MISSING_ASSETS_ARRAY,
        f"None of the {len(children)} child builds, nor the top level, has an 'assets' array",
    ))


def detect_assets_only(document: Dict[str, Any]) -> Optional[Result[ShapeMatch, NormalizationError]]:
    if not _has_assets(document):
        return None
    return Ok(ShapeMatch(ReportShape.ASSETS_ONLY, document))


# Priority order: first detector to claim the document wins.
SHAPE_DETECTORS: List[ShapeDetector] = [
    detect_single_build,
    detect_multi_build,
    detect_assets_only,
]


def detect_shape(raw: Any) -> Result[ShapeMatch, NormalizationError]:
    """Run the shape detectors in priority order against a parsed document."""
    if not isinstance(raw, dict):
        return Err(NormalizationError(
            NormalizationErrorKind.NOT_AN_OBJECT,
            f"Expected a JSON object, got {type(raw).__name__}",
        ))

    for detector in SHAPE_DETECTORS:
        outcome = detector(raw)
        if outcome is not None:
            return outcome

    return Err(NormalizationError(
        NormalizationErrorKind.UNRECOGNIZED_SHAPE,
        "Document has none of 'modules', 'children' or 'assets'",
    ))


def _count(value: Any, fallback: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    if isinstance(value, float):
        if not math.isfinite(value):
            return fallback
        return int(value)
    return value


def _canonical_payload(document: Dict[str, Any]) -> Dict[str, Any]:
    """Build a fresh dict with every guaranteed field present."""
    payload = dict(document)

    errors = document.get("errors")
    warnings = document.get("warnings")
    payload["errors"] = list(errors) if isinstance(errors, list) else []
    payload["warnings"] = list(warnings) if isinstance(warnings, list) else []
    payload["errorsCount"] = _count(document.get("errorsCount"), len(payload["errors"]))
    payload["warningsCount"] = _count(document.get("warningsCount"), len(payload["warnings"]))

    for key in ("modules", "chunks"):
        value = document.get(key)
        payload[key] = list(value) if isinstance(value, list) else []

    # sorted() is stable, so equal sizes keep their document order.
    payload["assets"] = sorted(
        document["assets"],
        key=lambda asset: size_for_ordering(asset.get("size")) if isinstance(asset, dict) else 0,
        reverse=True,
    )
    return payload


def normalize_stats(raw: Any) -> Result[NormalizedStats, NormalizationError]:
    """
    Detect the shape of a parsed stats document and build its Report.

    Args:
        raw: Any parsed JSON value.

    Returns:
        Ok(NormalizedStats) on success, Err(NormalizationError) otherwise.
    """
    detected = detect_shape(raw)
    if detected.is_err():
        error = detected.unwrap_err()
        logger.debug(f"Shape detection failed: {error}")
        return detected

    match = detected.unwrap()
    try:
        report = Report.model_validate(_canonical_payload(match.document))
    except ValidationError as e:
        return Err(NormalizationError(
            NormalizationErrorKind.MALFORMED_ENTRY,
            f"Stats document has malformed entries: {e.error_count()} validation error(s); "
            f"first: {e.errors()[0]['loc']} {e.errors()[0]['msg']}",
        ))

    logger.debug(
        f"Normalized {match.shape.value} report: {len(report.assets)} assets, "
        f"{len(report.chunks)} chunks, {len(report.modules)} modules"
    )
    return Ok(NormalizedStats(report=report, shape=match.shape, notices=list(match.notices)))


def normalize(raw: Any) -> Result[Report, NormalizationError]:
    """Normalize a parsed stats document into a Report."""
    return normalize_stats(raw).map(lambda stats: stats.report)

"""Core data model, normalization and indexing for build stats reports."""

from .exceptions import NormalizationError, NormalizationErrorKind, PreconditionViolation
from .index import ModuleIndex
from .normalizer import NormalizedStats, normalize, normalize_stats
from .types import Asset, Chunk, Module, Report

__all__ = [
    "Asset",
    "Chunk",
    "Module",
    "ModuleIndex",
    "NormalizationError",
    "NormalizationErrorKind",
    "NormalizedStats",
    "PreconditionViolation",
    "Report",
    "normalize",
    "normalize_stats",
]

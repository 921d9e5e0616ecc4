"""
Core type definitions for bundlesight.

The models mirror the subset of a bundler stats document that the analysis
relies on. Unknown keys are preserved (``extra="allow"``) so a Report dumps
back to a document that normalizes to the same Report.
"""

import math
from typing import Annotated, Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

# Chunk and module ids are integers in most builds and strings in others.
ModuleId = Union[int, str]

# Errors and warnings are plain strings in older stats and objects in newer
# ones; entries are kept as given.
Problem = Any


def id_key(value: Any) -> Optional[str]:
    """
    Canonical string form of a chunk or module id.

    ``1``, ``1.0`` and ``"1"`` all map to ``"1"``; ``None`` maps to ``None``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def size_for_ordering(size: Any) -> float:
    """Size used for sorting: missing, non-numeric or non-finite sizes count as 0."""
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        return 0
    if not math.isfinite(size):
        return 0
    return size


def _lenient_size(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _list_or_empty(value: Any) -> Any:
    return value if isinstance(value, list) else []


Size = Annotated[Optional[Union[int, float]], BeforeValidator(_lenient_size)]
IdList = Annotated[List[ModuleId], BeforeValidator(_list_or_empty)]
# Fields carried through untouched: only the container is checked.
LooseList = Annotated[List[Any], BeforeValidator(_list_or_empty)]


class _StatsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )


class Module(_StatsModel):
    """
    A source compilation unit.

    ``identifier`` is the stable cross-reference key; ``id`` is only unique
    within one report. A non-empty ``modules`` list marks a concatenated
    module whose sources were merged into this one.
    """
    id: Optional[ModuleId] = None
    identifier: Optional[str] = None
    name: Optional[str] = None
    size: Size = None
    chunks: IdList = Field(default_factory=list)
    issuer: Optional[str] = None
    issuer_id: Optional[ModuleId] = Field(default=None, alias="issuerId")
    issuer_name: Optional[str] = Field(default=None, alias="issuerName")
    modules: Optional[List["Module"]] = None

    @field_validator("modules", mode="before")
    @classmethod
    def _nested_modules(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return None
        # Some stats list concatenated sources by identifier only.
        return [
            {"identifier": item, "name": item} if isinstance(item, str) else item
            for item in value
        ]

    @property
    def is_concatenated(self) -> bool:
        return bool(self.modules)

    @property
    def display_name(self) -> str:
        return self.name or self.identifier or (id_key(self.id) or "<anonymous>")


class Asset(_StatsModel):
    """A build output file."""
    name: str
    size: Size = None
    chunks: IdList = Field(default_factory=list)
    chunk_names: LooseList = Field(default_factory=list, alias="chunkNames")


class Chunk(_StatsModel):
    """An intermediate bundling unit that emits one or more assets."""
    id: Optional[ModuleId] = None
    size: Size = None
    files: LooseList = Field(default_factory=list)
    names: LooseList = Field(default_factory=list)
    modules: Optional[List[Module]] = None

    @field_validator("modules", mode="before")
    @classmethod
    def _inline_modules(cls, value: Any) -> Any:
        return value if isinstance(value, list) else None


class Report(_StatsModel):
    """
    Canonical view of one build's stats.

    Assets are ordered by size, largest first. Collections are always lists.
    """
    assets: List[Asset]
    modules: List[Module] = Field(default_factory=list)
    chunks: List[Chunk] = Field(default_factory=list)
    errors: List[Problem] = Field(default_factory=list)
    warnings: List[Problem] = Field(default_factory=list)
    errors_count: int = Field(default=0, alias="errorsCount")
    warnings_count: int = Field(default=0, alias="warningsCount")

    def get_asset(self, name: str) -> Optional[Asset]:
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None

    @property
    def total_size(self) -> float:
        return sum(size_for_ordering(asset.size) for asset in self.assets)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready document using the stats field names."""
        return self.model_dump(mode="json", by_alias=True)


Module.model_rebuild()


def sorted_by_size(items: Iterable[Any]) -> List[Any]:
    """Largest first; ties keep their input order."""
    return sorted(items, key=lambda item: size_for_ordering(item.size), reverse=True)

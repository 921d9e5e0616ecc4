"""
Asset to Module resolution.

Finds the modules that make up an emitted asset, using chunk membership as
the bridge. Stats documents express the same membership in two ways:

- modules inlined under each chunk (``chunks[*].modules``), or
- a flat ``modules`` list where each module names its ``chunks``.

The inlined form is preferred; the flat list is only scanned when the
asset's chunks carry no inlined modules.
"""

import logging
from typing import Dict, Iterable, List, Set

from ..core.index import ModuleIndex, module_key, require_lists
from ..core.types import Module, Report, id_key, sorted_by_size

logger = logging.getLogger(__name__)


class AssetModuleResolver:
    """
    Resolves which modules back a given asset.
    """

    def __init__(self, report: Report, index: ModuleIndex):
        self.report = report
        self.index = index

    def resolve(self, asset_name: str) -> List[Module]:
        """
        Modules contributing to ``asset_name``, largest first.

        An unknown asset, or one with no resolvable modules, yields [].
        """
        require_lists(self.report, "assets", "chunks", "modules")

        asset = self.report.get_asset(asset_name)
        if asset is None:
            logger.debug(f"Asset not in report: {asset_name}")
            return []
        if not self.report.chunks:
            return []

        chunk_keys: Set[str] = {k for k in (id_key(c) for c in asset.chunks) if k is not None}
        found: Dict[str, Module] = {}

        for chunk in self.report.chunks:
            if id_key(chunk.id) in chunk_keys and chunk.modules:
                self._collect(found, chunk.modules)

        if not found:
            members = [
                module for module in self.report.modules
                if any(id_key(c) in chunk_keys for c in module.chunks)
            ]
            if members:
                logger.debug(f"Resolved {asset_name} through the flat module list")
            self._collect(found, members)

        return sorted_by_size(found.values())

    def _collect(self, found: Dict[str, Module], modules: Iterable[Module]) -> None:
        for module in modules:
            canonical = self.index.canonical(module)
            key = module_key(canonical) or f"object:{id(canonical)}"
            found.setdefault(key, canonical)

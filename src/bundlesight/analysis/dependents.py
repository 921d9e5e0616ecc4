"""
Module to Dependents resolution.

Given a module reference typed by a user (an id, an identifier, or a
path-like name), find the modules it directly pulled into the build.

Two signal sources, never combined:

- Concatenation: a module whose ``modules`` list is non-empty merged those
  sources; they are its dependents.
- Issuer back-references: otherwise, every module whose ``issuerId``
  matches the target's id, or whose ``issuer`` matches its identifier.
"""

import logging
from typing import List, Optional

from ..core.index import ModuleIndex, require_lists
from ..core.types import Module, Report, id_key, sorted_by_size

logger = logging.getLogger(__name__)

PATH_SEPARATORS = ("/", "\\")


class DependentsResolver:
    """
    Resolves the direct dependents of a module.
    """

    def __init__(self, report: Report, index: ModuleIndex):
        self.report = report
        self.index = index

    def find_target(self, module_ref: str) -> Optional[Module]:
        """
        Resolve a user-supplied reference to a module.

        Tries id, then identifier, then (for path-like refs only) exact name.
        """
        module = self.index.by_id(module_ref)
        if module is not None:
            return module

        module = self.index.by_identifier(module_ref)
        if module is not None:
            return module

        if any(sep in module_ref for sep in PATH_SEPARATORS):
            return self.index.by_name(module_ref)

        return None

    def resolve(self, module_ref: str) -> List[Module]:
        """
        Direct dependents of ``module_ref``, largest first.

        An unresolvable reference yields [].
        """
        require_lists(self.report, "modules", "chunks")

        target = self.find_target(module_ref)
        if target is None:
            logger.debug(f"No module matches reference: {module_ref}")
            return []

        return self.dependents_of(target)

    def dependents_of(self, target: Module) -> List[Module]:
        """Direct dependents of an already-resolved module."""
        if target.modules:
            return sorted_by_size(self.index.canonical(m) for m in target.modules)

        target_id = id_key(target.id)
        dependents: List[Module] = []
        for candidate in self.index:
            issuer_id = id_key(candidate.issuer_id)
            if target_id is not None and issuer_id is not None and issuer_id == target_id:
                dependents.append(candidate)
            elif target.identifier and candidate.issuer == target.identifier:
                dependents.append(candidate)

        return sorted_by_size(dependents)

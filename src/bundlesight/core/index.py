"""
Module Index.

O(1) lookup of modules by id or identifier, built once per Report.

Modules are interned by key (identifier, else id) so every resolver hands
out the same canonical instance for a logical module, and deduplication is
a dict-key property rather than object identity.
"""

import logging
from typing import Dict, Iterator, List, Optional

from .exceptions import PreconditionViolation
from .types import Module, ModuleId, Report, id_key

logger = logging.getLogger(__name__)


def module_key(module: Module) -> Optional[str]:
    """
    Stable key for a module.

    The identifier is preferred; modules without one fall back to their id.
    """
    if module.identifier:
        return module.identifier
    key = id_key(module.id)
    if key is not None:
        return f"id:{key}"
    return None


def require_lists(report: Report, *field_names: str) -> None:
    """Raise PreconditionViolation if any named Report collection is not a list."""
    for field_name in field_names:
        value = getattr(report, field_name, None)
        if not isinstance(value, list):
            raise PreconditionViolation(field_name, value)


class ModuleIndex:
    """
    Read-only lookup tables over a Report's modules.

    Sources, in order (first insertion of a key wins):
    - ``report.modules``
    - the modules inlined in ``report.chunks[*].modules``
    """

    def __init__(self, report: Report):
        require_lists(report, "modules", "chunks")

        self._by_id: Dict[str, Module] = {}
        self._by_identifier: Dict[str, Module] = {}
        self._by_key: Dict[str, Module] = {}
        self._modules: List[Module] = []

        for module in report.modules:
            self._add(module)

        for chunk in report.chunks:
            for module in chunk.modules or []:
                self._add(module)

        logger.debug(
            f"Indexed {len(self._modules)} modules "
            f"({len(self._by_id)} by id, {len(self._by_identifier)} by identifier)"
        )

    def _add(self, module: Module) -> None:
        key = module_key(module)
        if key is not None:
            if key in self._by_key:
                return
            self._by_key[key] = module
        elif any(existing is module for existing in self._modules):
            return

        self._modules.append(module)

        id_str = id_key(module.id)
        if id_str is not None and id_str not in self._by_id:
            self._by_id[id_str] = module

        if module.identifier and module.identifier not in self._by_identifier:
            self._by_identifier[module.identifier] = module

    def by_id(self, module_id: ModuleId | None) -> Optional[Module]:
        """Look up a module by id; ``5`` and ``"5"`` are the same key."""
        key = id_key(module_id)
        if key is None:
            return None
        return self._by_id.get(key)

    def by_identifier(self, identifier: str | None) -> Optional[Module]:
        """Look up a module by exact identifier."""
        if not identifier:
            return None
        return self._by_identifier.get(identifier)

    def by_name(self, name: str) -> Optional[Module]:
        """Linear scan for a module whose name equals ``name`` exactly."""
        for module in self._modules:
            if module.name == name:
                return module
        return None

    def canonical(self, module: Module) -> Module:
        """Return the interned instance for ``module``'s key, or ``module`` itself."""
        key = module_key(module)
        if key is None:
            return module
        return self._by_key.get(key, module)

    @property
    def modules(self) -> List[Module]:
        """Canonical modules: report order first, then chunk order."""
        return list(self._modules)

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    @property
    def is_empty(self) -> bool:
        return not self._modules

"""
Issuer Graph backed by rustworkx.

Connects every indexed module to the module that imported it (its issuer),
so the chain that pulled a costly module into a bundle can be walked back
to an entry point.

It manages:
- The bimap between module keys and rustworkx integer indices.
- Issuer resolution (by ``issuerId``, then by ``issuer`` identifier).
- Chain and descendant queries.
"""

import logging
from typing import Dict, List, Optional

import rustworkx as rx

from .index import ModuleIndex, module_key
from .types import Module

logger = logging.getLogger(__name__)


class IssuerGraph:
    """
    Directed graph with one edge ``issuer -> module`` per resolvable issuer.

    Features:
    - O(1) module-to-node lookup
    - Cycle-safe issuer chains
    - Transitive dependents via rustworkx traversal
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=False)
        self._key_to_idx: Dict[str, int] = {}
        self._unkeyed: Dict[int, int] = {}

    @classmethod
    def from_index(cls, index: ModuleIndex) -> "IssuerGraph":
        """Build the graph from every canonical module in an index."""
        graph = cls()
        for module in index:
            graph._add_module(module)

        unresolved = 0
        for module in index:
            issuer = cls._resolve_issuer(index, module)
            if issuer is None:
                if module.issuer_id is not None or module.issuer:
                    unresolved += 1
                continue
            graph._graph.add_edge(graph._node_for(issuer), graph._node_for(module), None)

        if unresolved:
            logger.debug(f"{unresolved} modules reference an issuer missing from the report")
        return graph

    @staticmethod
    def _resolve_issuer(index: ModuleIndex, module: Module) -> Optional[Module]:
        issuer = index.by_id(module.issuer_id)
        if issuer is None:
            issuer = index.by_identifier(module.issuer)
        if issuer is module:
            return None
        return issuer

    def _add_module(self, module: Module) -> int:
        key = module_key(module)
        if key is None:
            idx = self._graph.add_node(module)
            self._unkeyed[id(module)] = idx
            return idx
        if key not in self._key_to_idx:
            self._key_to_idx[key] = self._graph.add_node(module)
        return self._key_to_idx[key]

    def _node_for(self, module: Module) -> int:
        key = module_key(module)
        if key is None:
            return self._unkeyed[id(module)]
        return self._key_to_idx[key]

    def _lookup(self, module: Module) -> Optional[int]:
        key = module_key(module)
        if key is None:
            return self._unkeyed.get(id(module))
        return self._key_to_idx.get(key)

    def issuer_chain(self, module: Module) -> List[Module]:
        """
        Walk issuers back from ``module``.

        Returns the chain ordered from the entry module down to ``module``.
        A module missing from the graph yields an empty chain.
        """
        idx = self._lookup(module)
        if idx is None:
            return []

        chain = [idx]
        seen = {idx}
        while True:
            predecessors = self._graph.predecessor_indices(chain[-1])
            if not predecessors or predecessors[0] in seen:
                break
            chain.append(predecessors[0])
            seen.add(predecessors[0])

        return [self._graph[i] for i in reversed(chain)]

    def transitive_dependents(self, module: Module) -> List[Module]:
        """Every module reachable by following issuer edges from ``module``."""
        idx = self._lookup(module)
        if idx is None:
            return []
        return [self._graph[i] for i in sorted(rx.descendants(self._graph, idx))]

    def entry_modules(self) -> List[Module]:
        """Modules with no resolvable issuer."""
        return [
            self._graph[i]
            for i in self._graph.node_indices()
            if self._graph.in_degree(i) == 0
        ]

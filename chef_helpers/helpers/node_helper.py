from __future__ import annotations

from typing import Any, List, Optional, Union

from .addressing import AddressSelector
from .allies import AllyResolver
from .jsonpath_access import AttributePathAccessor
from ..directory.base import NodeDirectory
from ..models.node import Node


class NodeHelper:
    """
    Wraps a Node with cross-node query behavior.

    The wrapped node is never mutated. The resolved ally list is cached
    on the wrapper for its whole lifetime; it is not safe to share one
    wrapper between threads without external locking.
    """

    def __init__(
        self,
        node: Node,
        directory: NodeDirectory,
        resolver: Optional[AllyResolver] = None,
        selector: Optional[AddressSelector] = None,
        accessor: Optional[AttributePathAccessor] = None,
    ) -> None:
        if not isinstance(node, Node):
            raise TypeError("NodeHelper requires a Node instance.")

        if not isinstance(directory, NodeDirectory):
            raise TypeError("Directory must implement NodeDirectory.")

        self.node = node
        self.directory = directory
        self._resolver = resolver or AllyResolver()
        self._selector = selector or AddressSelector()
        self._accessor = accessor or AttributePathAccessor()
        self._allies: Optional[List[Node]] = None

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def chef_environment(self) -> Optional[str]:
        return self.node.chef_environment

    # ------------------------------------------------------------------
    # Allies
    # ------------------------------------------------------------------

    @property
    def allies(self) -> List[Node]:
        return self.resolve_allies()

    def resolve_allies(self) -> List[Node]:
        if self._allies is None:
            self._allies = self._resolver.resolve_allies(self.node, self.directory)
        return self._allies

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def ip_for(self, other: Union[Node, "NodeHelper"]) -> Optional[str]:
        """IP this node should use to contact ``other``."""
        other_node = other.node if isinstance(other, NodeHelper) else other
        return self._selector.select_address(self.node, other_node)

    # ------------------------------------------------------------------
    # Attribute Access
    # ------------------------------------------------------------------

    def get(self, key: Any) -> Any:
        return self._accessor.get(self.node, key)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __repr__(self) -> str:
        return f"NodeHelper({self.node!r})"

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from ..models.node import Node

logger = logging.getLogger(__name__)


class DirectorySearchError(Exception):
    """Raised when a directory backend cannot answer a search."""
    pass


class NodeDirectory(ABC):
    """
    Abstract search capability over the fleet of managed nodes.

    This is the boundary between node helpers and whatever actually
    indexes nodes (a Chef server, a fixture list, ...).

    Directories must:
        • Return matching nodes as a plain list, in backend order
        • Raise DirectorySearchError (or let transport errors surface)
          when the backend fails
        • Never mutate returned nodes after handing them out
    """

    @abstractmethod
    def search(self, query: str) -> List[Node]:
        """
        Run a ``field:value`` search query.

        Parameters
        ----------
        query : str
            Search-index query, treated as an opaque string.

        Returns
        -------
        List[Node]
            All matching nodes. Pagination, if any, is handled inside
            the directory.
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Optional Lifecycle Hooks
    # ------------------------------------------------------------------

    def health(self) -> bool:
        """Default implementation assumes healthy."""
        return True

    def shutdown(self) -> None:
        """Release connections or sessions, if any."""
        pass


class StaticDirectory(NodeDirectory):
    """
    In-memory directory for tests and offline runs.

    Understands single-term queries only:
        name:web01
        chef_environment:prod
        roles:db            (any attribute path, dotted for nesting)
        name:web*           (trailing '*' is a prefix match)
        *:*                 (everything)

    List-valued attributes match when any element matches.
    """

    def __init__(self, nodes: Optional[Iterable[Node]] = None) -> None:
        self._nodes: List[Node] = list(nodes or [])
        self.queries: List[str] = []

    def search(self, query: str) -> List[Node]:
        self.queries.append(query)
        logger.debug("[DIRECTORY] static search: %s", query)

        if query.strip() == "*:*":
            return list(self._nodes)

        field_name, sep, value = query.partition(":")
        field_name = field_name.strip()
        value = value.strip()

        if not sep or not field_name or not value or " " in value:
            raise DirectorySearchError(
                f"Unsupported query for static directory: '{query}'"
            )

        matches = [
            node for node in self._nodes
            if self._matches(self._field_value(node, field_name), value)
        ]

        logger.debug("[DIRECTORY] %s -> %d match(es)", query, len(matches))
        return matches

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    @staticmethod
    def _field_value(node: Node, field_name: str) -> Any:
        if field_name == "name":
            return node.name
        if field_name == "chef_environment":
            return node.chef_environment
        return node.get(field_name)

    @classmethod
    def _matches(cls, actual: Any, expected: str) -> bool:
        if actual is None:
            return False

        if isinstance(actual, (list, tuple)):
            return any(cls._matches(item, expected) for item in actual)

        actual = str(actual)
        if expected.endswith("*"):
            return actual.startswith(expected[:-1])
        return actual == expected

    def __len__(self) -> int:
        return len(self._nodes)

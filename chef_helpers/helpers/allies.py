import logging
from typing import List

from ..directory.base import NodeDirectory
from ..models.node import DEFAULT_ENVIRONMENT, Node

logger = logging.getLogger(__name__)


class AllyResolver:
    """
    Resolves a node's "allies".

    Allies are all nodes in the same environment (unless the environment
    is the default one), plus nodes named or matched by the node's
    ``allies`` attribute. Each ``allies`` entry is either a node name or
    a raw search query (anything containing ``:``).

    Mostly useful for firewall and other access rules: limit access to
    the insides of a cluster plus a handful of friendly machines.

    The resolver is stateless; caching belongs to the caller.
    Results are not de-duplicated.
    """

    def __init__(self, default_environment: str = DEFAULT_ENVIRONMENT) -> None:
        self.default_environment = default_environment

    def resolve_allies(self, node: Node, directory: NodeDirectory) -> List[Node]:
        allies: List[Node] = []

        for query in self.queries_for(node):
            logger.debug("[ALLIES] %s: searching %s", node.name, query)
            allies.extend(directory.search(query))

        logger.info("[ALLIES] %s: resolved %d ally node(s)", node.name, len(allies))
        return allies

    def queries_for(self, node: Node) -> List[str]:
        """Search queries that make up the node's allies, in resolution order."""
        queries: List[str] = []

        env = node.chef_environment
        if env and env != self.default_environment:
            queries.append(f"chef_environment:{env}")

        declared = node["allies"]
        if declared is not None:
            for ally in declared:
                queries.append(ally if ":" in ally else f"name:{ally}")

        return queries

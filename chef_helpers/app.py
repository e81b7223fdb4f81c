import logging
from typing import Dict, Iterable, Optional

from .config import HelperConfig
from .directory.base import NodeDirectory
from .directory.factory import create_directory
from .helpers.addressing import AddressSelector
from .helpers.allies import AllyResolver
from .helpers.jsonpath_access import AttributePathAccessor
from .helpers.node_helper import NodeHelper
from .models.node import Node

logger = logging.getLogger(__name__)


class ChefHelpersApp:
    """
    Top-level facade for wrapping nodes with cross-node helpers.

    Owns one directory and one set of policy objects, and hands out a
    NodeHelper per node. It performs pure assembly: no global state,
    no registrations.

    Wrapping the same Node instance again returns the same NodeHelper,
    so allies are resolved at most once per node. Helpers live as long
    as the app.
    """

    def __init__(
        self,
        config: HelperConfig,
        directory: Optional[NodeDirectory] = None,
        nodes: Optional[Iterable[Node]] = None,
    ) -> None:
        self.config = config
        if directory is None:
            directory = create_directory(config, nodes)
        self.directory = directory

        self._resolver = AllyResolver(default_environment=config.default_environment)
        self._selector = AddressSelector()
        self._accessor = AttributePathAccessor()
        self._helpers: Dict[Node, NodeHelper] = {}

        logger.info(
            "[APP] Ready | directory=%s", type(self.directory).__name__
        )

    def wrap(self, node: Node) -> NodeHelper:
        helper = self._helpers.get(node)
        if helper is None:
            helper = NodeHelper(
                node,
                self.directory,
                resolver=self._resolver,
                selector=self._selector,
                accessor=self._accessor,
            )
            self._helpers[node] = helper
        return helper

    def shutdown(self) -> None:
        logger.info("[APP] Shutting down directory")
        self.directory.shutdown()

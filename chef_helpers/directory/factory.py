from typing import Iterable, Optional

from .base import NodeDirectory, StaticDirectory
from .chef_server import ChefServerDirectory
from ..config import HelperConfig
from ..models.node import Node


def create_directory(
    config: HelperConfig,
    nodes: Optional[Iterable[Node]] = None,
) -> NodeDirectory:
    """
    Factory for constructing the node search backend.

    Supported directory types:
    - "static"      → in-memory directory seeded with ``nodes``
    - "chef_server" → HTTP search against ``config.server_url``
    """

    if config.directory_type == "static":
        return StaticDirectory(nodes)

    if config.directory_type == "chef_server":

        if nodes:
            raise ValueError("Seed nodes are only supported by the static directory.")

        return ChefServerDirectory(
            server_url=config.server_url,
            headers=config.headers,
            timeout_seconds=config.timeout_seconds,
            page_size=config.page_size,
        )

    raise ValueError(
        f"Unsupported directory_type: {config.directory_type}"
    )

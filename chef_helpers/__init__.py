"""
Cross-node helpers for configuration-managed hosts.

Resolves a node's allies through search, picks the address one node
should use to reach another, and adds jsonpath access to node attributes.
"""

from .app import ChefHelpersApp
from .config import HelperConfig
from .directory import (
    ChefServerDirectory,
    DirectorySearchError,
    NodeDirectory,
    StaticDirectory,
    create_directory,
)
from .helpers import AddressSelector, AllyResolver, AttributePathAccessor, NodeHelper
from .models import Node

__all__ = [
    "ChefHelpersApp",
    "HelperConfig",
    "ChefServerDirectory",
    "DirectorySearchError",
    "NodeDirectory",
    "StaticDirectory",
    "create_directory",
    "AddressSelector",
    "AllyResolver",
    "AttributePathAccessor",
    "NodeHelper",
    "Node",
]

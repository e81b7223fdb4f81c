from .base import NodeDirectory, StaticDirectory, DirectorySearchError
from .chef_server import ChefServerDirectory
from .factory import create_directory

__all__ = [
    "NodeDirectory",
    "StaticDirectory",
    "DirectorySearchError",
    "ChefServerDirectory",
    "create_directory",
]

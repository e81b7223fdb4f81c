import os
from typing import Dict, Optional

from .models.node import DEFAULT_ENVIRONMENT


class HelperConfig:
    """
    Central configuration object for node helpers.
    Controls which directory backend answers searches and how it is reached.
    """

    def __init__(
        self,
        directory_type: str = "static",   # "static" or "chef_server"
        server_url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout_seconds: int = 10,
        page_size: int = 1000,
        default_environment: str = DEFAULT_ENVIRONMENT,
    ):
        self.directory_type = directory_type
        self.server_url = server_url
        self.headers = dict(headers or {})
        self.timeout_seconds = timeout_seconds
        self.page_size = page_size
        self.default_environment = default_environment

        self._validate()

    @classmethod
    def from_env(cls, headers: Optional[Dict[str, str]] = None) -> "HelperConfig":
        """Build a config from CHEF_* environment variables."""
        return cls(
            directory_type=os.getenv("CHEF_HELPERS_DIRECTORY", "static"),
            server_url=os.getenv("CHEF_SERVER_URL"),
            headers=headers,
            timeout_seconds=int(os.getenv("CHEF_SEARCH_TIMEOUT", "10")),
            page_size=int(os.getenv("CHEF_SEARCH_PAGE_SIZE", "1000")),
        )

    def _validate(self):
        if self.directory_type not in {"static", "chef_server"}:
            raise ValueError(f"Unsupported directory_type: {self.directory_type}")

        if self.directory_type == "chef_server" and not self.server_url:
            raise ValueError("chef_server directory requires a server_url")

        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        if self.page_size <= 0:
            raise ValueError("page_size must be positive")

        if not self.default_environment:
            raise ValueError("default_environment must be a non-empty string")

    def __repr__(self) -> str:
        return (
            f"HelperConfig(directory_type='{self.directory_type}', "
            f"server_url={self.server_url!r})"
        )

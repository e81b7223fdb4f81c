import logging
from typing import Any, Dict, List, Optional

import requests

from .base import DirectorySearchError, NodeDirectory
from ..models.node import Node

logger = logging.getLogger(__name__)


class ChefServerDirectory(NodeDirectory):
    """
    Node search against a Chef-server-compatible ``/search/node`` endpoint.

    Responsible ONLY for transport and unpacking.
    Does NOT sign requests (pass pre-signed or proxy headers in).
    Does NOT interpret queries.
    """

    def __init__(
        self,
        server_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout_seconds: int = 10,
        page_size: int = 1000,
        session: Optional[requests.Session] = None,
    ):
        if not server_url:
            raise ValueError("ChefServerDirectory requires a server_url")

        self.server_url = server_url.rstrip("/")
        self.headers = {"Accept": "application/json", **(headers or {})}
        self.timeout_seconds = timeout_seconds
        self.page_size = page_size
        self._session = session or requests.Session()

    # ============================================================
    # SEARCH
    # ============================================================

    def search(self, query: str) -> List[Node]:

        url = f"{self.server_url}/search/node"
        nodes: List[Node] = []
        start = 0

        logger.info(f"[CHEF SEARCH] {query}")

        while True:
            page = self._fetch_page(url, query, start)
            rows = page.get("rows") or []
            total = page["total"]

            nodes.extend(self._row_to_node(row) for row in rows)

            logger.debug(
                f"[CHEF SEARCH] page start={start} rows={len(rows)} total={total}"
            )

            # Stop on an empty page even if total claims more rows
            if not rows or len(nodes) >= total:
                break

            start += len(rows)

        logger.info(f"[CHEF SEARCH] {query} -> {len(nodes)} node(s)")
        return nodes

    # ------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------

    def _fetch_page(self, url: str, query: str, start: int) -> Dict[str, Any]:
        params = {"q": query, "start": start, "rows": self.page_size}

        try:
            response = self._session.get(
                url,
                params=params,
                headers=self.headers,
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()

        except requests.exceptions.RequestException as e:
            raise DirectorySearchError(
                f"Chef search transport failure (GET {url} q={query!r}): {e}"
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise DirectorySearchError(
                f"Chef server did not return valid JSON. "
                f"Response text: {response.text}"
            ) from e

        if not isinstance(data, dict) or "rows" not in data:
            raise DirectorySearchError(
                f"Invalid search response format from Chef server: {data}"
            )

        total = data.get("total")
        if isinstance(total, bool) or not isinstance(total, int):
            raise DirectorySearchError(
                f"Chef search response has invalid total: {total!r}"
            )

        return data

    # ------------------------------------------------------------
    # Response Parsing
    # ------------------------------------------------------------

    @staticmethod
    def _row_to_node(row: Dict[str, Any]) -> Node:
        try:
            return Node.from_chef_json(row)
        except (TypeError, ValueError) as e:
            raise DirectorySearchError(f"Malformed node row in search response: {e}") from e

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    def health(self) -> bool:
        try:
            response = self._session.get(
                f"{self.server_url}/_status",
                headers=self.headers,
                timeout=self.timeout_seconds,
            )
            return response.ok
        except requests.exceptions.RequestException:
            logger.warning(f"[CHEF SEARCH] Health check failed for {self.server_url}")
            return False

    def shutdown(self) -> None:
        self._session.close()

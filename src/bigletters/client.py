"""HTTP client for the Big Letters grid API.

Does from Python what page A's script does in the browser: read the
grid and darken cells.
"""

from __future__ import annotations

import logging

import httpx

from bigletters.domain.models import Grid

logger = logging.getLogger(__name__)


class GridClientError(Exception):
    """Raised when a grid API request fails."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class GridClient:
    """Async client for ``/api/grid`` and ``/api/cell``.

    Example usage::

        async with GridClient(base_url="http://127.0.0.1:8080") as client:
            await client.darken_cell(17)
            grid = await client.fetch_grid()
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8080",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create the HTTP client and verify the server answers."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            resp = await self._client.get("/api/grid")
            resp.raise_for_status()
            logger.info("Connected to grid server at %s", self._base_url)
        except httpx.HTTPError as e:
            await self._client.aclose()
            self._client = None
            raise GridClientError(
                f"Failed to connect to grid server: {e}", path="/api/grid"
            ) from e

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Disconnected from grid server")

    async def fetch_grid(self) -> Grid:
        """Return the server's current grid."""
        resp = await self._request("GET", "/api/grid")
        return Grid.model_validate(resp.json())

    async def darken_cell(self, idx: int) -> None:
        """Ask the server to darken one cell."""
        await self._request("POST", "/api/cell", json={"idx": idx})
        logger.debug("Darkened cell %d", idx)

    async def _request(self, method: str, path: str, json: dict | None = None) -> httpx.Response:
        if self._client is None:
            raise GridClientError("Not connected to grid server", path=path)
        try:
            resp = await self._client.request(method, path, json=json)
            resp.raise_for_status()
            return resp
        except httpx.HTTPError as e:
            raise GridClientError(f"HTTP request to {path} failed: {e}", path=path) from e

    async def __aenter__(self) -> GridClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()
